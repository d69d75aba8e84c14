"""
Console mail sender adapter - Implements MailSender protocol.

This module provides a console-based implementation of the domain's
mail sender port, logging certification messages for development use.
"""

import logging

logger = logging.getLogger(__name__)


class ConsoleMailSender:
    """
    Implements MailSender protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - never fails.
    """

    def send(self, email: str, title: str, content: str) -> None:
        """
        Log the message at INFO level (simulates email delivery).

        Args:
            email: Recipient email address
            title: Message subject
            content: Message body, containing the certification code
        """
        logger.info("[CERTIFICATION] Email: %s Title: %s\n%s", email, title, content)
