"""
SMTP mail sender adapter - Implements MailSender protocol over smtplib.
"""

import logging
import smtplib
from email.message import EmailMessage

from userhub.domain.exceptions import MailDeliveryError

logger = logging.getLogger(__name__)


class SmtpMailSender:
    """
    Implements MailSender protocol by relaying through an SMTP server.

    A new connection is opened per message. Transport errors and
    addresses that cannot be put in a header are wrapped in MailDeliveryError
    so the domain never sees smtplib types.
    """

    def __init__(self, host: str, port: int, sender: str, timeout: float = 10.0) -> None:
        """
        Initialize sender with relay settings.

        Args:
            host: SMTP relay hostname
            port: SMTP relay port
            sender: Address placed in the From header
            timeout: Socket timeout in seconds
        """
        self._host = host
        self._port = port
        self._sender = sender
        self._timeout = timeout

    def send(self, email: str, title: str, content: str) -> None:
        try:
            # Header values with CR/LF raise ValueError
            message = EmailMessage()
            message["From"] = self._sender
            message["To"] = email
            message["Subject"] = title
            message.set_content(content)

            with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as smtp:
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError, ValueError) as e:
            logger.error(
                "SMTP delivery to %r via %s:%s failed: %s", email, self._host, self._port, e
            )
            raise MailDeliveryError(f"Could not deliver mail to {email!r}") from e

        logger.info("Mail sent to %s", email)
