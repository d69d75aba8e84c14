"""
Unit tests for ConsoleMailSender adapter.

Tests verify the console mail sender implements MailSender protocol
and logs certification messages in the correct format.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from userhub.adapters.mail.console import ConsoleMailSender


class TestConsoleMailSenderProtocol:
    """Tests for MailSender protocol compliance."""

    def test_implements_mail_sender_protocol(self) -> None:
        """ConsoleMailSender implements MailSender protocol."""
        from userhub.domain.ports import MailSender

        sender = ConsoleMailSender()
        assert callable(sender.send)

        def accepts_mail_sender(s: MailSender) -> None:
            pass

        accepts_mail_sender(sender)

    def test_no_explicit_inheritance(self) -> None:
        """ConsoleMailSender uses structural subtyping, not inheritance."""
        assert ConsoleMailSender.__bases__ == (object,)


class TestSend:
    """Tests for send method."""

    def test_logs_one_info_record(self, caplog: pytest.LogCaptureFixture) -> None:
        """Message is logged once at INFO level."""
        sender = ConsoleMailSender()

        with caplog.at_level(logging.INFO):
            sender.send("test@example.com", "Subject", "Body")

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.INFO

    def test_log_format(self, caplog: pytest.LogCaptureFixture) -> None:
        """Log line carries [CERTIFICATION], recipient, title and body."""
        sender = ConsoleMailSender()

        with caplog.at_level(logging.INFO):
            sender.send("user@example.com", "Please certify", "code: 5678")

        assert "[CERTIFICATION]" in caplog.text
        assert "Email: user@example.com" in caplog.text
        assert "Title: Please certify" in caplog.text
        assert "code: 5678" in caplog.text

    def test_returns_none(self) -> None:
        """Method returns None (fire-and-forget)."""
        assert ConsoleMailSender().send("test@example.com", "t", "c") is None


class TestThreadSafety:
    """Tests for thread-safe logging."""

    def test_concurrent_sends_all_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Concurrent calls each produce one complete record."""
        sender = ConsoleMailSender()

        with caplog.at_level(logging.INFO), ThreadPoolExecutor(max_workers=5) as executor:
            futures = [
                executor.submit(sender.send, f"user{i}@example.com", "t", f"code {i:04d}")
                for i in range(10)
            ]
            for f in futures:
                f.result()

        assert len(caplog.records) == 10
        for record in caplog.records:
            assert "[CERTIFICATION]" in record.message
            assert "Email:" in record.message
