"""Mail adapters - MailSender implementations."""

from .console import ConsoleMailSender
from .smtp import SmtpMailSender

__all__ = ["ConsoleMailSender", "SmtpMailSender"]
