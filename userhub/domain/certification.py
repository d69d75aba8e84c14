"""
Certification domain service - Composes and dispatches certification mail.
"""

from dataclasses import dataclass

from .ports import MailSender

DEFAULT_BASE_URL = "http://localhost:8080"


@dataclass
class CertificationService:
    """
    Sends the certification code a PENDING user needs to activate.

    Delivery errors from the mail sender propagate; the caller decides
    whether they are fatal.
    """

    mail_sender: MailSender
    base_url: str = DEFAULT_BASE_URL

    def send(self, email: str, certification_code: str, user_id: int) -> None:
        """
        Compose the certification message and hand it to the mail sender.

        Args:
            email: Recipient email address
            certification_code: Code the user must present to verify
            user_id: Id of the stored user, used in the verification link

        Raises:
            MailDeliveryError: If the mail sender fails
        """
        certification_url = self.generate_certification_url(user_id, certification_code)
        title = "Please certify your email address"
        content = (
            f"Your certification code is: {certification_code}\n"
            f"Please click the following link to certify your email address: "
            f"{certification_url}"
        )
        self.mail_sender.send(email, title, content)

    def generate_certification_url(self, user_id: int, certification_code: str) -> str:
        base = self.base_url.rstrip("/")
        return f"{base}/api/users/{user_id}/verify?certificationCode={certification_code}"
