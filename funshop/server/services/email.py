"""
Email Service.

Renders the transactional emails from the Jinja2 templates under
``funshop/server/templates/email`` and delivers them over SMTP with
aiosmtplib.
"""

from __future__ import annotations

from email.message import EmailMessage
from email.utils import formataddr
from pathlib import Path
from typing import Optional

import aiosmtplib
from jinja2 import Environment, FileSystemLoader, select_autoescape

from funshop.core.errors import EmailDeliveryError
from funshop.core.logging_config import get_logger
from funshop.core.models.io.checkout import OrderSummary
from funshop.server.core import constant
from funshop.server.core.config import EmailConfig, settings

logger = get_logger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates" / "email"

ORDER_CONFIRMATION_SUBJECT = "Your FunShop order is confirmed!"
PASSWORD_RESET_SUBJECT = "Reset your FunShop password"


class EmailService:
    """Builds and sends the shop's transactional emails."""

    def __init__(self, config: Optional[EmailConfig] = None) -> None:
        self.config = config or settings.email
        self.templates = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            autoescape=select_autoescape(["html"]),
        )

    def render(self, template_name: str, **context) -> str:
        return self.templates.get_template(template_name).render(shop_name=constant.PROJECT_NAME, **context)

    def build_message(self, to: str, subject: str, html: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = formataddr((self.config.sender_name, self.config.user or ""))
        message["To"] = to
        message["Subject"] = subject
        message.set_content("This email requires an HTML capable client.")
        message.add_alternative(html, subtype="html")
        return message

    async def send(self, message: EmailMessage) -> None:
        """Deliver a message through the configured SMTP server.

        Raises:
            EmailDeliveryError: When email is not configured or delivery fails
        """
        if not self.config.is_configured:
            raise EmailDeliveryError("Email delivery is not configured.")
        try:
            await aiosmtplib.send(
                message,
                hostname=self.config.host,
                port=self.config.port,
                username=self.config.user,
                password=self.config.password,
                start_tls=self.config.use_tls,
            )
        except aiosmtplib.SMTPException as e:
            raise EmailDeliveryError(f"Could not send email: {e}") from e

    async def send_order_confirmation(self, buyer_email: str, order: OrderSummary) -> bool:
        """Send the order confirmation; failures are logged, never raised.

        Returns:
            True when the email was handed to the SMTP server
        """
        if not self.config.is_configured:
            logger.info(f"Email not configured, skipping order confirmation to {buyer_email}")
            return False
        try:
            html = self.render("order_confirmation.html", order=order)
            await self.send(self.build_message(buyer_email, ORDER_CONFIRMATION_SUBJECT, html))
        except Exception as e:
            logger.error(f"Failed to send order confirmation to {buyer_email}: {e}", exc_info=True)
            return False
        logger.info(f"Order confirmation sent to {buyer_email}")
        return True

    async def send_password_reset(self, user_email: str, reset_link: str) -> None:
        """Send the password reset link.

        Raises:
            EmailDeliveryError: When the email could not be delivered
        """
        html = self.render(
            "password_reset.html",
            reset_link=reset_link,
            ttl_minutes=settings.password_reset_ttl_minutes,
        )
        await self.send(self.build_message(user_email, PASSWORD_RESET_SUBJECT, html))
        logger.info(f"Password reset email sent to {user_email}")


_email_service: Optional[EmailService] = None


def get_email_service() -> EmailService:
    """Get the process-wide EmailService instance."""
    global _email_service
    if _email_service is None:
        _email_service = EmailService()
    return _email_service
