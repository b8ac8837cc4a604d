"""Mail clients for confirmation and invitation e-mails.

Sends through SMTP when a host is configured; otherwise messages are only
logged, which keeps local development and tests free of a mail server.
"""

import asyncio
import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import formataddr
from typing import Protocol

from backend.app.config import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MailMessage:
    """Outbound HTML e-mail."""

    to_address: str
    subject: str
    html: str
    to_name: str | None = None


class MailClient(Protocol):
    """Protocol for mail client implementations."""

    async def send(self, message: MailMessage) -> None:
        """Deliver a message.

        Args:
            message: Message to deliver

        Raises:
            Exception: Implementation-specific delivery failure
        """
        ...


class LoggingMailClient:
    """Mail client that logs messages instead of sending them."""

    async def send(self, message: MailMessage) -> None:
        """Log the message."""
        logger.info(
            f"[mail] to={message.to_address} subject={message.subject!r} "
            f"({len(message.html)} chars html, not sent: no SMTP host configured)"
        )


class SmtpMailClient:
    """Mail client delivering through an SMTP relay."""

    def __init__(
        self,
        *,
        host: str,
        port: int,
        from_name: str,
        from_address: str,
        username: str = "",
        password: str = "",
        use_tls: bool = True,
        timeout_sec: int = 10,
    ) -> None:
        self.host = host
        self.port = port
        self.from_name = from_name
        self.from_address = from_address
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout_sec = timeout_sec

    def build_email(self, message: MailMessage) -> EmailMessage:
        """Build the MIME message for a MailMessage."""
        email = EmailMessage()
        email["From"] = formataddr((self.from_name, self.from_address))
        email["To"] = formataddr((message.to_name or "", message.to_address))
        email["Subject"] = message.subject
        email.set_content("This message requires an HTML capable mail client.")
        email.add_alternative(message.html, subtype="html")
        return email

    async def send(self, message: MailMessage) -> None:
        """Send the message without blocking the event loop."""
        email = self.build_email(message)
        await asyncio.to_thread(self._send_blocking, email)

    def _send_blocking(self, email: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout_sec) as smtp:
            if self.use_tls:
                smtp.starttls()
            if self.username:
                smtp.login(self.username, self.password)
            smtp.send_message(email)


def create_mail_client(settings: Settings) -> MailClient:
    """Pick a mail client based on config.

    Returns:
        SmtpMailClient if an SMTP host is configured, LoggingMailClient otherwise
    """
    if settings.smtp_host:
        return SmtpMailClient(
            host=settings.smtp_host,
            port=settings.smtp_port,
            from_name=settings.mail_from_name,
            from_address=settings.mail_from_address,
            username=settings.smtp_username,
            password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
            timeout_sec=settings.smtp_timeout_sec,
        )

    return LoggingMailClient()


def get_mail_client() -> MailClient:
    """FastAPI dependency returning the configured mail client."""
    return create_mail_client(get_settings())
