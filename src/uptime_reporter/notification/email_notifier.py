"""
SMTP email delivery of reports over an encrypted transport.

Preparing a report secures it for delivery: recipients are validated, the
MIME message is built and the TLS context used to encrypt the SMTP session is
created. Any failure there is a NotificationPreparationError. Sending opens the
SMTP session (STARTTLS or implicit TLS), authenticates when credentials are
configured and hands the message over; failures there are a
NotificationDeliveryError.
"""

import asyncio
import logging
import smtplib
import ssl
from email.mime.text import MIMEText
from email.utils import formatdate, make_msgid, parseaddr
from typing import Optional, Sequence, Tuple

from uptime_reporter.config import AppConfig
from uptime_reporter.config.constants import DEFAULT_SMTP_TIMEOUT, SMTP_SECURITY_MODES
from uptime_reporter.contracts import Notification, NotificationFactory
from uptime_reporter.domain import Email
from uptime_reporter.errors import NotificationDeliveryError, NotificationPreparationError

# Module logger
logger = logging.getLogger(__name__)


def _validate_address(address: str) -> str:
    _, parsed = parseaddr(address)
    if not parsed or "@" not in parsed:
        raise NotificationPreparationError(f"Invalid email address: {address!r}")
    return parsed


class SecureEmail(Notification):
    """
    An email ready to be sent over a TLS protected SMTP session.
    """

    def __init__(
        self,
        message: MIMEText,
        sender: str,
        recipients: Tuple[str, ...],
        host: str,
        port: int,
        security: str,
        tls_context: ssl.SSLContext,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: float = DEFAULT_SMTP_TIMEOUT,
    ) -> None:
        self.message: MIMEText = message
        self.sender: str = sender
        self.recipients: Tuple[str, ...] = recipients
        self._host: str = host
        self._port: int = port
        self._security: str = security
        self._tls_context: ssl.SSLContext = tls_context
        self._username: Optional[str] = username
        self._password: Optional[str] = password
        self._timeout: float = timeout

    async def send(self) -> None:
        """
        Delivers the email without blocking the event loop.

        Raises:
            NotificationDeliveryError: If the SMTP exchange failed.
        """
        try:
            await asyncio.to_thread(self._send_blocking)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationDeliveryError(
                f"Could not deliver email via {self._host}:{self._port}: {e}"
            ) from e
        logger.info(f"Report sent to {', '.join(self.recipients)}")

    def _open(self) -> smtplib.SMTP:
        if self._security == "ssl":
            return smtplib.SMTP_SSL(
                self._host, self._port, timeout=self._timeout, context=self._tls_context
            )
        return smtplib.SMTP(self._host, self._port, timeout=self._timeout)

    def _send_blocking(self) -> None:
        with self._open() as server:
            if self._security == "starttls":
                server.starttls(context=self._tls_context)
            if self._username and self._password:
                server.login(self._username, self._password)
            server.sendmail(self.sender, list(self.recipients), self.message.as_string())


class SmtpNotificationFactory(NotificationFactory):
    """
    Prepares SecureEmail notifications for a fixed relay and recipient list.
    """

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        recipients: Sequence[str],
        security: str = "starttls",
        username: Optional[str] = None,
        password: Optional[str] = None,
        ca_file: Optional[str] = None,
        timeout: float = DEFAULT_SMTP_TIMEOUT,
    ) -> None:
        self._host: str = host
        self._port: int = port
        self._sender: str = sender
        self._recipients: Tuple[str, ...] = tuple(recipients)
        self._security: str = security
        self._username: Optional[str] = username
        self._password: Optional[str] = password
        self._ca_file: Optional[str] = ca_file
        self._timeout: float = timeout

    @classmethod
    def from_config(cls, config: AppConfig) -> "SmtpNotificationFactory":
        return cls(
            host=config.smtp_host,
            port=config.smtp_port,
            sender=config.mail_from,
            recipients=config.mail_to,
            security=config.smtp_security,
            username=config.smtp_username,
            password=config.smtp_password,
            ca_file=config.smtp_ca_file,
        )

    def create(self, email: Email) -> SecureEmail:
        """
        Secures the email for delivery.

        Args:
            email: The subject and body to deliver.

        Returns:
            SecureEmail: The prepared notification.

        Raises:
            NotificationPreparationError: If the relay or the recipients are not
                configured, an address is invalid, or the TLS context cannot be built.
        """
        if not self._host:
            raise NotificationPreparationError("No SMTP host configured")
        if not self._recipients:
            raise NotificationPreparationError("No email recipients configured")
        if self._security not in SMTP_SECURITY_MODES:
            raise NotificationPreparationError(f"Unsupported SMTP security mode: {self._security}")

        sender = _validate_address(self._sender)
        recipients = tuple(_validate_address(address) for address in self._recipients)

        try:
            tls_context = ssl.create_default_context(cafile=self._ca_file)
        except (ssl.SSLError, OSError) as e:
            raise NotificationPreparationError(f"Could not build TLS context: {e}") from e

        message = MIMEText(email.body, "plain", "utf-8")
        message["Subject"] = email.subject
        message["From"] = self._sender
        message["To"] = ", ".join(self._recipients)
        message["Date"] = formatdate(localtime=True)
        message["Message-ID"] = make_msgid()

        logger.debug(f"Prepared email '{email.subject}' for {len(recipients)} recipients")
        return SecureEmail(
            message=message,
            sender=sender,
            recipients=recipients,
            host=self._host,
            port=self._port,
            security=self._security,
            tls_context=tls_context,
            username=self._username,
            password=self._password,
            timeout=self._timeout,
        )
