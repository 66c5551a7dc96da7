"""
Session delivery client.

Sends a subject/body pair by SMTP when the transport is fully configured,
otherwise writes it to a timestamped file in the local outbox directory.

Dependencies: smtplib, email, fastapi.concurrency, finbot.configs
System role: Outbound hand-off of collected session data
"""

import logging
import smtplib
import time
from email.message import EmailMessage
from email.utils import make_msgid
from pathlib import Path

from fastapi.concurrency import run_in_threadpool

from finbot.configs.delivery import DeliverySettings
from finbot.core.exceptions import DeliveryError
from finbot.models.delivery import DeliveryResult
from finbot.observability import log_exception_with_context

logger = logging.getLogger(__name__)

SMTPS_PORT = 465


class DeliveryClient:
    """SMTP sender with outbox-file fallback."""

    def __init__(self, settings: DeliverySettings, timeout_seconds: float = 30.0) -> None:
        """
        Initialize client.

        Args:
            settings: SMTP and outbox configuration
            timeout_seconds: Socket timeout for the SMTP connection
        """
        self._settings = settings
        self._timeout = timeout_seconds

    async def deliver(self, subject: str, body: str) -> DeliveryResult:
        """
        Deliver one message.

        Failures never raise; they come back as ``ok=False`` with a note.
        """
        if self._settings.smtp_configured:
            return await self._deliver_smtp(subject, body)
        return await self._deliver_outbox(subject, body)

    async def _deliver_smtp(self, subject: str, body: str) -> DeliveryResult:
        destination = f"smtp:{self._settings.smtp_host}"
        try:
            message_id = await run_in_threadpool(self._send_smtp, subject, body)
        except DeliveryError as e:
            log_exception_with_context(logger, f"{__name__}:deliver - SMTP delivery failed", e)
            return DeliveryResult(ok=False, destination=destination, note=e.message)
        logger.info(f"{__name__}:deliver - Email sent via {destination}")
        return DeliveryResult(ok=True, id=message_id, destination=destination, note="Email sent")

    def _send_smtp(self, subject: str, body: str) -> str:
        """
        Send over SMTP (blocking).

        Returns:
            str: Message-ID header of the sent message

        Raises:
            DeliveryError: Connection, authentication or send failure
        """
        s = self._settings
        message = EmailMessage()
        message["From"] = s.smtp_user
        message["To"] = s.deliver_to_email
        message["Subject"] = subject
        message["Message-ID"] = make_msgid()
        message.set_content(body)

        try:
            if s.smtp_port == SMTPS_PORT:
                with smtplib.SMTP_SSL(s.smtp_host, s.smtp_port, timeout=self._timeout) as smtp:
                    smtp.login(s.smtp_user, s.smtp_pass)
                    smtp.send_message(message)
            else:
                with smtplib.SMTP(s.smtp_host, s.smtp_port, timeout=self._timeout) as smtp:
                    smtp.ehlo()
                    if smtp.has_extn("starttls"):
                        smtp.starttls()
                        smtp.ehlo()
                    smtp.login(s.smtp_user, s.smtp_pass)
                    smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            raise DeliveryError(f"SMTP send failed: {e}", {"host": s.smtp_host, "port": s.smtp_port}) from e
        return message["Message-ID"]

    async def _deliver_outbox(self, subject: str, body: str) -> DeliveryResult:
        path = Path(self._settings.outbox_dir).resolve() / f"{int(time.time() * 1000)}-delivery.txt"
        try:
            await run_in_threadpool(self._write_outbox, path, f"Subject: {subject}\n\n{body}")
        except OSError as e:
            log_exception_with_context(logger, f"{__name__}:deliver - Outbox write failed", e, path=path)
            return DeliveryResult(ok=False, destination=str(path), note=f"Outbox write failed: {e}")
        logger.info(f"{__name__}:deliver - Written to outbox {path}")
        return DeliveryResult(
            ok=True,
            destination=str(path),
            note="Written to outbox (no SMTP configured)",
        )

    @staticmethod
    def _write_outbox(path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
