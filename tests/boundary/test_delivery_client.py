"""
Test suite for the delivery collaborator.

System role: Verification of SMTP and outbox hand-off paths
"""

import smtplib
from unittest.mock import patch

import pytest

from finbot.boundary.delivery import DeliveryClient
from finbot.configs.delivery import DeliverySettings


def smtp_settings(port: int = 587, **overrides) -> DeliverySettings:
    values = {
        "deliver_to_email": "desk@example.com",
        "smtp_host": "smtp.example.com",
        "smtp_port": port,
        "smtp_user": "bot@example.com",
        "smtp_pass": "secret",
    }
    values.update(overrides)
    return DeliverySettings(_env_file=None, **values)


class TestOutboxDelivery:
    """Deliveries without SMTP configuration land in the outbox."""

    @pytest.mark.asyncio
    async def test_should_write_subject_and_body(self, tmp_path) -> None:
        # Arrange
        settings = DeliverySettings(_env_file=None, outbox_dir=str(tmp_path / "outbox"))
        client = DeliveryClient(settings)

        # Act
        result = await client.deliver("FinancialBot Session abc", "Session: abc\nName: Ada")

        # Assert
        assert result.ok is True
        assert result.note == "Written to outbox (no SMTP configured)"
        written = list((tmp_path / "outbox").glob("*-delivery.txt"))
        assert len(written) == 1
        assert result.destination == str(written[0].resolve())
        assert written[0].read_text(encoding="utf-8") == (
            "Subject: FinancialBot Session abc\n\nSession: abc\nName: Ada"
        )

    @pytest.mark.asyncio
    async def test_partial_smtp_settings_should_use_outbox(self, tmp_path) -> None:
        settings = smtp_settings(smtp_pass=None, outbox_dir=str(tmp_path))
        client = DeliveryClient(settings)

        with patch("finbot.boundary.delivery.delivery_client.smtplib.SMTP") as smtp_cls:
            result = await client.deliver("subject", "body")

        assert result.ok is True
        smtp_cls.assert_not_called()

    @pytest.mark.asyncio
    async def test_unwritable_outbox_should_report_failure(self, tmp_path) -> None:
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("file", encoding="utf-8")
        client = DeliveryClient(DeliverySettings(_env_file=None, outbox_dir=str(blocker)))

        result = await client.deliver("subject", "body")

        assert result.ok is False
        assert result.note.startswith("Outbox write failed")


class TestSMTPDelivery:
    """Deliveries with complete SMTP configuration."""

    @pytest.mark.asyncio
    async def test_should_send_with_starttls(self) -> None:
        # Arrange
        client = DeliveryClient(smtp_settings())

        # Act
        with patch("finbot.boundary.delivery.delivery_client.smtplib.SMTP") as smtp_cls:
            smtp = smtp_cls.return_value.__enter__.return_value
            smtp.has_extn.return_value = True
            result = await client.deliver("FinancialBot Session abc", "Name: Ada")

        # Assert
        assert result.ok is True
        assert result.destination == "smtp:smtp.example.com"
        assert result.id
        smtp.starttls.assert_called_once()
        smtp.login.assert_called_once_with("bot@example.com", "secret")
        sent = smtp.send_message.call_args.args[0]
        assert sent["To"] == "desk@example.com"
        assert sent["Subject"] == "FinancialBot Session abc"
        assert sent.get_content().strip() == "Name: Ada"

    @pytest.mark.asyncio
    async def test_port_465_should_use_implicit_tls(self) -> None:
        client = DeliveryClient(smtp_settings(port=465))

        with patch("finbot.boundary.delivery.delivery_client.smtplib.SMTP_SSL") as ssl_cls:
            result = await client.deliver("subject", "body")

        assert result.ok is True
        ssl_cls.assert_called_once()
        ssl_cls.return_value.__enter__.return_value.send_message.assert_called_once()

    @pytest.mark.asyncio
    async def test_auth_failure_should_not_raise(self, tmp_path) -> None:
        # Arrange
        client = DeliveryClient(smtp_settings(outbox_dir=str(tmp_path)))

        # Act
        with patch("finbot.boundary.delivery.delivery_client.smtplib.SMTP") as smtp_cls:
            smtp = smtp_cls.return_value.__enter__.return_value
            smtp.login.side_effect = smtplib.SMTPAuthenticationError(535, b"bad credentials")
            result = await client.deliver("subject", "body")

        # Assert
        assert result.ok is False
        assert result.destination == "smtp:smtp.example.com"
        assert "SMTP send failed" in result.note
        assert list(tmp_path.iterdir()) == []
