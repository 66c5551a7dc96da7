"""
Delivery configuration settings.

SMTP transport for session hand-off; when any value is missing, deliveries
are written to the local outbox directory instead.

Dependencies: pydantic, pydantic_settings
System role: Delivery collaborator configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DeliverySettings(BaseSettings):
    """SMTP transport and outbox fallback configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    deliver_to_email: str | None = Field(default=None, description="Recipient address")
    smtp_host: str | None = Field(default=None)
    smtp_port: int | None = Field(default=None)
    smtp_user: str | None = Field(default=None)
    smtp_pass: str | None = Field(default=None)
    outbox_dir: str = Field(default="outbox", description="Fallback directory for deliveries")

    @property
    def smtp_configured(self) -> bool:
        """True when every SMTP value needed to send mail is present."""
        return all(
            (self.deliver_to_email, self.smtp_host, self.smtp_port, self.smtp_user, self.smtp_pass)
        )
