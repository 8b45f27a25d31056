import os
import logging
from typing import List, Optional

from pydantic import BaseModel

from .errors import configuration_error

logger = logging.getLogger("functions.config")


def _env(name: str) -> Optional[str]:
    value = (os.getenv(name) or "").strip()
    return value or None


class Settings(BaseModel):
    """Environment-backed configuration handed to each function.

    Built fresh per request by `get_settings`; routes ask for the values they
    need with `require`, which turns a missing value into a configuration error.
    """

    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    supabase_service_role_key: Optional[str] = None

    stripe_publishable_key: Optional[str] = None
    vapid_public_key: Optional[str] = None

    uploads_bucket: str = "uploads"
    certifications_bucket: str = "certifications"
    security_log_table: str = "security_logs"

    brevo_api_key: Optional[str] = None
    brevo_sender_email: Optional[str] = None
    brevo_sender_name: str = "Pharmanet Security"
    security_alert_emails: List[str] = []

    @classmethod
    def from_env(cls) -> "Settings":
        recipients = _env("SECURITY_ALERT_EMAILS") or ""
        return cls(
            supabase_url=_env("SUPABASE_URL"),
            supabase_anon_key=_env("SUPABASE_ANON_KEY"),
            supabase_service_role_key=_env("SUPABASE_SERVICE_ROLE_KEY"),
            stripe_publishable_key=_env("STRIPE_PUBLISHABLE_KEY"),
            vapid_public_key=_env("VAPID_PUBLIC_KEY"),
            uploads_bucket=_env("UPLOADS_BUCKET") or "uploads",
            certifications_bucket=_env("CERTIFICATIONS_BUCKET") or "certifications",
            security_log_table=_env("SECURITY_LOG_TABLE") or "security_logs",
            brevo_api_key=_env("BREVO_API_KEY"),
            brevo_sender_email=_env("BREVO_SENDER_EMAIL"),
            brevo_sender_name=_env("BREVO_SENDER_NAME") or "Pharmanet Security",
            security_alert_emails=[e.strip() for e in recipients.split(",") if e.strip()],
        )

    def require(self, field: str, message: str) -> str:
        value = getattr(self, field, None)
        if not value:
            logger.error(f"{field.upper()} not found")
            raise configuration_error(message)
        return value

    @property
    def alerts_enabled(self) -> bool:
        return bool(self.brevo_api_key and self.brevo_sender_email and self.security_alert_emails)


def get_settings() -> Settings:
    """FastAPI dependency; reads the environment on every call."""
    return Settings.from_env()
