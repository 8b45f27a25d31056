import logging
from typing import Any, Dict, Mapping

from fastapi import Depends

from ..config import Settings, get_settings
from .common import client_ip_from_headers, utc_now_iso
from .core_supabase import build_supabase_admin

logger = logging.getLogger("functions.security_log")

ALERT_SEVERITIES = {"critical", "high"}


def build_log_entry(event: Dict[str, Any], headers: Mapping[str, str]) -> Dict[str, Any]:
    """Caller-supplied event fields plus the server-derived ones.

    `ip_address` and `created_date` always come from the server, even if the
    caller sent its own.
    """
    return {
        **event,
        "ip_address": client_ip_from_headers(headers),
        "created_date": utc_now_iso(),
    }


def is_alert_severity(event: Mapping[str, Any]) -> bool:
    return event.get("severity") in ALERT_SEVERITIES


class SupabaseSecurityLogStore:
    """Writes security log rows with the service role client."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def create(self, entry: Dict[str, Any]) -> None:
        admin_client = build_supabase_admin(self.settings)
        admin_client.table(self.settings.security_log_table).insert(entry).execute()


def get_security_log_store(settings: Settings = Depends(get_settings)) -> SupabaseSecurityLogStore:
    return SupabaseSecurityLogStore(settings)
