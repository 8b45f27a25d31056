"""Utility helpers used by the API routes.

Re-export commonly used helpers for convenience.
"""

from .common import client_ip_from_headers, mask_email_for_log, safe_filename, utc_now_iso
from .core_supabase import build_supabase_admin, build_supabase_public
from .auth_checks import current_identity, extract_access_token, require_identity

__all__ = [
    "client_ip_from_headers",
    "mask_email_for_log",
    "safe_filename",
    "utc_now_iso",
    "build_supabase_admin",
    "build_supabase_public",
    "current_identity",
    "extract_access_token",
    "require_identity",
]
