import re
from datetime import datetime, timezone
from typing import Mapping, Optional

UNKNOWN_IP = "unknown"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def client_ip_from_headers(headers: Mapping[str, str]) -> str:
    """Originating client address as reported by the proxy in front of us.

    `x-forwarded-for` wins (its first hop is the client), then `x-real-ip`,
    otherwise the literal ``"unknown"``.
    """
    # An empty first hop (e.g. ", 10.0.0.1") falls through to x-real-ip
    forwarded = (headers.get("x-forwarded-for") or "").split(",")[0].strip()
    if forwarded:
        return forwarded
    real_ip = (headers.get("x-real-ip") or "").strip()
    if real_ip:
        return real_ip
    return UNKNOWN_IP


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def safe_filename(filename: Optional[str], default: str = "upload") -> str:
    # Drop any client-side directory part, keep a storage-friendly basename
    name = (filename or "").replace("\\", "/").split("/")[-1].strip()
    name = _UNSAFE_FILENAME_CHARS.sub("_", name).strip("._")
    return name or default


def mask_email_for_log(email: Optional[str]) -> str:
    try:
        if not email or "@" not in email:
            return "<none>"
        local, domain = email.split("@", 1)
        return f"{local[:1]}***@{domain}"
    except Exception:
        return "<invalid>"
