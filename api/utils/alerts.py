import html
import json as _json
import logging
from typing import Any, Dict, Mapping
from urllib import request as _urlreq

from fastapi import Depends

from ..config import Settings, get_settings
from .common import mask_email_for_log

logger = logging.getLogger("functions.alerts")

BREVO_SEND_URL = "https://api.brevo.com/v3/smtp/email"


def render_alert_html(entry: Mapping[str, Any]) -> str:
    rows = "".join(
        f"<tr><td><b>{html.escape(str(k))}</b></td><td>{html.escape(str(v))}</td></tr>"
        for k, v in entry.items()
    )
    return f"<h2>Security event</h2><table>{rows}</table>"


class BrevoAlertNotifier:
    """Emails high severity security events to the configured recipients.

    Best effort: failures are logged and swallowed so that the security log
    write they accompany still succeeds.
    """

    def __init__(self, settings: Settings, timeout: float = 10):
        self.settings = settings
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return self.settings.alerts_enabled

    def build_payload(self, entry: Mapping[str, Any]) -> Dict[str, Any]:
        severity = str(entry.get("severity") or "").upper()
        event_type = entry.get("event_type") or "security_event"
        return {
            "sender": {
                "name": self.settings.brevo_sender_name,
                "email": self.settings.brevo_sender_email,
            },
            "to": [{"email": e} for e in self.settings.security_alert_emails],
            "subject": f"[{severity}] {event_type} from {entry.get('ip_address', 'unknown')}",
            "htmlContent": render_alert_html(entry),
        }

    def notify(self, entry: Mapping[str, Any]) -> bool:
        if not self.enabled:
            return False
        body = _json.dumps(self.build_payload(entry), default=str).encode("utf-8")
        req = _urlreq.Request(
            BREVO_SEND_URL,
            data=body,
            headers={
                "accept": "application/json",
                "api-key": self.settings.brevo_api_key,
                "content-type": "application/json",
            },
            method="POST",
        )
        try:
            with _urlreq.urlopen(req, timeout=self.timeout) as resp:
                resp.read()
        except Exception as e:
            logger.info(f"Security alert email failed: {e}")
            return False
        recipients = ", ".join(mask_email_for_log(e) for e in self.settings.security_alert_emails)
        logger.info(f"Security alert email sent to {recipients}")
        return True


def get_alert_notifier(settings: Settings = Depends(get_settings)) -> BrevoAlertNotifier:
    return BrevoAlertNotifier(settings)
