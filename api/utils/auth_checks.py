import logging
from typing import Optional

from fastapi import Depends, Request

from ..config import Settings, get_settings
from ..errors import unauthorized
from ..models import Identity
from .common import mask_email_for_log
from .core_supabase import build_supabase_public

logger = logging.getLogger("functions.auth_checks")

SESSION_COOKIE = "sb_access_token"


def extract_access_token(request: Request) -> Optional[str]:
    """Bearer token from the Authorization header, else the session cookie."""
    header = request.headers.get("authorization") or ""
    scheme, _, value = header.partition(" ")
    if scheme.lower() == "bearer" and value.strip():
        return value.strip()
    token = request.cookies.get(SESSION_COOKIE)
    return token or None


class SupabaseIdentityResolver:
    """Resolves an access token to an `Identity` through Supabase Auth."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def resolve(self, token: str) -> Optional[Identity]:
        client = build_supabase_public(self.settings)
        try:
            user_res = client.auth.get_user(token)
        except Exception as e:
            logger.info(f"Token validation failed: {e}")
            return None
        user = getattr(user_res, "user", None)
        if not user:
            return None
        uid = getattr(user, "id", None) or (user.get("id") if isinstance(user, dict) else None)
        email = getattr(user, "email", None) or (user.get("email") if isinstance(user, dict) else None)
        if not uid:
            return None
        return Identity(id=str(uid), email=email)


def get_identity_resolver(settings: Settings = Depends(get_settings)) -> SupabaseIdentityResolver:
    return SupabaseIdentityResolver(settings)


def current_identity(
    request: Request,
    resolver: SupabaseIdentityResolver = Depends(get_identity_resolver),
) -> Optional[Identity]:
    """The caller's identity, or None for anonymous requests.

    Requests without credentials never reach the auth provider.
    """
    token = extract_access_token(request)
    if not token:
        return None
    identity = resolver.resolve(token)
    if identity:
        logger.info(f"Authenticated {mask_email_for_log(identity.email)}")
    return identity


def require_identity(identity: Optional[Identity] = Depends(current_identity)) -> Identity:
    if identity is None:
        raise unauthorized()
    return identity
