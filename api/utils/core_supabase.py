import logging

from supabase import create_client, Client

from ..config import Settings
from ..errors import configuration_error

logger = logging.getLogger("functions.supabase.core")


def build_supabase_public(settings: Settings) -> Client:
    """Create a Supabase client with the anon key (service key as a fallback).

    Used only to validate caller access tokens.
    """
    key = settings.supabase_anon_key or settings.supabase_service_role_key
    if not settings.supabase_url or not key:
        logger.error("Supabase environment not configured (SUPABASE_URL / SUPABASE_ANON_KEY)")
        raise configuration_error("Supabase environment not configured")
    return create_client(settings.supabase_url, key)


def build_supabase_admin(settings: Settings) -> Client:
    """Create a Supabase client with the service role key.

    The service role bypasses row level security, so this client is reserved
    for trusted server-side writes (storage uploads, security logs).
    """
    if not settings.supabase_url or not settings.supabase_service_role_key:
        logger.error("Supabase service role not configured (SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY)")
        raise configuration_error("Supabase service role not configured")
    return create_client(settings.supabase_url, settings.supabase_service_role_key)
