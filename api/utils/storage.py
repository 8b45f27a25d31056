import logging
import uuid
from typing import Optional

from fastapi import Depends

from ..config import Settings, get_settings
from .common import safe_filename
from .core_supabase import build_supabase_admin

logger = logging.getLogger("functions.storage")


def build_object_path(owner_id: str, filename: Optional[str]) -> str:
    return f"{owner_id}/{uuid.uuid4().hex}-{safe_filename(filename)}"


class SupabaseFileStorage:
    """Stores uploaded files in a Supabase Storage bucket and hands back a URL.

    No checks on type, size or content happen here; the bucket policy owns that.
    """

    def __init__(self, settings: Settings, bucket: str):
        self.settings = settings
        self.bucket = bucket

    def upload(self, owner_id: str, filename: Optional[str], content: bytes, content_type: Optional[str] = None) -> str:
        path = build_object_path(owner_id, filename)
        admin_client = build_supabase_admin(self.settings)
        bucket = admin_client.storage.from_(self.bucket)
        bucket.upload(
            path=path,
            file=content,
            file_options={"content-type": content_type or "application/octet-stream"},
        )
        url = bucket.get_public_url(path)
        # Older SDK releases return a dict
        if isinstance(url, dict):
            url = url.get("publicURL") or url.get("publicUrl")
        if isinstance(url, str):
            url = url.rstrip("?")
        if not url:
            raise RuntimeError(f"No public URL returned for {self.bucket}/{path}")
        logger.info(f"Stored {len(content)} bytes at {self.bucket}/{path}")
        return url


def get_file_storage(settings: Settings = Depends(get_settings)) -> SupabaseFileStorage:
    return SupabaseFileStorage(settings, settings.uploads_bucket)


def get_certification_storage(settings: Settings = Depends(get_settings)) -> SupabaseFileStorage:
    return SupabaseFileStorage(settings, settings.certifications_bucket)
