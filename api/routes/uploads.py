import logging

from fastapi import APIRouter, Depends, Request
from starlette.datastructures import UploadFile

from ..errors import ApiError, bad_request, delegated_failure
from ..models import ERROR_RESPONSES, CertificationUploadResponse, FileUploadResponse, Identity
from ..utils.auth_checks import require_identity
from ..utils.storage import SupabaseFileStorage, get_certification_storage, get_file_storage

router = APIRouter(prefix="/upload")
logger = logging.getLogger("functions.routes.uploads")


async def store_form_file(
    request: Request,
    identity: Identity,
    storage: SupabaseFileStorage,
    failure_message: str,
) -> str:
    """Pull the `file` field out of a multipart body and hand it to storage.

    Returns the stored file's URL. Anything other than a missing file is a
    delegated failure reported with `failure_message`.
    """
    try:
        form = await request.form()
        file = form.get("file")
        if not isinstance(file, UploadFile):
            raise bad_request("No file provided")
        content = await file.read()
        return storage.upload(identity.id, file.filename, content, file.content_type)
    except ApiError as e:
        logger.info(f"Upload rejected: {e.message}")
        raise
    except Exception as e:
        logger.exception(f"Upload failed for user {identity.id}: {e}")
        raise delegated_failure(failure_message) from e


@router.post("/file", response_model=FileUploadResponse, responses=ERROR_RESPONSES)
async def upload_file(
    request: Request,
    identity: Identity = Depends(require_identity),
    storage: SupabaseFileStorage = Depends(get_file_storage),
):
    file_url = await store_form_file(request, identity, storage, "Failed to upload file")
    return {"file_url": file_url}


@router.post("/certification-document", response_model=CertificationUploadResponse, responses=ERROR_RESPONSES)
async def upload_certification_document(
    request: Request,
    identity: Identity = Depends(require_identity),
    storage: SupabaseFileStorage = Depends(get_certification_storage),
):
    """Upload a pharmacist certification document (licence, diploma, ...)."""
    file_url = await store_form_file(request, identity, storage, "Failed to upload document")
    return {"success": True, "file_url": file_url}
