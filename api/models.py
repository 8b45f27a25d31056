from pydantic import BaseModel
from typing import Optional


class Identity(BaseModel):
    """Caller resolved from a Supabase access token."""
    id: str
    email: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str


class PublishableKeyResponse(BaseModel):
    publishableKey: str


class PublicKeyResponse(BaseModel):
    publicKey: str


class FileUploadResponse(BaseModel):
    file_url: str


class CertificationUploadResponse(BaseModel):
    success: bool = True
    file_url: str


class SuccessResponse(BaseModel):
    success: bool = True


# OpenAPI documentation for the `{"error": ...}` bodies built in errors.py
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing required input"},
    401: {"model": ErrorResponse, "description": "No authenticated caller"},
    500: {"model": ErrorResponse, "description": "Missing configuration or failed platform call"},
}
