"""Error kinds shared by every function and the single place they become HTTP responses."""

import logging
from enum import Enum

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger("functions.errors")


class ErrorKind(str, Enum):
    UNAUTHORIZED = "unauthorized"
    BAD_REQUEST = "bad_request"
    CONFIGURATION = "configuration"
    DELEGATED_FAILURE = "delegated_failure"


STATUS_CODES = {
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.CONFIGURATION: 500,
    ErrorKind.DELEGATED_FAILURE: 500,
}


class ApiError(Exception):
    """An error the caller is allowed to see.

    `message` is returned verbatim as the `error` field, so it must never carry
    internal exception text.
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]


def unauthorized(message: str = "Unauthorized") -> ApiError:
    return ApiError(ErrorKind.UNAUTHORIZED, message)


def bad_request(message: str) -> ApiError:
    return ApiError(ErrorKind.BAD_REQUEST, message)


def configuration_error(message: str) -> ApiError:
    return ApiError(ErrorKind.CONFIGURATION, message)


def delegated_failure(message: str) -> ApiError:
    return ApiError(ErrorKind.DELEGATED_FAILURE, message)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} failed ({exc.kind.value}): {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
