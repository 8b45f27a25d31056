import logging
from fastapi import Request

logger = logging.getLogger("functions")


async def log_requests(request: Request, call_next):
    """Write one line when a request arrives and one with its status code.

    Only method and path are logged; headers and bodies carry tokens and
    uploaded documents.
    """
    method, path = request.method, request.url.path
    logger.info(f"{method} {path}")
    try:
        response = await call_next(request)
    except Exception as e:
        logger.exception(f"Unhandled error for {method} {path}: {e}")
        raise
    logger.info(f"-> {response.status_code} {method} {path}")
    return response
