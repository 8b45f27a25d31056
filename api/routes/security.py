import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Request

from ..errors import ApiError, delegated_failure
from ..models import ERROR_RESPONSES, SuccessResponse
from ..utils.alerts import BrevoAlertNotifier, get_alert_notifier
from ..utils.security_log import (
    SupabaseSecurityLogStore,
    build_log_entry,
    get_security_log_store,
    is_alert_severity,
)

router = APIRouter(prefix="/security")
logger = logging.getLogger("functions.routes.security")


@router.post("/log-event", response_model=SuccessResponse, responses=ERROR_RESPONSES)
async def log_security_event(
    request: Request,
    background_tasks: BackgroundTasks,
    store: SupabaseSecurityLogStore = Depends(get_security_log_store),
    notifier: BrevoAlertNotifier = Depends(get_alert_notifier),
):
    """Record a security event reported by the web client.

    No caller authentication: the event may describe an anonymous or hostile
    actor, so the row is written with the service role. Alert emails go out
    after the response, on the threadpool.
    """
    try:
        event = await request.json()
        if not isinstance(event, dict):
            raise ValueError(f"Expected a JSON object, got {type(event).__name__}")
        entry = build_log_entry(event, request.headers)
        store.create(entry)
    except ApiError:
        raise
    except Exception as e:
        logger.exception(f"Error logging security event: {e}")
        raise delegated_failure("Failed to log security event") from e

    if is_alert_severity(event):
        logger.warning(f"HIGH SEVERITY SECURITY EVENT: {entry}")
        background_tasks.add_task(notifier.notify, entry)

    return {"success": True}
