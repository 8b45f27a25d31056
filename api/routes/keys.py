from fastapi import APIRouter, Depends

from ..config import Settings, get_settings
from ..models import ERROR_RESPONSES, Identity, PublicKeyResponse, PublishableKeyResponse
from ..utils.auth_checks import require_identity

router = APIRouter()


@router.api_route(
    "/stripe/publishable-key",
    methods=["GET", "POST"],
    response_model=PublishableKeyResponse,
    responses=ERROR_RESPONSES,
)
def get_stripe_publishable_key(
    identity: Identity = Depends(require_identity),
    settings: Settings = Depends(get_settings),
):
    """Stripe publishable key for the signed-in web client."""
    key = settings.require("stripe_publishable_key", "Stripe not configured")
    return {"publishableKey": key}


@router.api_route(
    "/push/vapid-public-key",
    methods=["GET", "POST"],
    response_model=PublicKeyResponse,
    responses=ERROR_RESPONSES,
)
def get_vapid_public_key(settings: Settings = Depends(get_settings)):
    """VAPID public key used by browsers to subscribe to web push. Public."""
    key = settings.require("vapid_public_key", "VAPID public key not configured")
    return {"publicKey": key}
