"""Authentication-related routes.

The web client signs users in with Firebase; the backend exposes the
client configuration and the verified session.
"""
from fastapi import APIRouter, Depends

from vaqmas.api.deps import get_context, get_current_user
from vaqmas.models.user import AuthSession
from vaqmas.services.image_utils import get_storage_bucket

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me")
async def get_me(user=Depends(get_current_user)):
    return AuthSession.from_token(user).to_api()


@router.get("/config")
async def client_config(context=Depends(get_context)):
    """Firebase web configuration for initializing the browser client."""
    config = context.settings.client_config()
    config["storageBucket"] = get_storage_bucket(context)
    return config
