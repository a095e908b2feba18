"""
API dependencies: application context and Firebase auth verification.
"""

from typing import Optional

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from vaqmas.core.context import AppContext
from vaqmas.core.logger import get_logger

logger = get_logger("auth")

# auto_error=False so the callable endpoint can answer with its own
# "unauthenticated" error instead of FastAPI's default 403
security = HTTPBearer(auto_error=False)


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    context: AppContext = Depends(get_context),
):
    """
    Verify Firebase ID token from Authorization header.

    Expects:
        Authorization: Bearer <id_token>
    """
    if credentials is None:
        raise HTTPException(status_code=401, detail="Missing Authorization Bearer token")
    try:
        return context.auth.verify_id_token(credentials.credentials)
    except Exception as exc:
        raise HTTPException(status_code=401, detail="Invalid ID token") from exc


def get_optional_caller(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    context: AppContext = Depends(get_context),
) -> Optional[dict]:
    """Decoded token of the caller, or None if absent or not verifiable."""
    if credentials is None:
        return None
    try:
        return context.auth.verify_id_token(credentials.credentials)
    except Exception as exc:
        logger.info("Rejected caller token: %s", exc)
        return None


def require_admin(user=Depends(get_current_user)):
    """
    Enforce the `admin` custom claim on the caller's ID token.

    Example claims:
        {'admin': True}
    """
    if user.get("admin") is not True:
        raise HTTPException(
            status_code=403,
            detail="Insufficient permissions",
        )
    return user
