"""Grant or revoke the ``admin`` custom claim on a user account.

The claim on the auth token is what authorizes admin calls; the
``isAdmin`` field on ``users/{uid}`` mirrors it for display. The two are
written one after the other. When the mirror write fails the previous
claim set is restored and the failure is reported, so the copies are not
left silently out of step.
"""
from typing import Any, Optional

from firebase_admin import auth
from pydantic import ValidationError

from vaqmas.core.errors import CallableError
from vaqmas.core.logger import get_logger, log_debug
from vaqmas.models.schemas import SetAdminClaimRequest, SetAdminClaimResult

logger = get_logger("claims")


def _restore_claims(auth_client, uid: str, previous: dict) -> bool:
    try:
        auth_client.set_custom_user_claims(uid, previous or None)
        return True
    except Exception:
        logger.critical(
            "Admin claim for %s diverged from users/%s and could not be restored",
            uid, uid, exc_info=True,
        )
        return False


def set_admin_claim(auth_client, db, caller: Optional[dict], payload: Any) -> SetAdminClaimResult:
    """
    Callable handler body.

    `caller` is the caller's decoded ID token (None when the request was
    not authenticated); `payload` is the callable's ``data`` field.
    """
    if not caller:
        raise CallableError("unauthenticated", "You must be signed in.")
    if caller.get("admin") is not True:
        raise CallableError("permission-denied", "Admins only.")

    try:
        request = SetAdminClaimRequest.model_validate(payload or {})
    except ValidationError as exc:
        raise CallableError("invalid-argument", "Expected { uid, admin }.") from exc

    uid, make_admin = request.uid, request.admin

    try:
        user = auth_client.get_user(uid)
    except auth.UserNotFoundError as exc:
        raise CallableError("not-found", f"No user with uid {uid}.") from exc

    existing = dict(user.custom_claims or {})
    claims_changed = existing.get("admin") is not make_admin
    if claims_changed:
        auth_client.set_custom_user_claims(uid, {**existing, "admin": make_admin})

    try:
        db.collection("users").document(uid).set({"isAdmin": make_admin}, merge=True)
    except Exception as exc:
        logger.error("Mirror write users/%s failed: %s", uid, exc)
        restored = _restore_claims(auth_client, uid, existing) if claims_changed else False
        in_sync = restored or not claims_changed
        raise CallableError(
            "internal",
            "Could not update the user profile; admin claim left unchanged."
            if in_sync
            else "Could not update the user profile; admin claim and profile are out of sync.",
            {"uid": uid, "admin": make_admin, "claimsChanged": claims_changed, "compensated": restored},
        ) from exc

    logger.info("Admin claim for %s set to %s by %s", uid, make_admin, caller.get("uid"))
    log_debug("set_admin_claim", {"uid": uid, "admin": make_admin, "previous": existing, "caller": caller.get("uid")})
    return SetAdminClaimResult(uid=uid, admin=make_admin)
