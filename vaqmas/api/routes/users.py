"""Admin user management routes.

Admin status is not editable here; it goes through the setAdminClaim
callable so the token claim and the profile mirror change together.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from vaqmas.api.deps import get_context, require_admin
from vaqmas.models.user import UserForm
from vaqmas.services.firestore_collection import FirestoreCollection

router = APIRouter(prefix="/admin/users", tags=["admin_users"])


def _users(context):
    return FirestoreCollection(context.db, "users")


@router.get("/")
def list_users(
    user_type: Optional[str] = None,
    is_admin: Optional[bool] = None,
    user=Depends(require_admin),
    context=Depends(get_context),
):
    filters = []
    if user_type:
        filters.append(("userType", "==", user_type))
    if is_admin is not None:
        filters.append(("isAdmin", "==", is_admin))
    return {"items": _users(context).list(filters=filters)}


@router.get("/{uid}")
def get_user(uid: str, user=Depends(require_admin), context=Depends(get_context)):
    return _users(context).get(uid)


@router.put("/{uid}")
def update_user(uid: str, form: UserForm, user=Depends(require_admin), context=Depends(get_context)):
    updated = _users(context).update(uid, form.to_firestore(exclude_unset=True))
    context.notifications.success(f"Usuario {form.email} actualizado")
    return updated


@router.delete("/{uid}")
def delete_user(uid: str, user=Depends(require_admin), context=Depends(get_context)):
    _users(context).delete(uid)
    context.notifications.success("Usuario eliminado")
    return {"id": uid, "deleted": True}
