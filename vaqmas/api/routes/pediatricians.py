"""Admin routes for pediatrician profiles."""
from fastapi import APIRouter, Depends

from vaqmas.api.deps import get_context, require_admin
from vaqmas.models.user import PediatricianForm
from vaqmas.services.firestore_collection import FirestoreCollection

router = APIRouter(prefix="/admin/pediatricians", tags=["admin_pediatricians"])


def _pediatricians(context):
    return FirestoreCollection(context.db, "pediatricians")


@router.get("/")
def list_pediatricians(user=Depends(require_admin), context=Depends(get_context)):
    return {"items": _pediatricians(context).list(order_by="createdAt")}


@router.get("/{pediatrician_id}")
def get_pediatrician(pediatrician_id: str, user=Depends(require_admin), context=Depends(get_context)):
    return _pediatricians(context).get(pediatrician_id)


@router.post("/", status_code=201)
def create_pediatrician(form: PediatricianForm, user=Depends(require_admin), context=Depends(get_context)):
    data = {**form.to_firestore(), "userType": "pediatrician", "isAdmin": False}
    created = _pediatricians(context).create(data)
    context.notifications.success(f"Pediatra {form.email} creado")
    return created


@router.put("/{pediatrician_id}")
def update_pediatrician(
    pediatrician_id: str,
    form: PediatricianForm,
    user=Depends(require_admin),
    context=Depends(get_context),
):
    updated = _pediatricians(context).update(pediatrician_id, form.to_firestore(exclude_unset=True))
    context.notifications.success(f"Pediatra {form.email} actualizado")
    return updated


@router.delete("/{pediatrician_id}")
def delete_pediatrician(pediatrician_id: str, user=Depends(require_admin), context=Depends(get_context)):
    _pediatricians(context).delete(pediatrician_id)
    context.notifications.success("Pediatra eliminado")
    return {"id": pediatrician_id, "deleted": True}
