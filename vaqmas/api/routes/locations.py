"""Clinic location routes."""
from fastapi import APIRouter, Depends

from vaqmas.api.deps import get_context, require_admin
from vaqmas.models.location import LocationForm
from vaqmas.services.firestore_collection import FirestoreCollection

router = APIRouter(prefix="/locations", tags=["locations"])
admin_router = APIRouter(prefix="/admin/locations", tags=["admin_locations"])


def _locations(context):
    return FirestoreCollection(context.db, "locations")


@router.get("/")
def list_locations(context=Depends(get_context)):
    return {"items": _locations(context).list(order_by="name", descending=False)}


@admin_router.post("/", status_code=201)
def create_location(form: LocationForm, user=Depends(require_admin), context=Depends(get_context)):
    created = _locations(context).create(form.to_firestore())
    context.notifications.success(f"Sede '{form.name}' creada")
    return created


@admin_router.put("/{location_id}")
def update_location(location_id: str, form: LocationForm, user=Depends(require_admin), context=Depends(get_context)):
    updated = _locations(context).update(location_id, form.to_firestore())
    context.notifications.success(f"Sede '{form.name}' actualizada")
    return updated


@admin_router.delete("/{location_id}")
def delete_location(location_id: str, user=Depends(require_admin), context=Depends(get_context)):
    _locations(context).delete(location_id)
    context.notifications.success("Sede eliminada")
    return {"id": location_id, "deleted": True}
