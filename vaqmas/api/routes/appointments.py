"""Admin appointment routes."""
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends

from vaqmas.api.deps import get_context, require_admin
from vaqmas.models.appointment import AppointmentForm
from vaqmas.services.firestore_collection import FirestoreCollection

router = APIRouter(prefix="/admin/appointments", tags=["admin_appointments"])


def _appointments(context):
    return FirestoreCollection(context.db, "appointments")


@router.get("/")
def list_appointments(
    status: Optional[str] = None,
    location_id: Optional[str] = None,
    limit: Optional[int] = None,
    user=Depends(require_admin),
    context=Depends(get_context),
):
    filters = []
    if status:
        filters.append(("status", "==", status))
    if location_id:
        filters.append(("locationId", "==", location_id))
    return {"items": _appointments(context).list(order_by="dateTime", limit=limit, filters=filters)}


@router.get("/{appointment_id}")
def get_appointment(appointment_id: str, user=Depends(require_admin), context=Depends(get_context)):
    return _appointments(context).get(appointment_id)


@router.post("/", status_code=201)
def create_appointment(form: AppointmentForm, user=Depends(require_admin), context=Depends(get_context)):
    data = {**form.to_firestore(), "createdByUserId": user["uid"], "lastUpdatedAt": None}
    created = _appointments(context).create(data)
    context.notifications.success("Cita creada")
    return created


@router.put("/{appointment_id}")
def update_appointment(
    appointment_id: str,
    form: AppointmentForm,
    user=Depends(require_admin),
    context=Depends(get_context),
):
    data = {**form.to_firestore(), "lastUpdatedAt": datetime.now(timezone.utc)}
    updated = _appointments(context).update(appointment_id, data)
    context.notifications.success("Cita actualizada")
    return updated


@router.delete("/{appointment_id}")
def delete_appointment(appointment_id: str, user=Depends(require_admin), context=Depends(get_context)):
    _appointments(context).delete(appointment_id)
    context.notifications.success("Cita eliminada")
    return {"id": appointment_id, "deleted": True}
