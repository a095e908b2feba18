from fastapi import APIRouter, Depends, HTTPException

from vaqmas.api.deps import get_context, require_admin
from vaqmas.services.dashboard_service import build_dashboard

router = APIRouter(prefix="/admin", tags=["admin_dashboard"])


@router.get("/dashboard")
def admin_dashboard(user=Depends(require_admin), context=Depends(get_context)):
    """
    Admin dashboard:
    - Collection totals and today's / this week's appointments
    - Most recent appointments and users
    - Merged recent-activity feed
    """
    try:
        summary = build_dashboard(context.db)
    except Exception as e:
        context.notifications.error("No se pudo cargar el panel")
        raise HTTPException(status_code=500, detail=f"Dashboard load failed: {e}")
    return summary.model_dump(mode="json")


@router.get("/notifications")
def list_notifications(user=Depends(require_admin), context=Depends(get_context)):
    return {"items": [n.to_dict() for n in context.notifications.active()]}


@router.delete("/notifications/{notification_id}")
def dismiss_notification(notification_id: str, user=Depends(require_admin), context=Depends(get_context)):
    context.notifications.remove(notification_id)
    return {"id": notification_id, "dismissed": True}


@router.delete("/notifications")
def clear_notifications(user=Depends(require_admin), context=Depends(get_context)):
    context.notifications.clear()
    return {"cleared": True}
