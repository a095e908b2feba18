"""Admin dashboard summary.

All queries go out at once on a thread pool and are awaited together.
They are independent reads, so counts may reflect slightly different
instants.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from vaqmas.core.logger import get_logger
from vaqmas.models.schemas import ActivityItem, DashboardCounts, DashboardSummary
from vaqmas.services.time_utils import as_utc, day_range, week_range

logger = get_logger("dashboard")

COUNTED_COLLECTIONS = ("users", "pediatricians", "products", "appointments", "articles", "locations")
RECENT_LIMIT = 5
ACTIVITY_LIMIT = 8


def count_documents(query) -> int:
    """Server-side count aggregation for a collection or query."""
    results = query.count().get()
    return int(results[0][0].value)


def recent_documents(db, collection: str, limit: int) -> List[Dict[str, Any]]:
    docs = (
        db.collection(collection)
        .order_by("createdAt", direction="DESCENDING")
        .limit(limit)
        .stream()
    )
    return [{"id": d.id, **(d.to_dict() or {})} for d in docs]


def _appointment_activity(appt: Dict[str, Any]) -> Optional[ActivityItem]:
    ts = as_utc(appt.get("createdAt"))
    if ts is None:
        return None
    patient = appt.get("patientName") or "Paciente"
    location = appt.get("locationName") or "sede sin nombre"
    return ActivityItem(kind="appointment", id=appt["id"], title=f"Nueva cita: {patient} en {location}", timestamp=ts)


def _user_activity(user: Dict[str, Any]) -> Optional[ActivityItem]:
    ts = as_utc(user.get("createdAt"))
    if ts is None:
        return None
    name = user.get("displayName") or user.get("email") or user["id"]
    return ActivityItem(kind="user", id=user["id"], title=f"Nuevo usuario: {name}", timestamp=ts)


def build_activity_feed(
    appointments: List[Dict[str, Any]],
    users: List[Dict[str, Any]],
    limit: int = ACTIVITY_LIMIT,
) -> List[ActivityItem]:
    """Appointment and user creation events, newest first."""
    items = [_appointment_activity(a) for a in appointments] + [_user_activity(u) for u in users]
    items = [i for i in items if i is not None]
    items.sort(key=lambda i: i.timestamp, reverse=True)
    return items[:limit]


def build_dashboard(
    db,
    now: Optional[datetime] = None,
    recent_limit: int = RECENT_LIMIT,
    activity_limit: int = ACTIVITY_LIMIT,
) -> DashboardSummary:
    now = now or datetime.now(timezone.utc)
    today_start, today_end = day_range(now)
    week_start, week_end = week_range(now)

    appointments = db.collection("appointments")
    count_queries = {name: db.collection(name) for name in COUNTED_COLLECTIONS}
    count_queries["appointments_today"] = (
        appointments.where("dateTime", ">=", today_start).where("dateTime", "<", today_end)
    )
    count_queries["appointments_this_week"] = (
        appointments.where("dateTime", ">=", week_start).where("dateTime", "<", week_end)
    )

    # Enough of each kind that the merged feed can fill up from either one
    fetch_limit = max(recent_limit, activity_limit)

    with ThreadPoolExecutor(max_workers=len(count_queries) + 2) as pool:
        count_futures = {key: pool.submit(count_documents, q) for key, q in count_queries.items()}
        recent_appts_future = pool.submit(recent_documents, db, "appointments", fetch_limit)
        recent_users_future = pool.submit(recent_documents, db, "users", fetch_limit)

        # .result() re-raises the first failed query
        counts = DashboardCounts(**{key: f.result() for key, f in count_futures.items()})
        recent_appointments = recent_appts_future.result()
        recent_users = recent_users_future.result()

    logger.debug("Dashboard counts: %s", counts.model_dump())
    return DashboardSummary(
        counts=counts,
        recent_appointments=recent_appointments[:recent_limit],
        recent_users=recent_users[:recent_limit],
        activity=build_activity_feed(recent_appointments, recent_users, activity_limit),
        generated_at=now,
    )
