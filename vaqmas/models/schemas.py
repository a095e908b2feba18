from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, StrictBool, StrictStr

# Define data models to ensure type safety and clearer APIs


class SetAdminClaimRequest(BaseModel):
    uid: StrictStr = Field(..., min_length=1)
    admin: StrictBool


class SetAdminClaimResult(BaseModel):
    ok: bool = True
    uid: str
    admin: bool


ActivityKind = Literal["appointment", "user"]


class ActivityItem(BaseModel):
    kind: ActivityKind
    id: str
    title: str
    timestamp: datetime


class DashboardCounts(BaseModel):
    users: int = 0
    pediatricians: int = 0
    products: int = 0
    appointments: int = 0
    articles: int = 0
    locations: int = 0
    appointments_today: int = 0
    appointments_this_week: int = 0


class DashboardSummary(BaseModel):
    counts: DashboardCounts
    recent_appointments: List[Dict[str, Any]] = []
    recent_users: List[Dict[str, Any]] = []
    activity: List[ActivityItem] = []
    generated_at: Optional[datetime] = None
