from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from vaqmas.models.base import FirestoreModel

AppointmentType = Literal["vaccination", "consultation", "packageApplication", "checkup", "followUp"]
AppointmentStatus = Literal[
    "scheduled",
    "completed",
    "cancelledByUser",
    "cancelledByClinic",
    "noShow",
    "pending",
    "rescheduled",
]


class Appointment(FirestoreModel):
    id: Optional[str] = None
    patient_id: str = ""
    patient_name: Optional[str] = None
    doctor_id: str = ""
    doctor_name: Optional[str] = None
    doctor_specialty: Optional[str] = None
    date_time: Optional[datetime] = None
    duration_minutes: int = 30
    location_id: str = ""
    location_name: str = ""
    location_address: Optional[str] = None
    type: AppointmentType = "vaccination"
    product_ids: List[str] = []
    status: AppointmentStatus = "scheduled"
    notes: Optional[str] = None
    created_by_user_id: Optional[str] = None
    created_at: Optional[datetime] = None
    last_updated_at: Optional[datetime] = None


class AppointmentForm(FirestoreModel):
    patient_id: str = Field(..., min_length=1)
    patient_name: Optional[str] = None
    doctor_id: str = ""
    doctor_name: Optional[str] = None
    doctor_specialty: Optional[str] = None
    date_time: datetime
    duration_minutes: int = Field(30, gt=0)
    location_id: str = Field(..., min_length=1)
    location_name: str = ""
    location_address: Optional[str] = None
    type: AppointmentType = "vaccination"
    product_ids: List[str] = []
    status: AppointmentStatus = "scheduled"
    notes: Optional[str] = None
