"""Pydantic model for clinic locations."""
from datetime import datetime
from typing import Optional

from pydantic import Field

from vaqmas.models.base import FirestoreModel


class Location(FirestoreModel):
    id: Optional[str] = None
    name: str
    address: str = ""
    created_at: Optional[datetime] = None


class LocationForm(FirestoreModel):
    name: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
