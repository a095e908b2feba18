"""Pydantic models for user and pediatrician profiles stored in Firestore."""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import EmailStr

from vaqmas.models.base import FirestoreModel

UserType = Literal["normal", "pediatrician"]


class User(FirestoreModel):
    id: Optional[str] = None
    email: Optional[str] = None
    display_name: Optional[str] = None
    photo_url: Optional[str] = None
    phone_number: Optional[str] = None
    is_admin: bool = False
    user_type: UserType = "normal"
    patient_profile_ids: List[str] = []
    preferred_location_id: Optional[str] = None
    created_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None


class UserForm(FirestoreModel):
    """Fields an admin can edit on a user.

    ``isAdmin`` is deliberately absent: it only changes through the
    admin-claim callable so token claims and the profile stay paired.
    """
    email: EmailStr
    display_name: Optional[str] = None
    photo_url: Optional[str] = None
    phone_number: Optional[str] = None
    user_type: UserType = "normal"
    patient_profile_ids: List[str] = []
    preferred_location_id: Optional[str] = None


class Pediatrician(FirestoreModel):
    id: Optional[str] = None
    email: Optional[str] = None
    display_name: Optional[str] = None
    photo_url: Optional[str] = None
    phone_number: str = ""
    is_admin: bool = False
    user_type: Literal["pediatrician"] = "pediatrician"
    specialty: str = ""
    license_number: str = ""
    clinic_location_ids: List[str] = []
    bio: Optional[str] = None
    years_experience: Optional[int] = None
    created_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None


class PediatricianForm(FirestoreModel):
    email: EmailStr
    display_name: Optional[str] = None
    photo_url: Optional[str] = None
    phone_number: str
    specialty: str
    license_number: str
    clinic_location_ids: List[str] = []
    bio: Optional[str] = None
    years_experience: Optional[int] = None


class AuthSession(FirestoreModel):
    """The signed-in caller as seen through their verified ID token."""
    uid: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    photo_url: Optional[str] = None
    is_admin: bool = False

    @classmethod
    def from_token(cls, decoded: dict) -> "AuthSession":
        return cls(
            uid=decoded["uid"],
            email=decoded.get("email"),
            display_name=decoded.get("name"),
            photo_url=decoded.get("picture"),
            is_admin=decoded.get("admin") is True,
        )
