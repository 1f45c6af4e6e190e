from pydantic import BaseModel, field_validator
from typing import Optional, Any, Dict

from clinic_admin.constants import Gender

# Fields owned by the server; never sent back by the client
SERVER_FIELDS = {"id", "createdAt", "updatedAt"}
TIMESTAMP_FIELDS = {"createdAt", "updatedAt"}

# -------------------- Shared --------------------


class PersonBase(BaseModel):
    """Fields shared by every resource managed from the admin.

    Wire names are camelCase, exactly as the backend sends them.
    """

    id: Optional[str] = None
    firstName: str
    lastName: str
    email: str
    phone: Optional[str] = None
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None

    @field_validator("phone", mode="before")
    @classmethod
    def blank_phone_is_unset(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def full_name(self) -> str:
        return f"{self.firstName} {self.lastName}".strip()

    def to_create_payload(self) -> Dict[str, Any]:
        """JSON body for POST: no id, no timestamps, unset optionals omitted."""
        return self.model_dump(mode="json", exclude=SERVER_FIELDS, exclude_none=True)

    def to_update_payload(self) -> Dict[str, Any]:
        """JSON body for PUT: the full entity minus server timestamps."""
        return self.model_dump(mode="json", exclude=TIMESTAMP_FIELDS, exclude_none=True)


# -------------------- Patient Schemas --------------------

class Patient(PersonBase):
    dob: Optional[str] = None  # date string, e.g. 1990-04-21
    gender: Optional[Gender] = None

    @field_validator("dob", "gender", mode="before")
    @classmethod
    def blank_is_unset(cls, v: Any) -> Any:
        # form inputs send "" for untouched optional fields
        if isinstance(v, str) and not v.strip():
            return None
        return v


# -------------------- Doctor Schemas --------------------

class Doctor(PersonBase):
    specialty: str
    rpps: Optional[str] = None  # professional registry number
    clinicAddress: Optional[str] = None

    @field_validator("rpps", "clinicAddress", mode="before")
    @classmethod
    def blank_is_unset(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v
