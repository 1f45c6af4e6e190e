from enum import Enum

class Gender(str, Enum):
    """Patient gender as sent on the wire."""
    MALE = "MALE"
    FEMALE = "FEMALE"


class Resource(str, Enum):
    """REST resources exposed by the backend under /api/."""
    PATIENTS = "patients"
    DOCTORS = "doctors"

    @property
    def path(self) -> str:
        return f"/api/{self.value}"
