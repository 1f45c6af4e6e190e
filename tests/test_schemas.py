import pytest
from pydantic import ValidationError

from clinic_admin.constants import Gender, Resource
from clinic_admin.schemas import Doctor, Patient


def test_patient_required_fields():
    with pytest.raises(ValidationError) as exc_info:
        Patient(firstName="Jane", lastName="Doe")

    assert "email" in str(exc_info.value)


def test_doctor_requires_specialty():
    with pytest.raises(ValidationError):
        Doctor(firstName="Greg", lastName="House", email="house@ppth.org")


def test_blank_optional_inputs_become_unset():
    patient = Patient(firstName="Jane", lastName="Doe", email="jane@x.com", phone=" ", dob="", gender="")
    doctor = Doctor(
        firstName="Greg", lastName="House", email="house@ppth.org",
        specialty="Diagnostics", rpps="", clinicAddress="",
    )

    assert patient.phone is None and patient.dob is None and patient.gender is None
    assert doctor.rpps is None and doctor.clinicAddress is None


def test_gender_only_accepts_known_values():
    assert Patient(firstName="J", lastName="D", email="j@x.com", gender="MALE").gender is Gender.MALE
    with pytest.raises(ValidationError):
        Patient(firstName="J", lastName="D", email="j@x.com", gender="OTHER")


def test_create_payload_never_carries_server_fields():
    doctor = Doctor(
        id="7", firstName="Greg", lastName="House", email="house@ppth.org",
        specialty="Diagnostics", createdAt="2024-01-01T00:00:00Z", updatedAt="2024-01-02T00:00:00Z",
    )

    assert doctor.to_create_payload() == {
        "firstName": "Greg",
        "lastName": "House",
        "email": "house@ppth.org",
        "specialty": "Diagnostics",
    }
    assert doctor.to_update_payload()["id"] == "7"
    assert "createdAt" not in doctor.to_update_payload()


def test_resource_paths():
    assert Resource.PATIENTS.path == "/api/patients"
    assert Resource.DOCTORS.path == "/api/doctors"
