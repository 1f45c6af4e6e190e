from typing import Optional

import httpx

from clinic_admin.config import Settings
from clinic_admin.constants import Resource
from clinic_admin.services.api_client import ApiClient, build_api_client
from clinic_admin.services.doctor_service import DoctorClient
from clinic_admin.services.patient_service import PatientClient
from clinic_admin.services.resource_client import ResourceClient


class ClinicApi:
    """Both resource clients sharing one ApiClient (and one connection pool)."""

    def __init__(self, api: ApiClient):
        self.api = api
        self.patients = PatientClient(api)
        self.doctors = DoctorClient(api)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        base_url: str | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ClinicApi":
        return cls(build_api_client(settings, base_url=base_url, transport=transport))

    def client_for(self, resource: Resource) -> ResourceClient:
        if resource is Resource.PATIENTS:
            return self.patients
        return self.doctors

    async def close(self) -> None:
        await self.api.close()

    async def __aenter__(self) -> "ClinicApi":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
