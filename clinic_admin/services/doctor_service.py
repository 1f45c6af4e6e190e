from clinic_admin.constants import Resource
from clinic_admin.schemas import Doctor
from clinic_admin.services.resource_client import ResourceClient


class DoctorClient(ResourceClient[Doctor]):
    """/api/doctors"""

    resource = Resource.DOCTORS
    model = Doctor
