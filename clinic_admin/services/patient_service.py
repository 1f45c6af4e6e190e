from clinic_admin.constants import Resource
from clinic_admin.schemas import Patient
from clinic_admin.services.resource_client import ResourceClient


class PatientClient(ResourceClient[Patient]):
    """/api/patients"""

    resource = Resource.PATIENTS
    model = Patient
