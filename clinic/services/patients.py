from __future__ import annotations

from clinic.identity import IdentityContext
from clinic.models import Patient
from clinic.results import Result, not_found, ok
from clinic.serializers.patients import PatientCreateSerializer, PatientUpdateSerializer
from clinic.services.base import EntityService


class PatientService(EntityService):
    label = 'Patient'

    def create_patient(self, payload, identity: IdentityContext) -> Result:
        data, error = self.validate(PatientCreateSerializer, payload)
        if error:
            return error
        return self.add(Patient(owner=identity.principal.text, **data))

    def get_patient_by_id(self, patient_id: str) -> Result:
        return self.lookup(patient_id)

    def get_patient_by_owner(self, identity: IdentityContext) -> Result:
        patient = self.query.first(self.store.values(), lambda p: identity.owns(p.owner))
        if patient is None:
            return not_found(f"Patient profile for owner={identity.principal} not found")
        return ok(patient)

    def get_all_patients(self) -> Result:
        return self.query.collect(self.store.values(), 'No patients found')

    def update_patient(self, patient_id: str, payload) -> Result:
        return self.merge(patient_id, PatientUpdateSerializer, payload)

    def delete_patient(self, patient_id: str) -> Result:
        return self.remove(patient_id)
