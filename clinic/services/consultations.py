from __future__ import annotations

from clinic.models import Consultation
from clinic.results import Result
from clinic.serializers.consultations import ConsultationCreateSerializer
from clinic.services.base import EntityService


class ConsultationService(EntityService):
    """Consultations are append-only: no update or delete."""
    label = 'Consultation'

    def create_consultation(self, payload) -> Result:
        data, error = self.validate(ConsultationCreateSerializer, payload)
        if error:
            return error
        return self.add(Consultation(**data))

    def get_consultation_by_id(self, consultation_id: str) -> Result:
        return self.lookup(consultation_id)

    def get_all_consultations(self) -> Result:
        return self.query.collect(self.store.values(), 'No consultations found')

    def get_consultation_history_by_patient(self, patient_id: str) -> Result:
        history = self.query.filter(self.store.values(), lambda c: c.patient_id == patient_id)
        return self.query.collect(history, f"No consultations found for patient id={patient_id}")
