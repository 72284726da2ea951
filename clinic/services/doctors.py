from __future__ import annotations

from django.db import transaction

from clinic.identity import IdentityContext
from clinic.models import Doctor
from clinic.results import Result, invalid_payload, not_found, ok
from clinic.serializers.doctors import (
    DoctorAvailabilitySerializer,
    DoctorCreateSerializer,
    DoctorUpdateSerializer,
)
from clinic.services.base import EntityService


class DoctorService(EntityService):
    label = 'Doctor'

    def create_doctor(self, payload, identity: IdentityContext) -> Result:
        data, error = self.validate(DoctorCreateSerializer, payload)
        if error:
            return error
        with transaction.atomic():
            # 同一科室内医生姓名唯一（仅在创建时校验）
            clash = self.query.first(
                self.store.values(),
                lambda d: d.name == data['name'] and d.department_id == data['department_id'],
            )
            if clash is not None:
                return invalid_payload('Doctor with this name already exists in the department')
            return self.add(Doctor(owner=identity.principal.text, **data))

    def get_doctor_by_id(self, doctor_id: str) -> Result:
        return self.lookup(doctor_id)

    def get_doctor_by_owner(self, identity: IdentityContext) -> Result:
        doctor = self.query.first(self.store.values(), lambda d: identity.owns(d.owner))
        if doctor is None:
            return not_found(f"Doctor profile for owner={identity.principal} not found")
        return ok(doctor)

    def get_all_doctors(self) -> Result:
        return self.query.collect(self.store.values(), 'No doctors found')

    def search_doctor_by_name(self, name: str) -> Result:
        return self.query.search_by_name(
            self.store.values(), name, f"No doctors found with name containing '{name}'"
        )

    def update_doctor(self, doctor_id: str, payload) -> Result:
        return self.merge(doctor_id, DoctorUpdateSerializer, payload)

    def update_doctor_availability(self, doctor_id: str, available) -> Result:
        return self.merge(doctor_id, DoctorAvailabilitySerializer, {'available': available})

    def delete_doctor(self, doctor_id: str) -> Result:
        return self.remove(doctor_id)
