"""
Process-wide service context.

One :class:`ServiceContext` owns the five record stores, the identifier
generator, the query engine and the services built on them.  The app
config creates it when Django starts (:meth:`ClinicConfig.ready`); nothing
here touches the database at construction time, and persistence needs no
teardown.  Tests build their own contexts with different policies.
"""
from __future__ import annotations

from typing import Callable, Optional

from django.apps import apps
from django.conf import settings

from clinic.models import Chat, Consultation, Department, Doctor, Patient
from clinic.services.chats import ChatService
from clinic.services.consultations import ConsultationService
from clinic.services.departments import DepartmentService
from clinic.services.doctors import DoctorService
from clinic.services.identifiers import IdentifierGenerator
from clinic.services.patients import PatientService
from clinic.services.query import QueryEngine
from clinic.services.store import RecordStore


class ServiceContext:
    def __init__(self, *, empty_result_is_error: bool = True,
                 id_factory: Optional[Callable[[], str]] = None):
        self.ids = IdentifierGenerator(id_factory)
        self.query = QueryEngine(empty_result_is_error=empty_result_is_error)
        self.stores = {
            'departments': RecordStore(Department),
            'doctors': RecordStore(Doctor),
            'patients': RecordStore(Patient),
            'consultations': RecordStore(Consultation),
            'chats': RecordStore(Chat),
        }
        self.departments = DepartmentService(self.stores['departments'], self.ids, self.query)
        self.doctors = DoctorService(self.stores['doctors'], self.ids, self.query)
        self.patients = PatientService(self.stores['patients'], self.ids, self.query)
        self.consultations = ConsultationService(self.stores['consultations'], self.ids, self.query)
        self.chats = ChatService(self.stores['chats'], self.ids, self.query)

    @property
    def empty_result_is_error(self) -> bool:
        return self.query.empty_result_is_error

    @classmethod
    def from_settings(cls) -> 'ServiceContext':
        return cls(empty_result_is_error=getattr(settings, 'CLINIC_EMPTY_RESULT_IS_ERROR', True))

    def __repr__(self) -> str:
        return f"ServiceContext(empty_result_is_error={self.empty_result_is_error})"


def get_service_context() -> ServiceContext:
    """Return the context created at startup by the clinic app config."""
    return apps.get_app_config('clinic').context
