from __future__ import annotations

from clinic.models import Department
from clinic.results import Result
from clinic.serializers.departments import DepartmentCreateSerializer
from clinic.services.base import EntityService


class DepartmentService(EntityService):
    label = 'Department'

    def create_department(self, payload) -> Result:
        data, error = self.validate(DepartmentCreateSerializer, payload)
        if error:
            return error
        return self.add(Department(name=data['name']))

    def get_department_by_id(self, department_id: str) -> Result:
        return self.lookup(department_id)

    def get_all_departments(self) -> Result:
        return self.query.collect(self.store.values(), 'No departments found')

    def search_department_by_name(self, name: str) -> Result:
        return self.query.search_by_name(
            self.store.values(), name, f"No departments found with name containing '{name}'"
        )

    def delete_department(self, department_id: str) -> Result:
        # Doctors / consultations keep pointing at the removed id.
        return self.remove(department_id)
