"""
Department endpoints.

Departments are a flat catalogue: create, list, search by name, fetch by
id and delete.  Deleting a department does not touch the doctors or
consultations that still reference its id.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from clinic.responses import render
from clinic.serializers.departments import DepartmentSerializer
from clinic.services.context import get_service_context


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def departments(request):
    """``GET`` lists every department, ``POST`` creates one from ``{"name": ...}``."""
    svc = get_service_context().departments
    if request.method == 'GET':
        return render(svc.get_all_departments(), DepartmentSerializer)
    return render(svc.create_department(request.data), DepartmentSerializer, created=True)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def search_departments(request):
    name = request.query_params.get('name', '')
    return render(get_service_context().departments.search_department_by_name(name), DepartmentSerializer)


@api_view(['GET', 'DELETE'])
@permission_classes([IsAuthenticated])
def department_detail(request, pk: str):
    svc = get_service_context().departments
    if request.method == 'GET':
        return render(svc.get_department_by_id(pk), DepartmentSerializer)
    return render(svc.delete_department(pk))
