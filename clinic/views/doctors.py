"""
Doctor profile endpoints.

A doctor profile is owned by the caller that created it; ``/mine``
returns the first profile owned by the current caller.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from clinic.identity import IdentityContext
from clinic.responses import render
from clinic.serializers.doctors import DoctorSerializer
from clinic.services.context import get_service_context


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def doctors(request):
    svc = get_service_context().doctors
    if request.method == 'GET':
        return render(svc.get_all_doctors(), DoctorSerializer)
    identity = IdentityContext.from_request(request)
    return render(svc.create_doctor(request.data, identity), DoctorSerializer, created=True)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_doctor_profile(request):
    identity = IdentityContext.from_request(request)
    return render(get_service_context().doctors.get_doctor_by_owner(identity), DoctorSerializer)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def search_doctors(request):
    name = request.query_params.get('name', '')
    return render(get_service_context().doctors.search_doctor_by_name(name), DoctorSerializer)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated])
def doctor_detail(request, pk: str):
    """Fetch, update (shallow merge of name/department_id/image) or delete a doctor."""
    svc = get_service_context().doctors
    if request.method == 'GET':
        return render(svc.get_doctor_by_id(pk), DoctorSerializer)
    if request.method == 'DELETE':
        return render(svc.delete_doctor(pk))
    return render(svc.update_doctor(pk, request.data), DoctorSerializer)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def doctor_availability(request, pk: str):
    """Set ``available`` from ``{"available": true|false}``."""
    available = request.data.get('available') if hasattr(request.data, 'get') else None
    return render(get_service_context().doctors.update_doctor_availability(pk, available), DoctorSerializer)
