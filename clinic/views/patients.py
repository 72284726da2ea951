"""
Patient profile endpoints, including a patient's consultation history.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from clinic.identity import IdentityContext
from clinic.responses import render
from clinic.serializers.consultations import ConsultationSerializer
from clinic.serializers.patients import PatientSerializer
from clinic.services.context import get_service_context


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def patients(request):
    svc = get_service_context().patients
    if request.method == 'GET':
        return render(svc.get_all_patients(), PatientSerializer)
    identity = IdentityContext.from_request(request)
    return render(svc.create_patient(request.data, identity), PatientSerializer, created=True)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_patient_profile(request):
    identity = IdentityContext.from_request(request)
    return render(get_service_context().patients.get_patient_by_owner(identity), PatientSerializer)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated])
def patient_detail(request, pk: str):
    svc = get_service_context().patients
    if request.method == 'GET':
        return render(svc.get_patient_by_id(pk), PatientSerializer)
    if request.method == 'DELETE':
        return render(svc.delete_patient(pk))
    return render(svc.update_patient(pk, request.data), PatientSerializer)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def patient_consultations(request, pk: str):
    svc = get_service_context().consultations
    return render(svc.get_consultation_history_by_patient(pk), ConsultationSerializer)
