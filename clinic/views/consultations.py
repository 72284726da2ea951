from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from clinic.responses import render
from clinic.serializers.consultations import ConsultationSerializer
from clinic.services.context import get_service_context


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def consultations(request):
    svc = get_service_context().consultations
    if request.method == 'GET':
        return render(svc.get_all_consultations(), ConsultationSerializer)
    return render(svc.create_consultation(request.data), ConsultationSerializer, created=True)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def consultation_detail(request, pk: str):
    return render(get_service_context().consultations.get_consultation_by_id(pk), ConsultationSerializer)
