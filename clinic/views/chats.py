from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from clinic.responses import render
from clinic.serializers.chats import ChatSerializer
from clinic.services.context import get_service_context


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def chats(request):
    """``POST`` stores a chat message and pushes it to both participants' feeds."""
    svc = get_service_context().chats
    if request.method == 'GET':
        return render(svc.get_all_chats(), ChatSerializer)
    return render(svc.create_chat(request.data), ChatSerializer, created=True)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def chat_detail(request, pk: str):
    return render(get_service_context().chats.get_chat_by_id(pk), ChatSerializer)
