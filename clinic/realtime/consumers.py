import json

from channels.generic.websocket import AsyncWebsocketConsumer
from django.contrib.auth.models import AnonymousUser

from clinic.services.chats import feed_group

FEED_ROLES = ('patient', 'doctor')


class ChatFeedConsumer(AsyncWebsocketConsumer):
    """Read-only feed of chats stored for one patient or doctor.

    Messages are written over HTTP (``POST /api/chats``); this socket only
    relays the ``chat.created`` events the chat service broadcasts.
    """

    async def connect(self):
        kwargs = self.scope["url_route"]["kwargs"]
        role = kwargs.get("role")
        user = self.scope.get("user") or AnonymousUser()

        if not user.is_authenticated:
            await self.close(code=4003)
            return
        group = feed_group(role, kwargs.get("participant_id")) if role in FEED_ROLES else None
        if group is None:
            await self.close(code=4001)
            return

        self.group_name = group
        await self.channel_layer.group_add(self.group_name, self.channel_name)
        await self.accept()

    async def disconnect(self, close_code):
        if hasattr(self, "group_name"):
            await self.channel_layer.group_discard(self.group_name, self.channel_name)

    async def receive(self, text_data=None, bytes_data=None):
        await self.send(json.dumps({"type": "error", "code": 4005, "message": "read_only_feed"}))

    # group_send 事件处理器: {"type": "chat.created", "chat": {...}}
    async def chat_created(self, event):
        await self.send(json.dumps({"type": "chat", "chat": event.get("chat", {})}))
