from __future__ import annotations

import logging
import re

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.db import transaction

from clinic.models import Chat
from clinic.results import Result
from clinic.serializers.chats import ChatCreateSerializer, ChatSerializer
from clinic.services.base import EntityService

logger = logging.getLogger(__name__)

# Channels only accepts ASCII alphanumerics, hyphens, underscores and periods.
_GROUP_SAFE = re.compile(r'^[A-Za-z0-9._-]{1,64}$')


def feed_group(role: str, participant_id: str) -> str | None:
    if not _GROUP_SAFE.match(participant_id or ''):
        return None
    return f"chat.{role}.{participant_id}"


def broadcast_chat(chat: Chat) -> list[str]:
    """Push a stored chat to the patient and doctor feeds; returns the groups used."""
    channel_layer = get_channel_layer()
    if channel_layer is None:
        return []
    event = {'type': 'chat.created', 'chat': dict(ChatSerializer(chat).data)}
    groups = []
    for role, participant_id in (('patient', chat.patient_id), ('doctor', chat.doctor_id)):
        group = feed_group(role, participant_id)
        if group is None:
            logger.debug('chat %s: %s id %r is not a valid feed name, skipped', chat.id, role, participant_id)
            continue
        try:
            async_to_sync(channel_layer.group_send)(group, event)
        except Exception as e:
            # stored already; only the live push is lost
            logger.warning('chat %s: push to %s failed: %s', chat.id, group, e)
            continue
        groups.append(group)
    return groups


class ChatService(EntityService):
    """Chats are append-only: no update or delete."""
    label = 'Chat'

    def create_chat(self, payload) -> Result:
        data, error = self.validate(ChatCreateSerializer, payload)
        if error:
            return error
        result = self.add(Chat(**data))
        chat = result.value
        transaction.on_commit(lambda: broadcast_chat(chat))
        return result

    def get_chat_by_id(self, chat_id: str) -> Result:
        return self.lookup(chat_id)

    def get_all_chats(self) -> Result:
        return self.query.collect(self.store.values(), 'No chats found')
