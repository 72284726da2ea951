import html

import bleach
from rest_framework import serializers

from clinic.models import Chat


class ChatCreateSerializer(serializers.Serializer):
    patient_id = serializers.CharField(max_length=64)
    doctor_id = serializers.CharField(max_length=64)
    message = serializers.CharField(max_length=2000)
    timestamp = serializers.CharField(max_length=64)

    def validate_message(self, v):
        # clean() also escapes <, > and &; the stored text keeps them as sent
        v = html.unescape(bleach.clean((v or '').strip(), strip=True)).strip()
        if not v:
            raise serializers.ValidationError('Message may not be empty.', code='blank')
        return v


class ChatSerializer(serializers.ModelSerializer):
    class Meta:
        model = Chat
        fields = ['id', 'patient_id', 'doctor_id', 'message', 'timestamp']
