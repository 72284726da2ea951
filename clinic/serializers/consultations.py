import html

import bleach
from rest_framework import serializers

from clinic.models import Consultation


class ConsultationCreateSerializer(serializers.Serializer):
    patient_id = serializers.CharField(max_length=64)
    problem = serializers.CharField(max_length=4000)
    department_id = serializers.CharField(max_length=64)

    def validate_problem(self, v):
        # clean() also escapes <, > and &; the stored text keeps them as sent
        v = html.unescape(bleach.clean((v or '').strip(), strip=True)).strip()
        if not v:
            raise serializers.ValidationError('This field may not be blank.', code='blank')
        return v


class ConsultationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Consultation
        fields = ['id', 'patient_id', 'problem', 'department_id']
