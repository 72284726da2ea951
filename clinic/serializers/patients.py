from rest_framework import serializers

from clinic.models import Patient

# largest value a PositiveIntegerField holds on every supported backend
AGE_COLUMN_MAX = 2147483647


class PatientCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    age = serializers.IntegerField(min_value=0, max_value=AGE_COLUMN_MAX)


class PatientUpdateSerializer(PatientCreateSerializer):
    """Mergeable patient fields; ``id`` and ``owner`` are deliberately absent."""


class PatientSerializer(serializers.ModelSerializer):
    class Meta:
        model = Patient
        fields = ['id', 'owner', 'name', 'age']
