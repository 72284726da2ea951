from rest_framework import serializers

from clinic.models import Doctor


class DoctorCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    department_id = serializers.CharField(max_length=64)
    image = serializers.CharField()


class DoctorUpdateSerializer(DoctorCreateSerializer):
    """Mergeable doctor fields; ``id`` and ``owner`` are deliberately absent."""


class DoctorAvailabilitySerializer(serializers.Serializer):
    available = serializers.BooleanField()


class DoctorSerializer(serializers.ModelSerializer):
    class Meta:
        model = Doctor
        fields = ['id', 'owner', 'name', 'department_id', 'image', 'available']
