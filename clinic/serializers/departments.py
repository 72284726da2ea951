from rest_framework import serializers

from clinic.models import Department


class DepartmentCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)


class DepartmentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Department
        fields = ['id', 'name']
