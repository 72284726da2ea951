"""
Database models for the clinical coordination service.

Each entity lives in its own table, which acts as the fixed namespace of
its record store.  Primary keys are the generated string identifiers and
``seq`` records the insertion position so that every store can hand back
its values in a stable order.  Cross-entity fields (``department_id``,
``patient_id``, ``doctor_id``) are plain identifiers, not foreign keys:
nothing checks that the referenced record exists.
"""
from __future__ import annotations

from django.db import models


class StoredRecord(models.Model):
    """Common columns for every record kept in a :class:`RecordStore`."""
    id = models.CharField(max_length=64, primary_key=True)
    # 插入顺序，由 RecordStore 分配；覆盖写入时保持不变
    seq = models.PositiveBigIntegerField(default=0, db_index=True, editable=False)

    class Meta:
        abstract = True
        ordering = ['seq']


class Department(StoredRecord):
    """An organizational department (e.g. Cardiology)."""
    name = models.CharField(max_length=255)

    class Meta(StoredRecord.Meta):
        db_table = 'clinic_departments'

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"


class Doctor(StoredRecord):
    """A practitioner profile owned by the principal that created it."""
    owner = models.CharField(max_length=255, db_index=True)
    name = models.CharField(max_length=255)
    department_id = models.CharField(max_length=64)
    image = models.TextField()
    # 创建后才会设置，未设置时为 None
    available = models.BooleanField(null=True, blank=True, default=None)

    class Meta(StoredRecord.Meta):
        db_table = 'clinic_doctors'

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"


class Patient(StoredRecord):
    """A patient profile owned by the principal that created it."""
    owner = models.CharField(max_length=255, db_index=True)
    name = models.CharField(max_length=255)
    age = models.PositiveIntegerField()

    class Meta(StoredRecord.Meta):
        db_table = 'clinic_patients'

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"


class Consultation(StoredRecord):
    """A consultation request raised for a patient in a department."""
    patient_id = models.CharField(max_length=64, db_index=True)
    problem = models.TextField()
    department_id = models.CharField(max_length=64)

    class Meta(StoredRecord.Meta):
        db_table = 'clinic_consultations'

    def __str__(self) -> str:
        return f"consult {self.id} patient={self.patient_id}"


class Chat(StoredRecord):
    """A chat message exchanged between a patient and a doctor.

    ``timestamp`` is kept exactly as supplied by the client.
    """
    patient_id = models.CharField(max_length=64)
    doctor_id = models.CharField(max_length=64)
    message = models.TextField()
    timestamp = models.CharField(max_length=64)

    class Meta(StoredRecord.Meta):
        db_table = 'clinic_chats'

    def __str__(self) -> str:
        return f"chat {self.id} p={self.patient_id} d={self.doctor_id}"
