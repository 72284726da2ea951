"""
Django admin registrations for the clinic records.

Records are normally written through the services (which generate ids
and enforce the doctor uniqueness rule), so the admin is meant for
inspection; ``seq`` is shown read-only to make store order visible.
"""

from django.contrib import admin

from .models import Chat, Consultation, Department, Doctor, Patient


class RecordAdmin(admin.ModelAdmin):
    readonly_fields = ('id', 'seq')
    ordering = ('seq',)


@admin.register(Department)
class DepartmentAdmin(RecordAdmin):
    list_display = ('id', 'name', 'seq')
    search_fields = ('id', 'name')


@admin.register(Doctor)
class DoctorAdmin(RecordAdmin):
    list_display = ('id', 'name', 'department_id', 'owner', 'available')
    list_filter = ('available',)
    search_fields = ('id', 'name', 'owner', 'department_id')


@admin.register(Patient)
class PatientAdmin(RecordAdmin):
    list_display = ('id', 'name', 'age', 'owner')
    search_fields = ('id', 'name', 'owner')


@admin.register(Consultation)
class ConsultationAdmin(RecordAdmin):
    list_display = ('id', 'patient_id', 'department_id', 'problem')
    search_fields = ('id', 'patient_id', 'department_id')


@admin.register(Chat)
class ChatAdmin(RecordAdmin):
    list_display = ('id', 'patient_id', 'doctor_id', 'timestamp')
    search_fields = ('id', 'patient_id', 'doctor_id')
