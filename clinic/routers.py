"""
URL mappings for the clinic API.

Paths carry no trailing slash.  Fixed segments (``search``, ``mine``)
are registered before the ``<pk>`` routes so they are never read as an
identifier.
"""
from django.urls import path, include

from .views import chats, consultations, departments, doctors, health, patients


urlpatterns = [
    path('', include('django_prometheus.urls')),  # /metrics
    path('healthz', health.healthz),
    # Departments
    path('api/departments', departments.departments),
    path('api/departments/search', departments.search_departments),
    path('api/departments/<str:pk>', departments.department_detail),
    # Doctors
    path('api/doctors', doctors.doctors),
    path('api/doctors/mine', doctors.my_doctor_profile),
    path('api/doctors/search', doctors.search_doctors),
    path('api/doctors/<str:pk>', doctors.doctor_detail),
    path('api/doctors/<str:pk>/availability', doctors.doctor_availability),
    # Patients
    path('api/patients', patients.patients),
    path('api/patients/mine', patients.my_patient_profile),
    path('api/patients/<str:pk>', patients.patient_detail),
    path('api/patients/<str:pk>/consultations', patients.patient_consultations),
    # Consultations
    path('api/consultations', consultations.consultations),
    path('api/consultations/<str:pk>', consultations.consultation_detail),
    # Chats
    path('api/chats', chats.chats),
    path('api/chats/<str:pk>', chats.chat_detail),
]
