"""
Management command to populate the record stores with demo data.
"""
from django.core.management.base import BaseCommand
from django.utils import timezone

from clinic.identity import IdentityContext
from clinic.services.context import get_service_context


DEPARTMENTS = ['Cardiology', 'Neurology', 'Pediatrics', 'Orthopedics']

DOCTORS = [
    # (owner, name, department, image)
    ('doctor1', 'Dr. Lee', 'Cardiology', 'https://example.org/img/lee.png'),
    ('doctor2', 'Dr. Patel', 'Neurology', 'https://example.org/img/patel.png'),
    ('doctor3', 'Dr. Okafor', 'Pediatrics', 'https://example.org/img/okafor.png'),
]

PATIENTS = [
    ('patient1', 'John Doe', 42),
    ('patient2', 'Jane Roe', 35),
]


class Command(BaseCommand):
    help = 'Populate the record stores with demo departments, doctors, patients, consultations and chats'

    def handle(self, *args, **options):
        ctx = get_service_context()
        self.stdout.write('Creating demo data...')

        departments = self.create_departments(ctx)
        doctors = self.create_doctors(ctx, departments)
        patients = self.create_patients(ctx)
        self.create_consultations(ctx, patients, departments)
        self.create_chats(ctx, patients, doctors)

        self.stdout.write(self.style.SUCCESS('Demo data created.'))

    def create_departments(self, ctx):
        existing = {d.name: d for d in ctx.stores['departments'].values()}
        departments = {}
        for name in DEPARTMENTS:
            if name in existing:
                departments[name] = existing[name]
                continue
            departments[name] = ctx.departments.create_department({'name': name}).unwrap()
        self.stdout.write(f'  departments: {len(departments)}')
        return departments

    def create_doctors(self, ctx, departments):
        doctors = []
        for owner, name, dept, image in DOCTORS:
            payload = {'name': name, 'department_id': departments[dept].id, 'image': image}
            result = ctx.doctors.create_doctor(payload, IdentityContext.for_principal(owner))
            if not result.is_ok:
                # 已存在（同科室同名）时跳过
                self.stdout.write(self.style.WARNING(f'  skip {name}: {result.error.text}'))
                continue
            doctors.append(result.value)
        self.stdout.write(f'  doctors created: {len(doctors)}')
        return doctors

    def create_patients(self, ctx):
        patients = []
        for owner, name, age in PATIENTS:
            identity = IdentityContext.for_principal(owner)
            found = ctx.patients.get_patient_by_owner(identity)
            if found.is_ok:
                patients.append(found.value)
                continue
            patients.append(ctx.patients.create_patient({'name': name, 'age': age}, identity).unwrap())
        self.stdout.write(f'  patients: {len(patients)}')
        return patients

    def create_consultations(self, ctx, patients, departments):
        problems = ['Chest pain after exercise', 'Recurring headaches']
        for patient, problem, dept in zip(patients, problems, DEPARTMENTS):
            ctx.consultations.create_consultation({
                'patient_id': patient.id,
                'problem': problem,
                'department_id': departments[dept].id,
            }).unwrap()
        self.stdout.write(f'  consultations created: {min(len(patients), len(problems))}')

    def create_chats(self, ctx, patients, doctors):
        count = 0
        for patient, doctor in zip(patients, doctors):
            ctx.chats.create_chat({
                'patient_id': patient.id,
                'doctor_id': doctor.id,
                'message': f'Hello {doctor.name}, I have a question about my consultation.',
                'timestamp': timezone.now().isoformat(),
            }).unwrap()
            count += 1
        self.stdout.write(f'  chats created: {count}')
