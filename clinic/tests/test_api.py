from django.contrib.auth import get_user_model
from django.test import override_settings
from rest_framework.authtoken.models import Token
from rest_framework.test import APITestCase

from clinic.services.context import ServiceContext


class ClinicApiTests(APITestCase):
    def setUp(self):
        User = get_user_model()
        self.doctor_user = User.objects.create_user(username='doctor1', password='x')
        self.patient_user = User.objects.create_user(username='patient1', password='x')
        self.client.force_authenticate(self.doctor_user)

    def as_user(self, user):
        self.client.force_authenticate(user)

    def post(self, url, data):
        return self.client.post(url, data, format='json')

    def create_department(self, name='Cardiology'):
        r = self.post('/api/departments', {'name': name})
        self.assertEqual(r.status_code, 201)
        return r.data['data']

    def create_doctor(self, name='John Doe', department_id='dep-1'):
        r = self.post('/api/doctors', {'name': name, 'department_id': department_id, 'image': 'img://x'})
        self.assertEqual(r.status_code, 201)
        return r.data['data']

    def test_requires_authentication(self):
        self.client.force_authenticate(None)
        r = self.client.get('/api/departments')
        self.assertEqual(r.status_code, 401)
        self.assertFalse(r.data['ok'])
        self.assertEqual(r.data['error']['code'], 'api_error')

    def test_token_header_authenticates(self):
        self.client.force_authenticate(None)
        token = Token.objects.create(user=self.doctor_user)
        self.client.credentials(HTTP_AUTHORIZATION='Token ' + token.key)
        r = self.client.get('/api/departments')
        # authenticated, but the store is empty
        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.data['error'], {'code': 'NotFound', 'message': 'No departments found'})

    def test_department_lifecycle(self):
        dep = self.create_department()
        r = self.client.get(f"/api/departments/{dep['id']}")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.data, {'ok': True, 'data': {'id': dep['id'], 'name': 'Cardiology'}})

        r = self.client.get('/api/departments/search', {'name': 'cardio'})
        self.assertEqual([d['id'] for d in r.data['data']], [dep['id']])

        r = self.client.delete(f"/api/departments/{dep['id']}")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.data['data'], {
            'kind': 'Success', 'message': f"Department with id={dep['id']} deleted successfully",
        })
        self.assertEqual(self.client.get(f"/api/departments/{dep['id']}").status_code, 404)

    def test_invalid_payload_is_400(self):
        r = self.post('/api/departments', {})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.data['error'], {'code': 'InvalidPayload', 'message': 'Missing required fields: name'})

    def test_duplicate_doctor_is_400(self):
        self.create_doctor()
        self.as_user(self.patient_user)
        r = self.post('/api/doctors', {'name': 'John Doe', 'department_id': 'dep-1', 'image': 'other'})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.data['error']['message'], 'Doctor with this name already exists in the department')

    def test_doctor_profile_belongs_to_caller(self):
        doc = self.create_doctor()
        self.assertEqual(doc['owner'], 'doctor1')
        self.assertIsNone(doc['available'])
        self.assertEqual(self.client.get('/api/doctors/mine').data['data']['id'], doc['id'])

        self.as_user(self.patient_user)
        r = self.client.get('/api/doctors/mine')
        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.data['error']['message'], 'Doctor profile for owner=patient1 not found')

    def test_doctor_update_and_availability(self):
        doc = self.create_doctor()
        r = self.client.patch(f"/api/doctors/{doc['id']}", {'image': 'img://new', 'owner': 'someone'}, format='json')
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.data['data']['image'], 'img://new')
        self.assertEqual(r.data['data']['owner'], 'doctor1')

        r = self.post(f"/api/doctors/{doc['id']}/availability", {'available': True})
        self.assertEqual(r.status_code, 200)
        self.assertTrue(r.data['data']['available'])

        r = self.post(f"/api/doctors/{doc['id']}/availability", {})
        self.assertEqual(r.status_code, 400)

        r = self.post('/api/doctors/ghost/availability', {'available': False})
        self.assertEqual(r.status_code, 404)

    def test_doctor_search(self):
        self.create_doctor(name='John Doe')
        self.create_doctor(name='Jane Roe')
        r = self.client.get('/api/doctors/search', {'name': 'doe'})
        self.assertEqual([d['name'] for d in r.data['data']], ['John Doe'])
        r = self.client.get('/api/doctors/search', {'name': 'smith'})
        self.assertEqual(r.status_code, 404)

    def test_patient_visit(self):
        self.as_user(self.patient_user)
        r = self.post('/api/patients', {'name': 'Alice', 'age': 30})
        self.assertEqual(r.status_code, 201)
        patient = r.data['data']
        self.assertEqual(patient['owner'], 'patient1')
        self.assertEqual(self.client.get('/api/patients/mine').data['data']['id'], patient['id'])

        r = self.client.patch(f"/api/patients/{patient['id']}", {'age': 40}, format='json')
        self.assertEqual(r.data['data']['age'], 40)
        self.assertEqual(r.data['data']['name'], 'Alice')

        r = self.client.get(f"/api/patients/{patient['id']}/consultations")
        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.data['error']['message'], f"No consultations found for patient id={patient['id']}")

        r = self.post('/api/consultations', {
            'patient_id': patient['id'], 'problem': 'Chest pain', 'department_id': 'dep-1',
        })
        self.assertEqual(r.status_code, 201)
        consultation = r.data['data']
        self.assertEqual(self.client.get(f"/api/consultations/{consultation['id']}").status_code, 200)

        r = self.client.get(f"/api/patients/{patient['id']}/consultations")
        self.assertEqual([c['id'] for c in r.data['data']], [consultation['id']])

    def test_patient_negative_age_is_400(self):
        r = self.post('/api/patients', {'name': 'Bob', 'age': -1})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.data['error']['code'], 'InvalidPayload')

    def test_chats(self):
        r = self.post('/api/chats', {
            'patient_id': 'pa-1', 'doctor_id': 'dr-1', 'message': 'hello', 'timestamp': '1700000000',
        })
        self.assertEqual(r.status_code, 201)
        chat = r.data['data']
        self.assertEqual(self.client.get(f"/api/chats/{chat['id']}").data['data']['message'], 'hello')
        self.assertEqual(len(self.client.get('/api/chats').data['data']), 1)
        self.assertEqual(self.client.get('/api/chats/ghost').status_code, 404)

    def test_chats_are_append_only(self):
        self.assertEqual(self.client.delete('/api/chats/anything').status_code, 405)
        self.assertEqual(self.client.put('/api/consultations/anything', {}, format='json').status_code, 405)

    def test_healthz(self):
        self.client.force_authenticate(None)
        r = self.client.get('/healthz')
        self.assertEqual(r.status_code, 200)
        body = r.json()
        self.assertTrue(body['db'])
        self.assertIn('clinic_doctors', body['stores'])


@override_settings(CLINIC_EMPTY_RESULT_IS_ERROR=False)
class LenientContextTests(APITestCase):
    def test_context_reads_policy_from_settings(self):
        self.assertFalse(ServiceContext.from_settings().empty_result_is_error)
