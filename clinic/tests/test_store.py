import pytest

from clinic.models import Department, Doctor
from clinic.services.store import RecordStore

pytestmark = pytest.mark.django_db


def test_insert_then_get_returns_the_record():
    store = RecordStore(Department)
    store.insert('d1', Department(name='Cardiology'))
    got = store.get('d1')
    assert got is not None
    assert got.name == 'Cardiology'
    assert store.namespace == 'clinic_departments'


def test_get_unknown_key_is_none():
    assert RecordStore(Department).get('missing') is None


def test_values_keep_insertion_order_across_upserts():
    store = RecordStore(Department)
    for key, name in [('z', 'First'), ('a', 'Second'), ('m', 'Third')]:
        store.insert(key, Department(name=name))

    # overwrite the first key: value changes, position does not
    store.insert('z', Department(name='First (renamed)'))

    values = store.values()
    assert [d.pk for d in values] == ['z', 'a', 'm']
    assert values[0].name == 'First (renamed)'
    assert len(store) == 3


def test_remove_only_touches_that_key():
    store = RecordStore(Department)
    store.insert('a', Department(name='A'))
    store.insert('b', Department(name='B'))

    store.remove('a')
    assert 'a' not in store
    assert 'b' in store
    # removing again is harmless
    store.remove('a')
    assert len(store) == 1


def test_stores_do_not_share_keys():
    departments = RecordStore(Department)
    doctors = RecordStore(Doctor)
    departments.insert('shared', Department(name='X'))
    assert doctors.get('shared') is None
    assert departments.namespace != doctors.namespace
