"""
HTTP contract of the JSON API, exercised through Flask's test client.
"""

import pytest

from donorhub.config import TestingConfig
from donorhub import create_app
from donorhub.models.blood_inventory_model import BloodInventory
from donorhub.extensions import db

from tests.helpers import BLOOD_REQUEST_PAYLOAD, DONOR_PAYLOAD, HOSPITAL_PAYLOAD, current_stats


# ── Statistics & dashboard ──────────────────────────────────────────


def test_statistics_defaults_to_zero(client):
    r = client.get('/api/statistics')
    assert r.status_code == 200
    assert r.get_json() == {'activeDonors': 0, 'totalBloodUnits': 0, 'partnerHospitals': 0}


def test_statistics_row(client, stats_row):
    body = client.get('/api/statistics').get_json()
    assert body['activeDonors'] == 0
    assert body['partnerHospitals'] == 0
    assert 'lastUpdated' in body


def test_dashboard_stats_shape(client):
    r = client.get('/api/dashboard-stats')
    assert r.status_code == 200
    body = r.get_json()
    assert set(body) == {
        'donorsByBloodType', 'donorsByLocation', 'totalDonors',
        'monthlyDonorStats', 'totalHospitals', 'totalPending',
    }
    assert len(body['monthlyDonorStats']) == 12


def test_blood_inventory_list(client):
    db.session.add(BloodInventory(blood_type='O-', units_available=2, status='Critical'))
    db.session.commit()
    r = client.get('/api/blood-inventory')
    assert r.status_code == 200
    item = r.get_json()[0]
    assert item['bloodType'] == 'O-'
    assert item['unitsAvailable'] == 2
    assert item['status'] == 'Critical'


# ── Donors ──────────────────────────────────────────────────────────


def test_create_donor(client, stats_row):
    before = client.get('/api/dashboard-stats').get_json()['totalDonors']

    r = client.post('/api/donors', json=DONOR_PAYLOAD)
    assert r.status_code == 201
    body = r.get_json()
    assert body['fullName'] == 'Ahmed Benali'
    assert body['isActive'] is True
    assert body['id'] and body['createdAt']

    after = client.get('/api/dashboard-stats').get_json()['totalDonors']
    assert after == before + 1
    assert current_stats().active_donors == 1


def test_create_donor_ignores_server_fields(client):
    payload = dict(DONOR_PAYLOAD, id='chosen-id', isActive=False)
    body = client.post('/api/donors', json=payload).get_json()
    assert body['id'] != 'chosen-id'
    assert body['isActive'] is True


@pytest.mark.parametrize('change', [
    {'bloodType': 'Z+'},
    {'age': 'old'},
    {'age': 10**20},
    {'fullName': None},
])
def test_create_donor_invalid(client, stats_row, change):
    r = client.post('/api/donors', json=dict(DONOR_PAYLOAD, **change))
    assert r.status_code == 400
    assert r.get_json()['error'].startswith('Validation error')
    assert client.get('/api/donors').get_json() == []
    assert current_stats().active_donors == 0


def test_create_donor_without_body(client):
    r = client.post('/api/donors', data='not json', content_type='text/plain')
    assert r.status_code == 400


def test_list_donors(client):
    client.post('/api/donors', json=DONOR_PAYLOAD)
    client.post('/api/donors', json=dict(DONOR_PAYLOAD, fullName='Fatima Hadj', bloodType='A+'))
    names = [d['fullName'] for d in client.get('/api/donors').get_json()]
    assert sorted(names) == ['Ahmed Benali', 'Fatima Hadj']


# ── Hospitals ───────────────────────────────────────────────────────


def test_create_and_get_hospital(client):
    r = client.post('/api/hospitals', json=dict(HOSPITAL_PAYLOAD, status='approved'))
    assert r.status_code == 201
    hospital = r.get_json()
    assert hospital['status'] == 'pending'
    assert hospital['contactPerson'] == 'Prof. Karim Meziane'

    r = client.get(f"/api/hospitals/{hospital['id']}")
    assert r.status_code == 200
    assert r.get_json()['name'] == 'University Hospital'


def test_hospital_optional_fields(client):
    payload = {k: v for k, v in HOSPITAL_PAYLOAD.items() if k not in ('address', 'contactPerson')}
    body = client.post('/api/hospitals', json=payload).get_json()
    assert body['address'] is None
    assert body['contactPerson'] is None


def test_get_missing_hospital(client):
    r = client.get('/api/hospitals/does-not-exist')
    assert r.status_code == 404
    assert r.get_json() == {'error': 'Hospital not found'}


def test_approve_hospital_twice_counts_twice(client, stats_row):
    hospital_id = client.post('/api/hospitals', json=HOSPITAL_PAYLOAD).get_json()['id']

    r = client.patch(f'/api/hospitals/{hospital_id}/status', json={'status': 'approved'})
    assert r.status_code == 200
    assert r.get_json()['status'] == 'approved'
    assert current_stats().partner_hospitals == 1

    r = client.patch(f'/api/hospitals/{hospital_id}/status', json={'status': 'approved'})
    assert r.status_code == 200
    assert current_stats().partner_hospitals == 2


def test_hospital_invalid_status(client, stats_row):
    hospital_id = client.post('/api/hospitals', json=HOSPITAL_PAYLOAD).get_json()['id']
    r = client.patch(f'/api/hospitals/{hospital_id}/status', json={'status': 'archived'})
    assert r.status_code == 400
    assert client.get(f'/api/hospitals/{hospital_id}').get_json()['status'] == 'pending'


def test_hospital_status_missing_id(client, stats_row):
    r = client.patch('/api/hospitals/does-not-exist/status', json={'status': 'approved'})
    assert r.status_code == 404
    assert current_stats().partner_hospitals == 0


def test_list_hospitals(client):
    client.post('/api/hospitals', json=HOSPITAL_PAYLOAD)
    assert len(client.get('/api/hospitals').get_json()) == 1


# ── Blood requests ──────────────────────────────────────────────────


def test_create_blood_request(client):
    r = client.post('/api/blood-requests', json=BLOOD_REQUEST_PAYLOAD)
    assert r.status_code == 201
    body = r.get_json()
    assert body['status'] == 'pending'
    # no registered hospital is needed
    assert body['hospitalName'] == 'City General Hospital'
    assert client.get('/api/hospitals').get_json() == []


@pytest.mark.parametrize('change', [
    {'unitsNeeded': 0},
    {'unitsNeeded': -3},
    {'unitsNeeded': 10**20},
    {'unitsNeeded': 2**31},
    {'urgencyLevel': 'whenever'},
    {'bloodType': 'AB'},
])
def test_create_blood_request_invalid(client, change):
    r = client.post('/api/blood-requests', json=dict(BLOOD_REQUEST_PAYLOAD, **change))
    assert r.status_code == 400
    assert client.get('/api/blood-requests').get_json() == []


def test_blood_request_status_update(client, stats_row):
    request_id = client.post('/api/blood-requests', json=BLOOD_REQUEST_PAYLOAD).get_json()['id']
    r = client.patch(f'/api/blood-requests/{request_id}/status', json={'status': 'approved'})
    assert r.status_code == 200
    assert r.get_json()['status'] == 'approved'
    assert current_stats().partner_hospitals == 0


def test_blood_request_status_errors(client):
    request_id = client.post('/api/blood-requests', json=BLOOD_REQUEST_PAYLOAD).get_json()['id']
    assert client.patch(f'/api/blood-requests/{request_id}/status', json={}).status_code == 400
    assert client.patch('/api/blood-requests/nope/status', json={'status': 'rejected'}).status_code == 404
    assert client.get('/api/blood-requests').get_json()[0]['status'] == 'pending'


def test_total_pending(client):
    for _ in range(2):
        client.post('/api/hospitals', json=HOSPITAL_PAYLOAD)
    for _ in range(3):
        client.post('/api/blood-requests', json=BLOOD_REQUEST_PAYLOAD)
    assert client.get('/api/dashboard-stats').get_json()['totalPending'] == 5


# ── Auth ────────────────────────────────────────────────────────────


def test_signup_opens_session(client):
    r = client.post('/api/auth/signup', json={'username': 'admin', 'password': 'abc123'})
    assert r.status_code == 201
    assert r.get_json()['user']['username'] == 'admin'
    assert 'password' not in r.get_json()['user']

    me = client.get('/api/auth/me')
    assert me.status_code == 200
    assert me.get_json()['user']['username'] == 'admin'


def test_signup_duplicate(client):
    client.post('/api/auth/signup', json={'username': 'admin', 'password': 'abc123'})
    r = client.post('/api/auth/signup', json={'username': 'admin', 'password': 'xyz'})
    assert r.status_code == 400
    assert r.get_json()['error'] == 'Username already taken'


def test_signup_invalid_body(client):
    assert client.post('/api/auth/signup', json={'username': 'admin'}).status_code == 400


def test_login_logout_cycle(app):
    setup = app.test_client()
    setup.post('/api/auth/signup', json={'username': 'admin', 'password': 'abc123'})

    client = app.test_client()
    assert client.get('/api/auth/me').status_code == 401

    r = client.post('/api/auth/login', json={'username': 'admin', 'password': 'abc123'})
    assert r.status_code == 200
    assert r.get_json()['user']['username'] == 'admin'
    assert client.get('/api/auth/me').status_code == 200

    assert client.post('/api/auth/logout').get_json() == {'ok': True}
    r = client.get('/api/auth/me')
    assert r.status_code == 401
    assert r.get_json() == {'error': 'Not authenticated'}


def test_login_failures(client):
    client.post('/api/auth/signup', json={'username': 'admin', 'password': 'abc123'})
    client.post('/api/auth/logout')

    assert client.post('/api/auth/login', json={'username': 'admin'}).status_code == 400

    wrong = client.post('/api/auth/login', json={'username': 'admin', 'password': 'abc124'})
    unknown = client.post('/api/auth/login', json={'username': 'ghost', 'password': 'abc123'})
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.get_json() == unknown.get_json() == {'error': 'Invalid credentials'}


@pytest.mark.parametrize('body', [
    {'username': ['admin'], 'password': 'abc123'},
    {'username': {'$ne': ''}, 'password': 'abc123'},
    {'username': 'admin', 'password': 123456},
    ['admin', 'abc123'],
])
def test_login_malformed_body(client, body):
    client.post('/api/auth/signup', json={'username': 'admin', 'password': 'abc123'})
    client.post('/api/auth/logout')

    r = client.post('/api/auth/login', json=body)
    assert r.status_code == 400
    assert r.get_json()['error'].startswith('Validation error')
    assert client.get('/api/auth/me').status_code == 401


def test_login_unencodable_password(client):
    client.post('/api/auth/signup', json={'username': 'admin', 'password': 'abc123'})
    client.post('/api/auth/logout')

    r = client.post('/api/auth/login', json={'username': 'admin', 'password': '\ud800'})
    assert r.status_code in (400, 401)
    assert 'error' in r.get_json()


# ── Unrouted ────────────────────────────────────────────────────────


def test_unknown_route_is_json(client):
    r = client.get('/api/nothing-here')
    assert r.status_code == 404
    assert r.get_json() == {'error': 'Resource not found'}


# ── Store not configured ────────────────────────────────────────────


class NoDatabaseConfig(TestingConfig):
    SQLALCHEMY_DATABASE_URI = None


@pytest.mark.parametrize('method, path, body', [
    ('get', '/api/statistics', None),
    ('get', '/api/dashboard-stats', None),
    ('get', '/api/blood-inventory', None),
    ('get', '/api/donors', None),
    ('post', '/api/donors', DONOR_PAYLOAD),
    ('get', '/api/hospitals/abc', None),
    ('patch', '/api/hospitals/abc/status', {'status': 'approved'}),
    ('post', '/api/auth/login', {'username': 'admin', 'password': 'abc123'}),
])
def test_unconfigured_store_returns_500(method, path, body):
    client = create_app(NoDatabaseConfig).test_client()
    r = getattr(client, method)(path, json=body)
    assert r.status_code == 500
    assert 'Database not configured' in r.get_json()['error']


def test_unconfigured_store_still_validates_first():
    client = create_app(NoDatabaseConfig).test_client()
    r = client.patch('/api/hospitals/abc/status', json={'status': 'bogus'})
    assert r.status_code == 400
