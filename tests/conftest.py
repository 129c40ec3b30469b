"""Shared pytest fixtures: app on in-memory SQLite, Celery eager, emails recorded."""
import pytest

from hospital import create_app
from hospital.extensions import db as _db
from hospital.models import Doctor, Service

DOCTOR_PASSWORD = 'doc-secret-1'


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture(autouse=True)
def sent_emails(monkeypatch):
    """Record every email the worker task would deliver."""
    sent = []

    def fake_send(kind, recipient, appointment_data):
        sent.append({'kind': kind, 'recipient': recipient, 'data': appointment_data})
        return {'success': True}

    monkeypatch.setattr('tasks.notification_tasks.send_appointment_email', fake_send)
    return sent


@pytest.fixture
def services(db):
    """Catalogue keyed by name."""
    items = {}
    for name in ('General Physician', 'Pediatrics', 'Neurology', 'Cardiology', 'Emergency', 'Immunization', 'Dermatology'):
        service = Service(name=name, description=f'{name} consultation', price=100)
        db.session.add(service)
        items[name] = service
    db.session.commit()
    return items


@pytest.fixture
def make_doctor(db):
    def _make(name, email, specialization, password=DOCTOR_PASSWORD):
        doctor = Doctor(name=name, email=email, specialization=specialization)
        doctor.set_password(password)
        db.session.add(doctor)
        db.session.commit()
        return doctor
    return _make


@pytest.fixture
def register(client):
    """Register a patient and return (patient_id, auth headers)."""
    counter = {'value': 0}

    def _register(name='Jane', email=None, password='secret123', phone='555-0100'):
        counter['value'] += 1
        email = email or f'patient{counter["value"]}@example.com'
        response = client.post('/api/register', json={
            'name': name, 'email': email, 'phone': phone, 'password': password
        })
        assert response.status_code == 201, response.get_json()
        body = response.get_json()
        return body['data']['id'], {'Authorization': f'Bearer {body["token"]}'}

    return _register


@pytest.fixture
def doctor_headers(client):
    def _login(doctor, password=DOCTOR_PASSWORD):
        response = client.post('/api/doctor-login', json={'email': doctor.email, 'password': password})
        assert response.status_code == 200, response.get_json()
        return {'Authorization': f'Bearer {response.get_json()["token"]}'}
    return _login


@pytest.fixture
def book(client):
    """Book an appointment and return the response JSON data."""
    def _book(headers, service, date='2030-05-10', time='10:00', notes=None, service_name=None):
        payload = {
            'service_id': service.id,
            'appointment_date': date,
            'appointment_time': time,
            'notes': notes,
            'service_name': service_name if service_name is not None else service.name,
        }
        response = client.post('/api/appointments', json=payload, headers=headers)
        assert response.status_code == 201, response.get_json()
        return response.get_json()['data']
    return _book
