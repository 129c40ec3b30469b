"""Booking workflow: doctor assignment, persistence and confirmation email."""
from datetime import date

from hospital.models import Appointment


def test_end_to_end_cardiology_booking(client, services, make_doctor, sent_emails):
    cardiologist = make_doctor('Alice Heart', 'alice@hospital.com', 'Senior Cardiologist')

    registered = client.post('/api/register', json={
        'name': 'Jane', 'email': 'jane@example.com', 'phone': '555-0100', 'password': 'secret123'
    })
    assert registered.status_code == 201

    login = client.post('/api/login', json={'email': 'jane@example.com', 'password': 'secret123'})
    headers = {'Authorization': f'Bearer {login.get_json()["token"]}'}

    response = client.post('/api/appointments', headers=headers, json={
        'service_id': services['Cardiology'].id,
        'service_name': 'Cardiology',
        'appointment_date': '2030-05-10',
        'appointment_time': '09:30',
        'notes': 'Chest pain on exertion',
    })

    assert response.status_code == 201
    data = response.get_json()['data']
    assert data['appointment_id']
    assert data['doctor_assigned'] is True
    assert data['doctor_id'] == cardiologist.id
    assert data['doctor_name'] == 'Alice Heart'

    mine = client.get('/api/my-appointments', headers=headers).get_json()['data']
    assert len(mine) == 1
    assert mine[0]['status'] == 'scheduled'
    assert mine[0]['service_name'] == 'Cardiology'
    assert mine[0]['doctor_name'] == 'Alice Heart'
    assert mine[0]['appointment_date'] == '2030-05-10'
    assert mine[0]['appointment_time'] == '09:30'

    assert len(sent_emails) == 1
    email = sent_emails[0]
    assert email['kind'] == 'confirmation'
    assert email['recipient'] == 'jane@example.com'
    assert email['data'] == {
        'id': data['appointment_id'],
        'patient_name': 'Jane',
        'service_name': 'Cardiology',
        'date': '2030-05-10',
        'time': '09:30',
        'doctor_name': 'Alice Heart',
        'notes': 'Chest pain on exertion',
    }


def test_unknown_service_name_searches_general_physician(services, make_doctor, register, book):
    make_doctor('Carl Heart', 'carl@hospital.com', 'Cardiologist')
    gp = make_doctor('Gina General', 'gina@hospital.com', 'General Physician')
    _, headers = register()

    data = book(headers, services['Dermatology'], service_name='Dermatology')

    assert data['doctor_assigned'] is True
    assert data['doctor_id'] == gp.id


def test_service_name_is_trusted_over_service_id(services, make_doctor, register, book):
    neuro = make_doctor('Nora Nerve', 'nora@hospital.com', 'Neurologist')
    _, headers = register()

    data = book(headers, services['Cardiology'], service_name='Neurology')

    assert data['doctor_id'] == neuro.id


def test_missing_service_name_falls_back_to_catalogue_name(client, services, make_doctor, register):
    peds = make_doctor('Paul Kids', 'paul@hospital.com', 'Pediatrician')
    _, headers = register()

    response = client.post('/api/appointments', headers=headers, json={
        'service_id': services['Pediatrics'].id,
        'appointment_date': '2030-05-10',
        'appointment_time': '11:00',
    })

    assert response.status_code == 201
    assert response.get_json()['data']['doctor_id'] == peds.id


def test_no_matching_doctor_leaves_appointment_unassigned(db, services, make_doctor, register, book, sent_emails):
    make_doctor('Carl Heart', 'carl@hospital.com', 'Cardiologist')
    _, headers = register()

    data = book(headers, services['Neurology'])

    assert data['doctor_assigned'] is False
    assert data['doctor_id'] is None
    appointment = db.session.get(Appointment, data['appointment_id'])
    assert appointment.doctor_id is None
    assert appointment.status == 'scheduled'
    assert sent_emails[0]['data']['doctor_name'] is None


def test_first_matching_doctor_wins(services, make_doctor, register, book):
    first = make_doctor('Alice Heart', 'alice@hospital.com', 'Cardiologist')
    make_doctor('Bob Heart', 'bob@hospital.com', 'Interventional Cardiologist')
    _, headers = register()

    assert book(headers, services['Cardiology'])['doctor_id'] == first.id
    assert book(headers, services['Cardiology'], time='11:00')['doctor_id'] == first.id


def test_duplicate_submissions_create_duplicate_rows(db, services, register, book):
    patient_id, headers = register()

    first = book(headers, services['Cardiology'])
    second = book(headers, services['Cardiology'])

    assert first['appointment_id'] != second['appointment_id']
    assert Appointment.query.filter_by(patient_id=patient_id).count() == 2


def test_booking_stores_row_fields(db, services, register, book):
    patient_id, headers = register()

    data = book(headers, services['Immunization'], date='2031-01-02', time='08:15', notes='Flu shot')

    appointment = db.session.get(Appointment, data['appointment_id'])
    assert appointment.patient_id == patient_id
    assert appointment.service_id == services['Immunization'].id
    assert appointment.appointment_date == date(2031, 1, 2)
    assert appointment.appointment_time == '08:15'
    assert appointment.notes == 'Flu shot'


def test_email_failure_does_not_affect_booking(client, monkeypatch, services, register):
    def broken_send(kind, recipient, appointment_data):
        raise RuntimeError('SMTP down')

    monkeypatch.setattr('tasks.notification_tasks.send_appointment_email', broken_send)
    _, headers = register()

    response = client.post('/api/appointments', headers=headers, json={
        'service_id': services['Cardiology'].id,
        'appointment_date': '2030-05-10',
        'appointment_time': '10:00',
    })

    assert response.status_code == 201
    assert response.get_json()['success'] is True


def test_booking_validates_request(client, services, register):
    _, headers = register()
    base = {'service_id': services['Cardiology'].id, 'appointment_date': '2030-05-10', 'appointment_time': '10:00'}

    missing = client.post('/api/appointments', headers=headers, json={'service_id': services['Cardiology'].id})
    assert missing.status_code == 400

    bad_date = client.post('/api/appointments', headers=headers, json={**base, 'appointment_date': '10/05/2030'})
    assert bad_date.status_code == 400
    assert 'YYYY-MM-DD' in bad_date.get_json()['error']

    bad_time = client.post('/api/appointments', headers=headers, json={**base, 'appointment_time': '25:00'})
    assert bad_time.status_code == 400

    bad_service = client.post('/api/appointments', headers=headers, json={**base, 'service_id': 'abc'})
    assert bad_service.status_code == 400


def test_unknown_service_id_is_not_found(client, register):
    _, headers = register()

    response = client.post('/api/appointments', headers=headers, json={
        'service_id': 9999, 'appointment_date': '2030-05-10', 'appointment_time': '10:00'
    })

    assert response.status_code == 404


def test_deleted_patient_token_is_not_found(client, db, services, register):
    from hospital.models import Patient

    patient_id, headers = register()
    db.session.delete(db.session.get(Patient, patient_id))
    db.session.commit()

    response = client.post('/api/appointments', headers=headers, json={
        'service_id': services['Cardiology'].id, 'appointment_date': '2030-05-10', 'appointment_time': '10:00'
    })

    assert response.status_code == 404
    assert response.get_json()['error'] == 'Patient not found'


def test_doctor_cannot_book(client, services, make_doctor, doctor_headers):
    doctor = make_doctor('Alice Heart', 'alice@hospital.com', 'Cardiologist')

    response = client.post('/api/appointments', headers=doctor_headers(doctor), json={
        'service_id': services['Cardiology'].id, 'appointment_date': '2030-05-10', 'appointment_time': '10:00'
    })

    assert response.status_code == 403


def test_booking_response_exposes_id_and_assignment_at_top_level(client, services, make_doctor, register):
    make_doctor('Alice Heart', 'alice@hospital.com', 'Cardiologist')
    _, headers = register()

    response = client.post('/api/appointments', headers=headers, json={
        'service_id': services['Cardiology'].id,
        'service_name': 'Cardiology',
        'appointment_date': '2030-05-10',
        'appointment_time': '09:30',
    })

    body = response.get_json()
    assert body['success'] is True
    assert body['message'] == 'Appointment booked successfully'
    assert body['appointment_id'] == body['data']['appointment_id']
    assert body['doctor_assigned'] is True
