"""Admin reporting endpoints."""
from datetime import date


def test_statistics(client, services, make_doctor, register, book):
    make_doctor('Alice Heart', 'alice@hospital.com', 'Cardiologist')
    make_doctor('Nora Nerve', 'nora@hospital.com', 'Neurologist')
    _, headers = register()
    register()
    book(headers, services['Cardiology'], date=date.today().isoformat())
    book(headers, services['Cardiology'], date='2030-05-10')

    response = client.get('/api/admin/statistics')

    assert response.status_code == 200
    assert response.get_json()['data'] == {
        'total_appointments': 2,
        'today_appointments': 1,
        'total_patients': 2,
        'total_doctors': 2,
    }


def test_admin_patients_include_counts_without_password(client, services, register, book):
    _, jane = register(name='Jane')
    register(name='John')
    book(jane, services['Cardiology'])
    book(jane, services['Neurology'])

    rows = client.get('/api/admin/patients').get_json()['data']

    counts = {row['name']: row['appointment_count'] for row in rows}
    assert counts == {'Jane': 2, 'John': 0}
    assert all('password_hash' not in row for row in rows)


def test_admin_doctors_sorted_by_name_with_counts(client, services, make_doctor, register, book):
    make_doctor('Zed Nerve', 'zed@hospital.com', 'Neurologist')
    make_doctor('Alice Heart', 'alice@hospital.com', 'Cardiologist')
    _, headers = register()
    book(headers, services['Cardiology'])

    rows = client.get('/api/admin/doctors').get_json()['data']

    assert [row['name'] for row in rows] == ['Alice Heart', 'Zed Nerve']
    assert [row['appointment_count'] for row in rows] == [1, 0]
    assert all('password_hash' not in row for row in rows)


def test_admin_appointments_include_names(client, services, make_doctor, register, book):
    make_doctor('Alice Heart', 'alice@hospital.com', 'Cardiologist')
    _, headers = register(name='Jane')
    book(headers, services['Cardiology'], date='2030-05-10')
    book(headers, services['Neurology'], date='2030-06-10')

    rows = client.get('/api/admin/appointments').get_json()['data']

    assert [row['service_name'] for row in rows] == ['Neurology', 'Cardiology']
    assert rows[0]['doctor_name'] is None
    assert rows[1]['doctor_name'] == 'Alice Heart'
    assert rows[1]['patient_name'] == 'Jane'


def test_services_listing_is_public(client, services):
    response = client.get('/api/services')

    assert response.status_code == 200
    body = response.get_json()
    assert isinstance(body, list)
    assert 'Cardiology' in [s['name'] for s in body]
    assert body[0]['price'] == 100.0
