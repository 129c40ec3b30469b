"""Health checks and generic error responses."""


def test_liveness(client):
    body = client.get('/health').get_json()
    assert body['status'] == 'healthy'
    assert body['service'] == 'hospital-appointments'
    assert client.get('/health/live').status_code == 200


def test_readiness_checks_database(client):
    response = client.get('/health/ready')
    assert response.status_code == 200
    assert response.get_json()['database'] == 'connected'

    assert client.get('/api/test').status_code == 200


def test_unknown_endpoint_returns_json_404(client):
    response = client.get('/api/nope')
    assert response.status_code == 404
    assert response.get_json() == {'success': False, 'error': 'Endpoint not found'}


def test_wrong_method_returns_json_405(client):
    response = client.delete('/api/services')
    assert response.status_code == 405
    assert response.get_json()['success'] is False


def test_database_errors_map_to_500(client, monkeypatch):
    from sqlalchemy.exc import OperationalError

    def broken(*args, **kwargs):
        raise OperationalError('SELECT', {}, Exception('database is gone'))

    monkeypatch.setattr('hospital.routes.admin.get_statistics', broken)

    response = client.get('/api/admin/statistics')

    assert response.status_code == 500
    assert response.get_json()['success'] is False
    assert 'database is gone' not in response.get_json()['error']
