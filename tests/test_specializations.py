"""Service name -> specialization table."""
import pytest

from hospital.services.specializations import (
    DEFAULT_SPECIALIZATION,
    SERVICE_SPECIALIZATIONS,
    resolve_specialization,
)


@pytest.mark.parametrize('service_name,expected', [
    ('Pediatrics', 'Pediatrician'),
    ('Neurology', 'Neurologist'),
    ('Cardiology', 'Cardiologist'),
    ('General Physician', 'General Physician'),
    ('Emergency', 'Emergency'),
    ('Immunization', 'General Physician'),
])
def test_known_services(service_name, expected):
    assert resolve_specialization(service_name) == expected


@pytest.mark.parametrize('service_name', ['Dermatology', '', None, 'cardiology'])
def test_unknown_services_default_to_general_physician(service_name):
    assert resolve_specialization(service_name) == DEFAULT_SPECIALIZATION == 'General Physician'


def test_table_is_fixed():
    assert len(SERVICE_SPECIALIZATIONS) == 6
