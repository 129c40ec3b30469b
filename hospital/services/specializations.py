"""
Service name -> doctor specialization used to pick a doctor at booking time.
"""

DEFAULT_SPECIALIZATION = 'General Physician'

SERVICE_SPECIALIZATIONS = {
    'Pediatrics': 'Pediatrician',
    'Neurology': 'Neurologist',
    'Cardiology': 'Cardiologist',
    'General Physician': 'General Physician',
    'Emergency': 'Emergency',
    'Immunization': 'General Physician',
}


def resolve_specialization(service_name):
    """Return the specialization for a service name, or the default for unknown names"""
    return SERVICE_SPECIALIZATIONS.get(service_name, DEFAULT_SPECIALIZATION)
