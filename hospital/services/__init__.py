from .auth_service import (
    issue_token,
    register_patient,
    authenticate_patient,
    authenticate_doctor,
)

from .appointment_service import (
    book_appointment,
    list_patient_appointments,
    list_doctor_appointments,
    cancel_appointment,
    update_appointment_status,
)

from .email_service import send_email, send_appointment_email
from .notification_service import dispatch_notification
from .specializations import resolve_specialization

__all__ = [
    # Auth Services
    "issue_token",
    "register_patient",
    "authenticate_patient",
    "authenticate_doctor",
    # Appointment Workflow
    "book_appointment",
    "list_patient_appointments",
    "list_doctor_appointments",
    "cancel_appointment",
    "update_appointment_status",
    # Email Services
    "send_email",
    "send_appointment_email",
    "dispatch_notification",
    "resolve_specialization",
]
