from .patient import Patient
from .doctor import Doctor
from .service import Service
from .appointment import Appointment

__all__ = ["Patient", "Doctor", "Service", "Appointment"]
