"""
Read-only reporting queries for the admin dashboard
"""
from datetime import date

from sqlalchemy import func

from hospital.extensions import db
from hospital.models import Appointment, Patient, Doctor, Service
from hospital.services.appointment_service import appointment_to_dict


def list_all_appointments():
    rows = db.session.query(Appointment, Patient.name, Doctor.name, Service.name).outerjoin(
        Patient, Appointment.patient_id == Patient.id
    ).outerjoin(
        Doctor, Appointment.doctor_id == Doctor.id
    ).outerjoin(
        Service, Appointment.service_id == Service.id
    ).order_by(
        Appointment.appointment_date.desc(),
        Appointment.appointment_time.desc()
    ).all()

    return [
        appointment_to_dict(apt, patient_name=patient_name, doctor_name=doctor_name, service_name=service_name)
        for apt, patient_name, doctor_name, service_name in rows
    ]


def list_patients_with_counts():
    rows = db.session.query(Patient, func.count(Appointment.id)).outerjoin(
        Appointment, Appointment.patient_id == Patient.id
    ).group_by(Patient.id).order_by(Patient.created_at.desc(), Patient.id.desc()).all()

    result = []
    for patient, count in rows:
        item = patient.to_dict()
        item['appointment_count'] = count
        result.append(item)
    return result


def list_doctors_with_counts():
    rows = db.session.query(Doctor, func.count(Appointment.id)).outerjoin(
        Appointment, Appointment.doctor_id == Doctor.id
    ).group_by(Doctor.id).order_by(Doctor.name.asc()).all()

    result = []
    for doctor, count in rows:
        item = doctor.to_dict()
        item['appointment_count'] = count
        result.append(item)
    return result


def get_statistics(today=None):
    """Headline counts; 'today' is the server's local date unless given"""
    today = today or date.today()
    return {
        'total_appointments': Appointment.query.count(),
        'today_appointments': Appointment.query.filter(Appointment.appointment_date == today).count(),
        'total_patients': Patient.query.count(),
        'total_doctors': Doctor.query.count(),
    }
