"""
Appointment workflow: booking, listing, cancellation and status updates.

Each operation is a short linear sequence of queries. There is no locking
around doctor lookup + insert, so two concurrent bookings may be assigned
the same doctor for overlapping slots.
"""
import logging

from sqlalchemy import or_

from hospital.extensions import db
from hospital.errors import NotFound, ValidationError, InvalidTransition
from hospital.models import Appointment, Patient, Doctor, Service
from hospital.models.appointment import STATUS_SCHEDULED, STATUS_CANCELLED, VALID_STATUSES
from hospital.services.email_service import KIND_CONFIRMATION, KIND_CANCELLATION
from hospital.services.notification_service import dispatch_notification
from hospital.services.specializations import resolve_specialization

logger = logging.getLogger(__name__)


def appointment_to_dict(appointment, **extra):
    data = {
        'id': appointment.id,
        'patient_id': appointment.patient_id,
        'doctor_id': appointment.doctor_id,
        'service_id': appointment.service_id,
        'appointment_date': appointment.appointment_date.isoformat() if appointment.appointment_date else None,
        'appointment_time': appointment.appointment_time,
        'notes': appointment.notes,
        'status': appointment.status,
        'created_at': appointment.created_at.isoformat() if appointment.created_at else None,
    }
    data.update(extra)
    return data


def notification_payload(appointment, patient_name, service_name, doctor_name):
    """JSON-safe appointment data handed to the email queue"""
    return {
        'id': appointment.id,
        'patient_name': patient_name,
        'service_name': service_name,
        'date': appointment.appointment_date.isoformat(),
        'time': appointment.appointment_time,
        'doctor_name': doctor_name,
        'notes': appointment.notes,
    }


def find_doctor_for_specialization(specialization):
    """
    First doctor (lowest id) whose specialization contains the given text,
    case-insensitive. Returns None when nobody matches.
    """
    return Doctor.query.filter(
        Doctor.specialization.ilike(f'%{specialization}%')
    ).order_by(Doctor.id.asc()).first()


def book_appointment(patient_id, service_id, appointment_date, appointment_time, notes=None, service_name=None):
    """
    Book an appointment for a patient.

    The doctor is resolved once, here, from the specialization mapping keyed by
    the client-supplied service_name. The confirmation email is queued after
    the row is committed and its outcome is never reported back.

    Returns:
        dict: appointment_id, doctor_assigned, doctor_id, doctor_name, notification_queued
    """
    patient = db.session.get(Patient, patient_id)
    if not patient:
        raise NotFound('Patient not found')

    service = db.session.get(Service, service_id)
    if not service:
        raise NotFound(f'Service with ID {service_id} not found')

    # Display name is trusted as sent; fall back to the catalogue name
    display_name = service_name or service.name
    specialization = resolve_specialization(display_name)
    doctor = find_doctor_for_specialization(specialization)

    appointment = Appointment(
        patient_id=patient.id,
        doctor_id=doctor.id if doctor else None,
        service_id=service.id,
        appointment_date=appointment_date,
        appointment_time=appointment_time,
        notes=notes,
        status=STATUS_SCHEDULED,
    )
    db.session.add(appointment)
    db.session.commit()

    doctor_name = doctor.name if doctor else None
    if doctor:
        logger.info("Appointment %s booked for patient %s with doctor %s (%s)",
                    appointment.id, patient.id, doctor.id, specialization)
    else:
        logger.info("Appointment %s booked for patient %s without doctor (no %s available)",
                    appointment.id, patient.id, specialization)

    queued = dispatch_notification(
        KIND_CONFIRMATION,
        patient.email,
        notification_payload(appointment, patient.name, display_name, doctor_name),
    )

    return {
        'appointment_id': appointment.id,
        'doctor_assigned': doctor is not None,
        'doctor_id': appointment.doctor_id,
        'doctor_name': doctor_name,
        'notification_queued': queued,
    }


def list_patient_appointments(patient_id):
    """Patient history, most recent first"""
    rows = db.session.query(Appointment, Service.name, Doctor.name).join(
        Service, Appointment.service_id == Service.id
    ).outerjoin(
        Doctor, Appointment.doctor_id == Doctor.id
    ).filter(
        Appointment.patient_id == patient_id
    ).order_by(
        Appointment.appointment_date.desc(),
        Appointment.appointment_time.desc()
    ).all()

    return [
        appointment_to_dict(apt, service_name=service_name, doctor_name=doctor_name)
        for apt, service_name, doctor_name in rows
    ]


def list_doctor_appointments(doctor_id):
    """
    Upcoming scheduled work for a doctor, soonest first.
    Includes unassigned appointments, which any doctor may pick up.
    """
    rows = db.session.query(Appointment, Patient.name, Service.name).join(
        Patient, Appointment.patient_id == Patient.id
    ).join(
        Service, Appointment.service_id == Service.id
    ).filter(
        or_(Appointment.doctor_id == doctor_id, Appointment.doctor_id.is_(None)),
        Appointment.status == STATUS_SCHEDULED
    ).order_by(
        Appointment.appointment_date.asc(),
        Appointment.appointment_time.asc()
    ).all()

    return [
        appointment_to_dict(apt, patient_name=patient_name, service_name=service_name)
        for apt, patient_name, service_name in rows
    ]


def cancel_appointment(appointment_id, patient_id):
    """
    Cancel a patient's own appointment.

    An appointment owned by someone else is reported as NotFound. The status
    is overwritten unconditionally, so cancelling twice sends two emails.
    """
    row = db.session.query(Appointment, Patient, Service.name, Doctor.name).join(
        Patient, Appointment.patient_id == Patient.id
    ).join(
        Service, Appointment.service_id == Service.id
    ).outerjoin(
        Doctor, Appointment.doctor_id == Doctor.id
    ).filter(
        Appointment.id == appointment_id,
        Appointment.patient_id == patient_id
    ).first()

    if row is None:
        raise NotFound('Appointment not found')

    appointment, patient, service_name, doctor_name = row
    appointment.status = STATUS_CANCELLED
    db.session.commit()

    logger.info("Appointment %s cancelled by patient %s", appointment.id, patient.id)

    dispatch_notification(
        KIND_CANCELLATION,
        patient.email,
        notification_payload(appointment, patient.name, service_name, doctor_name),
    )
    return appointment


def update_appointment_status(appointment_id, doctor_id, new_status):
    """
    Move an appointment through the status state machine on behalf of a doctor.

    Only the assigned doctor may update an appointment. An unassigned
    appointment is claimed by the doctor who updates it. Sending
    'scheduled' for an unassigned scheduled appointment only claims it,
    so it stays in the claimant's schedule.

    Returns:
        tuple: (appointment, claimed)
    """
    appointment = Appointment.query.filter(
        Appointment.id == appointment_id,
        or_(Appointment.doctor_id == doctor_id, Appointment.doctor_id.is_(None))
    ).first()
    if not appointment:
        raise NotFound('Appointment not found or access denied')

    if new_status not in VALID_STATUSES:
        raise ValidationError(f'Invalid status. Valid values: {", ".join(VALID_STATUSES)}')

    claimed = appointment.doctor_id is None
    claim_only = claimed and new_status == appointment.status == STATUS_SCHEDULED

    if not claim_only and not appointment.can_transition_to(new_status):
        raise InvalidTransition(
            f"Cannot change status from '{appointment.status}' to '{new_status}'"
        )

    if claimed:
        appointment.doctor_id = doctor_id

    previous = appointment.status
    appointment.status = new_status
    db.session.commit()

    logger.info("Appointment %s status %s -> %s by doctor %s%s",
                appointment.id, previous, new_status, doctor_id, ' (claimed)' if claimed else '')
    return appointment, claimed


def collect_reminders(target_date):
    """
    Scheduled appointments on target_date as (email, payload) pairs
    for the reminder template.
    """
    rows = db.session.query(Appointment, Patient, Service.name, Doctor.name).join(
        Patient, Appointment.patient_id == Patient.id
    ).join(
        Service, Appointment.service_id == Service.id
    ).outerjoin(
        Doctor, Appointment.doctor_id == Doctor.id
    ).filter(
        Appointment.appointment_date == target_date,
        Appointment.status == STATUS_SCHEDULED
    ).order_by(Appointment.appointment_time.asc()).all()

    return [
        (patient.email, notification_payload(apt, patient.name, service_name, doctor_name))
        for apt, patient, service_name, doctor_name in rows
    ]
