"""
Credential and token handling for patients and doctors
"""
import logging

from flask_jwt_extended import create_access_token
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from hospital.extensions import db
from hospital.errors import Conflict, Unauthorized
from hospital.models import Patient, Doctor

logger = logging.getLogger(__name__)

ROLE_PATIENT = 'patient'
ROLE_DOCTOR = 'doctor'


def issue_token(user, role):
    """
    Create a signed access token carrying {id, email, role}.
    Expiry comes from JWT_ACCESS_TOKEN_EXPIRES.
    """
    # JWT "sub" claim must be a string
    return create_access_token(
        identity=str(user.id),
        additional_claims={'email': user.email, 'role': role},
    )


def register_patient(name, email, phone, password):
    """Create a patient account; raises Conflict if the email is taken"""
    if Patient.query.filter_by(email=email).first():
        raise Conflict('Patient already exists')

    patient = Patient(name=name, email=email, phone=phone)
    patient.set_password(password)
    db.session.add(patient)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        db.session.rollback()
        raise Conflict('Patient already exists')

    logger.info("Registered patient %s (%s)", patient.id, email)
    return patient


def authenticate_patient(email, password):
    patient = Patient.query.filter_by(email=email).first()
    if not patient or not patient.check_password(password):
        raise Unauthorized('Invalid email or password')
    return patient


def authenticate_doctor(email, password):
    # Stored doctor emails are not normalised
    doctor = Doctor.query.filter(func.lower(Doctor.email) == email.lower()).first()
    if not doctor or not doctor.check_password(password):
        raise Unauthorized('Invalid doctor credentials')
    return doctor
