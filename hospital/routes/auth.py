from flask import Blueprint, jsonify, current_app
from hospital.services.auth_service import (
    issue_token,
    register_patient,
    authenticate_patient,
    authenticate_doctor,
    ROLE_PATIENT,
    ROLE_DOCTOR,
)
from hospital.utils.validation import get_json_body, require_fields

auth_bp = Blueprint('auth', __name__, url_prefix='/api')


def _token_response(token):
    # Match the token's lifetime so clients know when to log in again
    expires = current_app.config['JWT_ACCESS_TOKEN_EXPIRES']
    return {
        'token': token,
        'token_type': 'bearer',
        'expires_in': int(expires.total_seconds()),
    }


@auth_bp.route('/register', methods=['POST'])
def register():
    """Patient registration - creates the account and returns a token"""
    data = get_json_body()
    require_fields(data, 'name', 'email', 'password')

    patient = register_patient(
        name=str(data['name']).strip(),
        email=str(data['email']).strip().lower(),
        phone=str(data.get('phone') or '').strip() or None,
        password=str(data['password']),
    )
    token = issue_token(patient, ROLE_PATIENT)

    return jsonify({
        'success': True,
        'message': 'Patient registered successfully',
        'data': patient.to_dict(),
        **_token_response(token)
    }), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    """Patient login"""
    data = get_json_body()
    require_fields(data, 'email', 'password')

    patient = authenticate_patient(str(data['email']).strip().lower(), str(data['password']))
    token = issue_token(patient, ROLE_PATIENT)

    return jsonify({
        'success': True,
        'message': 'Login successful',
        'data': patient.to_dict(),
        **_token_response(token)
    }), 200


@auth_bp.route('/doctor-login', methods=['POST'])
def doctor_login():
    """Doctor login - same bcrypt check as patients"""
    data = get_json_body()
    require_fields(data, 'email', 'password')

    doctor = authenticate_doctor(str(data['email']).strip().lower(), str(data['password']))
    token = issue_token(doctor, ROLE_DOCTOR)

    return jsonify({
        'success': True,
        'message': 'Doctor login successful',
        'data': doctor.to_dict(),
        **_token_response(token)
    }), 200
