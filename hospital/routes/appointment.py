from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required
from hospital.services.appointment_service import (
    book_appointment,
    list_patient_appointments,
    list_doctor_appointments,
    cancel_appointment,
    update_appointment_status,
)
from hospital.services.auth_service import ROLE_PATIENT, ROLE_DOCTOR
from hospital.utils.decorators import require_role, current_user_id
from hospital.utils.validation import get_json_body, require_fields, parse_date, parse_time

appointment_bp = Blueprint('appointment', __name__, url_prefix='/api')


@appointment_bp.route('/appointments', methods=['POST'])
@jwt_required()
@require_role(ROLE_PATIENT)
def create_appointment():
    """
    Book an appointment for the logged-in patient.
    Body: { service_id, appointment_date, appointment_time, notes?, service_name? }
    """
    data = get_json_body()
    require_fields(data, 'service_id', 'appointment_date', 'appointment_time')

    try:
        service_id = int(data['service_id'])
    except (TypeError, ValueError):
        return jsonify({
            'success': False,
            'error': 'Field "service_id" must be an integer'
        }), 400

    result = book_appointment(
        patient_id=current_user_id(),
        service_id=service_id,
        appointment_date=parse_date(data['appointment_date']),
        appointment_time=parse_time(data['appointment_time']),
        notes=data.get('notes'),
        service_name=data.get('service_name'),
    )

    return jsonify({
        'success': True,
        'message': 'Appointment booked successfully',
        'appointment_id': result['appointment_id'],
        'doctor_assigned': result['doctor_assigned'],
        'data': result
    }), 201


@appointment_bp.route('/my-appointments', methods=['GET'])
@jwt_required()
@require_role(ROLE_PATIENT)
def my_appointments():
    """Logged-in patient's appointments, most recent first"""
    return jsonify({
        'success': True,
        'data': list_patient_appointments(current_user_id())
    }), 200


@appointment_bp.route('/appointments/<int:appointment_id>/cancel', methods=['PUT'])
@jwt_required()
@require_role(ROLE_PATIENT)
def cancel(appointment_id):
    """Cancel one of the logged-in patient's appointments"""
    cancel_appointment(appointment_id, current_user_id())
    return jsonify({
        'success': True,
        'message': 'Appointment cancelled successfully'
    }), 200


@appointment_bp.route('/doctor-appointments', methods=['GET'])
@jwt_required()
@require_role(ROLE_DOCTOR)
def doctor_appointments():
    """Scheduled appointments assigned to the doctor or still unassigned, soonest first"""
    return jsonify({
        'success': True,
        'data': list_doctor_appointments(current_user_id())
    }), 200


@appointment_bp.route('/appointments/<int:appointment_id>/status', methods=['PUT'])
@jwt_required()
@require_role(ROLE_DOCTOR)
def update_status(appointment_id):
    """
    Update appointment status
    Access: doctor
    Transitions: scheduled -> completed | cancelled | no-show
    Unassigned appointments: 'scheduled' claims without changing status
    """
    data = get_json_body()
    require_fields(data, 'status')
    new_status = str(data['status']).strip().lower()

    appointment, claimed = update_appointment_status(appointment_id, current_user_id(), new_status)
    action = 'claimed' if claimed and new_status == 'scheduled' else new_status

    return jsonify({
        'success': True,
        'message': f'Appointment {action} successfully',
        'data': {
            'id': appointment.id,
            'status': appointment.status,
            'doctor_id': appointment.doctor_id,
            'claimed': claimed,
            'updated_at': appointment.updated_at.isoformat() if appointment.updated_at else None
        }
    }), 200
