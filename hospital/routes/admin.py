"""
Admin reporting endpoints (no authentication, read only)
"""
import logging
from flask import Blueprint, jsonify
from hospital.services.reporting_service import (
    list_all_appointments,
    list_patients_with_counts,
    list_doctors_with_counts,
    get_statistics,
)

logger = logging.getLogger(__name__)

admin_bp = Blueprint('admin', __name__, url_prefix='/api/admin')


@admin_bp.route('/appointments', methods=['GET'])
def all_appointments():
    items = list_all_appointments()
    logger.info("Admin appointments: %d rows", len(items))
    return jsonify({'success': True, 'data': items}), 200


@admin_bp.route('/patients', methods=['GET'])
def all_patients():
    items = list_patients_with_counts()
    logger.info("Admin patients: %d rows", len(items))
    return jsonify({'success': True, 'data': items}), 200


@admin_bp.route('/doctors', methods=['GET'])
def all_doctors():
    items = list_doctors_with_counts()
    logger.info("Admin doctors: %d rows", len(items))
    return jsonify({'success': True, 'data': items}), 200


@admin_bp.route('/statistics', methods=['GET'])
def statistics():
    stats = get_statistics()
    logger.info("Admin statistics: %s", stats)
    return jsonify({'success': True, 'data': stats}), 200
