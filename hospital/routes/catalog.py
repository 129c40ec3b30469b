from flask import Blueprint, jsonify
from hospital.models import Service

catalog_bp = Blueprint('catalog', __name__, url_prefix='/api')


@catalog_bp.route('/services', methods=['GET'])
def list_services():
    """List bookable services (public). The booking page expects a bare array."""
    services = Service.query.order_by(Service.id.asc()).all()
    return jsonify([s.to_dict() for s in services]), 200
