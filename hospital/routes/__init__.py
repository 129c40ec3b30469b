from .auth import auth_bp
from .catalog import catalog_bp
from .appointment import appointment_bp
from .admin import admin_bp
from .health import health_bp

__all__ = ['auth_bp', 'catalog_bp', 'appointment_bp', 'admin_bp', 'health_bp']
