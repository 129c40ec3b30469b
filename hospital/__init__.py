from flask import Flask, jsonify, has_app_context
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
from .extensions import db, migrate, bcrypt, jwt, celery
from .errors import ApiError
import logging
import os

# Setup basic logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s %(levelname)s: %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(config_name=None):
    """Create Flask application factory"""
    app = Flask(__name__)

    # Load configuration
    if config_name:
        from hospital.config import config
        config_class = config.get(config_name, config['default'])
    else:
        from hospital.config import get_config
        config_class = get_config()
    if hasattr(config_class, 'validate'):
        config_class.validate()
    app.config.from_object(config_class)

    logging.getLogger().setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    bcrypt.init_app(app)
    jwt.init_app(app)

    from hospital.utils.cors import init_cors
    init_cors(app)

    from hospital.middleware import setup_middleware
    setup_middleware(app)

    # Initialize Celery
    celery.conf.update(
        broker_url=app.config['CELERY_BROKER_URL'],
        result_backend=app.config['CELERY_RESULT_BACKEND'],
        task_serializer=app.config['CELERY_TASK_SERIALIZER'],
        accept_content=app.config['CELERY_ACCEPT_CONTENT'],
        result_serializer=app.config['CELERY_RESULT_SERIALIZER'],
        timezone=app.config['CELERY_TIMEZONE'],
        enable_utc=app.config['CELERY_ENABLE_UTC'],
        task_always_eager=app.config['CELERY_TASK_ALWAYS_EAGER'],
    )

    # Make celery tasks work with Flask app context
    class FlaskAppContextTask(celery.Task):
        """Make celery tasks work with Flask app context."""
        def __call__(self, *args, **kwargs):
            # Eager tasks already run inside the request's app context
            if has_app_context():
                return self.run(*args, **kwargs)
            with app.app_context():
                return self.run(*args, **kwargs)

    celery.Task = FlaskAppContextTask

    register_error_handlers(app)
    register_jwt_callbacks()

    # Setup logging
    if not app.debug and not app.testing:
        from logging.handlers import RotatingFileHandler

        if not os.path.exists('logs'):
            os.mkdir('logs')

        file_handler = RotatingFileHandler(
            os.path.join('logs', app.config.get('LOG_FILE', 'app.log')),
            maxBytes=10240000,
            backupCount=10
        )
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)
        app.logger.setLevel(logging.INFO)
        app.logger.info('Application startup')

    with app.app_context():
        # Import models to register them with SQLAlchemy
        from .models import Patient, Doctor, Service, Appointment  # noqa: F401

        from .routes import auth_bp, catalog_bp, appointment_bp, admin_bp, health_bp
        from .routes.health import readiness_check
        app.register_blueprint(health_bp)  # Register health check first
        app.register_blueprint(auth_bp)
        app.register_blueprint(catalog_bp)
        app.register_blueprint(appointment_bp)
        app.register_blueprint(admin_bp)
        app.add_url_rule('/api/test', 'db_test', readiness_check, methods=['GET'])

        if app.config.get('AUTO_CREATE_TABLES'):
            db.create_all()
        if app.config.get('SEED_SERVICES'):
            from .seeds import seed_services
            seed_services()

    return app


def register_error_handlers(app):
    """Map application errors to the JSON error body"""

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status_code >= 500:
            logger.error(f"{type(error).__name__}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(error):
        db.session.rollback()
        logger.error(f"Database error: {error}", exc_info=True)
        return jsonify({
            'success': False,
            'error': 'Internal server error. Check server logs for details.'
        }), 500

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            'success': False,
            'error': 'Endpoint not found'
        }), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({
            'success': False,
            'error': 'Method not allowed'
        }), 405

    @app.errorhandler(Exception)
    def handle_exception(error):
        if isinstance(error, HTTPException):
            return jsonify({
                'success': False,
                'error': error.description
            }), error.code
        logger.error(f"Unhandled exception: {error}", exc_info=True)
        return jsonify({
            'success': False,
            'error': 'Internal server error. Check server logs for details.'
        }), 500


def register_jwt_callbacks():
    """Every token failure is a 401 with the standard error body"""

    @jwt.unauthorized_loader
    def missing_token(reason):
        return jsonify({'success': False, 'error': 'Access token required'}), 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return jsonify({'success': False, 'error': 'Invalid token'}), 401

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return jsonify({'success': False, 'error': 'Token has expired'}), 401
