"""
Application errors raised by services and mapped to JSON responses in create_app.
"""


class ApiError(Exception):
    """Base class for errors that map to an HTTP status code"""
    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self):
        return {'success': False, 'error': self.message}


class ValidationError(ApiError):
    status_code = 400
    default_message = 'Invalid request'


class Unauthorized(ApiError):
    status_code = 401
    default_message = 'Authentication required'


class Forbidden(ApiError):
    status_code = 403
    default_message = 'Access denied'


class NotFound(ApiError):
    status_code = 404
    default_message = 'Not found'


class Conflict(ApiError):
    status_code = 409
    default_message = 'Conflict'


class InvalidTransition(Conflict):
    default_message = 'Status transition not allowed'


class InternalError(ApiError):
    status_code = 500
