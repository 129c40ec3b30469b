from functools import wraps
from flask import jsonify
from flask_jwt_extended import get_jwt_identity, get_jwt


def current_user_id():
    """Id of the authenticated caller (JWT "sub" is stored as a string)"""
    return int(get_jwt_identity())


def require_role(*roles):
    """
    Decorator to require specific roles
    Usage: @require_role('doctor')
    Must be used together with @jwt_required() on the route.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            role = get_jwt().get('role')
            if role not in roles:
                return jsonify({
                    'success': False,
                    'error': f'Access denied. Required roles: {", ".join(roles)}'
                }), 403

            return f(*args, **kwargs)
        return decorated_function
    return decorator
