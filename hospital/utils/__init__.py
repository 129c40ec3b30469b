from .decorators import require_role, current_user_id
from .validation import get_json_body, require_fields, parse_date, parse_time

__all__ = [
    # Decorators
    "require_role",
    "current_user_id",
    # Request validation
    "get_json_body",
    "require_fields",
    "parse_date",
    "parse_time",
]
