"""
Request body helpers for the JSON API
"""
import re
from datetime import datetime

from flask import request

from hospital.errors import ValidationError

_TIME_RE = re.compile(r'^([01]\d|2[0-3]):[0-5]\d$')


def get_json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be JSON')
    return data


def require_fields(data, *fields):
    for field in fields:
        value = data.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(f'Field "{field}" is required')


def parse_date(value):
    """Parse YYYY-MM-DD into a date"""
    try:
        return datetime.strptime(str(value), '%Y-%m-%d').date()
    except ValueError:
        raise ValidationError('Invalid date format. Use YYYY-MM-DD')


def parse_time(value):
    """Validate HH:MM (24h); "HH:MM:SS" is truncated to minutes"""
    value = str(value)
    if len(value) == 8 and value[5] == ':':
        value = value[:5]
    if not _TIME_RE.match(value):
        raise ValidationError('Invalid time format. Use HH:MM (e.g., 10:30)')
    return value
