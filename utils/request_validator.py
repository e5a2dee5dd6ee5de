"""
Request Validation Module

Validates JSON payloads sent to the conversion API. Problems with the
request itself raise PayloadError; conversions that simply do not apply
are not errors and are left to the conversion service.
"""

from constants import (
    VALID_MEASUREMENT_SYSTEMS,
    VALID_TEMPERATURE_UNITS,
    MAX_BATCH_INGREDIENTS,
)
from services import parse_quantity
from .sanitizer import sanitize_ingredient_text, sanitize_unit


class PayloadError(Exception):
    """Raised when a conversion request is malformed."""
    pass


def get_payload(request):
    """Return the request's JSON object or raise PayloadError."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise PayloadError('Request body must be a JSON object')
    return payload


def require_number(payload, field):
    """
    Read a numeric field. Accepts JSON numbers and strings such as '2',
    '1.5' or '1/2'.
    """
    if field not in payload or payload[field] is None:
        raise PayloadError(f"Missing field '{field}'")

    value = payload[field]
    if isinstance(value, bool):
        raise PayloadError(f"Field '{field}' must be a number")
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        parsed = parse_quantity(value)
        if parsed is not None:
            return parsed
    raise PayloadError(f"Field '{field}' must be a number")


def require_unit(payload, field='unit'):
    unit = sanitize_unit(payload.get(field))
    if not unit:
        raise PayloadError(f"Missing field '{field}'")
    return unit


def require_system(payload, default, field='to_system'):
    """Read the target measurement system, falling back to default."""
    system = payload.get(field) or default
    if not isinstance(system, str) or system.strip().lower() not in VALID_MEASUREMENT_SYSTEMS:
        raise PayloadError(
            f"Field '{field}' must be one of: {', '.join(sorted(VALID_MEASUREMENT_SYSTEMS))}"
        )
    return system.strip().lower()


def require_temperature_unit(payload, field, default=None):
    unit = payload.get(field) or default
    if not isinstance(unit, str) or unit.strip().upper() not in VALID_TEMPERATURE_UNITS:
        raise PayloadError(
            f"Field '{field}' must be one of: {', '.join(sorted(VALID_TEMPERATURE_UNITS))}"
        )
    return unit.strip().upper()


def require_ingredient(payload, field='ingredient'):
    value = payload.get(field)
    if not isinstance(value, str):
        raise PayloadError(f"Field '{field}' must be a string")
    return sanitize_ingredient_text(value)


def require_ingredient_list(payload, field='ingredients', max_items=MAX_BATCH_INGREDIENTS):
    """Read a list of ingredient lines, at most max_items long."""
    lines = payload.get(field)
    if not isinstance(lines, list):
        raise PayloadError(f"Field '{field}' must be a list of strings")
    if len(lines) > max_items:
        raise PayloadError(f"At most {max_items} ingredients per request")
    if not all(isinstance(line, str) for line in lines):
        raise PayloadError(f"Field '{field}' must be a list of strings")
    return [sanitize_ingredient_text(line) for line in lines]
