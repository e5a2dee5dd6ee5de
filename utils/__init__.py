# Utility modules for the measurement converter API
from .sanitizer import sanitize_ingredient_text, sanitize_unit
from .request_validator import (
    PayloadError, get_payload, require_number, require_unit, require_system,
    require_temperature_unit, require_ingredient, require_ingredient_list
)
