"""
Validation Constants

Contains whitelist values and size limits for validating conversion
requests received by the API.
"""

from .units import MEASUREMENT_SYSTEMS, TEMPERATURE_UNITS

# Valid values for the to_system field (whitelist)
VALID_MEASUREMENT_SYSTEMS = set(MEASUREMENT_SYSTEMS)

# Valid values for from_unit / to_unit on temperature requests
VALID_TEMPERATURE_UNITS = set(TEMPERATURE_UNITS)

# Maximum field lengths
MAX_LENGTHS = {
    'ingredient_text': 500,
    'unit': 50,
}

# Maximum number of ingredient lines per batch request
MAX_BATCH_INGREDIENTS = 200
