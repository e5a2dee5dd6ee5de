"""
Constants Package

Unit tables and validation whitelists for the measurement converter.
"""

from .units import (
    STANDARD,
    METRIC,
    MEASUREMENT_SYSTEMS,
    VOLUME,
    WEIGHT,
    CELSIUS,
    FAHRENHEIT,
    TEMPERATURE_UNITS,
    STANDARD_UNITS,
    METRIC_UNITS,
    UNITS_BY_SYSTEM,
    UNIT_FAMILIES,
    CONVERSION_FACTORS,
    METRIC_DISPLAY_UNITS,
    METRIC_LARGE_UNIT_THRESHOLD,
    CUPS_LABEL,
    TABLESPOONS_LABEL,
    TEASPOONS_LABEL,
    OUNCES_LABEL,
    POUNDS_LABEL,
    OUNCES_PER_POUND,
)

from .validation import (
    VALID_MEASUREMENT_SYSTEMS,
    VALID_TEMPERATURE_UNITS,
    MAX_LENGTHS,
    MAX_BATCH_INGREDIENTS,
)
