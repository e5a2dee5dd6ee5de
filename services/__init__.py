"""
Services Package

Business logic modules for the measurement converter.
"""

from .parsing import (
    LeadingMeasurement,
    match_leading_measurement,
    parse_quantity,
    format_quantity,
)

from .conversion import (
    ConversionResult,
    convert_temperature,
    format_temperature,
    convert_measurement,
    convert_ingredient_measurement,
    convert_ingredient_list,
)

__all__ = [
    # Parsing
    'LeadingMeasurement',
    'match_leading_measurement',
    'parse_quantity',
    'format_quantity',
    # Conversion
    'ConversionResult',
    'convert_temperature',
    'format_temperature',
    'convert_measurement',
    'convert_ingredient_measurement',
    'convert_ingredient_list',
]
