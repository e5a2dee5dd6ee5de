"""
Conversion Service

Converts temperatures, single measurements and ingredient lines between
the US standard and metric systems.

Every function here fails open: unknown units, units already in the target
system and unparseable input all give back the original value instead of
raising, so a recipe step can always be rendered.
"""

import logging
import math
from dataclasses import dataclass, asdict

from constants import (
    STANDARD,
    METRIC,
    VOLUME,
    CELSIUS,
    FAHRENHEIT,
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
from .parsing import match_leading_measurement, parse_quantity, format_quantity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """A converted measurement together with the caller's original input."""
    value: float
    unit: str
    original_value: float
    original_unit: str

    def to_dict(self):
        return asdict(self)


def _round_half_up(value, digits=0):
    """Round to the nearest value, halves going up (2.5 -> 3, -2.5 -> -2)."""
    if digits == 0:
        return math.floor(value + 0.5)
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _normalize_system(to_system):
    if not isinstance(to_system, str):
        return None
    system = to_system.strip().lower()
    return system if system in UNITS_BY_SYSTEM else None


def convert_temperature(value, from_unit, to_unit):
    """
    Convert a temperature between Celsius and Fahrenheit.

    Converted values are rounded to whole degrees. Same-unit requests and
    unsupported unit pairs return the value untouched.
    """
    if not isinstance(from_unit, str) or not isinstance(to_unit, str):
        return value

    from_unit = from_unit.strip().upper()
    to_unit = to_unit.strip().upper()

    if from_unit == to_unit:
        return value

    try:
        if from_unit == FAHRENHEIT and to_unit == CELSIUS:
            return _round_half_up((value - 32) * 5 / 9)
        if from_unit == CELSIUS and to_unit == FAHRENHEIT:
            return _round_half_up(value * 9 / 5 + 32)
    except (TypeError, ValueError, OverflowError):
        return value

    return value


def format_temperature(value, unit=FAHRENHEIT):
    """Format a temperature with its reading in the other scale, e.g. '350°F / 177°C'."""
    if value is None:
        return ''

    unit = unit.strip().upper() if isinstance(unit, str) and unit.strip() else FAHRENHEIT
    label = f"{format_quantity(value)}°{unit}"

    other = {CELSIUS: FAHRENHEIT, FAHRENHEIT: CELSIUS}.get(unit)
    if other is None or not isinstance(value, (int, float)):
        return label

    converted = convert_temperature(value, unit, other)
    return f"{label} / {format_quantity(converted)}°{other}"


def _to_metric(value, factors, family):
    """Convert to ml/grams, switching to liters/kg once past 1000."""
    base_unit = 'ml' if family == VOLUME else 'gram'
    small_label, large_label = METRIC_DISPLAY_UNITS[family]

    amount = value * factors[base_unit]
    if amount >= METRIC_LARGE_UNIT_THRESHOLD:
        return amount / METRIC_LARGE_UNIT_THRESHOLD, large_label
    return amount, small_label


def _to_standard(value, factors, family):
    """Convert to cups, tablespoons or teaspoons for volume; pounds or ounces for weight."""
    if family == VOLUME:
        cups = value * factors['cup']
        if cups >= 1:
            return cups, CUPS_LABEL
        tablespoons = value * factors['tablespoon']
        if tablespoons >= 1:
            return tablespoons, TABLESPOONS_LABEL
        return value * factors['teaspoon'], TEASPOONS_LABEL

    ounces = value * factors['ounce']
    if ounces >= OUNCES_PER_POUND:
        return ounces / OUNCES_PER_POUND, POUNDS_LABEL
    return ounces, OUNCES_LABEL


def convert_measurement(value, unit, to_system):
    """
    Convert a quantity of a unit to the standard or metric system.

    Returns:
        ConversionResult rounded to one decimal, or None when the unit is
        already in to_system or is not recognized
    """
    system = _normalize_system(to_system)
    if system is None or not isinstance(unit, str):
        return None

    normalized_unit = unit.lower().strip()
    if normalized_unit in UNITS_BY_SYSTEM[system]:
        return None

    factors = CONVERSION_FACTORS.get(normalized_unit)
    if factors is None:
        logger.debug("No conversion for unit %r", unit)
        return None

    family = UNIT_FAMILIES[normalized_unit]
    try:
        if system == METRIC:
            amount, label = _to_metric(value, factors, family)
        else:
            amount, label = _to_standard(value, factors, family)
        amount = _round_half_up(amount, 1)
    except (TypeError, ValueError, OverflowError):
        return None

    return ConversionResult(
        value=amount,
        unit=label,
        original_value=value,
        original_unit=unit,
    )


def _resolve_unit(candidates):
    """Pick the first candidate unit that appears in the conversion table."""
    for unit, matched_text in candidates:
        if ' '.join(unit.lower().split()) in CONVERSION_FACTORS:
            return unit, matched_text
    return None, None


def convert_ingredient_measurement(ingredient, to_system):
    """
    Rewrite the leading quantity and unit of an ingredient line.

    '2 cups flour' becomes '473.2 ml flour' for metric. Lines without a
    leading quantity, with an unknown unit, or already in to_system are
    returned unchanged.
    """
    measurement = match_leading_measurement(ingredient)
    if measurement is None:
        return ingredient

    value = parse_quantity(measurement.quantity)
    if value is None:
        return ingredient

    unit, matched_text = _resolve_unit(measurement.candidates)
    if unit is None:
        return ingredient

    converted = convert_measurement(value, ' '.join(unit.split()), to_system)
    if converted is None:
        return ingredient

    replacement = f"{format_quantity(converted.value)} {converted.unit}"
    return ingredient.replace(matched_text, replacement, 1)


def convert_ingredient_list(ingredients, to_system):
    """Convert every line of an ingredient list, keeping order."""
    if not ingredients:
        return []
    return [convert_ingredient_measurement(line, to_system) for line in ingredients]
