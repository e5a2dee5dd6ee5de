"""
Unit Constants and Conversion Tables

Contains the unit spellings, families, measurement systems and conversion
factors used to convert ingredient quantities between US standard and
metric units.
"""

from types import MappingProxyType

# Measurement systems
STANDARD = 'standard'
METRIC = 'metric'
MEASUREMENT_SYSTEMS = (STANDARD, METRIC)

# Unit families
VOLUME = 'volume'
WEIGHT = 'weight'

# Temperature units (handled separately, not part of the factor table)
CELSIUS = 'C'
FAHRENHEIT = 'F'
TEMPERATURE_UNITS = (CELSIUS, FAHRENHEIT)

# Accepted spellings per system (lowercase input)
STANDARD_UNITS = frozenset({
    'cup', 'cups',
    'tablespoon', 'tablespoons', 'tbsp',
    'teaspoon', 'teaspoons', 'tsp',
    'fluid ounce', 'fluid ounces', 'fluid_ounce', 'fl_oz',
    'pint', 'pints',
    'quart', 'quarts',
    'gallon', 'gallons',
    'pound', 'pounds', 'lb',
    'ounce', 'ounces', 'oz',
})

METRIC_UNITS = frozenset({
    'ml', 'milliliter', 'milliliters',
    'liter', 'liters',
    'gram', 'grams',
    'kilogram', 'kilograms', 'kg',
})

UNITS_BY_SYSTEM = MappingProxyType({
    STANDARD: STANDARD_UNITS,
    METRIC: METRIC_UNITS,
})

# Family of every spelling in the factor table
UNIT_FAMILIES = MappingProxyType({
    **dict.fromkeys(
        ['cup', 'cups', 'tablespoon', 'tablespoons', 'tbsp',
         'teaspoon', 'teaspoons', 'tsp',
         'fluid ounce', 'fluid ounces', 'fluid_ounce', 'fl_oz',
         'pint', 'pints', 'quart', 'quarts', 'gallon', 'gallons',
         'ml', 'milliliter', 'milliliters', 'liter', 'liters'],
        VOLUME,
    ),
    **dict.fromkeys(
        ['pound', 'pounds', 'lb', 'ounce', 'ounces', 'oz',
         'gram', 'grams', 'kilogram', 'kilograms', 'kg'],
        WEIGHT,
    ),
})

# Standard -> metric rows
_CUP = {'ml': 236.588, 'liter': 0.236588}
_TABLESPOON = {'ml': 14.7868, 'liter': 0.0147868}
_TEASPOON = {'ml': 4.92892, 'liter': 0.00492892}
_FLUID_OUNCE = {'ml': 29.5735, 'liter': 0.0295735}
_PINT = {'ml': 473.176, 'liter': 0.473176}
_QUART = {'ml': 946.353, 'liter': 0.946353}
_GALLON = {'ml': 3785.41, 'liter': 3.78541}
_POUND = {'gram': 453.592, 'kilogram': 0.453592}
_OUNCE = {'gram': 28.3495, 'kilogram': 0.0283495}

# Metric -> standard rows
_MILLILITER = {'cup': 0.00422675, 'tablespoon': 0.067628, 'teaspoon': 0.202884}
_LITER = {
    'cup': 4.22675, 'tablespoon': 67.628, 'teaspoon': 202.884,
    'quart': 1.05669, 'gallon': 0.264172,
}
_GRAM = {'ounce': 0.035274, 'pound': 0.00220462}
_KILOGRAM = {'ounce': 35.274, 'pound': 2.20462}

# Unit conversion factors (unit -> {target unit -> factor})
CONVERSION_FACTORS = MappingProxyType({
    unit: MappingProxyType(row) for unit, row in {
        'cup': _CUP, 'cups': _CUP,
        'tablespoon': _TABLESPOON, 'tablespoons': _TABLESPOON, 'tbsp': _TABLESPOON,
        'teaspoon': _TEASPOON, 'teaspoons': _TEASPOON, 'tsp': _TEASPOON,
        'fluid ounce': _FLUID_OUNCE, 'fluid ounces': _FLUID_OUNCE,
        'fluid_ounce': _FLUID_OUNCE, 'fl_oz': _FLUID_OUNCE,
        'pint': _PINT, 'pints': _PINT,
        'quart': _QUART, 'quarts': _QUART,
        'gallon': _GALLON, 'gallons': _GALLON,
        'pound': _POUND, 'pounds': _POUND, 'lb': _POUND,
        'ounce': _OUNCE, 'ounces': _OUNCE, 'oz': _OUNCE,
        'ml': _MILLILITER, 'milliliter': _MILLILITER, 'milliliters': _MILLILITER,
        'liter': _LITER, 'liters': _LITER,
        'gram': _GRAM, 'grams': _GRAM,
        'kilogram': _KILOGRAM, 'kilograms': _KILOGRAM, 'kg': _KILOGRAM,
    }.items()
})

# Display labels chosen by magnitude thresholds
METRIC_DISPLAY_UNITS = MappingProxyType({
    VOLUME: ('ml', 'liters'),
    WEIGHT: ('grams', 'kg'),
})
METRIC_LARGE_UNIT_THRESHOLD = 1000

CUPS_LABEL = 'cups'
TABLESPOONS_LABEL = 'tablespoons'
TEASPOONS_LABEL = 'teaspoons'
OUNCES_LABEL = 'ounces'
POUNDS_LABEL = 'pounds'
OUNCES_PER_POUND = 16
