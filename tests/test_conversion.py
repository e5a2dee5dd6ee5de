import pytest

from constants import (
    CONVERSION_FACTORS, STANDARD_UNITS, METRIC_UNITS, UNIT_FAMILIES, VOLUME, WEIGHT
)
from services import (
    ConversionResult,
    convert_temperature,
    format_temperature,
    convert_measurement,
    convert_ingredient_measurement,
    convert_ingredient_list,
)


# Temperature

@pytest.mark.parametrize('fahrenheit', [32, 212])
def test_temperature_round_trip(fahrenheit):
    celsius = convert_temperature(fahrenheit, 'F', 'C')
    assert convert_temperature(celsius, 'C', 'F') == fahrenheit


def test_temperature_known_values():
    assert convert_temperature(212, 'F', 'C') == 100
    assert convert_temperature(350, 'F', 'C') == 177
    assert convert_temperature(180, 'C', 'F') == 356
    assert convert_temperature(-40, 'C', 'F') == -40


def test_temperature_same_unit_is_identity():
    assert convert_temperature(37.5, 'C', 'C') == 37.5
    assert convert_temperature(451.25, 'F', 'F') == 451.25


def test_temperature_halves_round_up():
    # (36.5 - 32) * 5 / 9 == 2.5 and (27.5 - 32) * 5 / 9 == -2.5
    assert convert_temperature(36.5, 'F', 'C') == 3
    assert convert_temperature(27.5, 'F', 'C') == -2


def test_temperature_unit_case_is_ignored():
    assert convert_temperature(212, 'f', 'c') == 100


def test_temperature_unsupported_pairs_pass_through():
    assert convert_temperature(300, 'K', 'C') == 300
    assert convert_temperature(300, None, 'C') == 300
    assert convert_temperature('hot', 'F', 'C') == 'hot'


def test_format_temperature():
    assert format_temperature(350, 'F') == '350°F / 177°C'
    assert format_temperature(180, 'C') == '180°C / 356°F'
    assert format_temperature(350, None) == '350°F / 177°C'
    assert format_temperature(200, 'K') == '200°K'
    assert format_temperature(None, 'F') == ''


# Unit table

def test_every_system_unit_has_a_factor_row_and_family():
    for unit in STANDARD_UNITS | METRIC_UNITS:
        assert unit in CONVERSION_FACTORS, unit
        assert unit in UNIT_FAMILIES, unit


def test_standard_units_map_to_metric_base():
    for unit in STANDARD_UNITS:
        base = 'ml' if UNIT_FAMILIES[unit] == VOLUME else 'gram'
        assert base in CONVERSION_FACTORS[unit], unit


def test_metric_units_map_to_standard_targets():
    for unit in METRIC_UNITS:
        if UNIT_FAMILIES[unit] == VOLUME:
            expected = {'cup', 'tablespoon', 'teaspoon'}
        else:
            expected = {'ounce', 'pound'}
        assert expected <= set(CONVERSION_FACTORS[unit]), unit


def test_spelled_out_spoons_are_volume():
    for unit in ('tablespoon', 'tablespoons', 'teaspoon', 'teaspoons', 'fl_oz', 'fluid_ounce'):
        assert UNIT_FAMILIES[unit] == VOLUME
    assert UNIT_FAMILIES['oz'] == WEIGHT


def test_factor_table_is_read_only():
    with pytest.raises(TypeError):
        CONVERSION_FACTORS['smidgen'] = {'ml': 0.1}
    with pytest.raises(TypeError):
        CONVERSION_FACTORS['cup']['ml'] = 250


# Measurement

def test_measurement_already_in_target_system():
    assert convert_measurement(1, 'cup', 'standard') is None
    assert convert_measurement(2, 'kg', 'metric') is None


def test_measurement_unknown_unit():
    assert convert_measurement(3, 'smidgen', 'metric') is None
    assert convert_measurement(3, 'smidgen', 'standard') is None


def test_measurement_unknown_system():
    assert convert_measurement(1, 'cup', 'imperial') is None
    assert convert_measurement(1, 'cup', None) is None


def test_measurement_bad_input_fails_open():
    assert convert_measurement('2', 'cup', 'metric') is None
    assert convert_measurement(2, None, 'metric') is None


def test_one_cup_to_metric():
    result = convert_measurement(1, 'cup', 'metric')
    assert result == ConversionResult(value=236.6, unit='ml', original_value=1, original_unit='cup')


def test_volume_past_threshold_switches_to_liters():
    result = convert_measurement(5, 'cup', 'metric')
    assert result.unit == 'liters'
    assert result.value == 1.2


def test_gallon_to_liters():
    result = convert_measurement(1, 'gallon', 'metric')
    assert (result.value, result.unit) == (3.8, 'liters')


def test_weight_to_metric():
    result = convert_measurement(1, 'pound', 'metric')
    assert (result.value, result.unit) == (453.6, 'grams')

    result = convert_measurement(3, 'pounds', 'metric')
    assert (result.value, result.unit) == (1.4, 'kg')


def test_spoons_and_fluid_ounces_to_metric():
    assert convert_measurement(1, 'tablespoon', 'metric').unit == 'ml'
    assert convert_measurement(1, 'tablespoon', 'metric').value == 14.8
    assert convert_measurement(1, 'fl_oz', 'metric').value == 29.6
    assert convert_measurement(2, 'fluid ounces', 'metric').value == 59.1


def test_grams_to_pounds():
    result = convert_measurement(500, 'gram', 'standard')
    assert (result.value, result.unit) == (1.1, 'pounds')


def test_grams_to_ounces():
    result = convert_measurement(100, 'grams', 'standard')
    assert (result.value, result.unit) == (3.5, 'ounces')


def test_kilograms_to_pounds():
    result = convert_measurement(2, 'kg', 'standard')
    assert (result.value, result.unit) == (4.4, 'pounds')


def test_milliliters_to_cups():
    result = convert_measurement(500, 'ml', 'standard')
    assert (result.value, result.unit) == (2.1, 'cups')


def test_small_volumes_to_spoons():
    result = convert_measurement(15, 'ml', 'standard')
    assert (result.value, result.unit) == (1.0, 'tablespoons')

    result = convert_measurement(5, 'ml', 'standard')
    assert (result.value, result.unit) == (1.0, 'teaspoons')

    result = convert_measurement(0.1, 'liter', 'standard')
    assert (result.value, result.unit) == (6.8, 'tablespoons')


def test_liters_to_cups():
    result = convert_measurement(2, 'liters', 'standard')
    assert (result.value, result.unit) == (8.5, 'cups')


def test_unit_is_normalized_but_original_kept():
    result = convert_measurement(1, ' CUPS ', 'metric')
    assert result.value == 236.6
    assert result.original_unit == ' CUPS '
    assert result.original_value == 1


def test_zero_and_negative_values():
    assert convert_measurement(0, 'cup', 'metric').value == 0
    assert convert_measurement(-2, 'cups', 'metric').value == -473.2


def test_result_to_dict():
    result = convert_measurement(1, 'cup', 'metric')
    assert result.to_dict() == {
        'value': 236.6,
        'unit': 'ml',
        'original_value': 1,
        'original_unit': 'cup',
    }


# Ingredient lines

@pytest.mark.parametrize('line, to_system, expected', [
    ('2 cups flour', 'metric', '473.2 ml flour'),
    ('2 Cups flour', 'metric', '473.2 ml flour'),
    ('2 cups', 'metric', '473.2 ml'),
    ('1/2 cup sugar', 'metric', '118.3 ml sugar'),
    ('1.5 cups milk', 'metric', '354.9 ml milk'),
    ('8 cups water', 'metric', '1.9 liters water'),
    ('2 fluid ounces cream', 'metric', '59.1 ml cream'),
    ('2   fluid   ounces milk', 'metric', '59.1 ml milk'),
    ('2 tbsp olive oil', 'metric', '29.6 ml olive oil'),
    ('1 pound ground beef', 'metric', '453.6 grams ground beef'),
    ('4 pounds potatoes', 'metric', '1.8 kg potatoes'),
    ('250 grams butter', 'standard', '8.8 ounces butter'),
    ('1000 grams flour', 'standard', '2.2 pounds flour'),
    ('10 kilograms rice', 'standard', '22 pounds rice'),
    ('473.176 ml milk', 'standard', '2 cups milk'),
])
def test_ingredient_conversion(line, to_system, expected):
    assert convert_ingredient_measurement(line, to_system) == expected


@pytest.mark.parametrize('line, to_system', [
    ('salt to taste', 'metric'),
    ('1/2 cup sugar', 'standard'),
    ('3 eggs', 'metric'),
    ('2 large eggs', 'metric'),
    ('200g flour', 'metric'),
    ('Add 2 cups flour', 'metric'),
    ('1/0 cup sugar', 'metric'),
    ('2 cups flour', 'kelvin'),
    ('', 'metric'),
])
def test_ingredient_left_unchanged(line, to_system):
    assert convert_ingredient_measurement(line, to_system) == line


def test_ingredient_only_leading_measurement_replaced():
    line = '2 cups flour, plus 2 cups for dusting'
    assert convert_ingredient_measurement(line, 'metric') == '473.2 ml flour, plus 2 cups for dusting'


def test_ingredient_non_string_passes_through():
    assert convert_ingredient_measurement(None, 'metric') is None


def test_ingredient_list():
    lines = ['2 cups flour', 'salt to taste', '1 pound ground beef']
    assert convert_ingredient_list(lines, 'metric') == [
        '473.2 ml flour', 'salt to taste', '453.6 grams ground beef'
    ]
    assert convert_ingredient_list([], 'metric') == []
    assert convert_ingredient_list(None, 'metric') == []
