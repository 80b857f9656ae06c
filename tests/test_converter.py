"""Tests for the conversion engine"""

import itertools
import logging
import threading

import numpy as np
import pytest

from unit_converter import convert, convert_value, convert_values, list_categories, units_for
from unit_converter.config.format_settings import FormatSettings
from unit_converter.core.exceptions import UnitConversionError, UnknownCategoryError, UnitNotInCategoryError
from unit_converter.core.units.converter import UnitConverter
from unit_converter.core.units.definitions import DEFAULT_REGISTRY, ConversionStrategy
from unit_converter.core.units.formatting import format_number

LINEAR_CATEGORIES = [c.name for c in DEFAULT_REGISTRY.categories_by_strategy(ConversionStrategy.LINEAR)]
TEMPERATURE_UNITS = DEFAULT_REGISTRY.units_of('Temperature')
SAMPLE_VALUES = [0.0, 1.0, -3.5, 42.125, 1234.5678, 1e-3, 9.87e6]


def _pairs(category):
    return list(itertools.permutations(DEFAULT_REGISTRY.units_of(category), 2))


# (category, raw input, from unit, to unit, expected display string)
SCENARIOS = [
    ('Length', '1', 'Meters', 'Feet', '3.280839895'),
    ('Temperature', '0', 'Celsius', 'Fahrenheit', '32'),
    ('Temperature', '212', 'Fahrenheit', 'Celsius', '100'),
    ('Weight', '1', 'Kilograms', 'Pounds', '2.20462442'),
    ('Length', '', 'Meters', 'Feet', ''),
    ('Length', 'abc', 'Meters', 'Feet', ''),
    ('Temperature', '-40', 'Celsius', 'Fahrenheit', '-40'),
    ('Temperature', '0', 'Kelvin', 'Celsius', '-273.15'),
    ('Temperature', '100', 'Celsius', 'Kelvin', '373.15'),
    ('Temperature', '98.6', 'Fahrenheit', 'Celsius', '37'),
    ('Length', '1', 'Feet', 'Yards', '0.3333333333'),
    ('Length', '-5', 'Meters', 'Centimeters', '-500'),
    ('Length', '1', 'Millimeters', 'Miles', '6.213712e-7'),
    ('Length', '1000000', 'Kilometers', 'Millimeters', '1.000000e+12'),
    ('Length', '1e3', 'Meters', 'Kilometers', '1'),
    ('Weight', '1', 'Tonnes', 'Grams', '1000000'),
    ('Volume', '1', 'Gallons (US)', 'Liters', '3.78541'),
    ('Volume', '1', 'Liters', 'Teaspoons', '202.8842018'),
    ('Length', '12abc', 'Meters', 'Meters', '12'),
]


@pytest.mark.parametrize("category, raw, from_unit, to_unit, expected", SCENARIOS)
def test_conversion_scenarios(category, raw, from_unit, to_unit, expected):
    assert convert(category, raw, from_unit, to_unit) == expected


def test_public_surface():
    assert list_categories() == ('Length', 'Weight', 'Temperature', 'Volume')
    assert units_for('Weight')[:2] == ('Kilograms', 'Grams')


@pytest.mark.parametrize("category", ['Length', 'Weight', 'Temperature', 'Volume'])
@pytest.mark.parametrize("raw", ['0', '1', '-2.75', '0.1', '123456.789', '0.00001', '5e12'])
def test_identity_conversion(category, raw):
    for unit in DEFAULT_REGISTRY.units_of(category):
        assert convert(category, raw, unit, unit) == format_number(float(raw))


@pytest.mark.parametrize("category", LINEAR_CATEGORIES)
def test_linear_round_trip(category):
    for a, b in _pairs(category):
        for value in SAMPLE_VALUES:
            there = convert_value(category, value, a, b)
            back = convert_value(category, there, b, a)
            assert back == pytest.approx(value, rel=1e-9)


@pytest.mark.parametrize("from_unit, to_unit", list(itertools.permutations(TEMPERATURE_UNITS, 2)))
def test_temperature_round_trip(from_unit, to_unit):
    for value in SAMPLE_VALUES:
        there = convert_value('Temperature', value, from_unit, to_unit)
        back = convert_value('Temperature', there, to_unit, from_unit)
        assert back == pytest.approx(value, rel=1e-9, abs=1e-9)


@pytest.mark.parametrize("category", LINEAR_CATEGORIES)
def test_scale_consistency_through_base_unit(category):
    base = DEFAULT_REGISTRY.lookup(category).strategy.base_unit
    for a, b in _pairs(category):
        via_base = convert_value(category, convert_value(category, 7.25, a, base), base, b)
        assert convert_value(category, 7.25, a, b) == pytest.approx(via_base, rel=1e-9)


def test_negative_absolute_temperature_is_accepted():
    assert convert('Temperature', '-10', 'Kelvin', 'Celsius') == '-283.15'


def test_unknown_category_is_rejected_and_logged(caplog):
    with caplog.at_level(logging.ERROR, logger='unit_converter'):
        with pytest.raises(UnknownCategoryError):
            convert('Speed', '1', 'Meters', 'Feet')
    assert 'Rejected conversion request' in caplog.text


@pytest.mark.parametrize("from_unit, to_unit", [('Pounds', 'Feet'), ('Meters', 'Celsius')])
def test_foreign_unit_is_rejected(from_unit, to_unit):
    with pytest.raises(UnitNotInCategoryError):
        convert('Length', '1', from_unit, to_unit)


def test_foreign_unit_rejected_even_without_input():
    with pytest.raises(UnitNotInCategoryError):
        convert('Temperature', '', 'Celsius', 'Meters')


def test_convert_values_array():
    result = convert_values('Length', [1.0, 2.0, -3.0], 'Meters', 'Centimeters')
    assert isinstance(result, np.ndarray)
    np.testing.assert_allclose(result, [100.0, 200.0, -300.0])


def test_convert_values_temperature_keeps_shape():
    celsius = np.array([[0.0, 100.0], [-40.0, 37.0]])
    result = convert_values('Temperature', celsius, 'Celsius', 'Fahrenheit')
    assert result.shape == (2, 2)
    np.testing.assert_allclose(result, [[32.0, 212.0], [-40.0, 98.6]])


def test_convert_values_identity_returns_copy():
    source = np.array([1.0, 2.0])
    result = convert_values('Weight', source, 'Grams', 'Grams')
    result[0] = 99.0
    assert source[0] == 1.0


def test_conversion_factor():
    converter = UnitConverter()
    assert converter.get_conversion_factor('Length', 'Kilometers', 'Meters') == 1000
    assert converter.get_conversion_factor('Weight', 'Grams', 'Grams') == 1.0
    assert converter.get_conversion_factor('Length', 'Feet', 'Inches') == pytest.approx(12.0)
    with pytest.raises(UnitConversionError):
        converter.get_conversion_factor('Temperature', 'Celsius', 'Kelvin')


def test_swap():
    assert UnitConverter.swap('Meters', 'Feet') == ('Feet', 'Meters')


def test_custom_format_settings():
    converter = UnitConverter(settings=FormatSettings(significant_digits=4))
    assert converter.convert('Length', '1', 'Meters', 'Feet') == '3.281'


def test_parse_failure_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger='unit_converter'):
        assert convert('Volume', 'cups', 'Liters', 'Cups') == ''
    assert 'No numeric value' in caplog.text


def test_concurrent_conversions_agree():
    converter = UnitConverter()
    results = []

    def worker():
        results.append(tuple(converter.convert('Length', str(i), 'Miles', 'Kilometers') for i in range(200)))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(set(results)) == 1
