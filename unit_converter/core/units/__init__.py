"""
Units Module for the Unit Converter

Category catalog, conversion engine and display formatting.
"""

from .converter import UnitConverter
from .definitions import (
    CATEGORY_DEFINITIONS,
    DEFAULT_REGISTRY,
    AffineStrategy,
    AffineTransform,
    CategoryDefinition,
    ConversionStrategy,
    LinearStrategy,
    UnitRegistry,
    get_category_info,
    list_categories_by_strategy
)
from .formatting import format_number
from .parsing import parse_input

# Create default converter instance
default_converter = UnitConverter()


# Convenience functions using default converter
def list_categories():
    """Category names in display order using default converter"""
    return default_converter.list_categories()


def units_for(category):
    """Ordered unit names of a category using default converter"""
    return default_converter.units_for(category)


def convert(category, raw_input, from_unit, to_unit):
    """Convert raw input text to a display string using default converter"""
    return default_converter.convert(category, raw_input, from_unit, to_unit)


def convert_value(category, value, from_unit, to_unit):
    """Convert a numeric value using default converter"""
    return default_converter.convert_value(category, value, from_unit, to_unit)


def convert_values(category, values, from_unit, to_unit):
    """Convert an array of values using default converter"""
    return default_converter.convert_values(category, values, from_unit, to_unit)


__all__ = [
    'UnitConverter',
    'CATEGORY_DEFINITIONS',
    'DEFAULT_REGISTRY',
    'AffineStrategy',
    'AffineTransform',
    'CategoryDefinition',
    'ConversionStrategy',
    'LinearStrategy',
    'UnitRegistry',
    'get_category_info',
    'list_categories_by_strategy',
    'format_number',
    'parse_input',
    'default_converter',
    'list_categories',
    'units_for',
    'convert',
    'convert_value',
    'convert_values'
]
