"""
Unit Converter

Converts quantities between units of length, weight, temperature and
volume, and renders the results as display strings.
"""

__version__ = "1.0.0"

# Core imports for public API
from .core.exceptions import (
    UnitConverterError,
    UnknownCategoryError,
    UnitNotInCategoryError,
    UnitConversionError,
    ConfigurationError
)
from .core.units import (
    UnitConverter,
    UnitRegistry,
    CategoryDefinition,
    ConversionStrategy,
    DEFAULT_REGISTRY,
    default_converter,
    format_number,
    parse_input,
    list_categories,
    units_for,
    convert,
    convert_value,
    convert_values
)
from .config.format_settings import FormatSettings, DEFAULT_FORMAT_SETTINGS

# Infrastructure
from .infrastructure.logging.converter_logger import setup_logging, get_logger

__all__ = [
    # Core classes
    'UnitConverter', 'UnitRegistry', 'CategoryDefinition', 'ConversionStrategy',
    'FormatSettings', 'DEFAULT_REGISTRY', 'DEFAULT_FORMAT_SETTINGS', 'default_converter',

    # Convenience functions
    'list_categories', 'units_for', 'convert', 'convert_value', 'convert_values',
    'format_number', 'parse_input', 'setup_logging', 'get_logger',

    # Exceptions
    'UnitConverterError', 'UnknownCategoryError', 'UnitNotInCategoryError',
    'UnitConversionError', 'ConfigurationError',

    # Version info
    '__version__'
]
