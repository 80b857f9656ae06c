"""Core conversion components"""

from .exceptions import (
    UnitConverterError,
    UnknownCategoryError,
    UnitNotInCategoryError,
    UnitConversionError,
    ConfigurationError
)

__all__ = [
    'UnitConverterError',
    'UnknownCategoryError',
    'UnitNotInCategoryError',
    'UnitConversionError',
    'ConfigurationError'
]
