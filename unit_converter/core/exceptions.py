"""
Custom Exceptions for the Unit Converter

Exception hierarchy for caller contract violations and invalid
configuration. Unparseable input is not an error and never raises.
"""


class UnitConverterError(Exception):
    """Base exception for all unit converter errors"""

    def __init__(self, message: str, details: dict = None):
        self.details = details or {}
        super().__init__(message)

    def __str__(self):
        base_msg = super().__str__()
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base_msg} (Details: {detail_str})"
        return base_msg


class UnknownCategoryError(UnitConverterError):
    """Raised when a category name is not in the registry"""

    def __init__(self, message: str, category: str = None):
        self.category = category
        details = {}
        if category is not None:
            details['category'] = category
        super().__init__(message, details)


class UnitNotInCategoryError(UnitConverterError):
    """Raised when a unit does not belong to the requested category"""

    def __init__(self, message: str, unit: str = None, category: str = None):
        self.unit = unit
        self.category = category
        details = {}
        if unit is not None:
            details['unit'] = unit
        if category is not None:
            details['category'] = category
        super().__init__(message, details)


class UnitConversionError(UnitConverterError):
    """Raised when a conversion is not defined for the given units"""

    def __init__(self, message: str, from_unit: str = None, to_unit: str = None):
        details = {}
        if from_unit:
            details['from_unit'] = from_unit
        if to_unit:
            details['to_unit'] = to_unit
        super().__init__(message, details)


class ConfigurationError(UnitConverterError):
    """Raised when configuration or catalog definitions are invalid"""

    def __init__(self, message: str, config_section: str = None, parameter: str = None):
        details = {}
        if config_section:
            details['section'] = config_section
        if parameter:
            details['parameter'] = parameter
        super().__init__(message, details)
