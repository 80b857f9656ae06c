"""Configuration for the unit converter"""

from .format_settings import FormatSettings, DEFAULT_FORMAT_SETTINGS

__all__ = ['FormatSettings', 'DEFAULT_FORMAT_SETTINGS']
