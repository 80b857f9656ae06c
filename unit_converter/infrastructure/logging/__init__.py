"""Logging configuration"""

from .converter_logger import setup_logging, reset_logging, get_logger

__all__ = ['setup_logging', 'reset_logging', 'get_logger']
