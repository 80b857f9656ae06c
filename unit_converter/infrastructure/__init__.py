"""
Infrastructure Module for the Unit Converter

Infrastructure services shared by the engine and the command line
interface.
"""

from .logging.converter_logger import setup_logging, reset_logging, get_logger

__all__ = [
    'setup_logging',
    'reset_logging',
    'get_logger'
]
