"""
Logging Setup

Configures standard library logging for the unit converter package.
Library modules only ask for loggers; handlers are installed by the
application (or CLI) through setup_logging.
"""

import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER_NAME = 'unit_converter'

LOG_FORMAT = '%(asctime)s.%(msecs)03d %(levelname)-7s - %(name)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_setup_lock = threading.Lock()
_handler: Optional[logging.Handler] = None


def _create_handler(log_file: Optional[Union[str, Path]], overwrite: bool,
                    console: bool) -> logging.Handler:
    """Create a file handler, or a stderr (or null) handler when no file is given"""

    if log_file is None:
        return logging.StreamHandler() if console else logging.NullHandler()

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, mode='w' if overwrite else 'a', encoding='utf-8')
    handler.stream.write(f"===== Unit Converter Log: started "
                         f"{datetime.now().strftime(DATE_FORMAT)} =====\n")
    handler.flush()
    return handler


def setup_logging(log_file: Optional[Union[str, Path]] = None,
                  overwrite: bool = False,
                  verbose: bool = False,
                  console: bool = True) -> logging.Logger:
    """
    Setup package logging

    Installs a single handler on the package logger. Calling again only
    adjusts the level, so repeated setup never duplicates output.

    Args:
        log_file: Path to log file (stderr when omitted)
        overwrite: Whether to overwrite an existing log file
        verbose: Enable debug logging
        console: Log to stderr when no log file is given; otherwise records are discarded

    Returns:
        The package logger
    """
    global _handler

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    with _setup_lock:
        if _handler is None:
            _handler = _create_handler(log_file, overwrite, console)
            _handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
            package_logger.addHandler(_handler)
            package_logger.propagate = False

        level = logging.DEBUG if verbose else logging.INFO
        _handler.setLevel(level)
        package_logger.setLevel(level)

    return package_logger


def reset_logging():
    """Remove the handler installed by setup_logging"""
    global _handler

    with _setup_lock:
        if _handler is not None:
            package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
            package_logger.removeHandler(_handler)
            package_logger.propagate = True
            package_logger.setLevel(logging.NOTSET)
            _handler.close()
            _handler = None


def get_logger(name: str = None) -> logging.Logger:
    """Get a logger inside the package namespace"""
    if not name or name == PACKAGE_LOGGER_NAME:
        return logging.getLogger(PACKAGE_LOGGER_NAME)
    if name.startswith(PACKAGE_LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{name}")
