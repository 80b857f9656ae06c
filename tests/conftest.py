import pytest

from unit_converter.infrastructure.logging.converter_logger import reset_logging


@pytest.fixture(autouse=True)
def clean_logging():
    """Drop any handler installed by setup_logging during a test"""
    yield
    reset_logging()
