"""
Unit Conversion Engine

Converts values between the units of a registry category and renders the
result for display. Linear categories scale through their base unit;
affine categories (temperature) route through a canonical unit.
"""

from functools import lru_cache
from typing import Tuple, Union

import numpy as np

from ...config.format_settings import FormatSettings, DEFAULT_FORMAT_SETTINGS
from ...infrastructure.logging.converter_logger import get_logger
from ..exceptions import UnitConversionError, UnitConverterError
from .definitions import (
    DEFAULT_REGISTRY,
    AffineStrategy,
    CategoryDefinition,
    LinearStrategy,
    UnitRegistry,
)
from .formatting import format_number
from .parsing import parse_input

logger = get_logger(__name__)


class UnitConverter:
    """
    Stateless unit converter bound to a read-only registry

    Every operation is a pure function of its arguments, so one instance
    can serve any number of callers and threads.
    """

    def __init__(self, registry: UnitRegistry = DEFAULT_REGISTRY,
                 settings: FormatSettings = DEFAULT_FORMAT_SETTINGS):
        """
        Initialize unit converter

        Args:
            registry: Category catalog to convert within
            settings: Display formatting thresholds and precision
        """
        self.registry = registry
        self.settings = settings

    def list_categories(self) -> Tuple[str, ...]:
        """Category names in display order"""
        return self.registry.list_categories()

    def units_for(self, category: str) -> Tuple[str, ...]:
        """Ordered unit names of a category; the first two are the default pair"""
        return self._resolve(category).units

    @staticmethod
    def swap(from_unit: str, to_unit: str) -> Tuple[str, str]:
        """Exchange source and target units"""
        return to_unit, from_unit

    def convert(self, category: str, raw_input, from_unit: str, to_unit: str) -> str:
        """
        Convert raw input text and format the result for display

        Args:
            category: Category name (e.g., 'Length')
            raw_input: Text holding the value to convert
            from_unit: Source unit (e.g., 'Meters')
            to_unit: Target unit (e.g., 'Feet')

        Returns:
            Display string, or '' when the input does not hold a number

        Raises:
            UnknownCategoryError: If the category is not in the registry
            UnitNotInCategoryError: If either unit is not in the category
        """
        definition = self._resolve(category, from_unit, to_unit)

        value = parse_input(raw_input)
        if value is None:
            logger.debug("No numeric value in input %r", raw_input)
            return ''

        return format_number(self._convert(definition, value, from_unit, to_unit), self.settings)

    def convert_value(self, category: str, value: float, from_unit: str, to_unit: str) -> float:
        """
        Convert a single numeric value without formatting

        Raises:
            UnknownCategoryError: If the category is not in the registry
            UnitNotInCategoryError: If either unit is not in the category
        """
        definition = self._resolve(category, from_unit, to_unit)
        return self._convert(definition, float(value), from_unit, to_unit)

    def convert_values(self, category: str, values, from_unit: str, to_unit: str) -> np.ndarray:
        """
        Convert an array of values elementwise

        Args:
            category: Category name
            values: Array-like of numbers
            from_unit: Source unit
            to_unit: Target unit

        Returns:
            Float array of converted values, same shape as the input
        """
        definition = self._resolve(category, from_unit, to_unit)
        array = np.asarray(values, dtype=float)
        if from_unit == to_unit:
            return array.copy()
        return np.asarray(self._convert(definition, array, from_unit, to_unit), dtype=float)

    @lru_cache(maxsize=256)
    def get_conversion_factor(self, category: str, from_unit: str, to_unit: str) -> float:
        """
        Multiplication factor between two units of a linear category

        Raises:
            UnitConversionError: If the category is not linear
        """
        definition = self._resolve(category, from_unit, to_unit)
        strategy = definition.strategy

        if not isinstance(strategy, LinearStrategy):
            raise UnitConversionError(
                f"Category '{category}' has no constant conversion factor", from_unit, to_unit
            )

        if from_unit == to_unit:
            return 1.0
        return strategy.scale_factors[from_unit] / strategy.scale_factors[to_unit]

    def _resolve(self, category: str, *units: str) -> CategoryDefinition:
        """Look up a category and check unit membership, logging contract violations"""
        try:
            definition = self.registry.lookup(category)
            for unit in units:
                self.registry.require_unit(category, unit)
        except UnitConverterError as e:
            logger.error("Rejected conversion request: %s", e)
            raise
        return definition

    @staticmethod
    def _convert(definition: CategoryDefinition, value: Union[float, np.ndarray],
                 from_unit: str, to_unit: str) -> Union[float, np.ndarray]:
        """Dispatch on the category strategy"""
        if from_unit == to_unit:
            return value

        strategy = definition.strategy

        if isinstance(strategy, LinearStrategy):
            return _convert_linear(strategy, value, from_unit, to_unit)

        if isinstance(strategy, AffineStrategy):
            return _convert_affine(strategy, value, from_unit, to_unit)

        raise UnitConversionError(
            f"Unsupported conversion strategy for '{definition.name}': {type(strategy).__name__}",
            from_unit, to_unit
        )


def _convert_linear(strategy: LinearStrategy, value, from_unit: str, to_unit: str):
    """Scale to the base unit and back out in one step"""
    return value * strategy.scale_factors[from_unit] / strategy.scale_factors[to_unit]


def _convert_affine(strategy: AffineStrategy, value, from_unit: str, to_unit: str):
    """Route through the canonical unit"""
    canonical = strategy.transforms[from_unit].to_canonical(value)
    return strategy.transforms[to_unit].from_canonical(canonical)
