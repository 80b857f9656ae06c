"""
Unit Definitions for the Unit Converter

Fixed catalog of measurement categories, their member units and the
strategy used to convert between them.
"""

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Tuple, Union

from ..exceptions import ConfigurationError, UnknownCategoryError, UnitNotInCategoryError


class ConversionStrategy(Enum):
    """How units of a category relate to each other"""
    LINEAR = "linear"
    AFFINE = "affine"


@dataclass(frozen=True)
class LinearStrategy:
    """
    Pure multiplicative relationship between units

    Each factor is the size of one unit expressed in the category's
    implicit base unit (factor 1).
    """
    scale_factors: Mapping[str, float]

    kind = ConversionStrategy.LINEAR

    def __post_init__(self):
        for unit, factor in self.scale_factors.items():
            if isinstance(factor, bool) or not isinstance(factor, (int, float)):
                raise ConfigurationError(f"Scale factor for '{unit}' must be a number, got {factor!r}",
                                         'registry', unit)
            if not math.isfinite(factor) or factor <= 0:
                raise ConfigurationError(f"Scale factor must be positive and finite, got {factor}",
                                         'registry', unit)

        if 1 not in self.scale_factors.values():
            raise ConfigurationError("Linear strategy requires a base unit with factor 1", 'registry')

        object.__setattr__(self, 'scale_factors', MappingProxyType(dict(self.scale_factors)))

    @property
    def base_unit(self) -> str:
        """Unit whose scale factor is 1"""
        return next(unit for unit, factor in self.scale_factors.items() if factor == 1)


@dataclass(frozen=True)
class AffineTransform:
    """Offset-and-scale mapping of one unit to and from the canonical scale"""
    to_canonical: Callable[[float], float]
    from_canonical: Callable[[float], float]


@dataclass(frozen=True)
class AffineStrategy:
    """
    Offset-and-scale relationship between units

    Values are routed through a canonical intermediate unit rather than
    through pairwise formulas.
    """
    canonical_unit: str
    transforms: Mapping[str, AffineTransform]

    kind = ConversionStrategy.AFFINE

    def __post_init__(self):
        if self.canonical_unit not in self.transforms:
            raise ConfigurationError(f"Canonical unit '{self.canonical_unit}' has no transform",
                                     'registry', self.canonical_unit)

        object.__setattr__(self, 'transforms', MappingProxyType(dict(self.transforms)))


Strategy = Union[LinearStrategy, AffineStrategy]


@dataclass(frozen=True)
class CategoryDefinition:
    """
    Definition of a measurement category

    Unit order is significant: the first two units are the default
    source and target of a fresh selection.
    """
    name: str
    units: Tuple[str, ...]
    strategy: Strategy
    description: str = ""

    def __post_init__(self):
        """Validate category definition after creation"""
        object.__setattr__(self, 'units', tuple(self.units))

        if len(self.units) < 2:
            raise ConfigurationError(f"Category '{self.name}' needs at least two units, "
                                     f"got {len(self.units)}", 'registry', self.name)

        if len(set(self.units)) != len(self.units):
            raise ConfigurationError(f"Duplicate unit names in category '{self.name}'",
                                     'registry', self.name)

        if isinstance(self.strategy, LinearStrategy):
            covered = set(self.strategy.scale_factors)
        else:
            covered = set(self.strategy.transforms)

        if covered != set(self.units):
            missing = sorted(set(self.units) - covered)
            extra = sorted(covered - set(self.units))
            raise ConfigurationError(
                f"Units of '{self.name}' do not match its conversion table "
                f"(missing={missing}, extra={extra})", 'registry', self.name
            )

    @property
    def conversion_strategy(self) -> ConversionStrategy:
        return self.strategy.kind

    @property
    def default_pair(self) -> Tuple[str, str]:
        return self.units[0], self.units[1]

    def has_unit(self, unit: str) -> bool:
        return unit in self.units


# ===================================================================
# TEMPERATURE TRANSFORMS
# ===================================================================

def _identity(value):
    return value


def _fahrenheit_to_celsius(value):
    return (value - 32) * 5 / 9


def _celsius_to_fahrenheit(celsius):
    return celsius * 9 / 5 + 32


def _kelvin_to_celsius(value):
    return value - 273.15


def _celsius_to_kelvin(celsius):
    return celsius + 273.15


# ===================================================================
# CATEGORY CATALOG
# ===================================================================

def _linear(name: str, factors: Dict[str, float], description: str = "") -> CategoryDefinition:
    return CategoryDefinition(name, tuple(factors), LinearStrategy(factors), description)


CATEGORY_DEFINITIONS: Tuple[CategoryDefinition, ...] = (
    _linear('Length', {
        'Meters': 1,
        'Kilometers': 1000,
        'Centimeters': 0.01,
        'Millimeters': 0.001,
        'Miles': 1609.344,
        'Yards': 0.9144,
        'Feet': 0.3048,
        'Inches': 0.0254,
    }, 'Distance, base unit meters'),

    _linear('Weight', {
        'Kilograms': 1,
        'Grams': 0.001,
        'Milligrams': 0.000001,
        'Pounds': 0.453592,
        'Ounces': 0.0283495,
        'Tonnes': 1000,
        'Stones': 6.35029,
    }, 'Mass, base unit kilograms'),

    CategoryDefinition(
        'Temperature',
        ('Celsius', 'Fahrenheit', 'Kelvin'),
        AffineStrategy('Celsius', {
            'Celsius': AffineTransform(_identity, _identity),
            'Fahrenheit': AffineTransform(_fahrenheit_to_celsius, _celsius_to_fahrenheit),
            'Kelvin': AffineTransform(_kelvin_to_celsius, _celsius_to_kelvin),
        }),
        'Temperature, routed through Celsius'
    ),

    _linear('Volume', {
        'Liters': 1,
        'Milliliters': 0.001,
        'Gallons (US)': 3.78541,
        'Quarts': 0.946353,
        'Pints': 0.473176,
        'Cups': 0.236588,
        'Fluid Oz': 0.0295735,
        'Tablespoons': 0.0147868,
        'Teaspoons': 0.00492892,
    }, 'Liquid volume, base unit liters'),
)


# ===================================================================
# UNIT REGISTRY
# ===================================================================

class UnitRegistry:
    """
    Read-only catalog of measurement categories

    Built once from a sequence of category definitions and never
    mutated afterwards, so it can be shared freely between threads.
    """

    def __init__(self, categories: Tuple[CategoryDefinition, ...]):
        names = [category.name for category in categories]
        if len(set(names)) != len(names):
            raise ConfigurationError("Category names must be unique", 'registry')

        self._categories: Mapping[str, CategoryDefinition] = MappingProxyType(
            {category.name: category for category in categories}
        )

    def __contains__(self, category: str) -> bool:
        return category in self._categories

    def __len__(self) -> int:
        return len(self._categories)

    def list_categories(self) -> Tuple[str, ...]:
        """Category names in display order"""
        return tuple(self._categories)

    def lookup(self, category: str) -> CategoryDefinition:
        """
        Get category definition by name

        Raises:
            UnknownCategoryError: If the name is not in the catalog
        """
        try:
            return self._categories[category]
        except (KeyError, TypeError):
            raise UnknownCategoryError(f"Unknown category: '{category}'", category) from None

    def get(self, category: str) -> Optional[CategoryDefinition]:
        """Get category definition by name, or None"""
        return self._categories.get(category)

    def units_of(self, category: str) -> Tuple[str, ...]:
        """Ordered unit names of a category"""
        return self.lookup(category).units

    def default_pair(self, category: str) -> Tuple[str, str]:
        """Conventional (from, to) units for a fresh selection"""
        return self.lookup(category).default_pair

    def require_unit(self, category: str, unit: str) -> CategoryDefinition:
        """
        Check that a unit belongs to a category

        Returns:
            The resolved category definition

        Raises:
            UnknownCategoryError: If the category is unknown
            UnitNotInCategoryError: If the unit is not a member of the category
        """
        definition = self.lookup(category)
        if not definition.has_unit(unit):
            raise UnitNotInCategoryError(f"Unit '{unit}' is not part of category '{category}'",
                                         unit, category)
        return definition

    def categories_by_strategy(self, strategy: ConversionStrategy) -> List[CategoryDefinition]:
        """All categories converted with the given strategy"""
        return [category for category in self._categories.values()
                if category.conversion_strategy == strategy]


DEFAULT_REGISTRY = UnitRegistry(CATEGORY_DEFINITIONS)


def get_category_info(category: str) -> Optional[CategoryDefinition]:
    """
    Get category definition from the default registry

    Args:
        category: Category name (e.g., 'Length')

    Returns:
        CategoryDefinition if found, None otherwise
    """
    return DEFAULT_REGISTRY.get(category)


def list_categories_by_strategy(strategy: ConversionStrategy) -> List[CategoryDefinition]:
    """
    List all default categories using a specific strategy

    Args:
        strategy: Strategy to filter on

    Returns:
        List of category definitions using that strategy
    """
    return DEFAULT_REGISTRY.categories_by_strategy(strategy)
