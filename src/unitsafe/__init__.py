"""unitsafe: dimensional analysis and unit-safe scalar quantities."""

__version__ = "0.1.0"

from unitsafe.dimensions import (
    AMOUNT_OF_SUBSTANCE,
    ANGLE,
    BIT,
    COUNT,
    CURRENT,
    LENGTH,
    LUMINOUS_INTENSITY,
    MASS,
    TEMPERATURE,
    TIME,
    BaseDimension,
    DimensionVector,
)
from unitsafe.errors import (
    ConstructionError,
    DimensionMismatchError,
    DomainError,
    DuplicateUnitError,
    InvalidTransformationCompositionError,
    ParseError,
    UnitNotFoundError,
    UnitsafeError,
)
from unitsafe.parser import parse_units
from unitsafe.quantity import Quantity
from unitsafe.registry import Registry
from unitsafe.transformations import (
    DecibelTransformation,
    IdentityTransformation,
    LinearTransformation,
)
from unitsafe.units import Unit

__all__ = [
    "__version__",
    # dimensions
    "BaseDimension",
    "DimensionVector",
    "MASS",
    "LENGTH",
    "TIME",
    "CURRENT",
    "TEMPERATURE",
    "AMOUNT_OF_SUBSTANCE",
    "LUMINOUS_INTENSITY",
    "ANGLE",
    "BIT",
    "COUNT",
    # transformations
    "IdentityTransformation",
    "LinearTransformation",
    "DecibelTransformation",
    # units and registry
    "Unit",
    "Registry",
    "parse_units",
    "Quantity",
    # errors
    "UnitsafeError",
    "ParseError",
    "DuplicateUnitError",
    "UnitNotFoundError",
    "DimensionMismatchError",
    "InvalidTransformationCompositionError",
    "ConstructionError",
    "DomainError",
]
