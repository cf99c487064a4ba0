"""Named units: a dimension plus a transformation to its base."""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction

from unitsafe.dimensions import DimensionVector, Exponent, as_exponent
from unitsafe.errors import DomainError, InvalidTransformationCompositionError
from unitsafe.transformations import (
    IDENTITY,
    DecibelTransformation,
    LinearTransformation,
    Transformation,
    from_base,
    from_scale,
    is_multiplicative,
    scale_of,
    to_base,
)


@dataclass(frozen=True)
class Unit:
    """An immutable unit definition.

    Two units are compatible when their dimensions are equal; the
    transformation only decides how magnitudes are converted.
    """

    name: str
    dimension: DimensionVector
    transformation: Transformation = field(default=IDENTITY)

    @classmethod
    def new_base(cls, name: str, dimension: DimensionVector) -> Unit:
        return cls(name, dimension, IDENTITY)

    @classmethod
    def new_linear(
        cls, name: str, dimension: DimensionVector, scale: float, offset: float = 0.0
    ) -> Unit:
        return cls(name, dimension, LinearTransformation(scale, offset))

    @classmethod
    def new_decibel(cls, name: str, dimension: DimensionVector, p0: float) -> Unit:
        return cls(name, dimension, DecibelTransformation(p0))

    def to_base(self, magnitude: float) -> float:
        return to_base(self.transformation, magnitude)

    def from_base(self, base_value: float) -> float:
        return from_base(self.transformation, base_value)

    def compatible(self, other: Unit) -> bool:
        return self.dimension == other.dimension

    @property
    def is_biased(self) -> bool:
        return isinstance(self.transformation, LinearTransformation) and self.transformation.is_biased

    @property
    def is_decibel(self) -> bool:
        return isinstance(self.transformation, DecibelTransformation)

    def _require_multiplicative(self, operation: str) -> None:
        if not is_multiplicative(self.transformation):
            kind = "decibel" if self.is_decibel else "biased"
            raise InvalidTransformationCompositionError(
                f"{operation} not permitted for unit '{self.name}' with {kind} transformation"
            )

    def multiply(self, other: Unit) -> Unit:
        self._require_multiplicative("Multiplication")
        other._require_multiplicative("Multiplication")
        return Unit(
            f"({self.name} * {other.name})",
            self.dimension * other.dimension,
            from_scale(scale_of(self.transformation) * scale_of(other.transformation)),
        )

    def divide(self, other: Unit) -> Unit:
        self._require_multiplicative("Division")
        other._require_multiplicative("Division")
        return Unit(
            f"({self.name} / {other.name})",
            self.dimension / other.dimension,
            from_scale(scale_of(self.transformation) / scale_of(other.transformation)),
        )

    def pow(self, exponent: Exponent) -> Unit:
        self._require_multiplicative("Exponentiation")
        exponent = as_exponent(exponent)
        scale = scale_of(self.transformation)
        if scale < 0 and isinstance(exponent, Fraction):
            raise DomainError(
                f"Cannot raise unit '{self.name}' with negative scale {scale} to power {exponent}"
            )
        return Unit(
            f"({self.name})^{exponent}",
            self.dimension ** exponent,
            from_scale(scale ** exponent),
        )

    def __mul__(self, other: Unit) -> Unit:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Unit) -> Unit:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, exponent: Exponent) -> Unit:
        return self.pow(exponent)

    def __str__(self) -> str:
        return f"{self.name} [{self.dimension}]"


def compatible(a: Unit, b: Unit) -> bool:
    return a.compatible(b)


def multiply(a: Unit, b: Unit) -> Unit:
    return a.multiply(b)


def divide(a: Unit, b: Unit) -> Unit:
    return a.divide(b)


def pow(a: Unit, exponent: Exponent) -> Unit:  # noqa: A001
    return a.pow(exponent)
