"""Unit-safe scalar quantities."""

from __future__ import annotations

import math
from fractions import Fraction
from numbers import Real
from typing import TYPE_CHECKING

from unitsafe.dimensions import DimensionVector, Exponent, as_exponent
from unitsafe.errors import DimensionMismatchError, DomainError
from unitsafe.units import Unit

if TYPE_CHECKING:
    from unitsafe.registry import Registry


class Quantity:
    """A magnitude expressed in a unit.

    The magnitude is kept in the quantity's own unit; cross-unit operations go
    through the base representation of the units involved.

    Examples:
        >>> from unitsafe.dimensions import LENGTH
        >>> km = Unit.new_linear("kilometer", LENGTH, 1000.0)
        >>> m = Unit.new_base("meter", LENGTH)
        >>> Quantity(5.0, km).magnitude_as(m)
        5000.0
    """

    __slots__ = ("_magnitude", "_unit")

    def __init__(self, magnitude: float, unit: Unit) -> None:
        if isinstance(magnitude, bool) or not isinstance(magnitude, Real):
            raise TypeError(f"Magnitude must be a real number, got {type(magnitude).__name__}")
        if not isinstance(unit, Unit):
            raise TypeError(f"Unit must be a Unit, got {type(unit).__name__}")
        self._magnitude = magnitude
        self._unit = unit

    @classmethod
    def new(cls, magnitude: float, unit: Unit) -> Quantity:
        return cls(magnitude, unit)

    @classmethod
    def from_registry(cls, registry: Registry, magnitude: float, unit_name: str) -> Quantity:
        """Resolve ``unit_name`` in ``registry``; raises ``UnitNotFoundError``."""
        return cls(magnitude, registry.get(unit_name))

    @property
    def magnitude(self) -> float:
        return self._magnitude

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def dimension(self) -> DimensionVector:
        return self._unit.dimension

    @property
    def base_magnitude(self) -> float:
        return self._unit.to_base(self._magnitude)

    # -- conversion ----------------------------------------------------------

    def _check_compatible(self, unit: Unit, operation: str) -> None:
        if not self._unit.compatible(unit):
            raise DimensionMismatchError(self.dimension, unit.dimension, operation)

    def magnitude_as(self, target: Unit) -> float:
        self._check_compatible(target, "magnitude_as")
        return target.from_base(self.base_magnitude)

    m_as = magnitude_as

    def to(self, target: Unit) -> Quantity:
        return Quantity(self.magnitude_as(target), target)

    def _converted(self, other: Quantity, operation: str) -> float:
        """``other``'s magnitude expressed in this quantity's unit."""
        self._check_compatible(other.unit, operation)
        return self._unit.from_base(other.base_magnitude)

    # -- arithmetic ----------------------------------------------------------

    def __add__(self, other: Quantity) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity(self._magnitude + self._converted(other, "add"), self._unit)

    def __sub__(self, other: Quantity) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity(self._magnitude - self._converted(other, "sub"), self._unit)

    def __mul__(self, other: Quantity | float) -> Quantity:
        if isinstance(other, Quantity):
            return Quantity(self._magnitude * other.magnitude, self._unit.multiply(other.unit))
        if isinstance(other, Real) and not isinstance(other, bool):
            return Quantity(self._magnitude * other, self._unit)
        return NotImplemented

    def __rmul__(self, other: float) -> Quantity:
        if isinstance(other, Real) and not isinstance(other, bool):
            return Quantity(other * self._magnitude, self._unit)
        return NotImplemented

    def __truediv__(self, other: Quantity | float) -> Quantity:
        if isinstance(other, Quantity):
            return Quantity(self._magnitude / other.magnitude, self._unit.divide(other.unit))
        if isinstance(other, Real) and not isinstance(other, bool):
            return Quantity(self._magnitude / other, self._unit)
        return NotImplemented

    def pow(self, n: Exponent) -> Quantity:
        unit = self._unit.pow(n)
        n = as_exponent(n)
        if isinstance(n, Fraction):
            try:
                magnitude = math.pow(self._magnitude, float(n))
            except ValueError:
                raise DomainError(
                    f"Cannot raise negative magnitude {self._magnitude} to power {n}"
                ) from None
        else:
            magnitude = self._magnitude ** n
        return Quantity(magnitude, unit)

    def __pow__(self, n: Exponent) -> Quantity:
        return self.pow(n)

    def __neg__(self) -> Quantity:
        return Quantity(-self._magnitude, self._unit)

    def __abs__(self) -> Quantity:
        return Quantity(abs(self._magnitude), self._unit)

    # -- comparison ----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        if not self._unit.compatible(other.unit):
            return False
        return self.base_magnitude == other.base_magnitude

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Quantity) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._magnitude < self._converted(other, "compare")

    def __le__(self, other: Quantity) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._magnitude <= self._converted(other, "compare")

    def __gt__(self, other: Quantity) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._magnitude > self._converted(other, "compare")

    def __ge__(self, other: Quantity) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._magnitude >= self._converted(other, "compare")

    def isclose(self, other: Quantity, rel_tol: float = 1e-9, abs_tol: float = 0.0) -> bool:
        return math.isclose(
            self._magnitude, self._converted(other, "isclose"), rel_tol=rel_tol, abs_tol=abs_tol
        )

    def __repr__(self) -> str:
        return f"Quantity({self._magnitude!r}, {self._unit.name!r})"

    def __str__(self) -> str:
        return f"{self._magnitude} {self._unit.name}"


def magnitude_as(quantity: Quantity, target: Unit) -> float:
    return quantity.magnitude_as(target)
