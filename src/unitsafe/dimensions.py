"""Dimension vectors over the ten base dimensions."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from fractions import Fraction
from typing import Union

Exponent = Union[int, Fraction]


class BaseDimension(str, Enum):
    """Base dimensions in vector slot order."""

    MASS = "mass"
    LENGTH = "length"
    TIME = "time"
    CURRENT = "current"
    TEMPERATURE = "temperature"
    AMOUNT_OF_SUBSTANCE = "amount of substance"
    LUMINOUS_INTENSITY = "luminous intensity"
    ANGLE = "angle"
    BIT = "bit"
    COUNT = "count"

    @property
    def slot(self) -> int:
        return list(BaseDimension).index(self)


def as_exponent(value: object) -> Exponent:
    """Coerce an exponent to ``int`` or ``Fraction``.

    Integral fractions collapse to ``int`` so that ``Fraction(2)`` and ``2``
    produce identical vectors. Floats and bools are rejected: exponents are
    exact.
    """
    if isinstance(value, bool):
        raise TypeError(f"Exponent must be int or Fraction, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, Fraction):
        return value.numerator if value.denominator == 1 else value
    raise TypeError(f"Exponent must be int or Fraction, got {type(value).__name__}")


@dataclass(frozen=True)
class DimensionVector:
    """Exponents of the ten base dimensions.

    The ``count`` slot marks a dimensionless vector: it is forced to 1 when the
    other nine exponents are all zero and to 0 otherwise, so ``count * length``
    is ``length`` and ``length / length`` is ``count``.
    """

    mass: Exponent = 0
    length: Exponent = 0
    time: Exponent = 0
    current: Exponent = 0
    temperature: Exponent = 0
    amount_of_substance: Exponent = 0
    luminous_intensity: Exponent = 0
    angle: Exponent = 0
    bit: Exponent = 0
    count: Exponent = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, as_exponent(getattr(self, f.name)))
        dimensionless = all(getattr(self, f.name) == 0 for f in fields(self)[:-1])
        object.__setattr__(self, "count", 1 if dimensionless else 0)

    @classmethod
    def from_exponents(cls, exponents: tuple[Exponent, ...] | list[Exponent]) -> DimensionVector:
        if len(exponents) != len(BaseDimension):
            raise ValueError(
                f"Expected {len(BaseDimension)} exponents, got {len(exponents)}"
            )
        return cls(*exponents)

    @classmethod
    def from_base(cls, base: BaseDimension) -> DimensionVector:
        exponents = [0] * len(BaseDimension)
        exponents[base.slot] = 1
        return cls.from_exponents(exponents)

    @property
    def exponents(self) -> tuple[Exponent, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    def exponent(self, base: BaseDimension) -> Exponent:
        return self.exponents[base.slot]

    @property
    def is_dimensionless(self) -> bool:
        return self.count == 1

    def combine(self, other: DimensionVector, op: str) -> DimensionVector:
        """Add (``multiply``) or subtract (``divide``) exponents component-wise."""
        if op == "multiply":
            return DimensionVector.from_exponents(
                [a + b for a, b in zip(self.exponents, other.exponents)]
            )
        if op == "divide":
            return DimensionVector.from_exponents(
                [a - b for a, b in zip(self.exponents, other.exponents)]
            )
        raise ValueError(f"Unknown dimension operation: {op!r}")

    def power(self, n: Exponent) -> DimensionVector:
        n = as_exponent(n)
        return DimensionVector.from_exponents([e * n for e in self.exponents])

    def equals(self, other: DimensionVector) -> bool:
        return self.exponents == other.exponents

    def __mul__(self, other: DimensionVector) -> DimensionVector:
        if not isinstance(other, DimensionVector):
            return NotImplemented
        return self.combine(other, "multiply")

    def __truediv__(self, other: DimensionVector) -> DimensionVector:
        if not isinstance(other, DimensionVector):
            return NotImplemented
        return self.combine(other, "divide")

    def __pow__(self, n: Exponent) -> DimensionVector:
        return self.power(n)

    def to_string(self) -> str:
        parts = []
        for base, e in zip(BaseDimension, self.exponents):
            if e == 1:
                parts.append(base.value)
            elif e != 0:
                parts.append(f"[{base.value}]^{e}")
        return " * ".join(parts)

    def __str__(self) -> str:
        return self.to_string()


def combine(a: DimensionVector, b: DimensionVector, op: str) -> DimensionVector:
    return a.combine(b, op)


def power(a: DimensionVector, n: Exponent) -> DimensionVector:
    return a.power(n)


def equals(a: DimensionVector, b: DimensionVector) -> bool:
    return a.equals(b)


MASS = DimensionVector.from_base(BaseDimension.MASS)
LENGTH = DimensionVector.from_base(BaseDimension.LENGTH)
TIME = DimensionVector.from_base(BaseDimension.TIME)
CURRENT = DimensionVector.from_base(BaseDimension.CURRENT)
TEMPERATURE = DimensionVector.from_base(BaseDimension.TEMPERATURE)
AMOUNT_OF_SUBSTANCE = DimensionVector.from_base(BaseDimension.AMOUNT_OF_SUBSTANCE)
LUMINOUS_INTENSITY = DimensionVector.from_base(BaseDimension.LUMINOUS_INTENSITY)
ANGLE = DimensionVector.from_base(BaseDimension.ANGLE)
BIT = DimensionVector.from_base(BaseDimension.BIT)
COUNT = DimensionVector.from_base(BaseDimension.COUNT)
