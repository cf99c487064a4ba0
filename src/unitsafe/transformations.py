"""Magnitude transformations to and from a unit's canonical base.

Three closed kinds: identity, linear (scale + offset) and decibel. Every
conversion between two units of the same dimension goes through the base:
``from_base(target, to_base(source, m))``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from unitsafe.errors import (
    ConstructionError,
    DomainError,
    InvalidTransformationCompositionError,
)


@dataclass(frozen=True)
class IdentityTransformation:
    def describe(self) -> str:
        return "identity"


@dataclass(frozen=True)
class LinearTransformation:
    """``base = magnitude * scale + offset``."""

    scale: float
    offset: float = 0.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.scale) or not math.isfinite(self.offset):
            raise ConstructionError(
                f"Linear transformation needs finite parameters, got scale={self.scale}, "
                f"offset={self.offset}"
            )
        if self.scale == 0:
            raise ConstructionError("Linear transformation scale must be non-zero")
        object.__setattr__(self, "scale", float(self.scale))
        object.__setattr__(self, "offset", float(self.offset))

    @property
    def is_biased(self) -> bool:
        return self.offset != 0.0

    def describe(self) -> str:
        return f"linear(scale: {self.scale!r}, offset: {self.offset!r})"


@dataclass(frozen=True)
class DecibelTransformation:
    """``base = p0 * 10 ** (magnitude / 10)``."""

    p0: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.p0) or self.p0 <= 0:
            raise ConstructionError(
                f"Decibel reference p0 must be positive and finite, got {self.p0}"
            )
        object.__setattr__(self, "p0", float(self.p0))

    def describe(self) -> str:
        return f"decibel(p0: {self.p0!r})"


Transformation = Union[IdentityTransformation, LinearTransformation, DecibelTransformation]

IDENTITY = IdentityTransformation()


def to_base(t: Transformation, magnitude: float) -> float:
    if isinstance(t, IdentityTransformation):
        return magnitude
    if isinstance(t, LinearTransformation):
        return magnitude * t.scale + t.offset
    if isinstance(t, DecibelTransformation):
        try:
            return t.p0 * math.pow(10.0, magnitude / 10.0)
        except OverflowError:
            return math.inf
    raise TypeError(f"Unknown transformation: {t!r}")


def from_base(t: Transformation, base_value: float) -> float:
    if isinstance(t, IdentityTransformation):
        return base_value
    if isinstance(t, LinearTransformation):
        return (base_value - t.offset) / t.scale
    if isinstance(t, DecibelTransformation):
        ratio = base_value / t.p0
        if ratio <= 0:
            raise DomainError(
                f"Decibel conversion needs a positive ratio to p0={t.p0}, got {base_value}"
            )
        return 10.0 * math.log10(ratio)
    raise TypeError(f"Unknown transformation: {t!r}")


def convert(source: Transformation, target: Transformation, magnitude: float) -> float:
    return from_base(target, to_base(source, magnitude))


def is_multiplicative(t: Transformation) -> bool:
    """True for identity and pure-scale linear transformations."""
    if isinstance(t, IdentityTransformation):
        return True
    return isinstance(t, LinearTransformation) and not t.is_biased


def scale_of(t: Transformation) -> float:
    """Scale factor of a multiplicative transformation."""
    if isinstance(t, IdentityTransformation):
        return 1.0
    if isinstance(t, LinearTransformation) and not t.is_biased:
        return t.scale
    raise InvalidTransformationCompositionError(
        f"{t.describe()} has no multiplicative scale"
    )


def from_scale(scale: float) -> Transformation:
    """Identity for a unit scale, pure-scale linear otherwise."""
    if scale == 1.0:
        return IDENTITY
    return LinearTransformation(scale)
