"""SI prefix table and prefixed-unit expansion."""

from __future__ import annotations

from typing import NamedTuple

from unitsafe.errors import InvalidTransformationCompositionError
from unitsafe.transformations import LinearTransformation, scale_of
from unitsafe.units import Unit


class Prefix(NamedTuple):
    name: str
    symbol: str
    factor: float


SI_PREFIXES: tuple[Prefix, ...] = (
    Prefix("quetta", "Q", 1e30),
    Prefix("ronna", "R", 1e27),
    Prefix("yotta", "Y", 1e24),
    Prefix("zetta", "Z", 1e21),
    Prefix("exa", "E", 1e18),
    Prefix("peta", "P", 1e15),
    Prefix("tera", "T", 1e12),
    Prefix("giga", "G", 1e9),
    Prefix("mega", "M", 1e6),
    Prefix("kilo", "k", 1e3),
    Prefix("hecto", "h", 1e2),
    Prefix("deca", "da", 1e1),
    Prefix("deci", "d", 1e-1),
    Prefix("centi", "c", 1e-2),
    Prefix("milli", "m", 1e-3),
    Prefix("micro", "µ", 1e-6),
    Prefix("nano", "n", 1e-9),
    Prefix("pico", "p", 1e-12),
    Prefix("femto", "f", 1e-15),
    Prefix("atto", "a", 1e-18),
    Prefix("zepto", "z", 1e-21),
    Prefix("yocto", "y", 1e-24),
    Prefix("ronto", "r", 1e-27),
    Prefix("quecto", "q", 1e-30),
)

PREFIXES_BY_NAME: dict[str, Prefix] = {p.name: p for p in SI_PREFIXES}

# What ``prefixes: standard`` expands to: yocto through yotta.
STANDARD_PREFIXES: tuple[Prefix, ...] = tuple(
    p for p in SI_PREFIXES if p.name not in ("quetta", "ronna", "ronto", "quecto")
)


def get_prefix(name: str) -> Prefix:
    try:
        return PREFIXES_BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown SI prefix: {name}") from None


def apply_prefix(unit: Unit, prefix: Prefix) -> Unit:
    """Build ``<prefix><unit>`` with the prefix factor folded into the scale.

    Only identity and pure-scale linear units can be prefixed.
    """
    if unit.is_biased or unit.is_decibel:
        kind = "decibel" if unit.is_decibel else "biased linear"
        raise InvalidTransformationCompositionError(
            f"Prefix '{prefix.name}' cannot be applied to unit '{unit.name}' with {kind} transformation"
        )
    return Unit(
        f"{prefix.name}{unit.name}",
        unit.dimension,
        LinearTransformation(prefix.factor * scale_of(unit.transformation)),
    )


def expand_prefixes(unit: Unit, prefixes: tuple[Prefix, ...] | list[Prefix]) -> list[Unit]:
    return [apply_prefix(unit, p) for p in prefixes]
