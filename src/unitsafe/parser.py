"""Parser for the unit-definition language.

A definition source is a sequence of blocks::

    unit newton {
        dimension: mass * length / time^2
        transformation: identity
        prefixes: standard
    }

``transformation`` is one of ``identity``, ``linear(scale: <n>, offset: <n>)``
(offset optional) or ``decibel(p0: <n>)``. ``prefixes`` is ``standard``, ``no``
or an explicit list such as ``[kilo, milli]``. ``#`` starts a comment.

Fields appear in the order dimension, transformation, prefixes. Only
``dimension`` is required; ``transformation`` defaults to ``identity`` and
``prefixes`` to ``no``. Passing ``strict_order=False`` accepts the fields in
any order.

Parsing never recovers: the first error raises ``ParseError`` with the line
and column of the offending token.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from fractions import Fraction
from typing import NamedTuple

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
    DimensionVector,
    Exponent,
)
from unitsafe.errors import ConstructionError, DuplicateUnitError, ParseError
from unitsafe.prefixes import STANDARD_PREFIXES, Prefix, expand_prefixes, get_prefix
from unitsafe.transformations import (
    IDENTITY,
    DecibelTransformation,
    LinearTransformation,
    Transformation,
)
from unitsafe.units import Unit

logger = logging.getLogger(__name__)

DIMENSION_TOKENS: dict[str, DimensionVector] = {
    "mass": MASS,
    "length": LENGTH,
    "time": TIME,
    "current": CURRENT,
    "temperature": TEMPERATURE,
    "amount": AMOUNT_OF_SUBSTANCE,
    "luminous_intensity": LUMINOUS_INTENSITY,
    "angle": ANGLE,
    "bit": BIT,
    "count": COUNT,
}

FIELD_ORDER = ("dimension", "transformation", "prefixes")

_TOKEN_SPEC = [
    ("NUMBER", r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"),
    ("IDENT", r"[A-Za-z_][A-Za-z0-9_]*"),
    ("LBRACE", r"\{"),
    ("RBRACE", r"\}"),
    ("LPAREN", r"\("),
    ("RPAREN", r"\)"),
    ("LBRACKET", r"\["),
    ("RBRACKET", r"\]"),
    ("COLON", r":"),
    ("COMMA", r","),
    ("STAR", r"\*"),
    ("SLASH", r"/"),
    ("CARET", r"\^"),
    ("NEWLINE", r"\n"),
    ("SKIP", r"[ \t\r]+|\#[^\n]*"),
    ("MISMATCH", r"."),
]
_TOKEN_RE = re.compile("|".join(f"(?P<{name}>{pattern})" for name, pattern in _TOKEN_SPEC))
_INTEGER_RE = re.compile(r"[+-]?\d+")


class Token(NamedTuple):
    kind: str
    text: str
    line: int
    column: int


@dataclass(frozen=True)
class UnitDefinition:
    """One parsed ``unit`` block, before prefix expansion."""

    name: str
    dimension: DimensionVector
    transformation: Transformation
    prefixes: tuple[Prefix, ...]
    line: int
    column: int


def tokenize(text: str, source: str = "<string>") -> list[Token]:
    tokens = []
    line = 1
    line_start = 0
    for match in _TOKEN_RE.finditer(text):
        kind = match.lastgroup
        column = match.start() - line_start + 1
        if kind == "NEWLINE":
            line += 1
            line_start = match.end()
        elif kind == "SKIP":
            continue
        elif kind == "MISMATCH":
            raise ParseError(f"Unexpected character {match.group()!r}", line, column, source)
        else:
            tokens.append(Token(kind, match.group(), line, column))
    tokens.append(Token("EOF", "", line, len(text) - line_start + 1))
    return tokens


class _Parser:
    def __init__(self, text: str, source: str, strict_order: bool) -> None:
        self.source = source
        self.strict_order = strict_order
        self.tokens = tokenize(text, source)
        self.pos = 0

    # -- token helpers -------------------------------------------------------

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def error(self, message: str, token: Token | None = None) -> ParseError:
        token = token or self.current
        return ParseError(message, token.line, token.column, self.source)

    def advance(self) -> Token:
        token = self.current
        if token.kind != "EOF":
            self.pos += 1
        return token

    def expect(self, kind: str, text: str | None = None) -> Token:
        token = self.current
        if token.kind != kind or (text is not None and token.text != text):
            wanted = repr(text) if text is not None else kind
            found = repr(token.text) if token.text else "end of input"
            raise self.error(f"Expected {wanted}, found {found}")
        return self.advance()

    def accept(self, kind: str) -> Token | None:
        if self.current.kind == kind:
            return self.advance()
        return None

    # -- grammar -------------------------------------------------------------

    def parse_file(self) -> list[UnitDefinition]:
        definitions = []
        while self.current.kind != "EOF":
            definitions.append(self.parse_block())
        return definitions

    def parse_block(self) -> UnitDefinition:
        start = self.expect("IDENT", "unit")
        name = self.expect("IDENT").text
        self.expect("LBRACE")

        values: dict[str, object] = {}
        locations: dict[str, Token] = {}
        while self.current.kind != "RBRACE":
            key = self.expect("IDENT")
            if key.text not in FIELD_ORDER:
                raise self.error(f"Unknown field {key.text!r} in unit {name!r}", key)
            if key.text in values:
                raise self.error(f"Duplicate field {key.text!r} in unit {name!r}", key)
            if self.strict_order and values:
                last = FIELD_ORDER.index(list(values)[-1])
                if FIELD_ORDER.index(key.text) < last:
                    raise self.error(
                        f"Field {key.text!r} must come before {list(values)[-1]!r} "
                        f"in unit {name!r}",
                        key,
                    )
            self.expect("COLON")
            locations[key.text] = key
            if key.text == "dimension":
                values[key.text] = self.parse_dimension_expression()
            elif key.text == "transformation":
                values[key.text] = self.parse_transformation()
            else:
                values[key.text] = self.parse_prefixes()
        self.expect("RBRACE")

        if "dimension" not in values:
            raise self.error(f"Unit {name!r} has no dimension", start)
        transformation = values.get("transformation", IDENTITY)
        prefixes = values.get("prefixes", ())
        if prefixes and isinstance(transformation, DecibelTransformation):
            raise self.error(
                f"Decibel unit {name!r} cannot take prefixes", locations["prefixes"]
            )
        if prefixes and isinstance(transformation, LinearTransformation) and transformation.is_biased:
            raise self.error(
                f"Biased linear unit {name!r} cannot take prefixes", locations["prefixes"]
            )

        logger.debug(f"Parsed unit block {name!r} at {self.source}:{start.line}")
        return UnitDefinition(
            name=name,
            dimension=values["dimension"],
            transformation=transformation,
            prefixes=prefixes,
            line=start.line,
            column=start.column,
        )

    def parse_dimension_expression(self) -> DimensionVector:
        result = self.parse_dimension_power()
        while self.current.kind in ("STAR", "SLASH"):
            op = self.advance()
            rhs = self.parse_dimension_power()
            result = result * rhs if op.kind == "STAR" else result / rhs
        return result

    def parse_dimension_power(self) -> DimensionVector:
        base = self.parse_dimension_factor()
        if self.accept("CARET"):
            return base ** self.parse_exponent()
        return base

    def parse_dimension_factor(self) -> DimensionVector:
        token = self.current
        if token.kind == "LPAREN":
            self.advance()
            inner = self.parse_dimension_expression()
            self.expect("RPAREN")
            return inner
        if token.kind == "NUMBER" and token.text == "1":
            self.advance()
            return COUNT
        if token.kind == "IDENT":
            if token.text not in DIMENSION_TOKENS:
                raise self.error(f"Unknown dimension {token.text!r}")
            self.advance()
            return DIMENSION_TOKENS[token.text]
        raise self.error(f"Expected a dimension, found {token.text or 'end of input'!r}")

    def parse_exponent(self) -> Exponent:
        if self.accept("LPAREN"):
            numerator = self.parse_integer()
            denominator = 1
            if self.accept("SLASH"):
                token = self.current
                denominator = self.parse_integer()
                if denominator == 0:
                    raise self.error("Exponent denominator must be non-zero", token)
            self.expect("RPAREN")
            value = Fraction(numerator, denominator)
            return value.numerator if value.denominator == 1 else value
        return self.parse_integer()

    def parse_integer(self) -> int:
        token = self.current
        if token.kind != "NUMBER" or not _INTEGER_RE.fullmatch(token.text):
            raise self.error(f"Expected an integer exponent, found {token.text or 'end of input'!r}")
        self.advance()
        return int(token.text)

    def parse_number(self) -> float:
        token = self.expect("NUMBER")
        return float(token.text)

    def parse_arguments(self, kind: Token, allowed: tuple[str, ...]) -> dict[str, float]:
        self.expect("LPAREN")
        args: dict[str, float] = {}
        while True:
            key = self.expect("IDENT")
            if key.text not in allowed:
                raise self.error(f"Unknown argument {key.text!r} for {kind.text}", key)
            if key.text in args:
                raise self.error(f"Duplicate argument {key.text!r} for {kind.text}", key)
            self.expect("COLON")
            args[key.text] = self.parse_number()
            if not self.accept("COMMA"):
                break
        self.expect("RPAREN")
        return args

    def parse_transformation(self) -> Transformation:
        kind = self.expect("IDENT")
        try:
            if kind.text == "identity":
                return IDENTITY
            if kind.text == "linear":
                args = self.parse_arguments(kind, ("scale", "offset"))
                if "scale" not in args:
                    raise self.error("linear transformation needs a scale", kind)
                return LinearTransformation(args["scale"], args.get("offset", 0.0))
            if kind.text == "decibel":
                args = self.parse_arguments(kind, ("p0",))
                if "p0" not in args:
                    raise self.error("decibel transformation needs p0", kind)
                return DecibelTransformation(args["p0"])
        except ConstructionError as e:
            raise self.error(str(e), kind) from e
        raise self.error(f"Unknown transformation {kind.text!r}", kind)

    def parse_prefixes(self) -> tuple[Prefix, ...]:
        if self.accept("LBRACKET"):
            prefixes = []
            while self.current.kind != "RBRACKET":
                token = self.expect("IDENT")
                try:
                    prefixes.append(get_prefix(token.text))
                except KeyError:
                    raise self.error(f"Unknown prefix {token.text!r}", token) from None
                if not self.accept("COMMA"):
                    break
            self.expect("RBRACKET")
            return tuple(prefixes)
        token = self.expect("IDENT")
        if token.text == "standard":
            return STANDARD_PREFIXES
        if token.text == "no":
            return ()
        raise self.error(f"Unknown prefix specification {token.text!r}", token)


def parse_definitions(
    text: str, source: str = "<string>", strict_order: bool = True
) -> list[UnitDefinition]:
    return _Parser(text, source, strict_order).parse_file()


def build_units(definitions: list[UnitDefinition]) -> list[Unit]:
    """Expand definitions into base and prefixed units, in source order.

    Raises ``DuplicateUnitError`` on the first name produced twice.
    """
    units: list[Unit] = []
    seen: set[str] = set()
    for definition in definitions:
        base = Unit(definition.name, definition.dimension, definition.transformation)
        for unit in [base, *expand_prefixes(base, definition.prefixes)]:
            if unit.name in seen:
                raise DuplicateUnitError(unit.name)
            seen.add(unit.name)
            units.append(unit)
    return units


def parse_units(text: str, source: str = "<string>", strict_order: bool = True) -> list[Unit]:
    return build_units(parse_definitions(text, source=source, strict_order=strict_order))
