"""Error taxonomy for unit and quantity operations."""

from __future__ import annotations

from typing import Any


class UnitsafeError(Exception):
    """Base class for every error raised by unitsafe."""


class ParseError(UnitsafeError, ValueError):
    """Malformed unit-definition source.

    Carries the position of the offending token so callers can point the user
    at the broken block.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        source: str = "<string>",
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.source = source
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line is None:
            return f"{self.source}: {self.message}"
        return f"{self.source}:{self.line}:{self.column}: {self.message}"


class DuplicateUnitError(UnitsafeError, KeyError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unit {self.name} already exists"


class UnitNotFoundError(UnitsafeError, KeyError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Registry does not contain unit {self.name}"


class DimensionMismatchError(UnitsafeError, TypeError):
    """Two dimensions that had to agree did not."""

    def __init__(self, expected: Any, got: Any, operation: str = "") -> None:
        self.expected = expected
        self.got = got
        self.operation = operation
        prefix = f"{operation}: " if operation else ""
        super().__init__(f"{prefix}incompatible dimensions: expected {expected}, got {got}")


class InvalidTransformationCompositionError(UnitsafeError, TypeError):
    """Multiplicative composition involving a biased or decibel unit.

    This signals a programming error in the caller. Unit and Quantity
    operations both raise it, never return it.
    """


class ConstructionError(UnitsafeError, ValueError):
    """Invalid transformation parameters."""


class DomainError(UnitsafeError, ArithmeticError):
    """A conversion was asked for outside its mathematical domain."""
