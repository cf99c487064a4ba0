"""Append-only registry of named units."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Iterator

from unitsafe.errors import DuplicateUnitError, ParseError, UnitNotFoundError
from unitsafe.parser import parse_units
from unitsafe.units import Unit

if TYPE_CHECKING:
    from unitsafe.utils.config import UnitsafeConfig

logger = logging.getLogger(__name__)


class Registry:
    """Name to unit mapping with unique names and no removal.

    Prefixed names such as ``kilometer`` are ordinary entries created at load
    time; ``get`` never infers prefixes. Bulk loads are all-or-nothing: every
    name is validated before anything is inserted.

    A registry that is fully built before being shared is safe for
    unsynchronized concurrent reads.
    """

    def __init__(self) -> None:
        self._units: dict[str, Unit] = {}

    @classmethod
    def new(cls) -> Registry:
        return cls()

    @classmethod
    def new_from_source(
        cls, text: str, source: str = "<string>", strict_order: bool = True
    ) -> Registry:
        registry = cls()
        registry.load_source(text, source=source, strict_order=strict_order)
        return registry

    @classmethod
    def new_from_file(cls, path: str | Path, strict_order: bool = True) -> Registry:
        registry = cls()
        registry.load_file(path, strict_order=strict_order)
        return registry

    @classmethod
    def new_from_config(cls, config: UnitsafeConfig) -> Registry:
        if config.definitions_path is None:
            raise ValueError("Config has no definitions_path")
        return cls.new_from_file(config.definitions_path, strict_order=config.strict_field_order)

    def load_source(self, text: str, source: str = "<string>", strict_order: bool = True) -> None:
        units = parse_units(text, source=source, strict_order=strict_order)
        self.register_many(units)
        logger.info(f"Loaded {len(units)} units from {source}")

    def load_file(self, path: str | Path, strict_order: bool = True) -> None:
        path = Path(path)
        with open(path, encoding="utf-8") as f:
            try:
                text = f.read()
            except UnicodeDecodeError as e:
                raise ParseError(f"File is not valid UTF-8: {e.reason}", source=str(path)) from e
        self.load_source(text, source=str(path), strict_order=strict_order)

    def register(self, unit: Unit) -> None:
        if unit.name in self._units:
            raise DuplicateUnitError(unit.name)
        self._units[unit.name] = unit
        logger.debug(f"Registered unit {unit}")

    def register_many(self, units: Iterable[Unit]) -> None:
        """Register a batch of units, or none of them."""
        batch: dict[str, Unit] = {}
        for unit in units:
            if unit.name in self._units or unit.name in batch:
                raise DuplicateUnitError(unit.name)
            batch[unit.name] = unit
        self._units.update(batch)

    def get(self, name: str) -> Unit:
        try:
            return self._units[name]
        except KeyError:
            raise UnitNotFoundError(name) from None

    def find(self, name: str) -> Unit | None:
        return self._units.get(name)

    def contains(self, name: str) -> bool:
        return name in self._units

    def unit_names(self) -> list[str]:
        return list(self._units)

    def __getitem__(self, name: str) -> Unit:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._units

    def __iter__(self) -> Iterator[str]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        return f"Registry({len(self._units)} units)"
