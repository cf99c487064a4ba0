"""CLI entry point for unitsafe.

Usage:
    unitsafe check [FILE]                   Parse a unit-definition file and report its units
    unitsafe convert VALUE FROM TO [FILE]   Convert VALUE from unit FROM to unit TO
    unitsafe show NAME [FILE]               Show a unit's dimension and transformation
    unitsafe version                        Show version

FILE defaults to definitions_path from the config ($UNITSAFE_CONFIG or
configs/default.yaml).
"""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from unitsafe.errors import UnitsafeError

if TYPE_CHECKING:
    from unitsafe.registry import Registry
    from unitsafe.utils.config import UnitsafeConfig


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(0)

    command = sys.argv[1].lower()
    args = sys.argv[2:]

    if command in ("version", "--version", "-v"):
        from unitsafe import __version__
        print(f"unitsafe {__version__}")
        return
    if command in ("help", "--help", "-h"):
        print(__doc__)
        return

    handlers = {"check": _run_check, "convert": _run_convert, "show": _run_show}
    if command not in handlers:
        print(f"Unknown command: {command}")
        print(__doc__)
        sys.exit(1)

    from unitsafe.utils.config import load_config
    config = load_config()
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        handlers[command](args, config)
    except (UnitsafeError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


def _load_registry(path: str | None, config: UnitsafeConfig) -> Registry:
    from unitsafe.registry import Registry

    path = path or config.definitions_path
    if path is None:
        print("error: no definitions file given and none configured", file=sys.stderr)
        sys.exit(1)
    return Registry.new_from_file(path, strict_order=config.strict_field_order)


def _usage_error(message: str) -> None:
    print(f"error: {message}", file=sys.stderr)
    print(__doc__)
    sys.exit(1)


def _run_check(args: list[str], config: UnitsafeConfig) -> None:
    """Load a definition file and summarize it."""
    if len(args) > 1:
        _usage_error("check takes at most one FILE")
    registry = _load_registry(args[0] if args else None, config)
    print(f"OK: {len(registry)} units")


def _run_convert(args: list[str], config: UnitsafeConfig) -> None:
    """Convert a magnitude between two units."""
    from unitsafe.quantity import Quantity

    if len(args) not in (3, 4):
        _usage_error("convert needs VALUE FROM TO [FILE]")
    try:
        value = float(args[0])
    except ValueError:
        _usage_error(f"not a number: {args[0]}")
    registry = _load_registry(args[3] if len(args) == 4 else None, config)
    quantity = Quantity.from_registry(registry, value, args[1])
    result = quantity.magnitude_as(registry.get(args[2]))
    print(f"{value:.{config.display_precision}g} {args[1]} = "
          f"{result:.{config.display_precision}g} {args[2]}")


def _run_show(args: list[str], config: UnitsafeConfig) -> None:
    """Print one unit's definition."""
    if len(args) not in (1, 2):
        _usage_error("show needs NAME [FILE]")
    registry = _load_registry(args[1] if len(args) == 2 else None, config)
    unit = registry.get(args[0])
    print(unit)
    print(f"  transformation: {unit.transformation.describe()}")


if __name__ == "__main__":
    main()
