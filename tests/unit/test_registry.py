"""Tests for the unit registry."""

import logging

import pytest

from unitsafe.dimensions import LENGTH, TEMPERATURE
from unitsafe.errors import DuplicateUnitError, ParseError, UnitNotFoundError
from unitsafe.registry import Registry
from unitsafe.units import Unit
from unitsafe.utils.config import UnitsafeConfig


class TestRegister:
    def test_new_is_empty(self):
        registry = Registry.new()
        assert len(registry) == 0
        assert registry.unit_names() == []

    def test_register_and_get(self):
        registry = Registry()
        km = Unit.new_linear("kilometer", LENGTH, 1000.0)
        registry.register(Unit.new_base("meter", LENGTH))
        registry.register(km)
        assert registry.get("kilometer") is km
        assert registry["kilometer"] is km
        assert registry.get("kilometer").to_base(5.0) == 5000.0

    def test_duplicate_register_leaves_state_unchanged(self):
        registry = Registry()
        meter = Unit.new_base("meter", LENGTH)
        registry.register(meter)
        other = Unit.new_linear("meter", LENGTH, 2.0)
        with pytest.raises(DuplicateUnitError) as exc:
            registry.register(other)
        assert exc.value.name == "meter"
        assert len(registry) == 1
        assert registry.get("meter") is meter

    def test_get_missing(self):
        with pytest.raises(UnitNotFoundError) as exc:
            Registry().get("furlong")
        assert "furlong" in str(exc.value)
        assert isinstance(exc.value, KeyError)

    def test_find_and_contains(self):
        registry = Registry()
        registry.register(Unit.new_base("meter", LENGTH))
        assert registry.find("meter") is not None
        assert registry.find("kilometer") is None
        assert registry.contains("meter")
        assert "meter" in registry
        assert "kilometer" not in registry
        assert list(registry) == ["meter"]

    def test_no_prefix_inference(self):
        registry = Registry()
        registry.register(Unit.new_base("meter", LENGTH))
        with pytest.raises(UnitNotFoundError):
            registry.get("kilometer")


class TestRegisterMany:
    def test_all_or_nothing_against_existing(self):
        registry = Registry()
        registry.register(Unit.new_base("kelvin", TEMPERATURE))
        batch = [Unit.new_base("meter", LENGTH), Unit.new_base("kelvin", TEMPERATURE)]
        with pytest.raises(DuplicateUnitError):
            registry.register_many(batch)
        assert registry.unit_names() == ["kelvin"]

    def test_all_or_nothing_within_batch(self):
        registry = Registry()
        batch = [Unit.new_base("meter", LENGTH), Unit.new_base("meter", LENGTH)]
        with pytest.raises(DuplicateUnitError):
            registry.register_many(batch)
        assert len(registry) == 0


class TestBulkLoad:
    def test_new_from_source(self, registry):
        assert len(registry) == 56
        for name in ("meter", "kilometer", "degree_celsius", "decibel", "newton", "kilogram"):
            assert name in registry

    def test_new_from_file(self, definitions_file):
        registry = Registry.new_from_file(definitions_file)
        assert len(registry) == 56
        assert registry.get("kilogram").to_base(1.0) == pytest.approx(1.0)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            Registry.new_from_file(tmp_path / "missing.txt")

    def test_invalid_utf8_file(self, tmp_path):
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfeunit meter { dimension: length }\n")
        with pytest.raises(ParseError) as exc:
            Registry.new_from_file(path)
        assert "not valid UTF-8" in str(exc.value)
        assert exc.value.source == str(path)

    def test_unknown_dimension_fails_whole_load(self):
        text = (
            "unit meter { dimension: length prefixes: standard }\n"
            "unit pound { dimension: weight }\n"
        )
        with pytest.raises(ParseError):
            Registry.new_from_source(text)

    def test_failed_load_into_existing_registry_is_atomic(self):
        registry = Registry()
        registry.register(Unit.new_base("second", LENGTH))
        text = (
            "unit meter { dimension: length prefixes: standard }\n"
            "unit pound { dimension: weight }\n"
        )
        with pytest.raises(ParseError):
            registry.load_source(text)
        assert registry.unit_names() == ["second"]

    def test_duplicate_with_existing_is_atomic(self):
        registry = Registry()
        registry.register(Unit.new_base("kilometer", LENGTH))
        with pytest.raises(DuplicateUnitError):
            registry.load_source("unit meter { dimension: length prefixes: standard }")
        assert registry.unit_names() == ["kilometer"]

    def test_load_logs_summary(self, caplog):
        with caplog.at_level(logging.INFO, logger="unitsafe.registry"):
            Registry.new_from_source("unit meter { dimension: length }", source="inline")
        assert "Loaded 1 units from inline" in caplog.text

    def test_lenient_order(self):
        text = "unit meter { prefixes: [kilo] dimension: length }"
        with pytest.raises(ParseError):
            Registry.new_from_source(text)
        assert len(Registry.new_from_source(text, strict_order=False)) == 2

    def test_new_from_config(self, definitions_file):
        config = UnitsafeConfig(definitions_path=str(definitions_file))
        assert len(Registry.new_from_config(config)) == 56

    def test_new_from_config_without_path(self):
        with pytest.raises(ValueError):
            Registry.new_from_config(UnitsafeConfig())
