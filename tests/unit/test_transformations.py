"""Tests for identity, linear and decibel transformations."""

import math

import pytest

from unitsafe.errors import (
    ConstructionError,
    DomainError,
    InvalidTransformationCompositionError,
)
from unitsafe.transformations import (
    IDENTITY,
    DecibelTransformation,
    IdentityTransformation,
    LinearTransformation,
    convert,
    from_base,
    from_scale,
    is_multiplicative,
    scale_of,
    to_base,
)


class TestIdentity:
    def test_passthrough(self):
        assert to_base(IDENTITY, 42.0) == 42.0
        assert from_base(IDENTITY, 42.0) == 42.0

    def test_value_equality(self):
        assert IdentityTransformation() == IDENTITY


class TestLinear:
    def test_to_base(self):
        t = LinearTransformation(2.0, 5.0)
        assert to_base(t, 9.0) == 23.0
        assert to_base(t, 5.0) == 15.0

    def test_from_base(self):
        t = LinearTransformation(2.0, 5.0)
        assert from_base(t, 3.0) == -1.0
        assert from_base(t, 9.0) == 2.0

    def test_offset_defaults_to_zero(self):
        t = LinearTransformation(1000)
        assert t.offset == 0.0
        assert not t.is_biased
        assert isinstance(t.scale, float)

    def test_zero_scale_fails_at_construction(self):
        with pytest.raises(ConstructionError):
            LinearTransformation(0.0, 1.0)

    def test_non_finite_parameters_rejected(self):
        with pytest.raises(ConstructionError):
            LinearTransformation(math.inf)
        with pytest.raises(ConstructionError):
            LinearTransformation(1.0, math.nan)

    def test_biased(self):
        assert LinearTransformation(1.0, 273.15).is_biased


class TestDecibel:
    def test_to_base(self):
        t = DecibelTransformation(1.0)
        assert to_base(t, 0.0) == 1.0
        assert to_base(t, 10.0) == 10.0
        assert to_base(t, 20.0) == pytest.approx(100.0)

    def test_from_base(self):
        t = DecibelTransformation(1.0)
        assert from_base(t, 1.0) == 0.0
        assert from_base(t, 10.0) == 10.0

    def test_reference_scales_base(self):
        t = DecibelTransformation(1e-3)
        assert to_base(t, 30.0) == pytest.approx(1.0)
        assert from_base(t, 1.0) == pytest.approx(30.0)

    @pytest.mark.parametrize("value", [0.0, -1.0])
    def test_non_positive_ratio_is_domain_error(self, value):
        with pytest.raises(DomainError):
            from_base(DecibelTransformation(1.0), value)

    def test_large_magnitude_saturates_to_infinity(self):
        assert to_base(DecibelTransformation(1.0), 4000.0) == math.inf
        assert convert(DecibelTransformation(1.0), IDENTITY, 1.0e6) == math.inf

    @pytest.mark.parametrize("p0", [0.0, -2.0, math.inf])
    def test_invalid_reference(self, p0):
        with pytest.raises(ConstructionError):
            DecibelTransformation(p0)


class TestComposition:
    def test_convert_goes_through_base(self):
        celsius = LinearTransformation(1.0, 273.15)
        fahrenheit = LinearTransformation(5.0 / 9.0, 273.15 - 32.0 * 5.0 / 9.0)
        assert convert(celsius, fahrenheit, 100.0) == pytest.approx(212.0)
        assert convert(celsius, IDENTITY, 25.0) == pytest.approx(298.15)

    def test_is_multiplicative(self):
        assert is_multiplicative(IDENTITY)
        assert is_multiplicative(LinearTransformation(1000.0))
        assert not is_multiplicative(LinearTransformation(1.0, 273.15))
        assert not is_multiplicative(DecibelTransformation(1.0))

    def test_scale_of(self):
        assert scale_of(IDENTITY) == 1.0
        assert scale_of(LinearTransformation(60.0)) == 60.0
        with pytest.raises(InvalidTransformationCompositionError):
            scale_of(LinearTransformation(1.0, 273.15))
        with pytest.raises(InvalidTransformationCompositionError):
            scale_of(DecibelTransformation(1.0))

    def test_from_scale(self):
        assert from_scale(1.0) is IDENTITY
        assert from_scale(1e3) == LinearTransformation(1e3)

    def test_describe(self):
        assert IDENTITY.describe() == "identity"
        assert LinearTransformation(2.0, 1.0).describe() == "linear(scale: 2.0, offset: 1.0)"
        assert DecibelTransformation(1.0).describe() == "decibel(p0: 1.0)"
