"""
Tests for the Temperature quantity.

Temperature is the affine dimension: construction applies an offset as well
as a scale, and scalar multiplication/division is anchored at the zero of the
unit the temperature is tagged with.
"""

import pytest

from psychrometry.config import TEMPERATURE_TOLERANCE
from psychrometry.engine.quantities.pressure import Pressure
from psychrometry.engine.quantities.temperature import Temperature
from psychrometry.models.units import CELSIUS, FAHRENHEIT, KELVIN, PASCAL


# ---------------------------------------------------------------------------
# Construction and conversion
# ---------------------------------------------------------------------------

class TestConstruction:

    def test_canonical_is_micro_kelvin(self):
        assert Temperature(273.15, KELVIN).canonical == 273_150_000
        assert Temperature(0.0, CELSIUS).canonical == 273_150_000
        assert Temperature(-40, CELSIUS).canonical == 233_150_000

    def test_round_trip(self):
        for unit in (KELVIN, CELSIUS, FAHRENHEIT):
            for value in (-148.0, -40.0, 0.0, 0.01, 23.525, 86.0, 392.0, 1234.5678):
                result = Temperature(value, unit).to_number()
                assert result == pytest.approx(value, abs=1.0 / unit.scale)

    def test_float(self):
        assert float(Temperature(21.5, CELSIUS)) == pytest.approx(21.5, abs=1e-6)

    def test_to_number_in_other_unit(self):
        t = Temperature(100.0, CELSIUS)
        assert t.to_number(KELVIN) == pytest.approx(373.15, abs=1e-6)
        assert t.to_number(FAHRENHEIT) == pytest.approx(212.0, abs=1e-3)

    def test_from_canonical(self):
        t = Temperature.from_canonical(293_150_000, CELSIUS)
        assert t.to_number() == pytest.approx(20.0)
        assert t.unit == CELSIUS

    def test_rejects_unit_of_other_dimension(self):
        with pytest.raises(TypeError):
            Temperature(1.0, PASCAL)

    def test_rejects_non_numbers(self):
        with pytest.raises(TypeError):
            Temperature("20", CELSIUS)


class TestRetag:

    def test_keeps_canonical_magnitude(self):
        t = Temperature(25.0, CELSIUS)
        f = t.to(FAHRENHEIT)
        assert f.canonical == t.canonical
        assert f.unit == FAHRENHEIT
        assert isinstance(f, Temperature)

    def test_number_follows_new_unit(self):
        assert float(Temperature(0.0, CELSIUS).to(FAHRENHEIT)) == pytest.approx(32.0, abs=1e-4)
        assert float(Temperature(0.0, CELSIUS).to(KELVIN)) == pytest.approx(273.15)

    def test_rejects_unit_of_other_dimension(self):
        with pytest.raises(TypeError):
            Temperature(0.0, CELSIUS).to(PASCAL)
        with pytest.raises(TypeError):
            Temperature(0.0, CELSIUS).to_number(PASCAL)


# ---------------------------------------------------------------------------
# Equality and ordering
# ---------------------------------------------------------------------------

class TestCrossUnitEquality:

    def test_celsius_kelvin(self):
        assert Temperature(0.0, CELSIUS) == Temperature(273.15, KELVIN)

    def test_fahrenheit_celsius(self):
        assert Temperature(32.0, FAHRENHEIT) == Temperature(0.0, CELSIUS)
        assert Temperature(212.0, FAHRENHEIT) == Temperature(100.0, CELSIUS)
        assert Temperature(-40.0, FAHRENHEIT) == Temperature(-40.0, CELSIUS)

    def test_different_temperatures(self):
        assert Temperature(20.0, CELSIUS) != Temperature(20.0, FAHRENHEIT)


class TestTolerance:

    def test_within_tolerance_is_equal(self):
        a = Temperature.from_canonical(300_000_000, KELVIN)
        b = Temperature.from_canonical(300_000_000 + TEMPERATURE_TOLERANCE - 1, KELVIN)
        assert a == b

    def test_at_tolerance_is_not_equal(self):
        a = Temperature.from_canonical(300_000_000, KELVIN)
        b = Temperature.from_canonical(300_000_000 + TEMPERATURE_TOLERANCE, KELVIN)
        assert a != b

    def test_ordering_is_exact(self):
        """Fuzzy equality and exact ordering can hold at the same time."""
        a = Temperature.from_canonical(300_000_000, KELVIN)
        b = Temperature.from_canonical(300_000_100, KELVIN)
        assert a == b
        assert a < b
        assert b > a
        assert not a >= b

    def test_equality_is_not_transitive(self):
        """Known limitation of tolerance-based equality."""
        a = Temperature.from_canonical(300_000_000, KELVIN)
        b = Temperature.from_canonical(300_000_150, KELVIN)
        c = Temperature.from_canonical(300_000_300, KELVIN)
        assert a == b
        assert b == c
        assert a != c

    def test_ordering_across_units(self):
        assert Temperature(0.0, CELSIUS) < Temperature(33.0, FAHRENHEIT)
        assert Temperature(300.0, KELVIN) >= Temperature(26.85, CELSIUS)
        assert Temperature(-10.0, CELSIUS) <= Temperature(-10.0, CELSIUS)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Temperature(0.0, CELSIUS))


class TestCrossDimension:

    def test_never_equal_to_pressure(self):
        t = Temperature.from_canonical(1_000, KELVIN)
        p = Pressure.from_canonical(1_000, PASCAL)
        assert (t == p) is False
        assert t != p

    def test_ordering_against_pressure_raises(self):
        with pytest.raises(TypeError):
            Temperature(1.0, KELVIN) < Pressure(1.0, PASCAL)

    def test_division_by_pressure_raises(self):
        with pytest.raises(TypeError):
            Temperature(1.0, KELVIN) / Pressure(1.0, PASCAL)


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

class TestScalarAddition:

    def test_adds_units_not_offset(self):
        assert Temperature(20.0, CELSIUS) + 5 == Temperature(25.0, CELSIUS)
        assert Temperature(20.0, CELSIUS).to(FAHRENHEIT) + 9 == Temperature(25.0, CELSIUS)

    def test_commutative(self):
        t = Temperature(68.0, FAHRENHEIT)
        assert (2.5 + t).canonical == (t + 2.5).canonical

    def test_subtraction(self):
        assert Temperature(25.0, CELSIUS) - 5 == Temperature(20.0, CELSIUS)
        assert Temperature(300.0, KELVIN) - 0.5 == Temperature(299.5, KELVIN)

    def test_number_minus_temperature(self):
        result = 30 - Temperature(10.0, CELSIUS)
        assert result == Temperature(20.0, CELSIUS)
        assert result.unit == CELSIUS

    def test_result_keeps_unit(self):
        assert (Temperature(68.0, FAHRENHEIT) + 1).unit == FAHRENHEIT


class TestAffineScaling:

    def test_doubling_is_anchored_at_unit_zero(self):
        doubled = Temperature(10.0, CELSIUS) * 2.0
        assert doubled == Temperature(20.0, CELSIUS)
        # Not a naive doubling of 283.15 K
        assert doubled.to_number(KELVIN) == pytest.approx(293.15)

    def test_commutative(self):
        t = Temperature(10.0, CELSIUS)
        assert (2.0 * t).canonical == (t * 2.0).canonical

    def test_anchor_follows_tag(self):
        kelvin_tagged = Temperature(10.0, CELSIUS).to(KELVIN)
        assert kelvin_tagged * 2 == Temperature(566.3, KELVIN)

    def test_fahrenheit(self):
        assert Temperature(50.0, FAHRENHEIT) * 2 == Temperature(100.0, FAHRENHEIT)

    def test_division(self):
        assert Temperature(20.0, CELSIUS) / 2 == Temperature(10.0, CELSIUS)
        assert Temperature(-30.0, CELSIUS) / 3.0 == Temperature(-10.0, CELSIUS)

    def test_number_divided_by_temperature(self):
        assert 100 / Temperature(20.0, CELSIUS) == pytest.approx(5.0)
        assert 1.0 / Temperature(250.0, KELVIN) == pytest.approx(0.004)

    def test_ratio_of_temperatures(self):
        assert Temperature(300.0, KELVIN) / Temperature(150.0, KELVIN) == pytest.approx(2.0)
        assert Temperature(26.85, CELSIUS) / Temperature(150.0, KELVIN) == pytest.approx(2.0)


class TestUndefinedOperations:

    def test_temperature_plus_temperature(self):
        with pytest.raises(TypeError):
            Temperature(1.0, CELSIUS) + Temperature(1.0, CELSIUS)

    def test_temperature_minus_temperature(self):
        with pytest.raises(TypeError):
            Temperature(1.0, CELSIUS) - Temperature(1.0, KELVIN)

    def test_temperature_times_temperature(self):
        with pytest.raises(TypeError):
            Temperature(1.0, CELSIUS) * Temperature(1.0, CELSIUS)

    def test_negation(self):
        with pytest.raises(TypeError):
            -Temperature(1.0, CELSIUS)


class TestImmutability:

    def test_no_new_attributes(self):
        t = Temperature(1.0, CELSIUS)
        with pytest.raises(AttributeError):
            t.extra = 1

    def test_canonical_is_read_only(self):
        t = Temperature(1.0, CELSIUS)
        with pytest.raises(AttributeError):
            t.canonical = 0

    def test_arithmetic_returns_new_instance(self):
        t = Temperature(1.0, CELSIUS)
        t2 = t + 1
        assert t2 is not t
        assert t == Temperature(1.0, CELSIUS)

    def test_repr(self):
        text = repr(Temperature(21.0, CELSIUS))
        assert "Temperature" in text
        assert "°C" in text
