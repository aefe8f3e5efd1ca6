"""Tests for the conversion engine."""

import math

import pytest
from unitconv.core.catalog.errors import UnknownQuantityError, UnresolvedUnitError
from unitconv.core.catalog.registry import list_quantities, units_of
from unitconv.core.engine.convert import convert, convert_all, convert_units


class TestFixedPoints:
    @pytest.mark.parametrize("quantity,src,dst,value,expected", [
        ("temperature", "C", "F", 0, 32),
        ("temperature", "C", "K", 0, 273.15),
        ("length", "km", "m", 1, 1000),
        ("mass", "kg", "g", 1, 1000),
        ("volume", "m3", "L", 1, 1000),
        ("pressure", "atm", "Pa", 1, 101325),
    ])
    def test_exact(self, quantity, src, dst, value, expected):
        assert convert(quantity, src, dst, value) == expected

    @pytest.mark.parametrize("quantity,src,dst,value,expected", [
        ("temperature", "F", "C", 212, 100),
        ("temperature", "C", "F", -40, -40),
        ("temperature", "K", "R", 100, 180),
        ("temperature", "R", "F", 491.67, 32),
        ("length", "mi", "km", 1, 1.609344),
        ("length", "ft", "in", 1, 12),
        ("mass", "lb", "oz", 1, 16),
        ("time", "week", "day", 1, 7),
        ("area", "mau_bac", "sao_bac", 1, 10),
        ("area", "ha", "m2", 1, 10000),
        ("speed", "km_h", "m_s", 36, 10),
        ("acceleration", "g0", "m_s2", 1, 9.80665),
        ("force", "kN", "dyne", 1, 1e8),
        ("pressure", "bar", "kPa", 1, 100),
        ("energy", "kWh", "kJ", 1, 3600),
        ("power", "GW", "MW", 1, 1000),
        ("density", "g_cm3", "kg_m3", 1, 1000),
    ])
    def test_approximate(self, quantity, src, dst, value, expected):
        assert convert(quantity, src, dst, value) == pytest.approx(expected, rel=1e-9)


class TestIdentity:
    @pytest.mark.parametrize("quantity", list_quantities(), ids=lambda q: q.value)
    def test_same_unit_returns_input_exactly(self, quantity):
        for unit in units_of(quantity):
            for v in (0.0, -17.3, 1e9, 0.1, -459.67):
                assert convert(quantity, unit.key, unit.key, v) == v

    def test_both_unresolved_is_identity(self):
        assert convert("temperature", "x", "y", 12.34) == 12.34


class TestFallback:
    def test_bogus_source_uses_first_unit(self):
        assert convert("length", "__bogus__", "m", 5) == 5

    def test_bogus_target_uses_first_unit(self):
        assert convert("length", "km", "__bogus__", 2) == 2000

    def test_stale_units_after_quantity_change(self):
        # mass keys left over while the caller switched to time
        assert convert("time", "kg", "min", 120) == 2

    def test_strict_rejects_unknown_unit(self):
        with pytest.raises(UnresolvedUnitError):
            convert("length", "__bogus__", "m", 5, strict=True)

    def test_unknown_quantity(self):
        with pytest.raises(UnknownQuantityError):
            convert("luminosity", "cd", "cd", 1)


class TestSymmetry:
    @pytest.mark.parametrize("quantity", list_quantities(), ids=lambda q: q.value)
    def test_linear_pairs_round_trip(self, quantity):
        linear = [u for u in units_of(quantity) if u.is_linear]
        for a in linear:
            for b in linear:
                for x in (1.0, 123.456, -7.5, 1e6):
                    there = convert(quantity, b.key, a.key, x)
                    assert convert(quantity, a.key, b.key, there) == pytest.approx(x, rel=1e-9)


class TestNonFinite:
    def test_nan_propagates(self):
        assert math.isnan(convert("length", "m", "km", float("nan")))

    def test_nan_identity(self):
        assert math.isnan(convert("mass", "kg", "kg", float("nan")))

    def test_infinity_propagates(self):
        assert convert("length", "m", "km", float("inf")) == float("inf")
        assert convert("temperature", "C", "F", float("-inf")) == float("-inf")

    def test_negative_kelvin_is_not_rejected(self):
        assert convert("temperature", "K", "C", -10) == pytest.approx(-283.15)


class TestConvertUnits:
    def test_same_object_short_circuits(self):
        f = units_of("temperature")[2]
        assert convert_units(f, f, 98.6) == 98.6

    def test_via_base(self):
        km, mi = units_of("length")[1], units_of("length")[10]
        assert convert_units(mi, km, 10) == pytest.approx(16.09344)


class TestConvertAll:
    def test_one_row_per_unit_in_order(self):
        rows = convert_all("length", "km", 1)
        assert [u.key for u, _ in rows] == [u.key for u in units_of("length")]

    def test_values(self):
        rows = dict((u.key, v) for u, v in convert_all("length", "km", 1))
        assert rows["m"] == 1000
        assert rows["km"] == 1
        assert rows["cm"] == pytest.approx(100000)

    def test_temperature(self):
        rows = dict((u.key, v) for u, v in convert_all("temperature", "C", 100))
        assert rows["K"] == pytest.approx(373.15)
        assert rows["F"] == pytest.approx(212)
        assert rows["R"] == pytest.approx(671.67)

    def test_unresolved_source_falls_back(self):
        rows = dict((u.key, v) for u, v in convert_all("mass", "nope", 1))
        assert rows["g"] == 1000

    def test_strict(self):
        with pytest.raises(UnresolvedUnitError):
            convert_all("mass", "nope", 1, strict=True)
