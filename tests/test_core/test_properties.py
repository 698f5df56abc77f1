"""Tests for property values, codes and derived property formulas."""

from enum import StrEnum

import pytest

from current_properties.properties import (
    Agility,
    Beauty,
    BodyWeightInKg,
    Charisma,
    Dangerousness,
    Dignity,
    Height,
    HeightInCm,
    Intelligence,
    Knack,
    PropertyCode,
    RaceCode,
    RemarkableSenseCode,
    Senses,
    Speed,
    Strength,
    SubRaceCode,
    Will,
    calculate_beauty,
    calculate_dangerousness,
    calculate_dignity,
    calculate_senses,
    calculate_speed,
    normalize_code,
    round_half_up,
)


class TestPropertyValues:
    """Tests for typed property values."""

    def test_add_returns_new_value_of_same_type(self):
        """Adding keeps the property type and leaves the original intact."""
        strength = Strength(10)
        lowered = strength.add(-3)

        assert lowered == Strength(7)
        assert isinstance(lowered, Strength)
        assert strength == Strength(10)

    def test_sub(self):
        """Subtracting lowers the value."""
        assert Strength(7).sub(2) == Strength(5)

    def test_measurements_add_and_sub(self):
        """Measurements change by any number and keep their type."""
        height = HeightInCm(180.0)

        assert height.add(1) == HeightInCm(181.0)
        assert height.sub(2.5) == HeightInCm(177.5)
        assert isinstance(height.add(1), HeightInCm)
        assert BodyWeightInKg(70.0).sub(5) == BodyWeightInKg(65.0)
        assert height == HeightInCm(180.0)

    def test_add_accepts_other_values(self):
        """Anything convertible to int can be added."""
        assert Agility(3).add(Strength(2)) == Agility(5)

    def test_different_properties_never_equal(self):
        """Same number of different properties are different values."""
        assert Strength(5) != Agility(5)

    def test_conversions(self):
        """Values convert to int and str as their numbers."""
        assert int(Knack(-4)) == -4
        assert str(Will(12)) == "12"
        assert float(HeightInCm(182.5)) == 182.5
        assert str(BodyWeightInKg(70.0)) == "70.0"

    def test_codes(self):
        """Every value knows its property code."""
        assert Strength.code is PropertyCode.STRENGTH
        assert Senses.code is PropertyCode.SENSES
        assert HeightInCm.code is PropertyCode.HEIGHT_IN_CM

    def test_values_are_immutable(self):
        """Values can't be changed in place."""
        with pytest.raises(AttributeError):
            Strength(1).value = 2  # type: ignore[misc]


class TestRounding:
    """Tests for rounding halves away from zero."""

    def test_round_half_up(self):
        """Halves go away from zero, the rest to the nearest."""
        assert round_half_up(0.5) == 1
        assert round_half_up(1.5) == 2
        assert round_half_up(2.5) == 3
        assert round_half_up(-0.5) == -1
        assert round_half_up(-2.5) == -3
        assert round_half_up(2.4) == 2
        assert round_half_up(-2.4) == -2
        assert round_half_up(0) == 0


class TestFormulas:
    """Tests for derived property formulas."""

    def test_speed(self):
        """Speed: average of strength and agility plus third of height minus 2."""
        assert calculate_speed(Strength(7), Agility(5), Height(3)) == Speed(5)
        assert calculate_speed(Strength(0), Agility(0), Height(0)) == Speed(-2)
        # 3.5 + (4 / 3 - 2) = 2.83...
        assert calculate_speed(Strength(3), Agility(4), Height(4)) == Speed(3)

    def test_beauty(self):
        """Beauty: average of agility and knack plus half of charisma."""
        assert calculate_beauty(Agility(5), Knack(4), Charisma(3)) == Beauty(6)
        assert calculate_beauty(Agility(0), Knack(0), Charisma(1)) == Beauty(1)

    def test_dangerousness(self):
        """Dangerousness: average of strength and will plus half of charisma."""
        assert calculate_dangerousness(Strength(7), Will(4), Charisma(3)) == Dangerousness(7)
        assert calculate_dangerousness(Strength(-3), Will(-2), Charisma(0)) == Dangerousness(-3)

    def test_dignity(self):
        """Dignity: average of intelligence and will plus half of charisma."""
        assert calculate_dignity(Intelligence(5), Will(4), Charisma(3)) == Dignity(6)

    def test_senses(self, tables):
        """Senses: knack plus senses bonus of the race."""
        assert calculate_senses(
            Knack(5), RaceCode.DWARF, SubRaceCode.COMMON, tables.races_table
        ) == Senses(4)


class TestNormalizeCode:
    """Tests for canonical code form."""

    def test_enum_member(self):
        """Enum members normalize to their values."""
        assert normalize_code(RemarkableSenseCode.HEARING) == "hearing"

    def test_other_enumeration_matches(self):
        """Codes of independent enumerations with same value are equal."""

        class PropertySense(StrEnum):
            HEARING = "Hearing"

        assert normalize_code(PropertySense.HEARING) == normalize_code(
            RemarkableSenseCode.HEARING
        )

    def test_plain_text(self):
        """Plain text is stripped and lowered."""
        assert normalize_code("  TOUCH\n") == "touch"

    def test_none(self):
        """None normalizes to an empty code."""
        assert normalize_code(None) == ""
