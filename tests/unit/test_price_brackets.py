"""Unit tests for price brackets and width policies."""

import pytest

from cabinet_pricing.domain import (
    BASE_DRAWER_BRACKETS,
    BASE_ONE_DOOR_BRACKETS,
    BASE_TWO_DOOR_BRACKETS,
    DEFAULT_BRACKETS,
    CabinetCategory,
    PriceBracket,
    WidthPolicy,
    default_brackets,
)


class TestPriceBracket:
    """Tests for PriceBracket."""

    def test_width_for_each_policy(self) -> None:
        bracket = PriceBracket("750-799mm", 750, 799)

        assert bracket.width_for(WidthPolicy.MINIMUM) == 750
        assert bracket.width_for(WidthPolicy.MAXIMUM) == 799
        assert bracket.width_for(WidthPolicy.MIDPOINT) == pytest.approx(774.5)

    def test_single_width_bracket(self) -> None:
        bracket = PriceBracket("600mm", 600, 600)

        for policy in WidthPolicy:
            assert bracket.width_for(policy) == 600

    def test_contains_is_inclusive(self) -> None:
        bracket = PriceBracket("450-499mm", 450, 499)

        assert bracket.contains(450)
        assert bracket.contains(499)
        assert not bracket.contains(500)
        assert not bracket.contains(449.9)

    def test_min_above_max_rejected(self) -> None:
        with pytest.raises(ValueError, match="exceeds max width"):
            PriceBracket("bad", 800, 700)

    def test_negative_width_rejected(self) -> None:
        with pytest.raises(ValueError, match="negative"):
            PriceBracket("bad", -10, 100)

    def test_policy_values(self) -> None:
        assert WidthPolicy("min") is WidthPolicy.MINIMUM
        assert WidthPolicy("max") is WidthPolicy.MAXIMUM
        assert WidthPolicy("midpoint") is WidthPolicy.MIDPOINT


class TestDefaultBrackets:
    """Tests for the built-in bracket sets."""

    @pytest.mark.parametrize("name", ["Base 1 Door", "base 1door", "BASE 1 DOOR WIDE"])
    def test_base_one_door(self, name: str) -> None:
        assert default_brackets("base", name) is BASE_ONE_DOOR_BRACKETS

    @pytest.mark.parametrize("name", ["Base 2 Door", "2door base"])
    def test_base_two_door(self, name: str) -> None:
        assert default_brackets("base", name) is BASE_TWO_DOOR_BRACKETS

    def test_base_drawer(self) -> None:
        assert default_brackets("base", "Base 3 Drawer") is BASE_DRAWER_BRACKETS

    def test_category_is_case_insensitive(self) -> None:
        assert default_brackets("BASE", "Base 2 Door") is BASE_TWO_DOOR_BRACKETS

    def test_accepts_category_enum(self) -> None:
        assert default_brackets(CabinetCategory.BASE, "Base 1 Door") is BASE_ONE_DOOR_BRACKETS
        assert default_brackets(CabinetCategory.WALL, "Wall 1 Door") is DEFAULT_BRACKETS

    def test_non_base_category_uses_fallback(self) -> None:
        assert default_brackets("wall", "Wall 1 Door") is DEFAULT_BRACKETS

    def test_unknown_base_name_uses_fallback(self) -> None:
        assert default_brackets("base", "Corner blind") is DEFAULT_BRACKETS

    def test_one_door_labels_and_bounds(self) -> None:
        labels = [bracket.label for bracket in BASE_ONE_DOOR_BRACKETS]

        assert labels[0] == "150-199mm"
        assert labels[-1] == "600mm"
        assert len(BASE_ONE_DOOR_BRACKETS) == 10

    def test_two_door_set_skips_gaps(self) -> None:
        lows = [bracket.min_width_mm for bracket in BASE_TWO_DOOR_BRACKETS]

        assert lows == [400, 450, 500, 600, 700, 800, 900, 1000, 1200]

    def test_fallback_set(self) -> None:
        assert [(b.min_width_mm, b.max_width_mm) for b in DEFAULT_BRACKETS] == [
            (300, 600),
            (600, 900),
            (900, 1200),
        ]
