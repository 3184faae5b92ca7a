"""Tests for swagnorm.normalizer.enums."""

from __future__ import annotations

from swagnorm.normalizer.enums import fix_enum


class TestFixEnum:
    """Test enum sanitising for generated identifiers."""

    def test_none_passes_through(self) -> None:
        assert fix_enum(None) is None

    def test_empty_list(self) -> None:
        assert fix_enum([]) == []

    def test_numeric_variant_appended(self) -> None:
        assert fix_enum(["A", "B", "1"]) == ["A", "B", "1", 1]

    def test_tokens_are_not_removed(self) -> None:
        result = fix_enum(["10", "20"])
        assert result == ["10", "20", 10, 20]

    def test_unsafe_tokens_filtered(self) -> None:
        assert fix_enum(["ok", "not ok", "a.b", "dash-ed", "$x", "_y"]) == [
            "ok",
            "dash-ed",
            "$x",
            "_y",
        ]

    def test_decimal_number_filtered_out(self) -> None:
        """'1.5' and 1.5 both stringify with a dot, so neither survives."""
        assert fix_enum(["1.5"]) == []

    def test_integral_float_string(self) -> None:
        assert fix_enum(["2.0"]) == [2]

    def test_negative_number(self) -> None:
        assert fix_enum(["-1"]) == ["-1", -1]

    def test_numbers_in_input(self) -> None:
        """A raw numeric value is its own numeric variant."""
        assert fix_enum([1, 2]) == [1, 2]

    def test_empty_string_is_not_numeric(self) -> None:
        assert fix_enum(["", "A"]) == ["A"]

    def test_non_finite_not_numeric(self) -> None:
        assert fix_enum(["NaN", "inf"]) == ["NaN", "inf"]

    def test_booleans_kept(self) -> None:
        assert fix_enum([True, False]) == [True, False]

    def test_input_not_mutated(self) -> None:
        values = ["A", "1"]
        fix_enum(values)
        assert values == ["A", "1"]

    def test_idempotent(self) -> None:
        for values in (["A", "B", "1"], ["1", "2", "x y"], ["0", 0, "-3"], []):
            once = fix_enum(values)
            assert fix_enum(once) == once

    def test_null_member_becomes_token(self) -> None:
        assert fix_enum(["ok", None]) == ["ok", "null"]

    def test_nested_members_dropped(self) -> None:
        assert fix_enum(["ok", ["a"], {"b": 1}]) == ["ok"]

    def test_trailing_newline_filtered(self) -> None:
        assert fix_enum(["A\n", "B"]) == ["B"]

    def test_underscore_grouping_is_not_numeric(self) -> None:
        assert fix_enum(["1_000"]) == ["1_000"]
