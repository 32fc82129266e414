"""Tests for arrow classification, location and reversal."""

import pytest

from plantuml_switcher.core.arrows import (
    ArrowMatch,
    find_arrow,
    is_arrow,
    reverse_arrow,
    tokenize_arrow,
)


class TestIsArrow:
    """Tests for is_arrow."""

    @pytest.mark.parametrize("token", ["-->", "--|>", "..>", "--o", "*--", "<|--", "#--", "\\\\--//", "^--+"])
    def test_glyph_tokens(self, token):
        """Tokens made only of direction and line glyphs are arrows."""
        assert is_arrow(token)

    def test_direction_keywords_are_not_glyphs(self):
        """Letters outside brackets disqualify a token, except the circle glyph."""
        assert not is_arrow("-up->")
        assert is_arrow("o-o")

    def test_bracket_contents_are_exempt(self):
        """Anything inside brackets is allowed."""
        assert is_arrow("-[#red]->")
        assert is_arrow("--[norank]->")
        assert is_arrow("-[#red,dashed,thickness=2]-[bold]->")

    def test_unterminated_bracket_exempts_rest(self):
        """An unterminated bracket does not raise and exempts the tail."""
        assert is_arrow("--[unterminated tail")

    def test_empty_string(self):
        """The empty string is not an arrow."""
        assert not is_arrow("")

    @pytest.mark.parametrize("token", ["A::B", '"label1"', ":", "relation", "C.D"])
    def test_non_arrows(self, token):
        """Entity names, labels and separators are not arrows."""
        assert not is_arrow(token)


class TestFindArrow:
    """Tests for find_arrow."""

    def test_finds_arrow_and_offset(self):
        """Returns the arrow token and its column."""
        match = find_arrow('A::B "label1" --> "label2" C::D : relation')
        assert match == ArrowMatch(arrow="-->", index=14)
        assert match.end == 17

    def test_offset_counts_indentation(self):
        """Leading whitespace is part of the offset."""
        match = find_arrow("    A --> B")
        assert match is not None
        assert match.index == 6

    def test_first_arrow_wins(self):
        """Only the first arrow-shaped token is returned."""
        match = find_arrow("A ..> B --> C")
        assert match is not None
        assert match.arrow == "..>"

    def test_no_arrow(self):
        """Lines without arrow tokens return None."""
        assert find_arrow("title My Diagram") is None
        assert find_arrow("@startuml") is None
        assert find_arrow("") is None

    def test_duplicate_text_uses_first_occurrence(self):
        """The offset is that of the first textual occurrence of the arrow."""
        match = find_arrow("A-- -- B")
        assert match is not None
        assert match.arrow == "--"
        assert match.index == 1


class TestTokenizeArrow:
    """Tests for tokenize_arrow."""

    def test_plain_arrow(self):
        assert tokenize_arrow("-->") == ["-->"]

    def test_bracket_groups(self):
        assert tokenize_arrow("-[#red]-[bold]->") == ["-", "[#red]", "-", "[bold]", "->"]

    def test_leading_bracket(self):
        assert tokenize_arrow("[norank]->") == ["[norank]", "->"]


class TestReverseArrow:
    """Tests for reverse_arrow."""

    @pytest.mark.parametrize(
        ("arrow", "expected"),
        [
            ("-->", "<--"),
            ("--|>", "<|--"),
            ("..>", "<.."),
            ("--o", "o--"),
            ("-|>", "<|-"),
            ("<-->", "<-->"),
            ("*--", "--*"),
        ],
    )
    def test_glyph_runs(self, arrow, expected):
        """Glyph runs are reversed with direction markers swapped."""
        assert reverse_arrow(arrow) == expected

    def test_modifier_survives(self):
        """A bracket group keeps its text and moves to the mirror position."""
        assert reverse_arrow("--[norank]->") == "<-[norank]--"

    def test_bracket_groups_swap_order(self):
        """Several bracket groups are reordered, never scrambled."""
        assert reverse_arrow("-[#red]-[bold]->") == "<-[bold]-[#red]-"

    def test_bracket_contents_not_swapped(self):
        """Direction characters inside brackets are left alone."""
        assert reverse_arrow("-[<>]->") == "<-[<>]-"

    @pytest.mark.parametrize(
        "arrow",
        ["-->", "--|>", "..>", "o--*", "--[norank]->", "-[#red]-[bold]->", "[hidden]->", "<|-[#blue]-"],
    )
    def test_double_reversal_is_identity(self, arrow):
        """Reversing twice gives back the original arrow."""
        assert reverse_arrow(reverse_arrow(arrow)) == arrow
