"""Tests for relation line parsing and switching."""

import pytest

from plantuml_switcher.core.relation import ParsedLine, RelationBuilder, parse_line, switch_relation


class TestParseLine:
    """Tests for parse_line."""

    @pytest.mark.parametrize(
        ("line", "from_block", "to_block"),
        [
            ('A::B "label1" --> "label2" C::D : relation', "A::B", "C::D"),
            ('A@B "label1" --> "label2" C@D : relation', "A@B", "C@D"),
            ('A.B "label1" --> "label2" C.D : relation', "A.B", "C.D"),
        ],
    )
    def test_entity_separators_are_opaque(self, line, from_block, to_block):
        """Entity blocks keep their separators."""
        assert parse_line(line) == ParsedLine(
            indent="",
            from_block=from_block,
            from_label="label1",
            arrow="-->",
            to_label="label2",
            to_block=to_block,
            relation_name="relation",
        )

    def test_without_relation_name(self):
        """A missing separator gives an empty relation name."""
        parsed = parse_line('A::B "label1" --> "label2" C::D')
        assert parsed is not None
        assert parsed.relation_name == ""
        assert parsed.to_block == "C::D"

    def test_indentation_preserved(self):
        """Leading spaces are captured verbatim."""
        parsed = parse_line('    A::B "label1" --> "label2" C::D')
        assert parsed is not None
        assert parsed.indent == "    "
        assert parsed.from_block == "A::B"

    def test_tab_indentation(self):
        parsed = parse_line("\t\tA --> B")
        assert parsed is not None
        assert parsed.indent == "\t\t"

    def test_without_labels(self):
        """Absent labels are empty strings."""
        assert parse_line("A --> B") == ParsedLine(from_block="A", arrow="-->", to_block="B")

    def test_single_quote_before_arrow_is_literal(self):
        """One quote on the source side is not a label delimiter."""
        parsed = parse_line('A "half --> B')
        assert parsed is not None
        assert parsed.from_block == 'A "half'
        assert parsed.from_label == ""

    def test_unterminated_target_label_is_literal(self):
        """A leading quote without a closing quote is part of the target."""
        parsed = parse_line('A --> "half B')
        assert parsed is not None
        assert parsed.to_block == '"half B'
        assert parsed.to_label == ""

    def test_labels_are_trimmed(self):
        parsed = parse_line('A " one " --> "  many " B')
        assert parsed is not None
        assert parsed.from_label == "one"
        assert parsed.to_label == "many"

    def test_separator_needs_spaces(self):
        """Only ' : ' separates the relation name."""
        parsed = parse_line("A --> B:uses")
        assert parsed is not None
        assert parsed.to_block == "B:uses"
        assert parsed.relation_name == ""

    def test_no_arrow(self):
        """Lines without an arrow parse to None."""
        assert parse_line("class Foo") is None
        assert parse_line("") is None


class TestRelationBuilder:
    """Tests for RelationBuilder."""

    def test_skips_empty_fragments(self):
        built = RelationBuilder("  ").add("B").add_label("").add("<--").add_label("").add("A").build()
        assert built == "  B <-- A"

    def test_quotes_labels(self):
        built = RelationBuilder().add("B").add_label("x").add("<--").add("A").build()
        assert built == 'B "x" <-- A'

    def test_relation_name_suffix(self):
        built = RelationBuilder().add("B").add("<--").add("A").add_relation_name("uses").build()
        assert built == "B <-- A : uses"

    def test_empty_relation_name_adds_nothing(self):
        built = RelationBuilder().add("B").add("<--").add("A").add_relation_name("").build()
        assert built == "B <-- A"


class TestSwitchRelation:
    """Tests for switch_relation."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            (
                'A::B "label1" --> "label2" C::D : relation',
                'C::D "label2" <-- "label1" A::B : relation',
            ),
            (
                'A@B "label1" --> "label2" C@D : relation',
                'C@D "label2" <-- "label1" A@B : relation',
            ),
            (
                'A.B "label1" --> "label2" C.D : relation',
                'C.D "label2" <-- "label1" A.B : relation',
            ),
            (
                'ClassA "name" --|> ClassB::Type : extends',
                'ClassB::Type <|-- "name" ClassA : extends',
            ),
            ("A --> B", "B <-- A"),
            ('A --> "many" B', 'B "many" <-- A'),
            ('  Foo "1" *-- "0..*" Bar : owns', '  Bar "0..*" --* "1" Foo : owns'),
            ("A -[#red]-[bold]-> B", "B <-[bold]-[#red]- A"),
        ],
    )
    def test_switch(self, line, expected):
        """Source and target swap around the reversed arrow."""
        assert switch_relation(line) == expected

    def test_indentation_kept(self):
        assert switch_relation('    A@B "label1" --> "label2" C@D : relation') == (
            '    C@D "label2" <-- "label1" A@B : relation'
        )

    def test_whitespace_normalized(self):
        """Runs of spaces between fields collapse to one."""
        assert switch_relation("A    -->     B   :   uses") == "B <-- A : uses"

    def test_no_arrow_unchanged(self):
        """Lines without an arrow come back untouched."""
        assert switch_relation("title  My Diagram ") == "title  My Diagram "
        assert switch_relation("") == ""

    def test_round_trip(self):
        """Switching twice restores a canonically formatted line."""
        line = '  A::B "label1" --[norank]-> "label2" C::D : relation'
        assert switch_relation(switch_relation(line)) == line
