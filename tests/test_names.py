"""
Tests for star-name table parsing and registration.
"""

import logging

from skyculture.culture.names import StarName, parse_names, register_names
from skyculture.identifiers import IdentifierRegistry


class TestParseNames:

    def test_basic_table(self):
        table = parse_names("39801 Betelgeuse\n34085 Rigel\n")

        assert table == {
            39801: StarName(39801, "Betelgeuse"),
            34085: StarName(34085, "Rigel"),
        }

    def test_comments_and_blank_lines_skipped(self):
        table = parse_names("// header\n\n39801 Betelgeuse\n// 1 Not a star\n")
        assert list(table) == [39801]

    def test_display_name_keeps_spaces(self):
        """Everything after the first space is the name, inner spaces included."""
        table = parse_names("98230 Alula Australis\n100  Leading Space\n")

        assert table[98230].display_name == "Alula Australis"
        assert table[100].display_name == " Leading Space"

    def test_tab_separated_line(self):
        table = parse_names("39801\tBetelgeuse\n\t34085\tRigel Kentaurus\n")

        assert table[39801].display_name == "Betelgeuse"
        assert table[34085].display_name == "Rigel Kentaurus"

    def test_crlf_line_endings(self):
        table = parse_names("39801 Betelgeuse\r\n34085 Rigel\r\n")
        assert table[39801].display_name == "Betelgeuse"
        assert table[34085].display_name == "Rigel"

    def test_bad_number_is_skipped(self, caplog):
        with caplog.at_level(logging.WARNING):
            table = parse_names("abc Nobody\n39801 Betelgeuse\n")

        assert list(table) == [39801]
        assert any("cannot parse star name" in r.getMessage() for r in caplog.records)

    def test_missing_name_is_skipped(self, caplog):
        with caplog.at_level(logging.WARNING):
            table = parse_names("12345\n39801 Betelgeuse\n")

        assert 12345 not in table
        assert any("missing display name" in r.getMessage() for r in caplog.records)

    def test_duplicate_number_last_wins(self):
        table = parse_names("39801 Betelgeuse\n39801 Betelgeuze\n")

        assert len(table) == 1
        assert table[39801].display_name == "Betelgeuze"


class TestRegisterNames:

    def test_names_published_to_registry(self):
        registry = IdentifierRegistry()
        register_names(parse_names("39801 Betelgeuse\n34085 Rigel\n"), registry)

        assert registry.values("HD 39801", "NAME") == ["Betelgeuse"]
        assert registry.values("HD 34085", "NAME") == ["Rigel"]
        assert registry.resolve("betelgeuse") == "HD 39801"
