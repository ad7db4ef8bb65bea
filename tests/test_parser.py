"""Unit tests for walk-line parsing and file reading."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from snmp_walk_tables.errors import InputError, ParseError
from snmp_walk_tables.parser import normalise_line, parse_file, parse_lines, read_lines, split_entry

# ===========================================================================
# normalise_line / split_entry tests
# ===========================================================================


class TestNormaliseLine:

    def test_double_colon_becomes_dot(self):
        assert normalise_line("IF-MIB::ifDescr.1 = eth0") == "IF-MIB.ifDescr.1 = eth0"

    def test_every_occurrence_replaced(self):
        assert normalise_line("a::b::c=1") == "a.b.c=1"

    def test_strips_line_terminator(self):
        assert normalise_line("a.b.c=1\r\n") == "a.b.c=1"

    def test_keeps_inner_whitespace(self):
        assert normalise_line("a.b.c = two words") == "a.b.c = two words"


class TestSplitEntry:

    def test_single_equals(self):
        assert split_entry("a.b.c=1") == ("a.b.c", "1")

    def test_whitespace_around_equals_is_stripped(self):
        assert split_entry("a.b.c = Linux box ") == ("a.b.c", "Linux box")

    def test_no_equals(self):
        assert split_entry("just text") is None

    def test_two_equals_is_not_an_entry(self):
        assert split_entry("a.b.c=x=y") is None

    def test_empty_value(self):
        assert split_entry("a.b.c=") == ("a.b.c", "")


# ===========================================================================
# parse_lines tests
# ===========================================================================


class TestParseLines:

    def test_empty_input(self):
        assert not parse_lines([])

    def test_basic_entries(self):
        result = parse_lines(["A.B.C=1", "A.B.D=2"])
        assert result == {"A.B.C": "1", "A.B.D": "2"}

    def test_preserves_input_order(self):
        result = parse_lines(["z.y.x=1", "a.b.c=2", "m.n.o=3"])
        assert list(result) == ["z.y.x", "a.b.c", "m.n.o"]

    def test_continuation_merging(self):
        result = parse_lines(["A.B.C=1", "more"])
        assert result["A.B.C"] == "1 more"

    def test_multiple_continuations(self):
        result = parse_lines(["A.B.C=first", "second", "third"])
        assert result["A.B.C"] == "first second third"

    def test_continuation_line_appended_verbatim(self):
        result = parse_lines(["A.B.C=1", "  indented text  "])
        assert result["A.B.C"] == "1   indented text  "

    def test_continuation_attaches_to_latest_key(self):
        result = parse_lines(["A.B.C=1", "A.B.D=2", "tail"])
        assert result == {"A.B.C": "1", "A.B.D": "2 tail"}

    def test_line_with_two_equals_is_continuation(self):
        result = parse_lines(["A.B.C=1", "x=y=z"])
        assert result["A.B.C"] == "1 x=y=z"

    def test_duplicate_key_overwrites_value(self):
        result = parse_lines(["A.B.C=1", "A.B.D=2", "A.B.C=3"])
        assert result == {"A.B.C": "3", "A.B.D": "2"}
        assert list(result) == ["A.B.C", "A.B.D"]

    def test_mib_qualified_names(self):
        result = parse_lines(["IF-MIB::ifDescr.1 = STRING: eth0"])
        assert result == {"IF-MIB.ifDescr.1": "STRING: eth0"}

    def test_blank_lines_skipped(self):
        result = parse_lines(["", "A.B.C=1", "   ", "A.B.D=2", ""])
        assert result == {"A.B.C": "1", "A.B.D": "2"}

    def test_single_segment_key_is_kept(self):
        assert parse_lines(["X=5"]) == {"X": "5"}

    def test_continuation_before_first_key_raises(self):
        with pytest.raises(ParseError, match="continuation before first key") as excinfo:
            parse_lines(["orphan text", "A.B.C=1"])
        assert excinfo.value.line_number == 1

    def test_line_number_counts_skipped_blanks(self):
        with pytest.raises(ParseError) as excinfo:
            parse_lines(["", "", "orphan"])
        assert excinfo.value.line_number == 3

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_lines(["orphan"])


# ===========================================================================
# read_lines / parse_file tests
# ===========================================================================


class TestReadLines:

    def test_reads_all_lines(self, tmp_path):
        path = tmp_path / "walk.txt"
        path.write_text("a.b.c=1\na.b.d=2\n", encoding="utf-8")
        assert read_lines(path) == ["a.b.c=1", "a.b.d=2"]

    def test_accepts_string_path(self, tmp_path):
        path = tmp_path / "walk.txt"
        path.write_text("a.b.c=1\n", encoding="utf-8")
        assert read_lines(str(path)) == ["a.b.c=1"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputError, match="not found"):
            read_lines(tmp_path / "missing.txt")

    def test_directory_is_unreadable(self, tmp_path):
        with pytest.raises(InputError):
            read_lines(tmp_path)

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "walk.bin"
        path.write_bytes(b"a.b.c=\xff\xfe\x00\n")
        with pytest.raises(InputError):
            read_lines(path)


class TestParseFile:

    def test_sample_file(self, sample_file):
        result = parse_file(sample_file)
        assert result["system.sysDescr.0"] == "Linux box"
        assert result["ifTable.ifEntry.ifSpeed.2"] == "100"
        assert len(result) == 5

    def test_form_feed_stays_inside_value(self, tmp_path):
        path = tmp_path / "walk.txt"
        path.write_text("t.c.1 = a\x0cb\nt.c.2 = c\n", encoding="utf-8")
        assert parse_file(path) == {"t.c.1": "a\x0cb", "t.c.2": "c"}

    def test_unicode_line_separator_does_not_split(self, tmp_path):
        """U+2028 inside a value must not start a new physical line (or invent a key)."""
        path = tmp_path / "walk.txt"
        path.write_text("t.c.1 = a\nt.c.2 = x\u2028y.z.w\n", encoding="utf-8")
        assert parse_file(path) == {"t.c.1": "a", "t.c.2": "x\u2028y.z.w"}

    def test_unicode_separator_before_assignment_stays_continuation(self, tmp_path):
        path = tmp_path / "walk.txt"
        path.write_text("t.c.1 = a\nmore\u2028y.z.w=9=0\n", encoding="utf-8")
        assert parse_file(path) == {"t.c.1": "a more\u2028y.z.w=9=0"}

    def test_read_lines_keeps_control_characters(self, tmp_path):
        path = tmp_path / "walk.txt"
        path.write_text("a\x0bb\x1cc\x85d\u2029e\n", encoding="utf-8")
        assert read_lines(path) == ["a\x0bb\x1cc\x85d\u2029e"]

    def test_crlf_line_endings(self, tmp_path):
        path = tmp_path / "walk.txt"
        path.write_bytes(b"a.b.c=1\r\nmore\r\n")
        assert parse_file(path) == {"a.b.c": "1 more"}
