# -*- coding: utf-8 -*-
"""Tests for label pattern expansion and pattern detection."""

import pytest

from rackspatial import detect_naming_pattern, expand_label, number_to_letters, substitute_number, suggest_bulk_pattern


def test_padded_sequence_number():
    """{##} pads the sequence number to two digits."""
    assert expand_label("{##}", 3) == "03"
    assert expand_label("{#}", 3) == "3"
    assert expand_label("{###}", 1234) == "1234"


def test_letters():
    """{A} encodes the sequence number in bijective base 26."""
    assert expand_label("{A}", 27) == "AA"
    assert expand_label("{A}", 1) == "A"


def test_letter_count_is_not_a_width():
    """{AA} expands exactly like {A}; the extra letters do not pad."""
    assert expand_label("{AA}", 1) == "A"
    assert expand_label("{AAA}", 28) == expand_label("{A}", 28) == "AB"


@pytest.mark.parametrize(
    "number, letters",
    [(1, "A"), (26, "Z"), (27, "AA"), (52, "AZ"), (702, "ZZ"), (703, "AAA"), (0, "A"), (-4, "A")],
)
def test_number_to_letters(number, letters):
    """Bijective base 26 encoding, with non-positive numbers encoded as A."""
    assert number_to_letters(number) == letters


def test_row_and_column():
    """{ROW} is unpadded, {COL##} is zero-padded."""
    assert expand_label("{ROW}-{COL##}", 1, row=2, col=5, start_row=1, start_col=1) == "2-05"


def test_single_hash_row_is_not_padded():
    """One # means no padding."""
    assert expand_label("{ROW#}{COL#}", 1, row=7, col=3) == "73"


def test_row_and_column_are_case_insensitive():
    """{row} and {Col} work like {ROW} and {COL}."""
    assert expand_label("{row}/{Col##}", 1, row=4, col=9) == "4/09"


def test_offsets():
    """Start offsets shift the numbers; letters follow the raw sequence number."""
    assert expand_label("{###}", 1, start_number=10) == "010"
    assert expand_label("R{ROW##}", 1, row=1, start_row=5) == "R05"
    assert expand_label("{COL}", 1, col=2, start_col=0) == "1"
    assert expand_label("{A}", 1, start_number=5) == "A"


def test_row_digits_are_not_reexpanded():
    """Placeholders are substituted once each, in a fixed order."""
    assert expand_label("{ROW}{#}{A}", 2, row=1) == "12B"


def test_unknown_and_partial_placeholders_pass_through():
    """Patterns typed half way are copied literally."""
    assert expand_label("A-{X}-{##", 4) == "A-{X}-{##"
    assert expand_label("{ROW", 1) == "{ROW"
    assert expand_label("{a}", 1) == "{a}"
    assert expand_label("", 1) == ""
    assert expand_label("plain", 9) == "plain"


def test_detect_two_number_label():
    """A label with two numeric groups gives two padded placeholders."""
    detected = detect_naming_pattern("A-01-05")
    assert detected.pattern == "A-{##}-{##}"
    assert detected.start_number == 1
    assert detected.prefix == "A-"
    assert detected.suffix == "-05"


def test_detect_single_number_label():
    """A prefix and a number give prefix plus a placeholder of the same width."""
    detected = detect_naming_pattern("R12")
    assert detected.pattern == "R{##}"
    assert detected.start_number == 12
    assert detect_naming_pattern("LOC-007B").pattern == "LOC-{###}B"


def test_detect_label_without_number():
    """A label with no number falls back to "<label>-{##}"."""
    detected = detect_naming_pattern("Dock")
    assert detected.to_dict() == {"pattern": "Dock-{##}", "start_number": 1, "prefix": "Dock", "suffix": ""}


def test_detect_requires_whole_label():
    """Trailing line breaks are not part of a recognised label."""
    assert detect_naming_pattern("R12\n").pattern == "R12\n-{##}"
    assert detect_naming_pattern("A-01-05\n").pattern == "A-01-05\n-{##}"


def test_substitute_number_first_placeholder():
    """Only the first number placeholder is filled, padded to its # count."""
    assert substitute_number("B{##}", 7) == "B07"
    assert substitute_number("B{#}", 12) == "B12"
    assert substitute_number("{##}-{##}", 3) == "03-{##}"
    assert substitute_number("{ROW}-X", 3) == "{ROW}-X"


def test_suggest_bulk_pattern():
    """Letters followed by digits become a pattern; everything else falls back to {##}."""
    assert suggest_bulk_pattern("B1").to_dict() == {"pattern": "B{#}", "start_number": 1, "prefix": "B", "suffix": ""}
    assert suggest_bulk_pattern("AB042").pattern == "AB{##}"
    assert suggest_bulk_pattern("AB042").start_number == 42
    assert suggest_bulk_pattern("A-01").pattern == "{##}"
    assert suggest_bulk_pattern("B1\n").pattern == "{##}"
    assert suggest_bulk_pattern(None).start_number == 1
