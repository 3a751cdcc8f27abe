# -*- coding: utf-8 -*-
"""Expands label patterns such as ``"A-{ROW}-{##}"`` into concrete location labels.

Recognised placeholders:

- ``{ROW}``, ``{ROW##}`` : row number plus row offset; more than one ``#`` zero-pads to that width
- ``{COL}``, ``{COL##}`` : column number, same rule
- ``{A}``, ``{AA}``, ... : sequence number as letters (1 -> A, 26 -> Z, 27 -> AA). The number of
  letters in the placeholder is not a width: ``{AA}`` and ``{A}`` expand identically.
- ``{#}``, ``{##}``, ... : sequence number plus start offset, zero-padded to the ``#`` count when it is above one

Placeholders are replaced in that order so digits produced by ROW/COL are never re-read as anything else.
Everything else in a pattern, including half typed or unknown placeholders, is copied through unchanged.

Bulk renames use a simpler scheme (substitute_number): only the first ``{#...}`` is replaced.
"""

import re

ROW_PLACEHOLDER = re.compile(r"\{ROW(#+)?\}", re.IGNORECASE)
COL_PLACEHOLDER = re.compile(r"\{COL(#+)?\}", re.IGNORECASE)
LETTER_PLACEHOLDER = re.compile(r"\{(A+)\}")
NUMBER_PLACEHOLDER = re.compile(r"\{(#+)\}")

LABEL_NUMBER = re.compile(r"([A-Za-z\-_]*)(\d+)(.*)")
SUFFIX_NUMBER = re.compile(r"([^0-9]*)(\d+)(.*)")
PREFIXED_NUMBER = re.compile(r"([A-Za-z]+)(\d+)")


class DetectedPattern:
    """A label pattern inferred from an existing label."""

    def __init__(self, pattern, start_number=1, prefix="", suffix=""):
        """Initialize a detected pattern.

        Parameters:
        -----------
        pattern : str
            Label pattern reproducing the label's layout
        start_number : int
            Number found in the label
        prefix : str
            Text before the number
        suffix : str
            Text after the number
        """
        self.pattern = pattern
        self.start_number = start_number
        self.prefix = prefix
        self.suffix = suffix

    def to_dict(self):
        """Return the detected pattern as a plain dict."""
        return {
            "pattern": self.pattern,
            "start_number": self.start_number,
            "prefix": self.prefix,
            "suffix": self.suffix,
        }

    def __repr__(self):
        """String representation of the detected pattern."""
        return f"DetectedPattern(pattern={self.pattern!r}, start_number={self.start_number})"


def format_number(number, width):
    """Left-pad a number with zeros to ``width`` characters."""
    return str(number).rjust(width, "0")


def _padded(number, hashes):
    width = len(hashes) if hashes else 0
    return format_number(number, width) if width > 1 else str(number)


def number_to_letters(number):
    """Encode a number in bijective base 26 (1 -> A, 26 -> Z, 27 -> AA).

    Numbers below 1 encode as "A".
    """
    result = ""
    n = int(number)
    while n > 0:
        n -= 1
        result = chr(65 + n % 26) + result
        n //= 26
    return result or "A"


def expand_label(pattern, sequence, row=1, col=1, start_number=1, start_row=1, start_col=1):
    """Expand a label pattern for one entity.

    Parameters:
    -----------
    pattern : str
        Label pattern
    sequence : int
        1-based sequence number of the entity
    row : int
        1-based row number
    col : int
        1-based column number
    start_number : int
        Number the first entity gets for {#} placeholders
    start_row : int
        Number the first row gets for {ROW} placeholders
    start_col : int
        Number the first column gets for {COL} placeholders

    Returns:
    --------
    label : str
        Expanded label
    """
    label = ROW_PLACEHOLDER.sub(lambda m: _padded(row + start_row - 1, m.group(1)), pattern)
    label = COL_PLACEHOLDER.sub(lambda m: _padded(col + start_col - 1, m.group(1)), label)
    label = LETTER_PLACEHOLDER.sub(lambda m: number_to_letters(sequence), label)
    label = NUMBER_PLACEHOLDER.sub(lambda m: _padded(sequence + start_number - 1, m.group(1)), label)
    return label


def generate_labels(pattern, positions, start_number=1, start_row=1, start_col=1):
    """Expand a pattern for each generated position.

    Parameters:
    -----------
    pattern : str
        Label pattern
    positions : list of GeneratedPosition
        Positions carrying row, col and sequence_number
    start_number, start_row, start_col : int
        Offsets, see expand_label

    Returns:
    --------
    labels : list of str
        One label per position
    """
    return [
        expand_label(
            pattern,
            pos.sequence_number,
            row=pos.row,
            col=pos.col,
            start_number=start_number,
            start_row=start_row,
            start_col=start_col,
        )
        for pos in positions
    ]


def detect_naming_pattern(label):
    """Guess the pattern an existing label was generated from.

    "A-01-05" becomes "A-{##}-{##}" starting at 1; "R12" becomes "R{##}" starting at 12.
    A label without a number gives "<label>-{##}" starting at 1.

    Parameters:
    -----------
    label : str
        Existing label

    Returns:
    --------
    detected : DetectedPattern
        Inferred pattern and start number
    """
    label = "" if label is None else str(label)
    match = LABEL_NUMBER.fullmatch(label)

    if not match:
        return DetectedPattern(f"{label}-{{##}}", 1, prefix=label, suffix="")

    prefix, number, suffix = match.groups()
    placeholder = "{" + "#" * len(number) + "}"

    suffix_match = SUFFIX_NUMBER.fullmatch(suffix)
    if suffix_match:
        separator, second, rest = suffix_match.groups()
        pattern = f"{prefix}{placeholder}{separator}{{{'#' * len(second)}}}{rest}"
    else:
        pattern = f"{prefix}{placeholder}{suffix}"

    return DetectedPattern(pattern, int(number), prefix=prefix, suffix=suffix)


def substitute_number(pattern, number):
    """Replace the first ``{#...}`` placeholder of a pattern with a zero-padded number.

    The ``#`` count is the padding width. Any further placeholders are left as they are.
    """
    return NUMBER_PLACEHOLDER.sub(lambda m: format_number(number, len(m.group(1))), pattern, count=1)


def suggest_bulk_pattern(label):
    """Default bulk-rename pattern for a selection whose first label is ``label``.

    Letters followed by digits keep the letters: "B1" gives "B{#}" starting at 1, "B07" gives "B{##}"
    starting at 7. Anything else gives "{##}" starting at 1.
    """
    match = PREFIXED_NUMBER.fullmatch("" if label is None else str(label))
    if not match:
        return DetectedPattern("{##}", 1)

    prefix, number = match.groups()
    placeholder = "{##}" if len(number) > 1 else "{#}"
    return DetectedPattern(f"{prefix}{placeholder}", int(number), prefix=prefix)
