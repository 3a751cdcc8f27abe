# -*- coding: utf-8 -*-
"""Tests for rename and label conflict validation."""

import pytest

from rackspatial import (
    RenameConflictError,
    RenamePreviewEntry,
    has_conflicts,
    rename_requests,
    validate_labels,
    validate_renames,
)


def test_second_duplicate_is_flagged():
    """The later of two identical proposals is the conflicting one."""
    entries = validate_renames([("a", "x", "R01"), ("b", "y", "R01")])
    assert [entry.conflict for entry in entries] == [False, True]


def test_comparison_ignores_case():
    """Labels differing only in case clash."""
    entries = validate_renames([("a", "", "aisle-1"), ("b", "", "AISLE-1")])
    assert entries[1].conflict, "Case-only difference was not flagged."


def test_frozen_labels_conflict():
    """Proposals matching labels outside the batch are flagged, even the first."""
    entries = validate_renames([("a", "old", "r01"), ("b", "old2", "R02")], frozen_labels=["R01"])
    assert [entry.conflict for entry in entries] == [True, False]
    assert has_conflicts(entries)


def test_conflicts_are_kept_in_order():
    """Flagged entries are reported, never dropped."""
    proposed = [("a", "1", "X"), ("b", "2", "X"), ("c", "3", "Y"), ("d", "4", "x")]
    entries = validate_renames(proposed)
    assert [entry.entity_id for entry in entries] == ["a", "b", "c", "d"]
    assert [entry.conflict for entry in entries] == [False, True, False, True]


def test_no_conflicts():
    """Distinct labels pass."""
    entries = validate_renames([("a", "", "1"), ("b", "", "2")], frozen_labels=["3"])
    assert not has_conflicts(entries)
    assert not has_conflicts([])


def test_validate_labels_lists_each_conflict_once():
    """Clashes with existing labels or earlier new labels are reported once each."""
    result = validate_labels(["A1", "A2", "A2", "a2", "B1"], existing_labels=["b1"])
    assert not result.valid
    assert result.conflicts == ["A2", "a2", "B1"]
    assert validate_labels(["C1", "C2"], ["C3"]).valid


def test_rename_requests_skip_unchanged_labels():
    """Only entries whose label changes become requests."""
    entries = [RenamePreviewEntry("a", "R01", "R01"), RenamePreviewEntry("b", "R09", "R02")]
    assert rename_requests(entries) == [{"entity_id": "b", "new_label": "R02"}]


def test_rename_requests_refuse_conflicts():
    """A batch with conflicts cannot be turned into requests."""
    entries = validate_renames([("a", "", "R01"), ("b", "", "R01")])
    with pytest.raises(RenameConflictError) as excinfo:
        rename_requests(entries)
    assert excinfo.value.conflicts == ["R01"]
