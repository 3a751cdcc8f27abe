# -*- coding: utf-8 -*-
"""Detects label conflicts before a batch rename or a batch of new entities is committed.

Labels are compared case-insensitively. Within a batch the first occurrence of a label wins and every
later occurrence is flagged, so the outcome depends on the order the batch is given in.
"""

from ..errors import RenameConflictError


class RenamePreviewEntry:
    """Proposed new label for one entity."""

    __slots__ = ("entity_id", "old_label", "new_label", "conflict")

    def __init__(self, entity_id, old_label, new_label, conflict=False):
        """Initialize a preview entry.

        Parameters:
        -----------
        entity_id : hashable
            Identifier of the entity being renamed
        old_label : str
            Label before the rename
        new_label : str
            Proposed label
        conflict : bool
            Whether the proposed label clashes with another label
        """
        self.entity_id = entity_id
        self.old_label = old_label
        self.new_label = new_label
        self.conflict = bool(conflict)

    @property
    def changed(self):
        """True when the rename would change the label."""
        return self.old_label != self.new_label

    def to_dict(self):
        """Return the entry as a plain dict."""
        return {
            "entity_id": self.entity_id,
            "old_label": self.old_label,
            "new_label": self.new_label,
            "conflict": self.conflict,
        }

    def __eq__(self, other):
        """Entries are equal when every field matches."""
        if not isinstance(other, RenamePreviewEntry):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        """String representation of the entry."""
        flag = " CONFLICT" if self.conflict else ""
        return f"RenamePreviewEntry({self.entity_id!r}: {self.old_label!r} -> {self.new_label!r}{flag})"


class ValidationResult:
    """Outcome of checking a batch of new labels."""

    def __init__(self, conflicts=None):
        """Initialize a validation result.

        Parameters:
        -----------
        conflicts : list of str, optional
            Labels that clash, each listed once
        """
        self.conflicts = list(conflicts or [])

    @property
    def valid(self):
        """True when no label clashes."""
        return not self.conflicts

    def __bool__(self):
        """A result is truthy when it is valid."""
        return self.valid

    def __repr__(self):
        """String representation of the result."""
        return f"ValidationResult(valid={self.valid}, conflicts={self.conflicts!r})"


def validate_renames(proposed, frozen_labels=()):
    """Flag proposed labels that collide with frozen labels or earlier proposals.

    Parameters:
    -----------
    proposed : iterable of tuple
        ``(entity_id, old_label, new_label)`` in visiting order
    frozen_labels : iterable of str
        Labels of entities that are not part of the batch

    Returns:
    --------
    entries : list of RenamePreviewEntry
        One entry per proposal, in the same order. Conflicting entries are kept and flagged.
    """
    used = {label.lower() for label in frozen_labels}
    entries = []

    for entity_id, old_label, new_label in proposed:
        key = new_label.lower()
        conflict = key in used
        used.add(key)
        entries.append(RenamePreviewEntry(entity_id, old_label, new_label, conflict))

    return entries


def has_conflicts(entries):
    """True when any preview entry is flagged; callers must not commit such a batch."""
    return any(entry.conflict for entry in entries)


def validate_labels(new_labels, existing_labels=()):
    """Check labels for brand new entities against the labels already in a layout.

    Parameters:
    -----------
    new_labels : iterable of str
        Labels of the entities about to be created
    existing_labels : iterable of str
        Labels already present

    Returns:
    --------
    result : ValidationResult
        Clashing labels, each listed once, in the order they were met
    """
    existing = {label.lower() for label in existing_labels}
    seen = set()
    conflicts = []

    for label in new_labels:
        key = label.lower()
        if (key in existing or key in seen) and label not in conflicts:
            conflicts.append(label)
        seen.add(key)

    return ValidationResult(conflicts)


def rename_requests(entries):
    """Build rename requests for the entries whose label changes.

    Parameters:
    -----------
    entries : list of RenamePreviewEntry
        Preview to commit

    Returns:
    --------
    requests : list of dict
        ``{"entity_id": ..., "new_label": ...}`` for each changed entry, in preview order

    Raises:
    -------
    RenameConflictError
        If any entry is flagged as a conflict
    """
    conflicts = [entry.new_label for entry in entries if entry.conflict]
    if conflicts:
        raise RenameConflictError(conflicts)

    return [{"entity_id": entry.entity_id, "new_label": entry.new_label} for entry in entries if entry.changed]


def entries_from_frame(frame):
    """Rebuild preview entries from a resequence layer's objects."""
    return [
        RenamePreviewEntry(entity_id, old_label, new_label, conflict)
        for entity_id, old_label, new_label, conflict in zip(
            frame["entity_id"], frame["old_label"], frame["new_label"], frame["conflict"], strict=False
        )
    ]
