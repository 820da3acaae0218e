"""Exceptions raised by snv_qc.

All errors derive from ``SnvQcError`` which is itself a ``ValueError``,
so callers that already guard table operations with ``except ValueError``
keep working.
"""

__all__ = [
    "SnvQcError",
    "MalformedRow",
    "MalformedFormatField",
    "MalformedAlleleDepth",
    "ParseError",
    "DuplicateObservation",
    "ColourAssignmentError",
]


class SnvQcError(ValueError):
    """Base class for all snv_qc errors."""


class MalformedRow(SnvQcError):
    """A long TSV row does not have the expected number of fields."""


class MalformedFormatField(SnvQcError):
    """A combined GT:AD:DP:GQ value has fewer than four segments."""


class MalformedAlleleDepth(SnvQcError):
    """An AD sub-field is not a ``ref,alt`` pair."""


class ParseError(SnvQcError):
    """Non-numeric text found where a number is required."""


class DuplicateObservation(SnvQcError):
    """Two long rows share the same variant and sample, so the pivot is ambiguous."""


class ColourAssignmentError(SnvQcError):
    """The concordance colour function broke its table contract."""
