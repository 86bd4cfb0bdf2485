"""Exception types raised by the analysis engine and the history store."""

from __future__ import annotations


class PlacementPrepError(Exception):
    """Base class for all placement-prep errors."""


class InvalidInputError(PlacementPrepError, TypeError):
    """A value that must be a string was missing or of the wrong type."""


class EmptyInputError(PlacementPrepError, ValueError):
    """The job description text is blank."""


class NotFoundError(PlacementPrepError, LookupError):
    """No stored analysis exists for the given id."""

    def __init__(self, record_id: str):
        super().__init__(f"Analysis not found: {record_id}")
        self.record_id = record_id
