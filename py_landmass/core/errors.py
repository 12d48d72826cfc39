"""Errors raised while building or editing a map graph."""

from typing import List, Optional


class MapGraphError(Exception):
    """Base class for map graph failures."""


class PreconditionViolation(MapGraphError):
    """A topology edit was requested on entities that do not satisfy its preconditions."""


class GraphConsistencyError(MapGraphError):
    """The assembled graph breaks one or more structural invariants."""

    def __init__(self, errors: List[str], message: Optional[str] = None):
        self.errors = list(errors)
        if message is None:
            preview = "; ".join(self.errors[:5])
            more = len(self.errors) - 5
            if more > 0:
                preview += f" (+{more} more)"
            message = f"{len(self.errors)} graph invariant violation(s): {preview}"
        super().__init__(message)
