"""Diff subsystem exceptions."""


class DiffError(Exception):
    """Base class for diff errors."""


class DiffInputError(DiffError, TypeError):
    """Diff inputs are not sequences of line strings."""
