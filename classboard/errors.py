"""Exceptions raised by the classboard services."""


class ClassboardError(Exception):
    """Base class for errors surfaced to the user as a generic failure."""


class BackendError(ClassboardError):
    """A backend read, write, delete or upload failed."""


class ValidationError(ClassboardError):
    """A submitted form is missing a required field or has an invalid value."""
