"""Errors raised by the external picker and clipboard collaborators."""
from __future__ import annotations


class CollaboratorError(Exception):
    """An external tool failed."""


class PickerError(CollaboratorError):
    pass


class ClipboardError(CollaboratorError):
    pass
