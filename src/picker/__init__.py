"""External collaborators: the rofi picker and clipboard writers."""

from .base import Clipboard, Picker
from .clipboard import SystemClipboard
from .errors import ClipboardError, CollaboratorError, PickerError
from .rofi import RofiPicker

__all__ = [
    "Clipboard",
    "Picker",
    "SystemClipboard",
    "ClipboardError",
    "CollaboratorError",
    "PickerError",
    "RofiPicker",
]
