"""Visual components: controls and their persistent sub-objects."""

from .font import Font
from .control import Control

__all__ = [
    "Font",
    "Control",
]
