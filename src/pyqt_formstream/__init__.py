"""
pyqt-formstream: XML form loader for PyQt6 component trees.

Reads a serialized form description (nested OBJECT and PROPERTY tags) and
rebuilds the live component tree it describes: components are created by
class name, wired to the root's fields and to their visual parents, their
published properties are set, and pages/data modules get their load
lifecycle.

Architecture:
- Tier 1 (Protocols): capability ABCs, StreamConfig, diagnostic sink hooks
- Tier 2 (Core): Component (QObject), published property tables, registry
- Tier 3 (UI/Forms): Control, Font, Page, DataModule
- Tier 4 (Streaming): QXmlStreamReader tokenizer, Filer, Reader
"""

__version__ = "0.1.0"

from .core import Component, ControlState, Persistent, published, registry
from .forms import Page, DataModule
from .ui import Control, Font
from .streaming import ParseError, Reader, load_resource, parse_into

__all__ = [
    "__version__",
    "Component",
    "ControlState",
    "Persistent",
    "published",
    "registry",
    "Page",
    "DataModule",
    "Control",
    "Font",
    "ParseError",
    "Reader",
    "load_resource",
    "parse_into",
]
