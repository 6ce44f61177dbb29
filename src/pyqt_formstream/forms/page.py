"""
Top-level containers: pages and data modules.

Forms are written with one of these as the root OBJECT. Closing it fires the
load lifecycle (see protocols.component_protocols.LIFECYCLE_HOOKS).
"""

from typing import Optional

from pyqt_formstream.core.component import Component
from pyqt_formstream.core.properties import published
from pyqt_formstream.protocols import TopLevelContainer
from pyqt_formstream.ui.control import Control


class Page(Control, TopLevelContainer):
    """Visual top-level container."""

    def __init__(self, owner: Optional[Component] = None):
        super().__init__(owner)
        self._encoding = "UTF-8"

    @published("Encoding")
    def encoding(self) -> str:
        return self._encoding

    @encoding.setter
    def encoding(self, value: str) -> None:
        self._encoding = value


class DataModule(Component, TopLevelContainer):
    """
    Non-visual container for components shared across pages.

    Not a VisualChild, so designer position hints (Left/Top) on it are ignored.
    """
