"""Font sub-object of visual controls."""

import weakref
from typing import Any, Optional

from pyqt_formstream.core.persistent import Persistent
from pyqt_formstream.core.properties import published


class Font(Persistent):
    """
    Font settings of a control.

    Reached from forms through nested properties:
        <PROPERTY NAME="Font"><PROPERTY NAME="Color">#FF0000</PROPERTY></PROPERTY>
    """

    def __init__(self, owner: Optional[Any] = None):
        self._owner_ref = weakref.ref(owner) if owner is not None else None
        self._color = ""
        self._size = ""
        self._family = "Verdana"
        self._style = ""

    def read_owner(self) -> Optional[Any]:
        return self._owner_ref() if self._owner_ref is not None else None

    @published("Color")
    def color(self) -> str:
        return self._color

    @color.setter
    def color(self, value: str) -> None:
        self._color = value

    @published("Size")
    def size(self) -> str:
        return self._size

    @size.setter
    def size(self, value: str) -> None:
        self._size = value

    @published("Family")
    def family(self) -> str:
        return self._family

    @family.setter
    def family(self, value: str) -> None:
        self._family = value

    @published("Style")
    def style(self) -> str:
        return self._style

    @style.setter
    def style(self, value: str) -> None:
        self._style = value

    def assign_to(self, dest: Persistent) -> None:
        if isinstance(dest, Font):
            dest._color = self._color
            dest._size = self._size
            dest._family = self._family
            dest._style = self._style
        else:
            super().assign_to(dest)
