"""
Control: base class of visual components.

A control has two relationships:
- owner (inherited from Component): who destroys it, always the form root
- parent control: the visual container it is drawn in, held weakly

The loader sets the parent control from the enclosing OBJECT tag.
"""

import logging
import weakref
from typing import Any, Optional

from pyqt_formstream.core.component import Component
from pyqt_formstream.core.properties import published, to_bool
from pyqt_formstream.protocols import VisualChild
from pyqt_formstream.ui.font import Font

logger = logging.getLogger(__name__)


class Control(Component, VisualChild):
    """Visual component with position, size, caption and font."""

    def __init__(self, owner: Optional[Component] = None):
        super().__init__(owner)
        self._parent_ref: Optional[weakref.ref] = None
        self._controls: list[Control] = []
        self._left = 0
        self._top = 0
        self._width = 0
        self._height = 0
        self._caption = ""
        self._hint = ""
        self._visible = True
        self._font = Font(self)

    # -- visual tree ----------------------------------------------------

    def get_parent_control(self) -> Optional[Any]:
        return self._parent_ref() if self._parent_ref is not None else None

    def set_parent_control(self, parent: Optional[Any]) -> None:
        current = self.get_parent_control()
        if current is parent:
            return
        if isinstance(current, Control):
            current._controls.remove(self)
        self._parent_ref = weakref.ref(parent) if parent is not None else None
        if isinstance(parent, Control):
            parent._controls.append(self)
        logger.debug(f"{self.read_name_path()} parent control -> {parent!r}")

    parent_control = property(get_parent_control, set_parent_control)

    @property
    def controls(self) -> tuple["Control", ...]:
        """Controls whose parent control is this one, in insertion order."""
        return tuple(self._controls)

    # -- published properties -------------------------------------------

    @published("Left", converter=int)
    def left(self) -> int:
        return self._left

    @left.setter
    def left(self, value: int) -> None:
        self._left = value

    @published("Top", converter=int)
    def top(self) -> int:
        return self._top

    @top.setter
    def top(self, value: int) -> None:
        self._top = value

    @published("Width", converter=int)
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self._width = value

    @published("Height", converter=int)
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        self._height = value

    @published("Caption")
    def caption(self) -> str:
        return self._caption

    @caption.setter
    def caption(self, value: str) -> None:
        self._caption = value

    @published("Hint")
    def hint(self) -> str:
        return self._hint

    @hint.setter
    def hint(self, value: str) -> None:
        self._hint = value

    @published("Visible", converter=to_bool)
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        self._visible = bool(value)

    @published("Font")
    def font(self) -> Font:
        return self._font

    @font.setter
    def font(self, value: Font) -> None:
        # Copies into the owned font, raises AssignError for anything else
        self._font.assign(value)

    def destroy(self) -> None:
        self.set_parent_control(None)
        super().destroy()
