"""
Component: base class of everything the form loader can instantiate.

Components are QObjects. The owner is the QObject parent, so Qt's object tree
mirrors ownership and owned components are released with their owner. The
name is mirrored to objectName.

Ownership (who destroys whom) is distinct from the visual parent used by
controls, see ui.control.
"""

import logging
import re
from enum import IntFlag
from typing import Iterator, Optional

from PyQt6.QtCore import QObject

from pyqt_formstream.core.exceptions import DuplicateNameError, InvalidComponentNameError
from pyqt_formstream.core.persistent import Persistent
from pyqt_formstream.core.properties import published
from pyqt_formstream.core.registry import ComponentMeta

logger = logging.getLogger(__name__)

_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class ControlState(IntFlag):
    """Transient state flags of a component."""
    NONE = 0
    LOADING = 1
    DESIGNING = 2


class Component(QObject, Persistent, metaclass=ComponentMeta):
    """
    Named, owned component with lifecycle hooks.

    Names are unique among the components of one owner. Setting a name that
    a sibling already uses raises DuplicateNameError. The empty name is
    exempt: any number of unnamed components can share an owner, and they
    are never found by find_component.
    """

    def __init__(self, owner: Optional["Component"] = None):
        super().__init__(owner)
        self._owner: Optional[Component] = None
        self._name = ""
        self._tag = 0
        self._components: list[Component] = []
        self._child_names: dict[str, Component] = {}
        self._control_state = ControlState.NONE
        if owner is not None:
            owner.insert_component(self)

    # -- published properties -------------------------------------------

    @published("Name")
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        value = str(value)
        if value == self._name:
            return
        if value and not _NAME_PATTERN.match(value):
            raise InvalidComponentNameError(value)

        owner = self._owner
        if owner is not None:
            if value:
                existing = owner.find_component(value)
                if existing is not None and existing is not self:
                    raise DuplicateNameError(value)
            if self._name:
                owner._child_names.pop(self._name, None)
            if value:
                owner._child_names[value] = self

        self._name = value
        self.setObjectName(value)

    @published("Tag", converter=int)
    def tag(self) -> int:
        return self._tag

    @tag.setter
    def tag(self, value: int) -> None:
        self._tag = int(value)

    # -- ownership ------------------------------------------------------

    @property
    def owner(self) -> Optional["Component"]:
        return self._owner

    def read_owner(self) -> Optional["Component"]:
        return self._owner

    def read_name_path(self) -> str:
        result = self._name or self.class_name()
        if self._owner is not None:
            prefix = self._owner.read_name_path()
            if prefix:
                result = f"{prefix}.{result}"
        return result

    @property
    def components(self) -> tuple["Component", ...]:
        return tuple(self._components)

    @property
    def component_count(self) -> int:
        return len(self._components)

    def iter_components(self) -> Iterator["Component"]:
        yield from list(self._components)

    def find_component(self, name: str) -> Optional["Component"]:
        """Find an owned component by name."""
        return self._child_names.get(name)

    def insert_component(self, component: "Component") -> None:
        """Take ownership of a component."""
        if component in self._components:
            return
        if component._owner is not None and component._owner is not self:
            component._owner.remove_component(component)
        self._components.append(component)
        component._owner = self
        component.setParent(self)
        if component._name:
            self._child_names[component._name] = component

    def remove_component(self, component: "Component") -> None:
        """Release ownership of a component without destroying it."""
        if component not in self._components:
            return
        self._components.remove(component)
        if component._name and self._child_names.get(component._name) is component:
            del self._child_names[component._name]
        component._owner = None
        component.setParent(None)

    def destroy(self) -> None:
        """Destroy owned components, then detach from the owner."""
        for child in list(self._components):
            child.destroy()
        self._components.clear()
        self._child_names.clear()
        if self._owner is not None:
            self._owner.remove_component(self)

    # -- state ----------------------------------------------------------

    @property
    def control_state(self) -> ControlState:
        return self._control_state

    @control_state.setter
    def control_state(self, value: ControlState) -> None:
        self._control_state = ControlState(value)

    @property
    def is_loading(self) -> bool:
        return bool(self._control_state & ControlState.LOADING)

    # -- lifecycle hooks (fired by the loader on top-level containers) ---

    def unserialize(self) -> None:
        """Restore persisted state. Components without persisted state do nothing."""
        pass

    def unserialize_children(self) -> None:
        for component in self.iter_components():
            component.unserialize()

    def loaded_children(self) -> None:
        for component in self.iter_components():
            component.loaded()

    def loaded(self) -> None:
        """Called once this component's properties have all been read."""
        pass

    def preinit(self) -> None:
        for component in self.iter_components():
            component.preinit()

    def init(self) -> None:
        for component in self.iter_components():
            component.init()

    def __repr__(self) -> str:
        return f"<{self.class_name()} name={self._name!r}>"
