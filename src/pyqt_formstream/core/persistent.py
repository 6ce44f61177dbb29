"""
Persistent: base for objects with published properties.

Sub-objects such as Font are Persistent without being components. They have
no owner or name of their own, but the loader can still reach their
properties through a nested path (Font.Color).
"""

from typing import Any, Optional

from pyqt_formstream.core.exceptions import AssignError
from pyqt_formstream.core.properties import PropertyTable
from pyqt_formstream.core.registry import class_name_matches


class Persistent:
    """Object with a published property table and assign support."""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        PropertyTable.for_class(cls)

    def class_name(self) -> str:
        return type(self).__name__

    def class_name_is(self, name: str) -> bool:
        """True if this object's own class is called `name` (case-insensitive)."""
        return class_name_matches(type(self), name)

    def inherits_from(self, name: str) -> bool:
        """True if this object's class or any base class is called `name`."""
        return any(class_name_matches(base, name) for base in type(self).__mro__)

    def read_owner(self) -> Optional[Any]:
        """Owner of this object. Plain persistents have none."""
        return None

    def read_name_path(self) -> str:
        """Dotted path identifying this object from the top of its owner chain."""
        result = self.class_name()
        owner = self.read_owner()
        if owner is not None:
            prefix = owner.read_name_path()
            if prefix:
                result = f"{prefix}.{result}"
        return result

    def assign(self, source: Optional["Persistent"]) -> None:
        """Copy `source` into this object."""
        if source is None or not isinstance(source, Persistent):
            self.assign_error(source)
        source.assign_to(self)

    def assign_to(self, dest: "Persistent") -> None:
        """Copy this object into `dest`. Override to support assignment."""
        dest.assign_error(self)

    def assign_error(self, source: Any) -> None:
        source_name = "None" if source is None else type(source).__name__
        raise AssignError(source_name, self.class_name())
