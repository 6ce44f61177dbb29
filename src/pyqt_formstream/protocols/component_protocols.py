"""
Component capability ABCs for the streaming engine.

The loader never asks a node "what class are you" to decide how to wire it.
It asks which capabilities the node implements:

- VisualChild: takes part in the visual parent/child tree (gets a parent control)
- TopLevelContainer: page/data-module kinds whose close fires the load lifecycle

Capabilities are plain ABCs so a component opts in by inheritance, and the
registry records them when the class is defined.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class VisualChild(ABC):
    """
    ABC for components placed inside a visual parent.

    Position hints (Left/Top) only exist on visual children.
    """

    @abstractmethod
    def get_parent_control(self) -> Optional[Any]:
        """
        Get the enclosing visual parent.

        Returns:
            The parent component, or None if detached or already collected.
        """
        pass

    @abstractmethod
    def set_parent_control(self, parent: Optional[Any]) -> None:
        """
        Attach to (or detach from, with None) a visual parent.

        Args:
            parent: The enclosing component. Held weakly.
        """
        pass


class TopLevelContainer(ABC):
    """
    ABC for composite roots (pages, data modules).

    When the loader closes one of these it runs, in order:
    unserialize, unserialize_children, loaded_children, loaded, preinit, init.
    """

    @abstractmethod
    def loaded_children(self) -> None:
        """Notify every owned component that loading finished."""
        pass

    @abstractmethod
    def loaded(self) -> None:
        """Called once all properties and children of the container are in place."""
        pass


# Order is part of the contract: properties applied, children loaded, then init
LIFECYCLE_HOOKS = (
    "unserialize",
    "unserialize_children",
    "loaded_children",
    "loaded",
    "preinit",
    "init",
)
