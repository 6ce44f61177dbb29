"""
Component registry with metaclass auto-registration.

Components auto-register when their classes are defined, so the loader can
turn a CLASS attribute into a constructor without any reflection.

Design:
- ComponentMeta metaclass (Qt metaclass + ABCMeta) handles auto-registration
- registry: global ComponentRegistry of all concrete component types
- COMPONENT_CAPABILITIES: tracks which capability ABCs each component implements
- Abstract classes (abstract methods remaining) are never registered
"""

from abc import ABCMeta
from typing import Any, Dict, Optional, Set, Type, Union
import logging

from PyQt6.QtCore import QObject

from pyqt_formstream.core.properties import PropertyTable
from pyqt_formstream.protocols import VisualChild, TopLevelContainer

logger = logging.getLogger(__name__)

# Capability ABCs the registry tracks per class
CAPABILITY_TYPES = (VisualChild, TopLevelContainer)

# Maps component class -> set of capability ABCs
COMPONENT_CAPABILITIES: Dict[Type, Set[Type]] = {}


def short_class_name(class_name: str) -> str:
    """Last segment of a dotted or backslash-namespaced class name."""
    return class_name.replace("\\", ".").rsplit(".", 1)[-1]


def class_name_matches(klass: Type, class_name: str) -> bool:
    """True if `class_name` names `klass` by short or qualified name, ignoring case."""
    wanted = class_name.strip().replace("\\", ".").casefold()
    if not wanted:
        return False
    qualified = f"{klass.__module__}.{klass.__qualname__}".casefold()
    return wanted == qualified or short_class_name(wanted) == klass.__name__.casefold()


class ComponentRegistry:
    """
    Map from class name to constructible component type.

    Lookup is case-insensitive and accepts short names ("Page"), qualified
    Python names ("pyqt_formstream.forms.page.Page") and namespaced names
    ("VCL\\Forms\\Page", which resolves by its last segment).
    """

    def __init__(self):
        self._by_short_name: Dict[str, Type] = {}
        self._by_qualified_name: Dict[str, Type] = {}

    def register(self, klass: Type) -> None:
        """Register a component class under its short and qualified names."""
        key = klass.__name__.casefold()
        existing = self._by_short_name.get(key)
        if existing is not None and existing is not klass:
            logger.warning(
                f"Component class name '{klass.__name__}' already registered to "
                f"{existing.__module__}.{existing.__qualname__}. Overwriting with "
                f"{klass.__module__}.{klass.__qualname__}."
            )
        self._by_short_name[key] = klass
        self._by_qualified_name[f"{klass.__module__}.{klass.__qualname__}".casefold()] = klass

    def unregister(self, klass: Type) -> None:
        """Remove a component class from the registry."""
        key = klass.__name__.casefold()
        if self._by_short_name.get(key) is klass:
            del self._by_short_name[key]
        self._by_qualified_name.pop(f"{klass.__module__}.{klass.__qualname__}".casefold(), None)

    def resolve(self, class_name: str) -> Optional[Type]:
        """
        Find a registered class by name.

        Args:
            class_name: The CLASS attribute value from a form

        Returns:
            The class, or None if no such type is registered
        """
        wanted = class_name.strip().replace("\\", ".").casefold()
        if not wanted:
            return None
        klass = self._by_qualified_name.get(wanted)
        if klass is None:
            klass = self._by_short_name.get(short_class_name(wanted))
        return klass

    def create(self, class_name: Union[str, Type], owner: Optional[Any] = None) -> Optional[Any]:
        """
        Construct a registered component owned by `owner`.

        Args:
            class_name: Registered class name, or the class itself
            owner: Component that will own the new instance

        Returns:
            The new component, or None if the type is unknown or abstract
        """
        klass = self.resolve(class_name) if isinstance(class_name, str) else class_name
        if klass is None or getattr(klass, "__abstractmethods__", None):
            return None
        return klass(owner)

    def capabilities(self, klass: Type) -> Set[Type]:
        """Capability ABCs implemented by a component class."""
        return COMPONENT_CAPABILITIES.get(klass) or _capabilities_of(klass)

    def classes_with_capability(self, capability: Type) -> list[Type]:
        """All registered classes implementing a capability ABC."""
        return [
            klass for klass in self._by_qualified_name.values()
            if capability in self.capabilities(klass)
        ]

    def names(self) -> list[str]:
        return [klass.__name__ for klass in self._by_short_name.values()]

    def __contains__(self, class_name: str) -> bool:
        return self.resolve(class_name) is not None

    def __len__(self) -> int:
        return len(self._by_qualified_name)


# Global registry (populated by ComponentMeta)
registry = ComponentRegistry()


def _capabilities_of(klass: Type) -> Set[Type]:
    return {capability for capability in CAPABILITY_TYPES if issubclass(klass, capability)}


_QtMetaclass = type(QObject)


class ComponentMeta(_QtMetaclass, ABCMeta):
    """
    Metaclass for automatic component registration.

    Combines Qt's metaclass (components are QObjects) with ABCMeta
    (capabilities are ABCs), then:
    1. Builds the class's PropertyTable once, at definition time
    2. Registers concrete classes (no abstract methods) in the global registry
    3. Records which capability ABCs the class implements

    Example:
        class Edit(Control):
            @published("Text")
            def text(self) -> str: ...

    Edit is resolvable as "Edit" as soon as the class statement runs.
    """

    def __new__(mcs, name, bases, attrs, **kwargs):
        new_class = super().__new__(mcs, name, bases, attrs, **kwargs)

        PropertyTable.for_class(new_class)

        abstract_methods = getattr(new_class, "__abstractmethods__", None)
        if abstract_methods:
            logger.debug(
                f"Skipping registration for {name} - abstract methods remaining: "
                f"{set(abstract_methods)}"
            )
            return new_class

        registry.register(new_class)
        capabilities = _capabilities_of(new_class)
        COMPONENT_CAPABILITIES[new_class] = capabilities

        logger.debug(
            f"Auto-registered {name} with capabilities: "
            f"{[c.__name__ for c in capabilities]}"
        )
        return new_class


def get_component_class(class_name: str) -> Type:
    """
    Get component class by name.

    Raises:
        KeyError: If class_name is not registered
    """
    klass = registry.resolve(class_name)
    if klass is None:
        raise KeyError(
            f"No component registered with name '{class_name}'. "
            f"Available components: {registry.names()}"
        )
    return klass


def list_components_with_capability(capability: Type) -> list[Type]:
    """
    Find all registered components that implement a capability ABC.

    Example:
        >>> from pyqt_formstream.protocols import TopLevelContainer
        >>> [c.__name__ for c in list_components_with_capability(TopLevelContainer)]
        ['Page', 'DataModule']
    """
    return registry.classes_with_capability(capability)
