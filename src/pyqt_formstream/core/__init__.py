"""
Component model.

Components, published property tables and the class registry the form
loader instantiates from.
"""

from .exceptions import ComponentError, InvalidComponentNameError, DuplicateNameError, AssignError
from .properties import Property, PropertyInfo, PropertyTable, published, property_table, to_bool
from .registry import (
    ComponentMeta,
    ComponentRegistry,
    registry,
    get_component_class,
    list_components_with_capability,
)
from .persistent import Persistent
from .component import Component, ControlState

__all__ = [
    "ComponentError",
    "InvalidComponentNameError",
    "DuplicateNameError",
    "AssignError",
    "Property",
    "PropertyInfo",
    "PropertyTable",
    "published",
    "property_table",
    "to_bool",
    "ComponentMeta",
    "ComponentRegistry",
    "registry",
    "get_component_class",
    "list_components_with_capability",
    "Persistent",
    "Component",
    "ControlState",
]
