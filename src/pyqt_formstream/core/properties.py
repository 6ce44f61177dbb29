"""
Published properties and per-type property tables.

Every streamable class declares its published properties explicitly:

    class Control(Component):
        @published("Caption")
        def caption(self) -> str:
            return self._caption

        @caption.setter
        def caption(self, value: str) -> None:
            self._caption = value

The loader never looks up methods by string. It asks the class's
PropertyTable, built once when the class is created, for the
(getter, setter) pair behind a published name.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional, Type


Getter = Callable[[Any], Any]
Setter = Callable[[Any, Any], None]


def to_bool(value: Any) -> bool:
    """Convert form text to bool ("true", "1", "yes" are True)."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


@dataclass(frozen=True)
class PropertyInfo:
    """Resolved accessors for one published property."""
    name: str
    getter: Optional[Getter] = None
    setter: Optional[Setter] = None

    @property
    def readable(self) -> bool:
        return self.getter is not None

    @property
    def writable(self) -> bool:
        return self.setter is not None


class Property:
    """
    Descriptor for a published property.

    Works like the builtin property, plus a published name (defaults to the
    attribute name) and an optional converter applied to string input, so
    form text such as "12" reaches an int setter as 12.
    """

    def __init__(
        self,
        fget: Optional[Getter] = None,
        fset: Optional[Setter] = None,
        *,
        name: Optional[str] = None,
        converter: Optional[Callable[[str], Any]] = None,
        doc: Optional[str] = None,
    ):
        self.fget = fget
        self.fset = fset
        self.name = name
        self.converter = converter
        self.attr_name: Optional[str] = None
        self.__doc__ = doc if doc is not None else getattr(fget, "__doc__", None)

    def __set_name__(self, owner: Type, attr_name: str) -> None:
        self.attr_name = attr_name
        if self.name is None:
            self.name = attr_name

    def __get__(self, obj: Any, objtype: Optional[Type] = None) -> Any:
        if obj is None:
            return self
        if self.fget is None:
            raise AttributeError(f"Property {self.name} is write-only")
        return self.fget(obj)

    def __set__(self, obj: Any, value: Any) -> None:
        if self.fset is None:
            raise AttributeError(f"Property {self.name} is read-only")
        self.fset(obj, self._convert(value))

    def _convert(self, value: Any) -> Any:
        if self.converter is not None and isinstance(value, str):
            return self.converter(value)
        return value

    def setter(self, fset: Setter) -> "Property":
        """Return a copy of this property with a setter attached."""
        return type(self)(self.fget, fset, name=self.name, converter=self.converter, doc=self.__doc__)

    def info(self) -> PropertyInfo:
        """Build the table entry for this property."""
        write = None
        if self.fset is not None:
            def write(obj: Any, value: Any) -> None:
                self.__set__(obj, value)
        return PropertyInfo(name=self.name, getter=self.fget, setter=write)


def published(name: Optional[str] = None, *, converter: Optional[Callable[[str], Any]] = None):
    """Decorator form of Property: @published("Caption") over the getter."""
    def decorator(fget: Getter) -> Property:
        return Property(fget, name=name, converter=converter)
    return decorator


# Cache of built tables, keyed by class
_TABLES: Dict[Type, "PropertyTable"] = {}


class PropertyTable:
    """Case-insensitive map from published name to PropertyInfo for one class."""

    def __init__(self, entries: Dict[str, PropertyInfo]):
        self._entries = {key.casefold(): info for key, info in entries.items()}

    @classmethod
    def for_class(cls, klass: Type) -> "PropertyTable":
        """
        Get (building on first use) the property table for a class.

        Walks the MRO from the base down so subclasses override inherited
        properties of the same published name.
        """
        table = _TABLES.get(klass)
        if table is None:
            entries: Dict[str, PropertyInfo] = {}
            for base in reversed(klass.__mro__):
                for value in vars(base).values():
                    if isinstance(value, Property) and value.name:
                        entries[value.name] = value.info()
            table = cls(entries)
            _TABLES[klass] = table
        return table

    def lookup(self, name: str) -> Optional[PropertyInfo]:
        """Find a property by published name, ignoring case."""
        return self._entries.get(name.casefold())

    def names(self) -> list[str]:
        return [info.name for info in self._entries.values()]

    def __contains__(self, name: str) -> bool:
        return name.casefold() in self._entries

    def __iter__(self) -> Iterator[PropertyInfo]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


def property_table(obj: Any) -> PropertyTable:
    """Property table for an instance or a class."""
    klass = obj if isinstance(obj, type) else type(obj)
    return PropertyTable.for_class(klass)
