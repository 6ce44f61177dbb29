"""
Filer: builds a component tree from form tokens.

State for one read lives in a ParseContext:
- parents: stack of open OBJECT nodes, seeded with the root; a None entry
  stands for an OBJECT that could not be created, so close tags stay balanced
- properties: stack of open PROPERTY tags (the current property path)
- root_fields: public fields of the root, for wiring nodes by name

Token handling:
- OBJECT open   -> bind the root, create a node, or bind an existing field
- PROPERTY open -> extend the property path
- text          -> buffered on the innermost open PROPERTY
- PROPERTY close-> resolve the path on the current node and call the setter
- OBJECT close  -> pop; top-level containers get the load lifecycle

Problems that only affect one tag are reported to the diagnostic sink and
the tag is skipped. Nothing here raises for bad form content.
"""

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from pyqt_formstream.core.component import Component, ControlState
from pyqt_formstream.core.exceptions import DuplicateNameError, InvalidComponentNameError
from pyqt_formstream.core.properties import property_table
from pyqt_formstream.core.registry import ComponentRegistry, registry as default_registry
from pyqt_formstream.protocols import (
    DiagnosticSink, LIFECYCLE_HOOKS, StreamConfig, TopLevelContainer, VisualChild, get_stream_config,
)
from pyqt_formstream.streaming.array_codec import decode_array
from pyqt_formstream.streaming.diagnostics import resolve_diagnostic_sink
from pyqt_formstream.streaming.entities import decode_character_data
from pyqt_formstream.streaming.exceptions import (
    ArrayDecodeError,
    ComponentNameError,
    InvalidPropertyValueError,
    MissingFieldError,
    MissingPropertyTargetError,
    PropertyNotFoundError,
    StreamDiagnostic,
    UnknownClassError,
    UnrecognizedTagError,
)
from pyqt_formstream.streaming.tokenizer import Token, TokenKind

logger = logging.getLogger(__name__)

OBJECT_TAG = "OBJECT"
PROPERTY_TAG = "PROPERTY"

# Designer position hints written for non-visual components; never reported
POSITION_HINT_PROPERTIES = frozenset({"left", "top"})


@dataclass
class _OpenProperty:
    name: str
    target: Optional[Any]
    chunks: list[str] = field(default_factory=list)
    has_nested: bool = False


@dataclass
class ParseContext:
    """Mutable state of one read. Never shared between reads."""
    root: Component
    root_fields: Dict[str, Any]
    parents: list[Optional[Component]]
    properties: list[_OpenProperty] = field(default_factory=list)
    objects_opened: int = 0

    @property
    def current(self) -> Optional[Component]:
        return self.parents[-1] if self.parents else None


def collect_root_fields(root: Component) -> Dict[str, Any]:
    """
    Public fields of a root component.

    Declared as class annotations or set as public instance attributes:

        class MainPage(Page):
            Button1: Optional[Control] = None
    """
    fields: Dict[str, Any] = {}
    for klass in reversed(type(root).__mro__):
        for name in inspect.get_annotations(klass):
            if not name.startswith("_"):
                fields[name] = getattr(root, name, None)
    for name, value in vars(root).items():
        if not name.startswith("_"):
            fields[name] = value
    return fields


class Filer:
    """
    Token-driven component tree builder.

    Assign `root` first; that seeds the parent stack. Then feed tokens through
    dispatch(), or call tag_open/tag_close/character_data directly.
    """

    def __init__(
        self,
        registry: Optional[ComponentRegistry] = None,
        config: Optional[StreamConfig] = None,
        sink: Optional[DiagnosticSink] = None,
    ):
        self._registry = registry if registry is not None else default_registry
        self._config = config if config is not None else get_stream_config()
        self._sink = resolve_diagnostic_sink(sink)
        self.create_objects = self._config.create_objects
        self._context: Optional[ParseContext] = None
        self._handlers = {
            TokenKind.START: lambda token: self.tag_open(token.name, token.attributes),
            TokenKind.END: lambda token: self.tag_close(token.name),
            TokenKind.TEXT: lambda token: self.character_data(token.text),
        }

    # -- root binding ---------------------------------------------------

    @property
    def root(self) -> Optional[Component]:
        return self._context.root if self._context is not None else None

    @root.setter
    def root(self, value: Optional[Component]) -> None:
        if value is None:
            self._context = None
            return
        self._context = ParseContext(
            root=value,
            root_fields=collect_root_fields(value),
            parents=[value],
        )

    @property
    def parents(self) -> tuple[Optional[Component], ...]:
        return tuple(self._context.parents) if self._context is not None else ()

    @property
    def property_path(self) -> tuple[str, ...]:
        if self._context is None:
            return ()
        return tuple(entry.name for entry in self._context.properties)

    @property
    def current_node(self) -> Optional[Component]:
        return self._context.current if self._context is not None else None

    def _require_context(self) -> ParseContext:
        if self._context is None:
            raise RuntimeError("Filer has no root component; assign Filer.root before reading")
        return self._context

    # -- token entry points ---------------------------------------------

    def dispatch(self, token: Token) -> None:
        self._handlers[token.kind](token)

    def tag_open(self, tag: str, attributes: Dict[str, str]) -> None:
        if tag == OBJECT_TAG:
            self._open_object(attributes)
        elif tag == PROPERTY_TAG:
            self._open_property(attributes)
        else:
            self._report(UnrecognizedTagError(tag))

    def tag_close(self, tag: str) -> None:
        if tag == OBJECT_TAG:
            self._close_object()
        elif tag == PROPERTY_TAG:
            self._close_property()

    def character_data(self, text: str) -> None:
        context = self._require_context()
        if context.properties:
            context.properties[-1].chunks.append(text)

    # -- OBJECT ---------------------------------------------------------

    def _open_object(self, attributes: Dict[str, str]) -> None:
        context = self._require_context()
        class_name = attributes.get("CLASS", "")
        name = attributes.get("NAME", "")
        first = context.objects_opened == 0
        context.objects_opened += 1

        if first and context.root.inherits_from(class_name):
            self._bind_root(context, name)
            return

        klass = self._registry.resolve(class_name)
        if klass is None:
            self._skip_object(context, UnknownClassError(class_name, name))
            return

        if self.create_objects:
            node = self._registry.create(klass, context.root)
            if node is None:
                self._skip_object(context, UnknownClassError(class_name, name))
                return
        else:
            node = context.root_fields.get(name)
            if not isinstance(node, Component):
                self._skip_object(context, MissingFieldError(name))
                return

        node.control_state |= ControlState.LOADING
        try:
            node.name = name
        except (InvalidComponentNameError, DuplicateNameError) as e:
            node.control_state &= ~ControlState.LOADING
            if self.create_objects:
                node.destroy()
            self._skip_object(context, ComponentNameError(name, str(e)))
            return

        if name in context.root_fields:
            setattr(context.root, name, node)
            context.root_fields[name] = node

        if isinstance(node, VisualChild):
            parent = self._nearest_node(context)
            if parent is not None and parent is not node:
                node.set_parent_control(parent)

        context.parents.append(node)
        logger.debug(f"Opened {type(node).__name__} {node.read_name_path()} (depth {len(context.parents)})")

    def _bind_root(self, context: ParseContext, name: str) -> None:
        root = context.root
        root.control_state |= ControlState.LOADING
        if name:
            try:
                root.name = name
            except (InvalidComponentNameError, DuplicateNameError) as e:
                self._report(ComponentNameError(name, str(e)))
        context.parents.append(root)
        logger.debug(f"Bound root {type(root).__name__} as {root.name!r}")

    def _skip_object(self, context: ParseContext, diagnostic: StreamDiagnostic) -> None:
        self._report(diagnostic)
        context.parents.append(None)

    @staticmethod
    def _nearest_node(context: ParseContext) -> Optional[Component]:
        for node in reversed(context.parents):
            if node is not None:
                return node
        return None

    def _close_object(self) -> None:
        context = self._require_context()
        if len(context.parents) <= 1:
            logger.warning("Ignoring OBJECT close tag without a matching open tag")
            return

        node = context.parents.pop()
        if node is None:
            return

        node.control_state &= ~ControlState.LOADING
        if self.create_objects and isinstance(node, TopLevelContainer):
            logger.debug(f"Running load lifecycle on {node.read_name_path()}")
            for hook in LIFECYCLE_HOOKS:
                getattr(node, hook)()

    # -- PROPERTY -------------------------------------------------------

    def _open_property(self, attributes: Dict[str, str]) -> None:
        context = self._require_context()
        name = attributes.get("NAME", "")
        if context.properties:
            context.properties[-1].has_nested = True
            target = context.properties[0].target
        else:
            target = context.current
            # Nested properties share the outermost target; report it once
            if target is None:
                self._report(MissingPropertyTargetError(name))
        context.properties.append(_OpenProperty(name, target))

    def _close_property(self) -> None:
        context = self._require_context()
        if not context.properties:
            return
        entry = context.properties.pop()
        if entry.has_nested or not entry.chunks or entry.target is None:
            return
        path = [outer.name for outer in context.properties] + [entry.name]
        text = decode_character_data("".join(entry.chunks), self._config.use_html_entity_decode)
        self._assign(entry.target, path, text)

    def _assign(self, node: Any, path: list[str], text: str) -> None:
        """Resolve a property path on `node` and write `text` through the final setter."""
        dotted = ".".join(path)
        owner = node
        for segment in path[:-1]:
            info = property_table(owner).lookup(segment)
            owner = info.getter(owner) if info is not None and info.readable else None
            if owner is None:
                self._report(PropertyNotFoundError(_describe(node), dotted))
                return

        name = path[-1]
        info = property_table(owner).lookup(name)
        if info is None or not info.writable:
            if self._is_position_hint(owner, name):
                logger.debug(f"Ignoring {name} on non-visual {_describe(owner)}")
                return
            self._report(PropertyNotFoundError(_describe(owner), dotted))
            return

        value: Any = text
        if info.readable and isinstance(info.getter(owner), (list, dict)):
            try:
                value = decode_array(text)
            except ArrayDecodeError as e:
                self._report(e)
                return

        try:
            info.setter(owner, value)
        except (ValueError, TypeError) as e:
            self._report(InvalidPropertyValueError(_describe(owner), dotted, str(e)))

    @staticmethod
    def _is_position_hint(owner: Any, name: str) -> bool:
        return (
            name.casefold() in POSITION_HINT_PROPERTIES
            and isinstance(owner, Component)
            and not isinstance(owner, VisualChild)
        )

    def _report(self, diagnostic: StreamDiagnostic) -> None:
        self._sink.report(diagnostic)


def _describe(obj: Any) -> str:
    if isinstance(obj, Component):
        return f"{obj.class_name()}({obj.read_name_path()})"
    return type(obj).__name__
