"""
Streaming exceptions.

Two families:
- fatal errors (ParseError, ResourceNotFoundError) propagate to the caller
- StreamDiagnostic subclasses describe recoverable problems; the loader hands
  them to a DiagnosticSink and carries on with the rest of the document
"""

from typing import Optional


class FormStreamError(Exception):
    """Base class for all form streaming errors."""


class ParseError(FormStreamError):
    """Raised when the XML stream is not well-formed. Aborts the read."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column
        location = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"Error parsing form stream: {message}{location}")


class ResourceNotFoundError(FormStreamError):
    """Raised when a form resource file does not exist."""

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(f"Resource not found: {resource}")


class StreamDiagnostic(FormStreamError):
    """Recoverable problem; the affected tag is skipped."""


class UnrecognizedTagError(StreamDiagnostic):
    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Error reading resource file, tag ({tag}) not recognized")


class UnknownClassError(StreamDiagnostic):
    def __init__(self, class_name: str, name: str = ""):
        self.class_name = class_name
        self.name = name
        super().__init__(f"Error reading resource file, class ({class_name}) doesn't exist")


class MissingFieldError(StreamDiagnostic):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Error reading resource file, object ({name}) not found")


class MissingPropertyTargetError(StreamDiagnostic):
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Error reading resource file, property ({name}) doesn't have an object to assign to"
        )


class ComponentNameError(StreamDiagnostic):
    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Error naming component ({name}): {reason}")


class PropertyNotFoundError(StreamDiagnostic):
    def __init__(self, class_name: str, property_path: str):
        self.class_name = class_name
        self.property_path = property_path
        super().__init__(f"Error setting property ({class_name}::{property_path}), doesn't exist")


class ArrayDecodeError(StreamDiagnostic):
    def __init__(self, text: str, reason: str = ""):
        self.text = text
        self.reason = reason
        preview = text if len(text) <= 40 else text[:37] + "..."
        suffix = f": {reason}" if reason else ""
        super().__init__(f"Error decoding array value {preview!r}{suffix}")


class InvalidPropertyValueError(StreamDiagnostic):
    def __init__(self, class_name: str, property_path: str, reason: str):
        self.class_name = class_name
        self.property_path = property_path
        self.reason = reason
        super().__init__(f"Error setting property ({class_name}::{property_path}): {reason}")
