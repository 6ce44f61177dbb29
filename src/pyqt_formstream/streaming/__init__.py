"""
XML form streaming.

Tokenizer, entity decoding, array codec, the Filer tree builder and the
Reader entry points.
"""

from .exceptions import (
    FormStreamError,
    ParseError,
    ResourceNotFoundError,
    StreamDiagnostic,
    UnrecognizedTagError,
    UnknownClassError,
    MissingFieldError,
    MissingPropertyTargetError,
    ComponentNameError,
    PropertyNotFoundError,
    ArrayDecodeError,
    InvalidPropertyValueError,
)
from .tokenizer import Token, TokenKind, tokenize
from .entities import decode_html_entities, decode_numeric_entities, decode_character_data
from .array_codec import ARRAY_FORMAT_VERSION, encode_array, decode_array
from .diagnostics import (
    LoggingDiagnosticSink,
    CollectingDiagnosticSink,
    StrictDiagnosticSink,
    resolve_diagnostic_sink,
)
from .filer import Filer, ParseContext, collect_root_fields
from .reader import Reader, parse_into, load_resource

__all__ = [
    "FormStreamError",
    "ParseError",
    "ResourceNotFoundError",
    "StreamDiagnostic",
    "UnrecognizedTagError",
    "UnknownClassError",
    "MissingFieldError",
    "MissingPropertyTargetError",
    "ComponentNameError",
    "PropertyNotFoundError",
    "ArrayDecodeError",
    "InvalidPropertyValueError",
    "Token",
    "TokenKind",
    "tokenize",
    "decode_html_entities",
    "decode_numeric_entities",
    "decode_character_data",
    "ARRAY_FORMAT_VERSION",
    "encode_array",
    "decode_array",
    "LoggingDiagnosticSink",
    "CollectingDiagnosticSink",
    "StrictDiagnosticSink",
    "resolve_diagnostic_sink",
    "Filer",
    "ParseContext",
    "collect_root_fields",
    "Reader",
    "parse_into",
    "load_resource",
]
