"""
Component capability contracts and pluggable loader hooks.

ABC-based capabilities replace class-name checks when the loader decides how
to wire a node.
"""

from .component_protocols import (
    VisualChild,
    TopLevelContainer,
    LIFECYCLE_HOOKS,
)
from .stream_config import StreamConfig, set_stream_config, get_stream_config
from .diagnostic_sink import DiagnosticSink, register_diagnostic_sink, get_diagnostic_sink

__all__ = [
    "VisualChild",
    "TopLevelContainer",
    "LIFECYCLE_HOOKS",
    "StreamConfig",
    "set_stream_config",
    "get_stream_config",
    "DiagnosticSink",
    "register_diagnostic_sink",
    "get_diagnostic_sink",
]
