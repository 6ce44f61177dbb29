"""Diagnostic sink protocol for pluggable error reporting.

Recoverable loader errors (unknown class, missing property, ...) never abort a
read. They are handed to a sink instead, so applications decide whether to log,
collect or raise them.
"""

from typing import Protocol, Optional


class DiagnosticSink(Protocol):
    """Protocol for receivers of recoverable streaming errors.

    Example:
        from pyqt_formstream.protocols import register_diagnostic_sink
        from pyqt_formstream.streaming import CollectingDiagnosticSink

        register_diagnostic_sink(CollectingDiagnosticSink())
    """

    def report(self, diagnostic: Exception) -> None:
        """Report one recoverable error.

        Args:
            diagnostic: A StreamDiagnostic describing what was skipped
        """
        ...


# Global sink instance (set by application)
_diagnostic_sink: Optional[DiagnosticSink] = None


def register_diagnostic_sink(sink: Optional[DiagnosticSink]) -> None:
    """Register the application-wide diagnostic sink.

    Args:
        sink: Object implementing DiagnosticSink, or None to restore the default
    """
    global _diagnostic_sink
    _diagnostic_sink = sink


def get_diagnostic_sink() -> Optional[DiagnosticSink]:
    """Get the registered diagnostic sink.

    Returns:
        Registered sink or None if not registered
    """
    return _diagnostic_sink
