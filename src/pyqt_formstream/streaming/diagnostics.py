"""
Diagnostic sinks for recoverable streaming errors.

- LoggingDiagnosticSink: default, logs each diagnostic as a warning
- CollectingDiagnosticSink: keeps diagnostics for the caller to inspect
- StrictDiagnosticSink: raises the diagnostic, turning any skip into a failure
"""

import logging
from typing import Iterator, Optional, Type

from pyqt_formstream.protocols import DiagnosticSink, get_diagnostic_sink, get_stream_config
from pyqt_formstream.streaming.exceptions import StreamDiagnostic

logger = logging.getLogger(__name__)


class LoggingDiagnosticSink:
    """Report diagnostics as warnings on the configured diagnostics logger."""

    def __init__(self, logger_name: Optional[str] = None):
        self._logger = logging.getLogger(logger_name or get_stream_config().diagnostic_logger_name)

    def report(self, diagnostic: StreamDiagnostic) -> None:
        self._logger.warning(str(diagnostic))


class CollectingDiagnosticSink:
    """Keep every reported diagnostic, in report order."""

    def __init__(self):
        self.diagnostics: list[StreamDiagnostic] = []

    def report(self, diagnostic: StreamDiagnostic) -> None:
        logger.debug(f"Collected diagnostic: {diagnostic}")
        self.diagnostics.append(diagnostic)

    def of_type(self, diagnostic_type: Type[StreamDiagnostic]) -> list[StreamDiagnostic]:
        return [d for d in self.diagnostics if isinstance(d, diagnostic_type)]

    def clear(self) -> None:
        self.diagnostics.clear()

    def __iter__(self) -> Iterator[StreamDiagnostic]:
        return iter(self.diagnostics)

    def __len__(self) -> int:
        return len(self.diagnostics)


class StrictDiagnosticSink:
    """Raise every diagnostic instead of skipping the offending tag."""

    def report(self, diagnostic: StreamDiagnostic) -> None:
        raise diagnostic


def resolve_diagnostic_sink(sink: Optional[DiagnosticSink] = None) -> DiagnosticSink:
    """Explicit sink, else the registered one, else a LoggingDiagnosticSink."""
    if sink is not None:
        return sink
    # Collecting sinks define __len__, so an empty one is falsy
    registered = get_diagnostic_sink()
    return registered if registered is not None else LoggingDiagnosticSink()
