"""pytest configuration and fixtures for pyqt-formstream tests."""

import pytest
from PyQt6.QtCore import QCoreApplication

from pyqt_formstream.protocols import register_diagnostic_sink, set_stream_config
from pyqt_formstream.streaming import CollectingDiagnosticSink


@pytest.fixture(scope="session")
def qapp():
    """Create QCoreApplication instance for tests."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def reset_stream_globals():
    """Restore default config and sink after each test."""
    yield
    set_stream_config(None)
    register_diagnostic_sink(None)


@pytest.fixture
def sink():
    """Diagnostic sink that keeps everything reported."""
    return CollectingDiagnosticSink()
