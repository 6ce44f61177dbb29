"""Tests for capability protocols and loader configuration."""

import pytest


def test_control_implements_visual_child(qapp):
    """Test Control implements VisualChild and not TopLevelContainer."""
    from pyqt_formstream.protocols import TopLevelContainer, VisualChild
    from pyqt_formstream.ui import Control

    control = Control()
    assert isinstance(control, VisualChild)
    assert not isinstance(control, TopLevelContainer)


def test_containers_implement_top_level_container(qapp):
    """Test Page is visual and DataModule is not."""
    from pyqt_formstream.forms import DataModule, Page
    from pyqt_formstream.protocols import TopLevelContainer, VisualChild

    assert isinstance(Page(), TopLevelContainer)
    assert isinstance(Page(), VisualChild)
    assert isinstance(DataModule(), TopLevelContainer)
    assert not isinstance(DataModule(), VisualChild)


def test_lifecycle_hook_order():
    """Test lifecycle hooks are declared in load order."""
    from pyqt_formstream.protocols import LIFECYCLE_HOOKS

    assert LIFECYCLE_HOOKS == (
        "unserialize", "unserialize_children", "loaded_children", "loaded", "preinit", "init",
    )


def test_stream_config_defaults_and_override():
    """Test get_stream_config returns defaults until one is set."""
    from pyqt_formstream.protocols import StreamConfig, get_stream_config, set_stream_config

    config = get_stream_config()
    assert config.use_html_entity_decode is True
    assert config.create_objects is True
    assert config.case_folding is True

    custom = StreamConfig(create_objects=False)
    set_stream_config(custom)
    assert get_stream_config() is custom


def test_diagnostic_sink_registration():
    """Test a registered sink is returned and resolved by default."""
    from pyqt_formstream.protocols import get_diagnostic_sink, register_diagnostic_sink
    from pyqt_formstream.streaming import (
        CollectingDiagnosticSink, LoggingDiagnosticSink, resolve_diagnostic_sink,
    )

    assert get_diagnostic_sink() is None
    assert isinstance(resolve_diagnostic_sink(), LoggingDiagnosticSink)

    collecting = CollectingDiagnosticSink()
    register_diagnostic_sink(collecting)
    assert get_diagnostic_sink() is collecting
    assert resolve_diagnostic_sink() is collecting

    explicit = CollectingDiagnosticSink()
    assert resolve_diagnostic_sink(explicit) is explicit


def test_strict_sink_raises():
    """Test StrictDiagnosticSink raises the reported diagnostic."""
    from pyqt_formstream.streaming import StrictDiagnosticSink, UnrecognizedTagError

    with pytest.raises(UnrecognizedTagError):
        StrictDiagnosticSink().report(UnrecognizedTagError("DIV"))


def test_logging_sink_uses_configured_logger(caplog):
    """Test LoggingDiagnosticSink logs a warning on the diagnostics logger."""
    from pyqt_formstream.streaming import LoggingDiagnosticSink, MissingFieldError

    with caplog.at_level("WARNING", logger="pyqt_formstream.diagnostics"):
        LoggingDiagnosticSink().report(MissingFieldError("Button1"))

    assert any(
        record.name == "pyqt_formstream.diagnostics" and "Button1" in record.getMessage()
        for record in caplog.records
    )
