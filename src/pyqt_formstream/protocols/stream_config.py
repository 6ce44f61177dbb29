"""Base configuration for form streaming.

Provides hooks for applications to customize how XML forms are loaded.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class StreamConfig:
    """Configuration for the XML form loader.

    Applications can subclass this to provide custom configuration.

    Attributes:
        use_html_entity_decode: Decode HTML and numeric entities in property text
        create_objects: Instantiate OBJECT tags (False binds them to existing root fields)
        case_folding: Upper-case tag and attribute names before matching
        diagnostic_logger_name: Logger used by the default diagnostic sink
    """

    use_html_entity_decode: bool = True
    create_objects: bool = True
    case_folding: bool = True
    diagnostic_logger_name: str = "pyqt_formstream.diagnostics"


# Global config instance (set by application)
_stream_config: Optional[StreamConfig] = None


def set_stream_config(config: Optional[StreamConfig]) -> None:
    """Set the global streaming configuration.

    Args:
        config: StreamConfig instance, or None to restore defaults
    """
    global _stream_config
    _stream_config = config


def get_stream_config() -> StreamConfig:
    """Get the current streaming configuration.

    Returns:
        Current StreamConfig or default if not set
    """
    if _stream_config is None:
        return StreamConfig()
    return _stream_config
