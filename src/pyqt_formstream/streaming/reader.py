"""
Reader: loads a component and everything it contains from an XML form.

    page = MainPage()
    parse_into(page, xml_text)

One read is one synchronous pass. A ParseError (malformed XML) aborts it;
every other problem is reported to the diagnostic sink and skipped, so a
successful return means "best-effort tree", not "fully verified tree".
"""

import logging
from pathlib import Path
from typing import Optional, Union

from pyqt_formstream.core.component import Component, ControlState
from pyqt_formstream.core.registry import ComponentRegistry
from pyqt_formstream.protocols import DiagnosticSink, StreamConfig
from pyqt_formstream.streaming.exceptions import ResourceNotFoundError
from pyqt_formstream.streaming.filer import Filer
from pyqt_formstream.streaming.tokenizer import tokenize

logger = logging.getLogger(__name__)


class Reader(Filer):
    """Filer that pulls its tokens from an XML document."""

    def read_root_component(self, root: Component, stream: Union[str, bytes]) -> None:
        """
        Read `stream` into `root`, creating and configuring its components.

        Args:
            root: Component the document's root OBJECT binds to
            stream: Complete XML document

        Raises:
            ParseError: If the document is not well-formed
        """
        self.root = root
        try:
            for token in tokenize(stream, case_folding=self._config.case_folding):
                self.dispatch(token)
        finally:
            root.control_state &= ~ControlState.LOADING
        logger.debug(f"Read {root.read_name_path()}: {root.component_count} components")


def parse_into(
    root: Component,
    xml_text: Union[str, bytes],
    *,
    registry: Optional[ComponentRegistry] = None,
    config: Optional[StreamConfig] = None,
    sink: Optional[DiagnosticSink] = None,
) -> None:
    """Read a form document into `root` with a fresh parse context."""
    Reader(registry=registry, config=config, sink=sink).read_root_component(root, xml_text)


def load_resource(
    root: Component,
    path: Union[str, Path],
    *,
    registry: Optional[ComponentRegistry] = None,
    config: Optional[StreamConfig] = None,
    sink: Optional[DiagnosticSink] = None,
) -> None:
    """
    Read a form file into `root`.

    Raises:
        ResourceNotFoundError: If `path` is not a file
        ParseError: If the file is not well-formed
    """
    resource = Path(path)
    if not resource.is_file():
        raise ResourceNotFoundError(str(resource))
    logger.debug(f"Loading form resource {resource}")
    parse_into(root, resource.read_bytes(), registry=registry, config=config, sink=sink)
