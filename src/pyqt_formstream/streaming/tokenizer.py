"""
Tag reader: XML form text -> flat token stream.

Built on QXmlStreamReader, a pull parser. The loader iterates tokens in an
explicit loop instead of receiving reentrant callbacks, so the Filer can be
driven (and tested) from any token source.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Optional, Union

from PyQt6.QtCore import QXmlStreamReader

from pyqt_formstream.streaming.exceptions import ParseError

logger = logging.getLogger(__name__)

TokenType = QXmlStreamReader.TokenType


class TokenKind(Enum):
    START = "start"
    END = "end"
    TEXT = "text"


@dataclass(frozen=True)
class Token:
    """One tag or text event, in document order."""
    kind: TokenKind
    name: str = ""
    attributes: Dict[str, str] = field(default_factory=dict)
    text: str = ""
    line: Optional[int] = None


def tokenize(stream: Union[str, bytes], *, case_folding: bool = True) -> Iterator[Token]:
    """
    Yield tokens for a complete XML document.

    Args:
        stream: Document text; bytes are decoded by Qt according to the XML
            declaration (UTF-8 by default)
        case_folding: Upper-case tag and attribute names

    Raises:
        ParseError: When the document is not well-formed. Tokens before the
            error have already been yielded.
    """
    reader = QXmlStreamReader(stream)

    while not reader.atEnd():
        token_type = reader.readNext()

        if reader.hasError():
            raise ParseError(reader.errorString(), reader.lineNumber(), reader.columnNumber())

        if token_type == TokenType.StartElement:
            yield Token(
                TokenKind.START,
                name=_fold(reader.name(), case_folding),
                attributes=_read_attributes(reader, case_folding),
                line=reader.lineNumber(),
            )
        elif token_type == TokenType.EndElement:
            yield Token(TokenKind.END, name=_fold(reader.name(), case_folding), line=reader.lineNumber())
        elif token_type == TokenType.Characters:
            yield Token(TokenKind.TEXT, text=reader.text(), line=reader.lineNumber())
        else:
            # StartDocument, EndDocument, Comment, DTD, ProcessingInstruction
            logger.debug(f"Skipping {token_type.name} token at line {reader.lineNumber()}")

    if reader.hasError():
        raise ParseError(reader.errorString(), reader.lineNumber(), reader.columnNumber())


def _fold(name: str, case_folding: bool) -> str:
    return name.upper() if case_folding else name


def _read_attributes(reader: QXmlStreamReader, case_folding: bool) -> Dict[str, str]:
    attributes = reader.attributes()
    result: Dict[str, str] = {}
    for index in range(len(attributes)):
        attribute = attributes[index]
        result[_fold(attribute.qualifiedName(), case_folding)] = attribute.value()
    return result
