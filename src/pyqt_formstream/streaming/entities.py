"""
Entity decoding for property text.

Two passes, in this order:
1. named HTML entities (&amp;, &eacute;, ...)
2. decimal numeric references (&#65;)

The named pass runs first so "&amp;#65;" ends up as "A". Anything that does
not decode (unknown names, &#0;, surrogates, out-of-range code points) is left
exactly as written.
"""

import re
from html.entities import html5

_NAMED_ENTITY = re.compile(r"&([A-Za-z][A-Za-z0-9]*;)")
_NUMERIC_ENTITY = re.compile(r"&#([0-9]+);")

_MAX_CODE_POINT = 0x10FFFF


def decode_html_entities(text: str) -> str:
    """Decode named HTML5 entities terminated by ';'."""
    def replace(match: re.Match) -> str:
        return html5.get(match.group(1), match.group(0))
    return _NAMED_ENTITY.sub(replace, text)


def decode_numeric_entities(text: str) -> str:
    """Decode &#NNN; references; invalid ones pass through unchanged."""
    def replace(match: re.Match) -> str:
        code_point = int(match.group(1))
        if code_point < 1 or code_point > _MAX_CODE_POINT or 0xD800 <= code_point <= 0xDFFF:
            return match.group(0)
        return chr(code_point)
    return _NUMERIC_ENTITY.sub(replace, text)


def decode_character_data(text: str, enabled: bool = True) -> str:
    """Decode entities in one chunk of property text."""
    if not enabled or "&" not in text:
        return text
    return decode_numeric_entities(decode_html_entities(text))
