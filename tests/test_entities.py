"""Tests for entity decoding of property text."""


def test_named_entities_decoded():
    """Test common named entities decode."""
    from pyqt_formstream.streaming import decode_html_entities

    assert decode_html_entities("Caf&eacute; &amp; Bar") == "Café & Bar"
    assert decode_html_entities("&lt;b&gt;") == "<b>"


def test_unknown_named_entity_unchanged():
    """Test unknown or unterminated names pass through."""
    from pyqt_formstream.streaming import decode_html_entities

    assert decode_html_entities("&nosuchentity; &amp") == "&nosuchentity; &amp"


def test_numeric_entities_decoded():
    """Test decimal references decode to characters."""
    from pyqt_formstream.streaming import decode_numeric_entities

    assert decode_numeric_entities("&#65;&#66;&#8364;") == "AB€"


def test_invalid_numeric_entities_unchanged():
    """Test out-of-range, zero and surrogate references are left alone."""
    from pyqt_formstream.streaming import decode_numeric_entities

    assert decode_numeric_entities("&#0;") == "&#0;"
    assert decode_numeric_entities("&#55296;") == "&#55296;"
    assert decode_numeric_entities("&#9999999;") == "&#9999999;"
    assert decode_numeric_entities("&#x41;") == "&#x41;"


def test_named_pass_runs_before_numeric_pass():
    """Test an escaped numeric reference decodes fully."""
    from pyqt_formstream.streaming import decode_character_data

    assert decode_character_data("A&amp;#65;B") == "AAB"


def test_decoding_disabled():
    """Test decode_character_data returns text unchanged when disabled."""
    from pyqt_formstream.streaming import decode_character_data

    assert decode_character_data("A&amp;#65;B", enabled=False) == "A&amp;#65;B"


def test_text_without_ampersand_untouched():
    """Test plain text is returned as-is."""
    from pyqt_formstream.streaming import decode_character_data

    text = "plain caption"
    assert decode_character_data(text) is text
