"""Tests for the array property codec."""

import pytest


def test_encode_uses_compact_json():
    """Test the current format is compact JSON."""
    from pyqt_formstream.streaming import encode_array

    assert encode_array(["a", 1, None]) == '["a",1,null]'
    assert encode_array({"k": "é"}) == '{"k":"é"}'


def test_encode_rejects_scalars():
    """Test only lists and dicts are encoded."""
    from pyqt_formstream.streaming import encode_array

    with pytest.raises(TypeError):
        encode_array("text")


def test_decode_json():
    """Test JSON arrays and objects decode."""
    from pyqt_formstream.streaming import decode_array

    assert decode_array(' ["a","b"] ') == ["a", "b"]
    assert decode_array('{"x": 1}') == {"x": 1}


def test_decode_legacy_list():
    """Test a sequentially keyed legacy array decodes as a list."""
    from pyqt_formstream.streaming import decode_array

    text = 'a:3:{i:0;s:5:"Hello";i:1;i:42;i:2;b:1;}'

    assert decode_array(text) == ["Hello", 42, True]


def test_decode_legacy_dict_and_nesting():
    """Test string keys decode as a dict and nested arrays recurse."""
    from pyqt_formstream.streaming import decode_array

    text = 'a:2:{s:4:"name";s:3:"Bob";s:5:"items";a:2:{i:0;d:1.5;i:1;N;}}'

    assert decode_array(text) == {"name": "Bob", "items": [1.5, None]}


def test_decode_legacy_non_sequential_keys():
    """Test integer keys that are not 0..n-1 keep dict form."""
    from pyqt_formstream.streaming import decode_array

    assert decode_array('a:2:{i:1;s:1:"a";i:5;s:1:"b";}') == {1: "a", 5: "b"}


def test_decode_legacy_utf8_lengths_in_bytes():
    """Test string lengths count UTF-8 bytes."""
    from pyqt_formstream.streaming import decode_array

    assert decode_array('a:1:{i:0;s:5:"Café";}') == ["Café"]


def test_decode_repairs_wrong_string_lengths():
    """Test text saved with wrong byte counts is repaired and retried."""
    from pyqt_formstream.streaming import decode_array

    assert decode_array('a:1:{i:0;s:4:"Café";}') == ["Café"]


def test_decode_rejects_objects():
    """Test serialized objects are refused."""
    from pyqt_formstream.streaming import ArrayDecodeError, decode_array

    with pytest.raises(ArrayDecodeError):
        decode_array('O:8:"stdClass":0:{}')


def test_decode_rejects_scalar_top_level():
    """Test the top-level value must be an array."""
    from pyqt_formstream.streaming import ArrayDecodeError, decode_array

    with pytest.raises(ArrayDecodeError):
        decode_array('s:3:"abc";')


def test_decode_garbage_raises():
    """Test undecodable text raises ArrayDecodeError with the text attached."""
    from pyqt_formstream.streaming import ArrayDecodeError, decode_array

    with pytest.raises(ArrayDecodeError) as exc_info:
        decode_array("not an array")

    assert exc_info.value.text == "not an array"


def test_decode_trailing_data_rejected():
    """Test trailing data after the array is an error."""
    from pyqt_formstream.streaming import ArrayDecodeError, decode_array

    with pytest.raises(ArrayDecodeError):
        decode_array('a:0:{}extra')


def test_decode_legacy_nesting_limit():
    """Test legacy arrays nested past the limit raise ArrayDecodeError."""
    from pyqt_formstream.streaming import ArrayDecodeError, decode_array
    from pyqt_formstream.streaming.array_codec import MAX_ARRAY_DEPTH

    def nested(depth):
        return "a:1:{i:0;" * depth + "N;" + "}" * depth

    assert decode_array(nested(MAX_ARRAY_DEPTH)) is not None
    with pytest.raises(ArrayDecodeError, match="nesting too deep"):
        decode_array(nested(MAX_ARRAY_DEPTH + 1))
    with pytest.raises(ArrayDecodeError):
        decode_array(nested(3000))


def test_decode_deep_json_raises_decode_error():
    """Test JSON too deep for the parser raises ArrayDecodeError."""
    from pyqt_formstream.streaming import ArrayDecodeError, decode_array

    with pytest.raises(ArrayDecodeError):
        decode_array("[" * 100000 + "]" * 100000)
