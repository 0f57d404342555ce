"""Tests for the token-at-a-time JSON reader"""

import pytest

from services.json_reader import (
    BEGIN_ARRAY,
    BOOLEAN,
    END_DOCUMENT,
    NULL,
    NUMBER,
    JsonReader,
    JsonReadError,
)


class TestJsonReader:
    def test_reads_object_in_order(self):
        reader = JsonReader('{"b": "x", "a": [1, -2.5e3, true, null]}')
        reader.begin_object()

        assert reader.next_name() == "b"
        assert reader.next_string() == "x"
        assert reader.next_name() == "a"
        assert reader.peek() == BEGIN_ARRAY
        reader.begin_array()
        assert reader.peek() == NUMBER
        assert reader.next_string() == "1"
        assert reader.next_string() == "-2.5e3"
        assert reader.peek() == BOOLEAN
        assert reader.next_boolean() is True
        assert reader.peek() == NULL
        reader.next_null()
        assert not reader.has_next()
        reader.end_array()
        assert not reader.has_next()
        reader.end_object()
        assert reader.peek() == END_DOCUMENT

    def test_empty_document(self):
        assert not JsonReader("  \n ").has_next()

    def test_string_escapes(self):
        reader = JsonReader(r'["a\"bé\n"]')
        reader.begin_array()
        assert reader.next_string() == 'a"bé\n'

    def test_skip_value_leaves_reader_on_next_name(self):
        reader = JsonReader('{"skip": {"x": [1, {"y": null}], "z": "w"}, "keep": false}')
        reader.begin_object()
        reader.next_name()
        reader.skip_value()

        assert reader.next_name() == "keep"
        assert reader.next_boolean() is False

    def test_skip_scalar(self):
        reader = JsonReader('[3, "s"]')
        reader.begin_array()
        reader.skip_value()
        assert reader.next_string() == "s"

    def test_does_not_read_past_requested_tokens(self):
        reader = JsonReader('{"a": "b"} trailing {{{')
        reader.begin_object()
        reader.next_name()
        reader.next_string()
        reader.end_object()

    @pytest.mark.parametrize(
        "text",
        ['{"a" "b"}', '{"a": "b" "c": 1}', "[1 2]", "{a: 1}", '{"a": tru}', '{"a": "unterminated'],
    )
    def test_malformed(self, text):
        reader = JsonReader(text)
        with pytest.raises(JsonReadError):
            reader.begin_object() if text.startswith("{") else reader.begin_array()
            while True:
                reader.skip_value()

    def test_wrong_token_type(self):
        reader = JsonReader('{"a": true}')
        reader.begin_object()
        reader.next_name()
        with pytest.raises(JsonReadError, match="Expected a string"):
            reader.next_string()
