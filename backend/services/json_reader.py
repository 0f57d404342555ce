"""
JSON Reader - Pull tokens from a JSON document one at a time

Nothing past the last token asked for is read, so a caller can stop at any
point without the rest of the document having to be well-formed. Skipping a
value keeps an explicit scope stack and does not recurse.
"""

from __future__ import annotations

import re
from json.decoder import JSONDecodeError, scanstring
from json.scanner import NUMBER_RE

WHITESPACE = re.compile(r"[ \t\n\r]*")

# Tokens
BEGIN_OBJECT = "BEGIN_OBJECT"
END_OBJECT = "END_OBJECT"
BEGIN_ARRAY = "BEGIN_ARRAY"
END_ARRAY = "END_ARRAY"
NAME = "NAME"
STRING = "STRING"
NUMBER = "NUMBER"
BOOLEAN = "BOOLEAN"
NULL = "NULL"
END_DOCUMENT = "END_DOCUMENT"

# Scopes
_EMPTY_DOCUMENT = "EMPTY_DOCUMENT"
_NONEMPTY_DOCUMENT = "NONEMPTY_DOCUMENT"
_EMPTY_OBJECT = "EMPTY_OBJECT"
_DANGLING_NAME = "DANGLING_NAME"
_NONEMPTY_OBJECT = "NONEMPTY_OBJECT"
_EMPTY_ARRAY = "EMPTY_ARRAY"
_NONEMPTY_ARRAY = "NONEMPTY_ARRAY"


class JsonReadError(ValueError):
    """Input is not the JSON structure the caller asked for"""


class JsonReader:
    """Streaming reader over a JSON text"""

    def __init__(self, text: str):
        self._text = text
        self._pos = 0
        self._scopes = [_EMPTY_DOCUMENT]
        self._peeked: str | None = None

    def peek(self) -> str:
        """Type of the next token, without consuming it"""
        if self._peeked is None:
            self._peeked = self._do_peek()
        return self._peeked

    def has_next(self) -> bool:
        return self.peek() not in (END_OBJECT, END_ARRAY, END_DOCUMENT)

    def begin_object(self):
        self._consume(BEGIN_OBJECT, 1)
        self._scopes.append(_EMPTY_OBJECT)

    def end_object(self):
        self._consume(END_OBJECT, 1)
        self._scopes.pop()

    def begin_array(self):
        self._consume(BEGIN_ARRAY, 1)
        self._scopes.append(_EMPTY_ARRAY)

    def end_array(self):
        self._consume(END_ARRAY, 1)
        self._scopes.pop()

    def next_name(self) -> str:
        self._expect(NAME)
        return self._read_string()

    def next_string(self) -> str:
        """Read a string; a number is returned as its literal text"""
        token = self.peek()
        if token == STRING:
            return self._read_string()
        if token == NUMBER:
            return self._read_number()
        raise self._error(f"Expected a string but was {token}")

    def next_boolean(self) -> bool:
        self._expect(BOOLEAN)
        value = self._text.startswith("true", self._pos)
        self._consume(BOOLEAN, 4 if value else 5)
        return value

    def next_null(self):
        self._consume(NULL, 4)

    def skip_value(self):
        """Skip the next value, however deeply nested"""
        depth = 0
        while True:
            token = self.peek()
            if token == BEGIN_OBJECT:
                self.begin_object()
                depth += 1
            elif token == BEGIN_ARRAY:
                self.begin_array()
                depth += 1
            elif token == END_OBJECT:
                self.end_object()
                depth -= 1
            elif token == END_ARRAY:
                self.end_array()
                depth -= 1
            elif token in (NAME, STRING):
                self._read_string()
            elif token == NUMBER:
                self._read_number()
            elif token == BOOLEAN:
                self.next_boolean()
            elif token == NULL:
                self.next_null()
            else:
                raise self._error("Unexpected end of input")
            if depth <= 0:
                return

    def _do_peek(self) -> str:
        scope = self._scopes[-1]
        char = self._next_non_whitespace()

        if scope == _EMPTY_ARRAY:
            self._scopes[-1] = _NONEMPTY_ARRAY
            if char == "]":
                return END_ARRAY
        elif scope == _NONEMPTY_ARRAY:
            if char == "]":
                return END_ARRAY
            if char != ",":
                raise self._error("Unterminated array")
            self._pos += 1
            char = self._next_non_whitespace()
        elif scope in (_EMPTY_OBJECT, _NONEMPTY_OBJECT):
            if char == "}":
                return END_OBJECT
            if scope == _NONEMPTY_OBJECT:
                if char != ",":
                    raise self._error("Unterminated object")
                self._pos += 1
                char = self._next_non_whitespace()
            if char != '"':
                raise self._error("Expected a name")
            self._scopes[-1] = _DANGLING_NAME
            return NAME
        elif scope == _DANGLING_NAME:
            if char != ":":
                raise self._error("Expected ':'")
            self._pos += 1
            self._scopes[-1] = _NONEMPTY_OBJECT
            char = self._next_non_whitespace()
        elif scope == _EMPTY_DOCUMENT:
            if char == "":
                return END_DOCUMENT
            self._scopes[-1] = _NONEMPTY_DOCUMENT
        else:
            return END_DOCUMENT

        return self._value_token(char)

    def _value_token(self, char: str) -> str:
        if char == "{":
            return BEGIN_OBJECT
        if char == "[":
            return BEGIN_ARRAY
        if char == '"':
            return STRING
        if char == "-" or char.isdigit():
            return NUMBER
        if self._text.startswith("true", self._pos) or self._text.startswith("false", self._pos):
            return BOOLEAN
        if self._text.startswith("null", self._pos):
            return NULL
        if char == "":
            raise self._error("Unexpected end of input")
        raise self._error(f"Unexpected character {char!r}")

    def _next_non_whitespace(self) -> str:
        self._pos = WHITESPACE.match(self._text, self._pos).end()
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _expect(self, token: str):
        actual = self.peek()
        if actual != token:
            raise self._error(f"Expected {token} but was {actual}")

    def _consume(self, token: str, length: int):
        self._expect(token)
        self._pos += length
        self._peeked = None

    def _read_string(self) -> str:
        try:
            value, self._pos = scanstring(self._text, self._pos + 1, True)
        except JSONDecodeError as e:
            raise self._error(e.msg) from e
        self._peeked = None
        return value

    def _read_number(self) -> str:
        match = NUMBER_RE.match(self._text, self._pos)
        if match is None:
            raise self._error("Malformed number")
        self._pos = match.end()
        self._peeked = None
        return match.group()

    def _error(self, message: str) -> JsonReadError:
        line = self._text.count("\n", 0, self._pos) + 1
        column = self._pos - self._text.rfind("\n", 0, self._pos)
        return JsonReadError(f"{message} at line {line} column {column}")
