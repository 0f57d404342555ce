"""
Content List Request Parser - Turn a diff request body into a DiffRequest

The body is read token by token in input order. A request-level "fileType"
only applies to a "contents" array that comes after it, and reading stops at
the first entry without content.
"""

from __future__ import annotations

from models.diff import ContentEntry, DiffRequest, FileType
from services.file_type_registry import FileTypeRegistry
from services.json_reader import NULL, JsonReader, JsonReadError

EMPTY_REQUEST = "Empty request"
CONTENT_NOT_SPECIFIED = "content is not specified"


class ContentListRequestError(Exception):
    """Request is well-formed but not acceptable; message goes back to the client"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedRequestError(Exception):
    """Request body could not be read as the expected structure"""


class ContentListRequestParser:
    """Parse diff requests against a file type registry"""

    def __init__(self, file_type_registry: FileTypeRegistry):
        self.file_type_registry = file_type_registry

    def parse(self, body: bytes | str) -> DiffRequest:
        """Parse a request body. Raises ContentListRequestError or MalformedRequestError."""
        if isinstance(body, bytes):
            try:
                body = body.decode("utf-8")
            except UnicodeDecodeError as e:
                raise MalformedRequestError(f"Request body is not valid UTF-8: {e}") from e

        request = DiffRequest()
        try:
            self._read_request(JsonReader(body), request)
        except JsonReadError as e:
            raise MalformedRequestError(f"Malformed JSON: {e}") from e

        if not request.entries:
            raise ContentListRequestError(EMPTY_REQUEST)
        return request

    def _read_request(self, reader: JsonReader, request: DiffRequest):
        if not reader.has_next():
            return

        reader.begin_object()
        while reader.has_next():
            name = reader.next_name()
            if name == "fileType":
                request.file_type_name = _next_optional_string(reader)
            elif name == "focused":
                request.focused = reader.next_boolean()
            elif name == "windowTitle":
                window_title = _next_optional_string(reader)
                request.window_title = window_title if window_title and window_title.strip() else None
            elif name == "contents":
                self._read_contents(reader, request)
            else:
                reader.skip_value()
        reader.end_object()

    def _read_contents(self, reader: JsonReader, request: DiffRequest):
        """Append entries of a "contents" array, failing on the first entry without content"""
        if reader.peek() == NULL:
            reader.next_null()
            return

        default_file_type = self._find_file_type(request.file_type_name)

        reader.begin_array()
        while reader.has_next():
            title = None
            file_type_name = None
            content = None

            reader.begin_object()
            while reader.has_next():
                name = reader.next_name()
                if name == "title":
                    title = _next_optional_string(reader)
                elif name == "fileType":
                    file_type_name = _next_optional_string(reader)
                elif name == "content":
                    content = _next_optional_string(reader)
                else:
                    reader.skip_value()
            reader.end_object()

            if content is None:
                raise ContentListRequestError(CONTENT_NOT_SPECIFIED)

            request.entries.append(
                ContentEntry(
                    title="" if title is None or not title.strip() else title,
                    file_type=default_file_type if file_type_name is None else self._find_file_type(file_type_name),
                    content=content,
                )
            )
        reader.end_array()

    def _find_file_type(self, name: str | None) -> FileType | None:
        if name is None:
            return None
        return self.file_type_registry.find_file_type_by_name(name)


def _next_optional_string(reader: JsonReader) -> str | None:
    """Read a string value, null as absent"""
    if reader.peek() == NULL:
        reader.next_null()
        return None
    return reader.next_string()
