"""
File Type Registry - Resolve file type names sent by diff clients
"""

from __future__ import annotations

from models.diff import FileType

BUILTIN_FILE_TYPES = [
    FileType(name="PLAIN_TEXT", description="Text files", default_extension="txt"),
    FileType(name="Python", description="Python files", default_extension="py"),
    FileType(name="JAVA", description="Java source files", default_extension="java"),
    FileType(name="JavaScript", description="JavaScript files", default_extension="js"),
    FileType(name="JSON", description="JSON files", default_extension="json"),
    FileType(name="XML", description="XML files", default_extension="xml"),
    FileType(name="HTML", description="HTML files", default_extension="html"),
    FileType(name="CSS", description="Style sheets", default_extension="css"),
    FileType(name="YAML", description="YAML files", default_extension="yaml"),
    FileType(name="Markdown", description="Markdown files", default_extension="md"),
    FileType(name="SQL", description="SQL files", default_extension="sql"),
    FileType(name="Properties", description="Properties files", default_extension="properties"),
]


class FileTypeRegistry:
    """Name -> FileType lookup shared by the whole backend"""

    _instance = None

    def __init__(self, file_types: list[FileType] | None = None):
        self._file_types: dict[str, FileType] = {}
        for file_type in BUILTIN_FILE_TYPES if file_types is None else file_types:
            self.register(file_type)

    @classmethod
    def get_instance(cls) -> "FileTypeRegistry":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = FileTypeRegistry()
        return cls._instance

    def register(self, file_type: FileType):
        """Register a file type, replacing any type with the same name"""
        self._file_types[file_type.name] = file_type

    def find_file_type_by_name(self, name: str) -> FileType | None:
        """Exact, case-sensitive lookup. Unknown names resolve to None."""
        return self._file_types.get(name)

    def get_registered_file_types(self) -> list[FileType]:
        return list(self._file_types.values())
