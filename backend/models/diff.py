"""Diff-related data models"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class FileType(BaseModel):
    """A registered file type used to interpret and highlight content"""

    name: str
    description: str
    default_extension: str = ""
    is_binary: bool = False


class ContentEntry(BaseModel):
    """One titled block of text shown as a side of a diff"""

    title: str = ""
    file_type: FileType | None = None
    content: str


class DiffRequest(BaseModel):
    """Parsed request to open a diff view"""

    file_type_name: str | None = None  # Request-level default, as read
    window_title: str | None = None
    focused: bool = True
    entries: list[ContentEntry] = []

    @property
    def titles(self) -> list[str]:
        return [entry.title for entry in self.entries]

    @property
    def contents(self) -> list[str]:
        return [entry.content for entry in self.entries]


class DiffHunk(BaseModel):
    """A single change hunk in a diff"""

    start_line: int  # 1-indexed
    end_line: int
    original_content: str
    new_content: str
    change_type: str  # "add", "modify", "delete"


class DiffResult(BaseModel):
    """Comparison of two adjacent contents"""

    left_title: str
    right_title: str
    hunks: list[DiffHunk]
    unified_diff: str  # Standard unified diff format


class DiffPanel(BaseModel):
    """One side of an opened diff window"""

    title: str
    file_type: str | None = None
    content: str


class DiffWindow(BaseModel):
    """A diff window opened by the viewer"""

    id: str
    project: str
    window_title: str
    panels: list[DiffPanel]
    comparisons: list[DiffResult] = []
    opened_at: datetime = Field(default_factory=datetime.now)
