"""Models module - Pydantic data models"""

from .diff import (
    ContentEntry,
    DiffHunk,
    DiffPanel,
    DiffRequest,
    DiffResult,
    DiffWindow,
    FileType,
)
from .project import (
    LanguageLevel,
    LanguageLevelItem,
    LanguageLevelResponse,
    LanguageLevelUpdateRequest,
    OpenProjectRequest,
    ProjectInfo,
)

__all__ = [
    # Diff models
    "ContentEntry",
    "DiffHunk",
    "DiffPanel",
    "DiffRequest",
    "DiffResult",
    "DiffWindow",
    "FileType",
    # Project models
    "LanguageLevel",
    "LanguageLevelItem",
    "LanguageLevelResponse",
    "LanguageLevelUpdateRequest",
    "OpenProjectRequest",
    "ProjectInfo",
]
