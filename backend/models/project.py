"""Project and language level data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class LanguageLevel(str, Enum):
    """Java language levels a module can be compiled against"""

    JDK_1_3 = "JDK_1_3"
    JDK_1_4 = "JDK_1_4"
    JDK_1_5 = "JDK_1_5"
    JDK_1_6 = "JDK_1_6"
    JDK_1_7 = "JDK_1_7"
    JDK_1_8 = "JDK_1_8"
    JDK_1_9 = "JDK_1_9"

    @property
    def presentable_text(self) -> str:
        return _PRESENTABLE_TEXT[self]


_PRESENTABLE_TEXT = {
    LanguageLevel.JDK_1_3: "1.3 - Plain old Java",
    LanguageLevel.JDK_1_4: "1.4 - 'assert' keyword",
    LanguageLevel.JDK_1_5: "5.0 - 'enum' keyword, autoboxing etc.",
    LanguageLevel.JDK_1_6: "6 - @Override in interfaces",
    LanguageLevel.JDK_1_7: "7 - Diamonds, ARM, multi-catch etc.",
    LanguageLevel.JDK_1_8: "8 - Lambdas, type annotations etc.",
    LanguageLevel.JDK_1_9: "9 - Jigsaw project",
}


class ProjectInfo(BaseModel):
    """Open project as reported by the API"""

    name: str
    base_path: str | None = None
    is_default: bool = False
    focus_count: int = 0


class OpenProjectRequest(BaseModel):
    """Request to open a project"""

    name: str
    base_path: str | None = None


class LanguageLevelItem(BaseModel):
    """Entry of the language level selector"""

    value: LanguageLevel | None  # None means "use project language level"
    text: str


class LanguageLevelUpdateRequest(BaseModel):
    """Request to select a module language level"""

    languageLevel: str | None = None


class LanguageLevelResponse(BaseModel):
    """Current language level state of a module"""

    module: str
    selected: LanguageLevel | None
    committed: LanguageLevel | None
    effective: LanguageLevel
    modified: bool
    items: list[LanguageLevelItem] = []
