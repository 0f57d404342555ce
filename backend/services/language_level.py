"""
Language Level - Per-module language level selection

The configurable holds the selector state. Pending and committed values live
in the module extension, which the configurable delegates to.
"""

from __future__ import annotations

import threading
from typing import Union

from models.project import LanguageLevel


class _UseProjectLanguageLevel:
    """Selector item meaning "inherit the project language level" """

    def __repr__(self) -> str:
        return "USE_PROJECT_LANGUAGE_LEVEL"


USE_PROJECT_LANGUAGE_LEVEL = _UseProjectLanguageLevel()
USE_PROJECT_LANGUAGE_LEVEL_TEXT = "Use project language level"

SelectorItem = Union[LanguageLevel, _UseProjectLanguageLevel]


class LanguageLevelModuleExtension:
    """Module language level with uncommitted changes"""

    def __init__(self, module_name: str, language_level: LanguageLevel | None = None):
        self.module_name = module_name
        self._committed = language_level
        self._pending = language_level

    def get_language_level(self) -> LanguageLevel | None:
        return self._pending

    def get_committed_language_level(self) -> LanguageLevel | None:
        return self._committed

    def set_language_level(self, language_level: LanguageLevel | None):
        self._pending = language_level

    def is_changed(self) -> bool:
        return self._pending != self._committed

    def commit(self):
        self._committed = self._pending

    def rollback(self):
        self._pending = self._committed


class LanguageLevelConfigurable:
    """Selector bound to a module's language level extension"""

    def __init__(self, extension: LanguageLevelModuleExtension):
        self.extension = extension
        self._selected: SelectorItem = USE_PROJECT_LANGUAGE_LEVEL
        self.reset()

    def get_items(self) -> list[SelectorItem]:
        return [USE_PROJECT_LANGUAGE_LEVEL, *LanguageLevel]

    def get_selected_item(self) -> SelectorItem:
        return self._selected

    def select(self, item: SelectorItem):
        """Select an item and push it into the extension"""
        self._selected = item
        self.extension.set_language_level(item if isinstance(item, LanguageLevel) else None)

    def is_modified(self) -> bool:
        return self.extension.is_changed()

    def apply(self):
        self.extension.commit()

    def reset(self):
        """Show the extension's current level in the selector"""
        level = self.extension.get_language_level()
        self._selected = USE_PROJECT_LANGUAGE_LEVEL if level is None else level


class ModuleRegistry:
    """Language level configurables per module name"""

    _instance = None

    def __init__(self):
        self._lock = threading.Lock()
        self._configurables: dict[str, LanguageLevelConfigurable] = {}

    @classmethod
    def get_instance(cls) -> "ModuleRegistry":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ModuleRegistry()
        return cls._instance

    def get_configurable(self, module_name: str) -> LanguageLevelConfigurable:
        with self._lock:
            configurable = self._configurables.get(module_name)
            if configurable is None:
                configurable = LanguageLevelConfigurable(LanguageLevelModuleExtension(module_name))
                self._configurables[module_name] = configurable
            return configurable


def presentable_text(item: SelectorItem) -> str:
    if isinstance(item, LanguageLevel):
        return item.presentable_text
    return USE_PROJECT_LANGUAGE_LEVEL_TEXT
