"""Module language level API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from models.project import (
    LanguageLevel,
    LanguageLevelItem,
    LanguageLevelResponse,
    LanguageLevelUpdateRequest,
)
from services.config_manager import ConfigManager
from services.language_level import (
    USE_PROJECT_LANGUAGE_LEVEL,
    LanguageLevelConfigurable,
    ModuleRegistry,
    presentable_text,
)

router = APIRouter()


def project_language_level() -> LanguageLevel:
    value = ConfigManager.get_instance().get_section_value("languageLevel", "projectDefault", "JDK_1_8")
    try:
        return LanguageLevel(value)
    except ValueError:
        print(f"[Modules] Invalid project language level '{value}', using JDK_1_8")
        return LanguageLevel.JDK_1_8


def build_response(module: str, configurable: LanguageLevelConfigurable, with_items: bool = False) -> LanguageLevelResponse:
    extension = configurable.extension
    selected = configurable.get_selected_item()
    selected_level = selected if isinstance(selected, LanguageLevel) else None

    items = []
    if with_items:
        items = [
            LanguageLevelItem(
                value=item if isinstance(item, LanguageLevel) else None,
                text=presentable_text(item),
            )
            for item in configurable.get_items()
        ]

    return LanguageLevelResponse(
        module=module,
        selected=selected_level,
        committed=extension.get_committed_language_level(),
        effective=extension.get_committed_language_level() or project_language_level(),
        modified=configurable.is_modified(),
        items=items,
    )


@router.get("/{module}/language-level", response_model=LanguageLevelResponse)
async def get_language_level(module: str) -> LanguageLevelResponse:
    """Get the module language level and the selectable items"""
    configurable = ModuleRegistry.get_instance().get_configurable(module)
    return build_response(module, configurable, with_items=True)


@router.put("/{module}/language-level", response_model=LanguageLevelResponse)
async def select_language_level(module: str, request: LanguageLevelUpdateRequest) -> LanguageLevelResponse:
    """Select a level, or null to use the project language level. Not applied until /apply."""
    if request.languageLevel is None:
        item = USE_PROJECT_LANGUAGE_LEVEL
    else:
        try:
            item = LanguageLevel(request.languageLevel)
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Unknown language level: {request.languageLevel}")

    configurable = ModuleRegistry.get_instance().get_configurable(module)
    configurable.select(item)
    return build_response(module, configurable)


@router.post("/{module}/language-level/apply", response_model=LanguageLevelResponse)
async def apply_language_level(module: str) -> LanguageLevelResponse:
    """Commit the selected level"""
    configurable = ModuleRegistry.get_instance().get_configurable(module)
    configurable.apply()
    return build_response(module, configurable)


@router.post("/{module}/language-level/reset", response_model=LanguageLevelResponse)
async def reset_language_level(module: str) -> LanguageLevelResponse:
    """Discard the uncommitted selection"""
    configurable = ModuleRegistry.get_instance().get_configurable(module)
    configurable.extension.rollback()
    configurable.reset()
    return build_response(module, configurable)
