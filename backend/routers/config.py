"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from models.project import LanguageLevel
from services.config_manager import ConfigManager

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    diff: dict | None = None
    languageLevel: dict | None = None
    server: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    diff: dict
    languageLevel: dict
    server: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        diff=config.get("diff", {}),
        languageLevel=config.get("languageLevel", {}),
        server=config.get("server", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    if request.diff:
        title = request.diff.get("defaultWindowTitle")
        if title is not None and (not isinstance(title, str) or not title.strip()):
            raise HTTPException(status_code=400, detail="defaultWindowTitle must be a non-blank string")
        context_lines = request.diff.get("contextLines")
        if context_lines is not None and (not isinstance(context_lines, int) or context_lines < 0):
            raise HTTPException(status_code=400, detail="contextLines must be a non-negative integer")
        current_config["diff"] = {**current_config.get("diff", {}), **request.diff}
    if request.languageLevel:
        level = request.languageLevel.get("projectDefault")
        if level is not None and level not in LanguageLevel.__members__:
            raise HTTPException(status_code=400, detail=f"Unknown language level: {level}")
        current_config["languageLevel"] = {**current_config.get("languageLevel", {}), **request.languageLevel}
    if request.server:
        current_config["server"] = {**current_config.get("server", {}), **request.server}

    config_manager.save_config(current_config)

    return {"status": "success", "message": "Configuration updated"}
