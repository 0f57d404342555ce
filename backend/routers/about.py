"""About API endpoint"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

from services.file_type_registry import FileTypeRegistry

router = APIRouter()

SERVICE_NAME = "Diff Service Backend"
SERVICE_VERSION = "1.0.0"


@router.get("/about")
async def about(request: Request) -> dict[str, Any]:
    """Describe the service; `?registeredFileTypes` adds the known file types"""
    result: dict[str, Any] = {"name": SERVICE_NAME, "version": SERVICE_VERSION}

    if "registeredFileTypes" in request.query_params:
        result["registeredFileTypes"] = [
            {
                "name": file_type.name,
                "description": file_type.description,
                "isBinary": file_type.is_binary,
                "defaultExtension": file_type.default_extension,
            }
            for file_type in FileTypeRegistry.get_instance().get_registered_file_types()
        ]

    return result
