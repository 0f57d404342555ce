"""Diff API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response

from models.diff import DiffRequest, DiffWindow
from services.config_manager import ConfigManager
from services.content_list_parser import (
    ContentListRequestError,
    ContentListRequestParser,
    MalformedRequestError,
)
from services.diff_manager import DiffManager
from services.file_type_registry import FileTypeRegistry
from services.project_manager import Project, ProjectManager
from services.ui_task_queue import UITaskQueue

router = APIRouter()


def build_show_task(project: Project, request: DiffRequest):
    """Build the deferred task that opens the diff window and optionally focuses the project"""
    config_manager = ConfigManager.get_instance()
    window_title = request.window_title or config_manager.get_section_value(
        "diff", "defaultWindowTitle", "Diff Service"
    )
    context_lines = config_manager.get_section_value("diff", "contextLines", 3)

    def show():
        DiffManager.get_instance().show(project, request, window_title, context_lines)
        if request.focused:
            ProjectManager.get_instance().focus_project_window(project)

    return show


@router.post("/diff")
async def open_diff(request: Request) -> Response:
    """Open the posted contents in a diff window"""
    body = await request.body()
    parser = ContentListRequestParser(FileTypeRegistry.get_instance())

    try:
        diff_request = parser.parse(body)
    except ContentListRequestError as e:
        return PlainTextResponse(e.message, status_code=400)
    except MalformedRequestError as e:
        print(f"[DiffService] Cannot read request: {e}")
        return PlainTextResponse("Bad Request", status_code=400)

    project_manager = ProjectManager.get_instance()
    project = project_manager.guess_project()
    if project is None:
        project = project_manager.get_default_project()

    UITaskQueue.get_instance().invoke_later(build_show_task(project, diff_request), project.disposed)
    return Response(status_code=200)


@router.get("/diff/windows", response_model=list[DiffWindow])
async def get_diff_windows() -> list[DiffWindow]:
    """List diff windows opened so far"""
    return DiffManager.get_instance().get_windows()


@router.delete("/diff/windows/{window_id}")
async def close_diff_window(window_id: str) -> dict:
    """Close a diff window"""
    try:
        DiffManager.get_instance().close_window(window_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown diff window: {window_id}")
    return {"status": "success", "message": "Diff window closed"}
