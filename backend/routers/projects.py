"""Project API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from models.project import OpenProjectRequest, ProjectInfo
from services.project_manager import Project, ProjectManager

router = APIRouter()


def to_project_info(project: Project) -> ProjectInfo:
    return ProjectInfo(
        name=project.name,
        base_path=project.base_path,
        is_default=project.is_default,
        focus_count=project.focus_count,
    )


@router.get("", response_model=list[ProjectInfo])
async def get_projects() -> list[ProjectInfo]:
    """List open projects"""
    return [to_project_info(p) for p in ProjectManager.get_instance().get_open_projects()]


@router.post("", response_model=ProjectInfo)
async def open_project(request: OpenProjectRequest) -> ProjectInfo:
    """Open a project; diff requests go to the most recently opened one"""
    name = request.name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Project name is required")

    try:
        project = ProjectManager.get_instance().open_project(name, request.base_path)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return to_project_info(project)


@router.delete("/{name}")
async def dispose_project(name: str) -> dict:
    """Dispose a project, cancelling its pending diff windows"""
    try:
        ProjectManager.get_instance().dispose_project(name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Project not open: {name}")

    return {"status": "success", "message": f"Project '{name}' disposed"}
