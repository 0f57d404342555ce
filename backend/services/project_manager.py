"""
Project Manager - Track open projects and their disposal signals
"""

from __future__ import annotations

import threading

DEFAULT_PROJECT_NAME = "Default"


class Project:
    """An open project. `disposed` is set once the project is closed."""

    def __init__(self, name: str, base_path: str | None = None, is_default: bool = False):
        self.name = name
        self.base_path = base_path
        self.is_default = is_default
        self.disposed = threading.Event()
        self.focus_count = 0

    def is_disposed(self) -> bool:
        return self.disposed.is_set()

    def __repr__(self) -> str:
        return f"Project({self.name!r})"


class ProjectManager:
    """Manage open projects"""

    _instance = None

    def __init__(self):
        self._lock = threading.Lock()
        self._projects: dict[str, Project] = {}  # Insertion order = open order
        self._default_project = Project(DEFAULT_PROJECT_NAME, is_default=True)

    @classmethod
    def get_instance(cls) -> "ProjectManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ProjectManager()
        return cls._instance

    def open_project(self, name: str, base_path: str | None = None) -> Project:
        """Open a project, or return it if a project with that name is already open"""
        if name == DEFAULT_PROJECT_NAME:
            raise ValueError(f"'{name}' is reserved for the default project")
        with self._lock:
            project = self._projects.get(name)
            if project is None:
                project = Project(name, base_path)
                self._projects[name] = project
                print(f"[ProjectManager] Opened project '{name}'")
            return project

    def dispose_project(self, name: str) -> Project:
        """Close a project and fire its disposal signal"""
        if name == DEFAULT_PROJECT_NAME:
            raise ValueError("The default project cannot be disposed")
        with self._lock:
            project = self._projects.pop(name, None)
        if project is None:
            raise KeyError(name)
        project.disposed.set()
        print(f"[ProjectManager] Disposed project '{name}'")
        return project

    def get_open_projects(self) -> list[Project]:
        with self._lock:
            return list(self._projects.values())

    def get_default_project(self) -> Project:
        return self._default_project

    def guess_project(self) -> Project | None:
        """Most recently opened project that is still alive"""
        with self._lock:
            for project in reversed(list(self._projects.values())):
                if not project.is_disposed():
                    return project
        return None

    def focus_project_window(self, project: Project):
        """Bring the project window to front"""
        project.focus_count += 1
        print(f"[ProjectManager] Focused window of project '{project.name}'")
