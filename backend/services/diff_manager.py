"""
Diff Manager - Present diff requests as diff windows
"""

from __future__ import annotations

import threading
import uuid

from models.diff import DiffPanel, DiffRequest, DiffWindow
from services.diff_generator import DiffGenerator
from services.project_manager import Project


class DiffManager:
    """Open and track diff windows"""

    _instance = None

    def __init__(self, diff_generator: DiffGenerator | None = None):
        self.diff_generator = diff_generator or DiffGenerator()
        self._lock = threading.Lock()
        self._windows: dict[str, DiffWindow] = {}

    @classmethod
    def get_instance(cls) -> "DiffManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = DiffManager()
        return cls._instance

    def show(
        self,
        project: Project,
        request: DiffRequest,
        window_title: str,
        context_lines: int = 3,
    ) -> DiffWindow:
        """Open a window with one panel per entry, compared pairwise left to right"""
        panels = [
            DiffPanel(
                title=entry.title,
                file_type=entry.file_type.name if entry.file_type else None,
                content=entry.content,
            )
            for entry in request.entries
        ]

        comparisons = [
            self.diff_generator.generate_diff(
                left.content,
                right.content,
                left_title=left.title,
                right_title=right.title,
                context_lines=context_lines,
            )
            for left, right in zip(panels, panels[1:])
        ]

        window = DiffWindow(
            id=str(uuid.uuid4()),
            project=project.name,
            window_title=window_title,
            panels=panels,
            comparisons=comparisons,
        )
        with self._lock:
            self._windows[window.id] = window

        print(f"[DiffManager] Opened '{window_title}' with {len(panels)} contents in project '{project.name}'")
        return window

    def get_windows(self) -> list[DiffWindow]:
        with self._lock:
            return list(self._windows.values())

    def close_window(self, window_id: str) -> DiffWindow:
        """Close a window. Raises KeyError for unknown ids."""
        with self._lock:
            return self._windows.pop(window_id)
