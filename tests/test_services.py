"""Tests for the host services behind the diff endpoint"""

import asyncio
import threading

import pytest

from models.diff import ContentEntry, DiffRequest, FileType
from services.diff_generator import DiffGenerator
from services.diff_manager import DiffManager
from services.file_type_registry import FileTypeRegistry
from services.project_manager import DEFAULT_PROJECT_NAME, ProjectManager
from services.ui_task_queue import UITaskQueue


class TestFileTypeRegistry:
    def test_builtin_types(self):
        registry = FileTypeRegistry()
        assert registry.find_file_type_by_name("PLAIN_TEXT").default_extension == "txt"
        assert registry.find_file_type_by_name("Python").default_extension == "py"
        assert registry.find_file_type_by_name("Cobol") is None

    def test_register_replaces_same_name(self):
        registry = FileTypeRegistry(file_types=[])
        registry.register(FileType(name="Cobol", description="Old", default_extension="cob"))
        registry.register(FileType(name="Cobol", description="COBOL files", default_extension="cbl"))

        assert [t.description for t in registry.get_registered_file_types()] == ["COBOL files"]

    def test_singleton(self):
        assert FileTypeRegistry.get_instance() is FileTypeRegistry.get_instance()


class TestProjectManager:
    def test_guess_project_without_open_projects(self):
        manager = ProjectManager()
        assert manager.guess_project() is None
        assert manager.get_default_project().name == DEFAULT_PROJECT_NAME

    def test_guess_project_prefers_latest(self):
        manager = ProjectManager()
        manager.open_project("first")
        manager.open_project("second", "/work/second")
        assert manager.guess_project().name == "second"

    def test_reopening_returns_same_project(self):
        manager = ProjectManager()
        assert manager.open_project("p") is manager.open_project("p")

    def test_dispose_sets_signal(self):
        manager = ProjectManager()
        first = manager.open_project("first")
        second = manager.open_project("second")

        manager.dispose_project("second")

        assert second.is_disposed()
        assert not first.is_disposed()
        assert manager.guess_project() is first
        assert [p.name for p in manager.get_open_projects()] == ["first"]

    def test_dispose_unknown_project(self):
        with pytest.raises(KeyError):
            ProjectManager().dispose_project("missing")

    def test_default_project_cannot_be_disposed(self):
        with pytest.raises(ValueError):
            ProjectManager().dispose_project(DEFAULT_PROJECT_NAME)

    def test_default_name_cannot_be_opened(self):
        manager = ProjectManager()
        with pytest.raises(ValueError):
            manager.open_project(DEFAULT_PROJECT_NAME)
        assert manager.get_open_projects() == []

    def test_focus_project_window(self):
        manager = ProjectManager()
        project = manager.open_project("p")
        manager.focus_project_window(project)
        manager.focus_project_window(project)
        assert project.focus_count == 2


class TestUITaskQueue:
    def test_runs_tasks_in_order(self):
        async def scenario():
            queue = UITaskQueue()
            await queue.start()
            ran = []
            alive = threading.Event()
            for i in range(3):
                queue.invoke_later(lambda i=i: ran.append(i), alive)
            await queue.join()
            await queue.stop()
            return ran

        assert asyncio.run(scenario()) == [0, 1, 2]

    def test_skips_expired_tasks(self):
        async def scenario():
            queue = UITaskQueue()
            await queue.start()
            ran = []
            disposed = threading.Event()
            queue.invoke_later(lambda: ran.append("disposed"), disposed)
            queue.invoke_later(lambda: ran.append("alive"), threading.Event())
            disposed.set()
            await queue.join()
            await queue.stop()
            return ran, queue.skipped_count

        ran, skipped = asyncio.run(scenario())
        assert ran == ["alive"]
        assert skipped == 1

    def test_failing_task_does_not_stop_queue(self):
        async def scenario():
            queue = UITaskQueue()
            await queue.start()
            ran = []

            def fail():
                raise RuntimeError("boom")

            queue.invoke_later(fail, threading.Event())
            queue.invoke_later(lambda: ran.append("after"), threading.Event())
            await queue.join()
            running = queue.is_running
            await queue.stop()
            return ran, running

        assert asyncio.run(scenario()) == (["after"], True)

    def test_invoke_later_requires_running_queue(self):
        with pytest.raises(RuntimeError):
            UITaskQueue().invoke_later(lambda: None, threading.Event())


class TestDiffGenerator:
    def test_generate_diff(self):
        result = DiffGenerator().generate_diff("a\nb\nc", "a\nB\nc\nd", "left", "right")

        assert result.left_title == "left"
        assert "--- left" in result.unified_diff
        assert "+++ right" in result.unified_diff
        assert [h.change_type for h in result.hunks] == ["modify", "add"]
        assert result.hunks[0].start_line == 2
        assert result.hunks[0].original_content == "b\n"
        assert result.hunks[0].new_content == "B\n"

    def test_identical_contents(self):
        result = DiffGenerator().generate_diff("same", "same")
        assert result.hunks == []
        assert result.unified_diff == ""


class TestDiffManager:
    def test_show_builds_panels_and_adjacent_comparisons(self):
        json_type = FileType(name="JSON", description="JSON files", default_extension="json")
        request = DiffRequest(
            entries=[
                ContentEntry(title="one", content="1\n", file_type=json_type),
                ContentEntry(content="2\n"),
                ContentEntry(title="three", content="3\n"),
            ]
        )
        project = ProjectManager().open_project("p")
        manager = DiffManager()

        window = manager.show(project, request, "Compare")

        assert window.window_title == "Compare"
        assert window.project == "p"
        assert [p.title for p in window.panels] == ["one", "", "three"]
        assert [p.file_type for p in window.panels] == ["JSON", None, None]
        assert [(c.left_title, c.right_title) for c in window.comparisons] == [("one", ""), ("", "three")]
        assert manager.get_windows() == [window]

    def test_close_window(self):
        manager = DiffManager()
        project = ProjectManager().get_default_project()
        window = manager.show(project, DiffRequest(entries=[ContentEntry(content="x")]), "t")

        assert manager.close_window(window.id) == window
        assert manager.get_windows() == []
        with pytest.raises(KeyError):
            manager.close_window(window.id)
