"""Shared fixtures: fresh singletons and config directory per test"""

import pytest
from fastapi.testclient import TestClient

from services.config_manager import ConfigManager
from services.diff_manager import DiffManager
from services.file_type_registry import FileTypeRegistry
from services.language_level import ModuleRegistry
from services.project_manager import ProjectManager
from services.ui_task_queue import UITaskQueue


@pytest.fixture(autouse=True)
def isolated_services(tmp_path, monkeypatch):
    monkeypatch.setenv("DIFF_SERVICE_CONFIG_DIR", str(tmp_path / "config"))
    for cls in (ConfigManager, DiffManager, FileTypeRegistry, ModuleRegistry, ProjectManager, UITaskQueue):
        monkeypatch.setattr(cls, "_instance", None)
    yield


@pytest.fixture
def client():
    from main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def drain(client):
    """Wait for the UI task queue to run everything submitted so far"""

    def _drain():
        client.portal.call(UITaskQueue.get_instance().join)

    return _drain
