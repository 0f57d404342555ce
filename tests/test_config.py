"""Tests for configuration persistence and endpoints"""

import json

from services.config_manager import ConfigManager


class TestConfigManager:
    def test_defaults_without_file(self, tmp_path):
        config = ConfigManager.get_instance().get_config()

        assert config["diff"] == {"defaultWindowTitle": "Diff Service", "contextLines": 3}
        assert config["languageLevel"] == {"projectDefault": "JDK_1_8"}
        assert ConfigManager.get_instance().config_file == tmp_path / "config" / "config.json"

    def test_stored_values_merge_with_defaults(self, tmp_path):
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "config.json").write_text(json.dumps({"diff": {"contextLines": 1}}))

        config = ConfigManager.get_instance().get_config()
        assert config["diff"] == {"defaultWindowTitle": "Diff Service", "contextLines": 1}

    def test_corrupt_file_falls_back_to_defaults(self, tmp_path):
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "config.json").write_text("{not json")

        assert ConfigManager.get_instance().get_section_value("diff", "contextLines") == 3

    def test_save_config_persists(self):
        manager = ConfigManager.get_instance()
        manager.set("server", {"host": "0.0.0.0", "port": 8080})

        stored = json.loads(manager.config_file.read_text())
        assert stored["server"] == {"host": "0.0.0.0", "port": 8080}


class TestConfigEndpoints:
    def test_get_config(self, client):
        data = client.get("/api/config").json()
        assert data["diff"]["defaultWindowTitle"] == "Diff Service"
        assert data["server"] == {"host": "127.0.0.1", "port": 63342}

    def test_update_config(self, client):
        response = client.put("/api/config", json={"diff": {"contextLines": 0}})
        assert response.json()["status"] == "success"
        assert client.get("/api/config").json()["diff"] == {"defaultWindowTitle": "Diff Service", "contextLines": 0}

    def test_rejects_invalid_values(self, client):
        assert client.put("/api/config", json={"diff": {"defaultWindowTitle": " "}}).status_code == 400
        assert client.put("/api/config", json={"diff": {"contextLines": -1}}).status_code == 400
        assert client.put("/api/config", json={"languageLevel": {"projectDefault": "JDK_0"}}).status_code == 400
