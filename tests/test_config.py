"""Tests for config loading — YAML file plus environment overrides."""

from pathlib import Path

import pytest

from pokerhands.config import AppConfig, load_config

EXAMPLE_CONFIG = Path(__file__).resolve().parent.parent / "pokerhands.yaml.example"


class TestDefaults:
    def test_no_file_no_env(self):
        config = load_config(env={})
        assert config == AppConfig()
        assert config.server.port == 8080
        assert config.storage.uri is None
        assert config.request_id_prefix == "01-00002"
        assert config.language == "en"


class TestYaml:
    def test_example_config_loads(self):
        config = load_config(EXAMPLE_CONFIG, env={})
        assert config.server.host == "127.0.0.1"
        assert config.storage.uri == "mongodb://localhost:27017"
        assert config.storage.collection == "poker_results"

    def test_partial_file(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("server:\n  port: 9000\nlanguage: ja\n")
        config = load_config(path, env={})
        assert config.server.port == 9000
        assert config.server.host == "127.0.0.1"
        assert config.language == "ja"
        assert config.storage.db_name == "pokerhands"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("")
        assert load_config(path, env={}) == AppConfig()

    def test_unknown_language_rejected(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("language: fr\n")
        with pytest.raises(ValueError):
            load_config(path, env={})


    def test_empty_sections(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("server:\nstorage:\n")
        assert load_config(path, env={}) == AppConfig()

    def test_unknown_log_level_rejected(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("log_level: LOUD\n")
        with pytest.raises(ValueError):
            load_config(path, env={})

    def test_log_level_case_insensitive(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("log_level: debug\n")
        assert load_config(path, env={}).log_level == "debug"


class TestEnvOverrides:
    def test_env_overrides_file(self):
        env = {
            "POKERHANDS_PORT": "9100",
            "POKERHANDS_MONGO_URI": "mongodb://db:27017",
            "POKERHANDS_DB_NAME": "hands",
            "POKERHANDS_LANGUAGE": "ja",
            "POKERHANDS_REQUEST_ID_PREFIX": "02-00001",
        }
        config = load_config(EXAMPLE_CONFIG, env=env)
        assert config.server.port == 9100
        assert config.storage.uri == "mongodb://db:27017"
        assert config.storage.db_name == "hands"
        assert config.language == "ja"
        assert config.request_id_prefix == "02-00001"

    def test_empty_env_value_ignored(self):
        config = load_config(env={"POKERHANDS_MONGO_URI": ""})
        assert config.storage.uri is None

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("POKERHANDS_HOST", "0.0.0.0")
        assert load_config().server.host == "0.0.0.0"
