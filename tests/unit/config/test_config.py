import logging

import pytest
from pydantic import ValidationError

from studio.config import Config, LoggingConfig, configure_logging
from studio.domain.migration.model.policy import MigrationPolicy


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for name in ("STUDIO_CONFIG_FILE", "STUDIO_LOG_FILE", "STUDIO_DATABASE__URL", "STUDIO_STORAGE__PATH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)  # no stray .env


class TestConfigDefaults:
    def test_defaults_run_in_demo_mode(self) -> None:
        config = Config()
        assert config.database.demo_mode
        assert config.storage.path == ""
        assert config.storage.quota_bytes == 5 * 1024 * 1024
        assert config.migration.precondition == MigrationPolicy.SKIP_IF_REMOTE_DATA
        assert config.migration.notify is True


class TestConfigSources:
    def test_nested_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("STUDIO_DATABASE__URL", "sqlite+aiosqlite:///studio.db")
        config = Config()
        assert config.database.url == "sqlite+aiosqlite:///studio.db"
        assert not config.database.demo_mode

    def test_yaml_file(self, monkeypatch, tmp_path) -> None:
        path = tmp_path / "studio.yaml"
        path.write_text("storage:\n  path: /tmp/local.json\nmigration:\n  precondition: always\n")
        monkeypatch.setenv("STUDIO_CONFIG_FILE", str(path))

        config = Config()
        assert config.storage.path == "/tmp/local.json"
        assert config.migration.precondition == MigrationPolicy.ALWAYS

    def test_env_beats_yaml(self, monkeypatch, tmp_path) -> None:
        path = tmp_path / "studio.yaml"
        path.write_text("database:\n  url: sqlite+aiosqlite:///from-yaml.db\n")
        monkeypatch.setenv("STUDIO_CONFIG_FILE", str(path))
        monkeypatch.setenv("STUDIO_DATABASE__URL", "sqlite+aiosqlite:///from-env.db")

        assert Config().database.url == "sqlite+aiosqlite:///from-env.db"

    def test_missing_yaml_file_ignored(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("STUDIO_CONFIG_FILE", str(tmp_path / "absent.yaml"))
        assert Config().database.demo_mode

    def test_unknown_policy_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Config(migration={"precondition": "sometimes"})

    def test_negative_quota_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Config(storage={"quota_bytes": -1})


class TestConfigureLogging:
    def test_writes_to_log_file(self, monkeypatch, tmp_path) -> None:
        log_file = tmp_path / "logs" / "studio.log"
        monkeypatch.setenv("STUDIO_LOG_FILE", str(log_file))
        root = logging.getLogger()
        saved = root.handlers[:], root.level
        try:
            configure_logging(LoggingConfig(level="DEBUG"))
            logging.getLogger("studio.test").info("hello")
            for handler in root.handlers:
                handler.flush()
            assert "hello" in log_file.read_text()
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
                handler.close()
            for handler in saved[0]:
                root.addHandler(handler)
            root.setLevel(saved[1])
