"""
Unit Tests for Configuration Management.

Black box tests against the public interface of config.py.
Tests run against the real project files (YAML configs).
Failure scenarios use tmp_path to create controlled filesystems.
"""

import pytest

from notes_app.core.config import (
    AppConfig,
    find_project_root,
    get_app_config,
    get_database_url,
    load_yaml_config,
    validate_project_root,
)
from notes_app.core.config_schema import (
    ApplicationSchema,
    LoggingSchema,
    StorageSchema,
)


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Clear lru_cache between tests so each test gets a fresh load."""
    get_app_config.cache_clear()
    yield
    get_app_config.cache_clear()


def _write_project(root, storage_yaml: str) -> None:
    """Create a minimal project tree with all three settings files."""
    settings = root / "config" / "settings"
    settings.mkdir(parents=True)
    (root / ".project_root").touch()
    (settings / "application.yaml").write_text(
        "name: Test\nversion: '1'\ndescription: d\nenvironment: test\ndebug: true\n"
    )
    (settings / "storage.yaml").write_text(storage_yaml)
    (settings / "logging.yaml").write_text(
        "level: DEBUG\nformat: json\nhandlers:\n"
        "  console: {enabled: false}\n"
        "  file: {enabled: false, path: logs/x.jsonl, max_bytes: 10, backup_count: 1}\n"
    )


# =============================================================================
# find_project_root
# =============================================================================


class TestFindProjectRoot:
    """Tests for .project_root marker discovery."""

    def test_finds_root_from_project_directory(self):
        root = find_project_root()
        assert root.is_dir()
        assert (root / ".project_root").exists()

    def test_config_directory_exists_at_root(self):
        root = find_project_root()
        assert (root / "config" / "settings").is_dir()

    def test_finds_root_from_subdirectory(self, tmp_path, monkeypatch):
        (tmp_path / ".project_root").touch()
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        assert find_project_root() == tmp_path

    def test_raises_when_no_marker_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(RuntimeError, match="Project root not found"):
            find_project_root()


class TestValidateProjectRoot:
    """Tests for the SystemExit wrapper around find_project_root."""

    def test_returns_path_when_marker_exists(self):
        root = validate_project_root()
        assert (root / ".project_root").exists()

    def test_exits_when_marker_missing(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit):
            validate_project_root()


# =============================================================================
# load_yaml_config
# =============================================================================


class TestLoadYamlConfig:
    """Tests for YAML file loading from config/settings/."""

    def test_loads_all_config_files(self):
        for filename in ["application.yaml", "storage.yaml", "logging.yaml"]:
            data = load_yaml_config(filename)
            assert isinstance(data, dict), f"{filename} did not return a dict"
            assert len(data) > 0, f"{filename} returned empty dict"

    def test_raises_for_nonexistent_file(self):
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            load_yaml_config("does_not_exist.yaml")

    def test_returns_empty_dict_for_empty_yaml(self, tmp_path, monkeypatch):
        (tmp_path / ".project_root").touch()
        settings = tmp_path / "config" / "settings"
        settings.mkdir(parents=True)
        (settings / "empty.yaml").write_text("")
        monkeypatch.chdir(tmp_path)

        assert load_yaml_config("empty.yaml") == {}


# =============================================================================
# AppConfig
# =============================================================================


class TestAppConfig:
    """Tests for schema-validated configuration."""

    def test_properties_are_typed(self):
        config = AppConfig()

        assert isinstance(config.application, ApplicationSchema)
        assert isinstance(config.storage, StorageSchema)
        assert isinstance(config.logging, LoggingSchema)

    def test_project_storage_defaults(self):
        storage = AppConfig().storage

        assert storage.backend == "sqlite"
        assert storage.key == "notes_data"

    def test_get_app_config_is_cached(self):
        assert get_app_config() is get_app_config()

    def test_unknown_key_is_rejected(self, tmp_path, monkeypatch):
        _write_project(
            tmp_path,
            "backend: memory\npath: x.db\nkey: k\necho: false\nsurprise: 1\n",
        )
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ValueError, match="Invalid configuration in storage.yaml"):
            AppConfig()

    def test_unknown_backend_is_rejected(self, tmp_path, monkeypatch):
        _write_project(tmp_path, "backend: redis\npath: x.db\nkey: k\necho: false\n")
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ValueError, match="storage.yaml"):
            AppConfig()


class TestGetDatabaseUrl:
    """Tests for the SQLite URL builder."""

    def test_relative_path_resolves_against_root(self, tmp_path, monkeypatch):
        _write_project(tmp_path, "backend: sqlite\npath: data/n.db\nkey: k\necho: false\n")
        monkeypatch.chdir(tmp_path)

        assert get_database_url() == f"sqlite:///{tmp_path / 'data' / 'n.db'}"

    def test_absolute_path_is_kept(self, tmp_path, monkeypatch):
        target = tmp_path / "elsewhere.db"
        _write_project(tmp_path, f"backend: sqlite\npath: {target}\nkey: k\necho: false\n")
        monkeypatch.chdir(tmp_path)

        assert get_database_url() == f"sqlite:///{target}"
