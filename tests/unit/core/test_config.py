"""Tests for AppSettings and the per-user .env helpers."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir, get_user_env_file, write_user_env_vars


@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="XDG layout only on Linux")
def test_user_config_dir_follows_xdg(isolated_environment):
    assert get_user_config_dir() == isolated_environment / "hr-manager"
    assert get_user_env_file() == isolated_environment / "hr-manager" / ".env"


def test_defaults():
    settings = AppSettings()

    assert settings.storage_path == get_user_config_dir() / "employees.json"
    assert settings.log_level == "WARNING"
    assert settings.log_json is False
    assert settings.log_file is None


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("HR_MANAGER_STORAGE_PATH", str(tmp_path / "store.json"))
    monkeypatch.setenv("HR_MANAGER_LOG_LEVEL", "debug")
    monkeypatch.setenv("HR_MANAGER_LOG_JSON", "true")

    settings = AppSettings()

    assert settings.storage_path == tmp_path / "store.json"
    assert settings.log_level == "DEBUG"
    assert settings.log_json is True


def test_project_env_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("HR_MANAGER_LOG_LEVEL=ERROR\n", encoding="utf-8")

    assert AppSettings().log_level == "ERROR"


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("HR_MANAGER_LOG_LEVEL", "LOUD")

    with pytest.raises(ValidationError):
        AppSettings()


def test_write_user_env_vars_adds_and_updates_keys():
    first = write_user_env_vars({"HR_MANAGER_STORAGE_PATH": "/data/a.json"})
    write_user_env_vars({"HR_MANAGER_LOG_LEVEL": "INFO"})
    second = write_user_env_vars({"HR_MANAGER_STORAGE_PATH": "/data/b.json", "HR_MANAGER_LOG_FILE": None})

    assert first == second == get_user_env_file()
    lines = Path(second).read_text(encoding="utf-8").splitlines()
    assert lines == [
        "# hr-manager user config (.env)",
        "HR_MANAGER_STORAGE_PATH=/data/b.json",
        "HR_MANAGER_LOG_LEVEL=INFO",
    ]


def test_user_env_file_is_read_by_settings(monkeypatch):
    write_user_env_vars({"HR_MANAGER_LOG_LEVEL": "ERROR"})
    monkeypatch.setitem(
        AppSettings.model_config, "env_file", (".env", str(get_user_env_file()))
    )

    assert AppSettings().log_level == "ERROR"
