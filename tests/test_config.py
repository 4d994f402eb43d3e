from __future__ import annotations

from pathlib import Path

import pydantic
import pytest

from core.config import AppSettings, get_user_config_dir
from core.domain.models import ValidationLimits


def test_defaults(app_dir: Path):
    settings = AppSettings()

    assert settings.app_module is None
    assert settings.resolved_root() == app_dir.resolve()
    assert settings.limits() == ValidationLimits(
        max_file_size=10 * 1024 * 1024,
        max_inline_code_length=10_000,
        source_suffix=".py",
    )
    assert settings.log_level == "WARNING"


def test_settings_from_env(app_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    other = tmp_path / "other"
    other.mkdir()
    monkeypatch.setenv("APPRUN_APP_ROOT", str(other))
    monkeypatch.setenv("APPRUN_APP_MODULE", "myapp.prepare")
    monkeypatch.setenv("APPRUN_MAX_INLINE_CODE_LENGTH", "50")
    monkeypatch.setenv("APPRUN_LOG_LEVEL", "debug")

    settings = AppSettings()

    assert settings.resolved_root() == other.resolve()
    assert settings.app_module == "myapp.prepare"
    assert settings.limits().max_inline_code_length == 50
    assert settings.log_level == "DEBUG"


def test_settings_from_dotenv(app_dir: Path):
    (app_dir / ".env").write_text("APPRUN_MAX_FILE_SIZE=2048\n", encoding="utf-8")

    assert AppSettings().max_file_size == 2048


def test_invalid_values_are_rejected(app_dir: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("APPRUN_MAX_FILE_SIZE", "0")
    with pytest.raises(pydantic.ValidationError):
        AppSettings()

    monkeypatch.delenv("APPRUN_MAX_FILE_SIZE")
    monkeypatch.setenv("APPRUN_LOG_LEVEL", "loud")
    with pytest.raises(pydantic.ValidationError):
        AppSettings()


def test_limits_are_frozen():
    limits = ValidationLimits()
    with pytest.raises(pydantic.ValidationError):
        limits.max_file_size = 1  # type: ignore[misc]


def test_user_config_dir_honors_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "apprun"
