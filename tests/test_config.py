"""Tests for settings loading from YAML and the environment."""

from __future__ import annotations

from pathlib import Path

import pytest  # type: ignore

from recruitdesk.config import Settings, load_settings
from recruitdesk.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for suffix in ("DATA_DIR", "TIMEZONE", "RECRUITER_ID", "RECRUITER_NAME", "LOG_LEVEL"):
        monkeypatch.delenv(f"RECRUITDESK_{suffix}", raising=False)


def test_defaults() -> None:
    assert load_settings(use_dotenv=False) == Settings()


def test_yaml_values(tmp_path: Path) -> None:
    path = tmp_path / "recruitdesk.yaml"
    path.write_text("data_dir: /srv/tables\ntimezone: Europe/Paris\nunknown_key: 1\n", encoding="utf-8")
    settings = load_settings(str(path), use_dotenv=False)
    assert settings.data_dir == "/srv/tables"
    assert settings.timezone == "Europe/Paris"
    assert settings.default_recruiter_id == "USR01"


def test_environment_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "recruitdesk.yaml"
    path.write_text("default_recruiter_id: USR02\n", encoding="utf-8")
    monkeypatch.setenv("RECRUITDESK_RECRUITER_ID", "USR03")
    settings = load_settings(str(path), use_dotenv=False)
    assert settings.default_recruiter_id == "USR03"


def test_empty_yaml(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(str(path), use_dotenv=False) == Settings()


@pytest.mark.parametrize("content", ["- a\n- b\n", "data_dir: [unclosed\n"])
def test_bad_yaml(tmp_path: Path, content: str) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(str(path), use_dotenv=False)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_settings(str(tmp_path / "nope.yaml"), use_dotenv=False)
