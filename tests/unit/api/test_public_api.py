from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import BaseModel
from result import is_err

import configfile
from configfile import settings as settings_module


class AppConfig(BaseModel):
    name: str


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> tuple[Path, Path]:
    cwd = tmp_path / "cwd"
    home = tmp_path / "home"
    cwd.mkdir()
    home.mkdir()
    monkeypatch.chdir(cwd)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setattr(settings_module, "_settings", None)
    return Path.cwd(), home


def test_read_json_with_default_policy(workspace: tuple[Path, Path]) -> None:
    _, home = workspace
    (home / "app.json").write_text('{"name": "demo"}')

    assert configfile.read_json("app.json", AppConfig).unwrap() == AppConfig(name="demo")


def test_default_policy_comes_from_environment(
    workspace: tuple[Path, Path],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    cwd, home = workspace
    (home / "myapp").mkdir()
    (home / "myapp" / "app.json").write_text('{"name": "nested"}')
    (cwd / "app.json").write_text('{"name": "top"}')
    monkeypatch.setenv("CONFIGFILE_POLICY__SUBFOLDER", "myapp")

    assert configfile.resolve_file("app.json").unwrap() == home / "myapp" / "app.json"


def test_explicit_policy_overrides_default(workspace: tuple[Path, Path]) -> None:
    cwd, _ = workspace
    (cwd / "app.json").write_text('{"name": "top"}')
    policy = configfile.SearchPolicy(exclude_current_folder=True)

    result = configfile.read_file("app.json", policy)

    assert is_err(result)
    assert isinstance(result.err_value, configfile.ConfigNotFoundError)
    assert configfile.read_file("app.json").unwrap() == b'{"name": "top"}'
