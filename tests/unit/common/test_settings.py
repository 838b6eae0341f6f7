from __future__ import annotations

import pytest

from configfile import settings as settings_module
from configfile.models import SearchPolicy
from configfile.settings import Settings, get_settings


def test_default_settings_build_default_policy(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("CONFIGFILE_POLICY__INCLUDE_ETC", "CONFIGFILE_POLICY__SUBFOLDER"):
        monkeypatch.delenv(key, raising=False)

    assert Settings().to_search_policy() == SearchPolicy()


def test_policy_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CONFIGFILE_POLICY__INCLUDE_ETC", "true")
    monkeypatch.setenv("CONFIGFILE_POLICY__SUBFOLDER", "myapp")
    monkeypatch.setenv("CONFIGFILE_LOGGING__LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.to_search_policy() == SearchPolicy(include_etc=True, subfolder="myapp")
    assert settings.logging.log_level == "DEBUG"
    assert settings.logging.enabled is False


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings_module, "_settings", None)

    assert get_settings() is get_settings()
