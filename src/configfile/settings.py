from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from configfile.common import LoggingConfig
from configfile.constants import ENV_PREFIX

from .models import SearchPolicy


class SearchPolicySettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    exclude_current_folder: bool = False
    exclude_homedir: bool = False
    include_etc: bool = False
    subfolder: str = ""
    fail_on_probe_error: bool = False


class Settings(BaseSettings):
    policy: SearchPolicySettings = SearchPolicySettings()
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )

    def to_search_policy(self) -> SearchPolicy:
        return SearchPolicy(**self.policy.model_dump())


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# Private singleton instance
_settings: Settings | None = None


__all__ = [
    "SearchPolicySettings",
    "Settings",
    "get_settings",
]
