import os
from dataclasses import dataclass


def _get_env(key: str, default: str | None = None) -> str | None:
    value = os.environ.get(key)
    if value is not None and value != "":
        return value
    return default


@dataclass
class AppConfig:
    github_token: str | None
    api_url: str
    api_version: str
    user_agent: str
    timeout: float

    @staticmethod
    def load() -> "AppConfig":
        return AppConfig(
            github_token=_get_env("GH_TOKEN"),
            api_url=_get_env("GITHUB_API_URL", "https://api.github.com").rstrip("/"),
            api_version=_get_env("GITHUB_API_VERSION", "2022-11-28"),
            user_agent=_get_env("GHCOMMIT_USER_AGENT", "ghcommit"),
            timeout=float(_get_env("HTTP_TIMEOUT", "30")),
        )
