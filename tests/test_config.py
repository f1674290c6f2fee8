import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
from ghcommit.config import AppConfig  # noqa: E402


def test_defaults(monkeypatch) -> None:
    for key in ("GH_TOKEN", "GITHUB_API_URL", "GITHUB_API_VERSION", "HTTP_TIMEOUT", "GHCOMMIT_USER_AGENT"):
        monkeypatch.delenv(key, raising=False)
    cfg = AppConfig.load()
    assert cfg.github_token is None
    assert cfg.api_url == "https://api.github.com"
    assert cfg.api_version == "2022-11-28"
    assert cfg.user_agent == "ghcommit"
    assert cfg.timeout == 30.0


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("GH_TOKEN", "ghp_x")
    monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example.com/api/v3/")
    monkeypatch.setenv("HTTP_TIMEOUT", "5")
    monkeypatch.setenv("GHCOMMIT_USER_AGENT", "")
    cfg = AppConfig.load()
    assert cfg.github_token == "ghp_x"
    assert cfg.api_url == "https://ghe.example.com/api/v3"
    assert cfg.timeout == 5.0
    assert cfg.user_agent == "ghcommit"
