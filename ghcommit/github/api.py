from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

import requests

from ..config import AppConfig


class GitHubApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code} {message}")
        self.status_code = status_code
        self.message = message


@dataclass(frozen=True)
class FileWriteRequest:
    owner: str
    repo: str
    branch: str
    path: str
    content_base64: str
    message: str
    sha: str | None = None

    def payload(self) -> dict:
        body = {
            "message": self.message,
            "content": self.content_base64,
            "branch": self.branch,
        }
        if self.sha:
            body["sha"] = self.sha
        return body


def _headers(token: str | None, cfg: AppConfig) -> dict:
    headers = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": cfg.api_version,
        "User-Agent": cfg.user_agent,
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def _raise_for_status(r: requests.Response) -> None:
    if r.status_code < 400:
        return
    try:
        data = r.json()
    except ValueError:
        data = None
    message = data.get("message") if isinstance(data, dict) else None
    raise GitHubApiError(r.status_code, message or r.text or r.reason or "")


class GitHubApi:
    """Blocking calls against the GitHub REST endpoints this tool needs."""

    def __init__(self, token: Optional[str], cfg: AppConfig):
        self.cfg = cfg
        self.http = requests.Session()
        self.http.headers.update(_headers(token, cfg))

    def _contents_url(self, owner: str, repo: str, path: str) -> str:
        return f"{self.cfg.api_url}/repos/{owner}/{repo}/contents/{quote(path.lstrip('/'))}"

    def get_current_user(self) -> dict:
        r = self.http.get(f"{self.cfg.api_url}/user", timeout=self.cfg.timeout)
        _raise_for_status(r)
        return r.json()

    def get_contents(self, owner: str, repo: str, path: str, ref: str) -> Any:
        """Contents metadata of ``path`` at ``ref``; ``None`` if it does not exist.

        A file yields a dict, a directory yields a list of entries.
        """
        r = self.http.get(
            self._contents_url(owner, repo, path),
            params={"ref": ref},
            timeout=self.cfg.timeout,
        )
        if r.status_code == 404:
            return None
        _raise_for_status(r)
        return r.json()

    def put_contents(self, req: FileWriteRequest) -> dict:
        r = self.http.put(
            self._contents_url(req.owner, req.repo, req.path),
            json=req.payload(),
            timeout=self.cfg.timeout * 2,
        )
        _raise_for_status(r)
        return r.json()

    def close(self) -> None:
        self.http.close()
