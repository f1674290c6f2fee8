from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional

from ..config import AppConfig
from ..console import Console
from .api import FileWriteRequest, GitHubApi


class ClientNotInitializedError(RuntimeError):
    pass


@dataclass
class GitHubSession:
    api: GitHubApi
    login: str


@dataclass
class WriteResult:
    created: bool
    request: FileWriteRequest
    response: dict


class GitHubContentClient:
    """Owns the (optional) authenticated session and writes single files.

    Every remote call is awaited in turn; the blocking HTTP work runs in a
    worker thread so that the caller can be cancelled between steps.
    """

    def __init__(self, console: Console, cfg: Optional[AppConfig] = None):
        self.console = console
        self.cfg = cfg or AppConfig.load()
        self._session: GitHubSession | None = None

    async def login(self, token: Optional[str] = None) -> GitHubSession:
        if token is None:
            token = self.cfg.github_token
        self.console.info("Logging in to GitHub.")
        self.close()
        api = None
        try:
            api = GitHubApi(token, self.cfg)
            user = await asyncio.to_thread(api.get_current_user)
            self._session = GitHubSession(api=api, login=user.get("login", ""))
        except Exception:
            if api is not None:
                api.close()
            self.console.error("Fail to login to GitHub.")
            raise
        self.console.success(f"Logged in to GitHub as {self._session.login}.")
        return self._session

    def require_session(self) -> GitHubSession:
        if self._session is None:
            raise ClientNotInitializedError("GitHub client is not initialized.")
        return self._session

    async def find_revision(
        self, session: GitHubSession, owner: str, repo: str, branch: str, path: str
    ) -> str | None:
        existing = await asyncio.to_thread(session.api.get_contents, owner, repo, path, branch)
        # directory listings come back as a list; only the first entry counts
        if isinstance(existing, list):
            existing = existing[0] if existing else None
        sha = existing.get("sha") if existing else None
        if not sha:
            self.console.info(f"Not found file. Path: {path}")
            return None
        return sha

    async def create_or_update_file(
        self,
        owner: str,
        repo: str,
        branch: str,
        path: str,
        content_base64: str,
        message: str | None = None,
    ) -> WriteResult:
        session = self.require_session()
        sha = await self.find_revision(session, owner, repo, branch, path)
        if sha is None:
            return await self._create_file(session, owner, repo, branch, path, content_base64, message)
        return await self._update_file(session, owner, repo, branch, path, content_base64, sha, message)

    async def _create_file(
        self,
        session: GitHubSession,
        owner: str,
        repo: str,
        branch: str,
        path: str,
        content_base64: str,
        message: str | None,
    ) -> WriteResult:
        req = FileWriteRequest(
            owner=owner,
            repo=repo,
            branch=branch,
            path=path,
            content_base64=content_base64,
            message=message or f"Create {path}.",
        )
        resp = await asyncio.to_thread(session.api.put_contents, req)
        self.console.success(f"File Created: {owner}/{repo} on {branch}, Path: {path}")
        return WriteResult(created=True, request=req, response=resp)

    async def _update_file(
        self,
        session: GitHubSession,
        owner: str,
        repo: str,
        branch: str,
        path: str,
        content_base64: str,
        sha: str,
        message: str | None,
    ) -> WriteResult:
        req = FileWriteRequest(
            owner=owner,
            repo=repo,
            branch=branch,
            path=path,
            content_base64=content_base64,
            message=message or f"Update {path}.",
            sha=sha,
        )
        resp = await asyncio.to_thread(session.api.put_contents, req)
        self.console.success(f"File Updated: {owner}/{repo} on {branch}, Path: {path}")
        return WriteResult(created=False, request=req, response=resp)

    def close(self) -> None:
        if self._session is not None:
            self._session.api.close()
            self._session = None
