from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RepositoryIdentifier:
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def is_empty(self) -> bool:
        return not self.owner and not self.repo


def parse_owner_repo(value: str) -> RepositoryIdentifier:
    """Split ``owner/repo``.

    Anything that does not split into exactly two parts gives an empty
    identifier instead of raising; callers decide whether to warn.
    """
    parts = (value or "").split("/")
    if len(parts) == 2:
        return RepositoryIdentifier(owner=parts[0], repo=parts[1])
    return RepositoryIdentifier(owner="", repo="")
