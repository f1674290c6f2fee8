from __future__ import annotations

import argparse
import asyncio
from typing import Optional, Sequence

from . import __version__
from .config import AppConfig
from .console import Console
from .encoder import encode_file_to_base64
from .github.content import GitHubContentClient
from .github.repository import parse_owner_repo


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghcommit",
        description="Create or update a single file in a GitHub repository.",
    )
    parser.add_argument("source", metavar="SourceFilePath", help="Local path of the file to commit.")
    parser.add_argument(
        "target",
        metavar="TargetFilePath",
        help="Path of the file to create or update in the repository.",
    )
    parser.add_argument(
        "--repo",
        metavar="OwnerRepo",
        default="OWNER/REPO",
        help="Select another repository using the OWNER/REPO format.",
    )
    parser.add_argument(
        "--branch",
        default="main",
        help="Branch where the file will be created or updated.",
    )
    parser.add_argument(
        "--message",
        required=True,
        help="Commit message for the file creation or update.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


async def run(args: argparse.Namespace, console: Console, cfg: AppConfig) -> int:
    client = GitHubContentClient(console, cfg)
    try:
        # 1) Login
        await client.login()

        # 2) Read and encode the local file
        content = encode_file_to_base64(args.source)

        # 3) owner/repo
        target = parse_owner_repo(args.repo)
        if target.is_empty:
            console.warn(f"--repo '{args.repo}' is not in OWNER/REPO format.")

        # 4) Create or update
        await client.create_or_update_file(
            owner=target.owner,
            repo=target.repo,
            branch=args.branch,
            path=args.target,
            content_base64=content,
            message=args.message,
        )
    finally:
        client.close()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()
    try:
        return asyncio.run(run(args, console, AppConfig.load()))
    except KeyboardInterrupt:
        console.error("Cancelled.")
        return 130
    except Exception as e:
        console.error("Commit failed.", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
