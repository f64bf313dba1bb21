"""
gh_flatten: flatten a remote repository into a single markdown file for an LLM.

Overview
--------
Given `owner/repo[/sub/path]`, the tool shallow-clones the repository's
default branch into a temporary directory, walks the requested path, skips
binary files, and writes every text file into `<owner>-<repo>[-sub-path].md`
in the current directory: a `# owner/repo` title, then one `## path`
heading and fenced code block per file.

Only public repositories can be fetched; nothing is cached between runs and
the temporary clone is always removed.

Usage
-----
Run `python -m gh_flatten --help` for full options. Common examples:
    - Whole repository:
        uv run gh-flatten octocat/hello-world

    - Only the docs folder, markdown and text files:
        uv run gh-flatten owner/repo/docs -e md,txt

    - Log to a file:
        uv run gh-flatten owner/repo --log-file export.log
"""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING

from gh_flatten import __version__
from gh_flatten.exceptions import GhFlattenError, LogFileError
from gh_flatten.fetch import ephemeral_workspace, repo_url, resolve_target_root, shallow_clone
from gh_flatten.locator import output_filename, parse_locator
from gh_flatten.logging import logger, setup_logging
from gh_flatten.output_construction import build_markdown, write_document
from gh_flatten.settings import Settings

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def parse_args(argv: Sequence[str] | None = None) -> Settings:
    p = argparse.ArgumentParser(
        prog="gh-flatten",
        description="Extract text files from a GitHub repo path (owner/repo[/sub/path]) into one markdown file.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("repo", type=str, help="Repository in `owner/repo[/sub/path]` form.")
    p.add_argument(
        "-e",
        "--extensions",
        action="append",
        default=[],
        help="Comma-separated list of file extensions to include, e.g. rs,md,txt (repeatable).",
    )
    p.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to clone from (default: $GH_FLATTEN_HOST or github.com).",
    )
    p.add_argument("--log-file", type=str, default=None, help="Log file path.")
    args = p.parse_args(argv)
    return Settings(**vars(args))


def run(settings: Settings) -> Path:
    """Fetch, flatten and write one repository.

    Args:
        settings (Settings): the run configuration

    Raises:
        GhFlattenError: on a malformed locator, clone failure, missing subpath
            or write failure

    Returns:
        Path: the markdown file written
    """
    locator = parse_locator(settings.repo)
    url = repo_url(locator.owner, locator.repository, settings.host)

    with ephemeral_workspace() as workspace:
        shallow_clone(url, workspace)
        target_root = resolve_target_root(workspace, locator.subpath)
        doc = build_markdown(locator, workspace, target_root, settings.extensions)

    return write_document(output_filename(locator.raw), doc.getvalue())


def main(argv: Sequence[str] | None = None) -> int:
    settings = parse_args(argv)

    try:
        if settings.log_file:
            try:
                setup_logging(settings.log_file)
            except OSError as e:
                raise LogFileError(filename=settings.log_file, reason=str(e)) from e
        out_path = run(settings)
    except GhFlattenError as e:
        logger.error("Export failed: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Written {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
