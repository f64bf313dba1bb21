from __future__ import annotations

from gh_flatten.config import DOCUMENT_SUFFIX, Locator
from gh_flatten.exceptions import MissingOwnerError, MissingRepositoryError


def parse_locator(raw: str) -> Locator:
    """Split an `owner/repo[/sub/path]` string into its parts.

    Surrounding slashes are ignored and the string is split on its first two
    slashes only, so everything after the repository name is the subpath.

    Args:
        raw (str): the locator as given on the command line

    Raises:
        MissingOwnerError: if there is no owner segment
        MissingRepositoryError: if there is no repository segment

    Returns:
        Locator: the parsed locator
    """
    parts = raw.strip("/").split("/", 2)
    owner = parts[0]
    if not owner:
        raise MissingOwnerError(locator=raw)
    if len(parts) < 2 or not parts[1]:  # noqa: PLR2004
        raise MissingRepositoryError(locator=raw)
    subpath = parts[2] if len(parts) > 2 else ""  # noqa: PLR2004
    return Locator(raw=raw, owner=owner, repository=parts[1], subpath=subpath)


def output_filename(raw: str) -> str:
    """Name of the document written for a locator: slashes become dashes."""
    return raw.replace("/", "-") + DOCUMENT_SUFFIX
