from __future__ import annotations

import io
from pathlib import Path
from typing import TYPE_CHECKING

from gh_flatten.exceptions import WriteFailedError
from gh_flatten.file_manipulation import (
    is_likely_text,
    passes_extension_filter,
    read_text_verbatim,
    walk_files,
)
from gh_flatten.logging import logger

if TYPE_CHECKING:
    from collections.abc import Set

    from gh_flatten.config import Locator


class MarkdownDocument:
    """Append-only markdown buffer: a title, then one fenced section per file."""

    def __init__(self, title: str) -> None:
        self._out = io.StringIO()
        self._out.write(f"# {title}\n\n")
        self.files = 0

    def append_file(self, rel: str, language: str, text: str) -> None:
        """Append a `## rel` heading and the file content in a fenced block.

        Args:
            rel (str): path shown in the heading
            language (str): code fence language, may be empty
            text (str): verbatim file content; a final newline is added if missing
        """
        out = self._out
        out.write(f"## {rel}\n\n```{language}\n")
        out.write(text)
        if not text.endswith("\n"):
            out.write("\n")
        out.write("```\n\n")
        self.files += 1

    def getvalue(self) -> str:
        return self._out.getvalue()


def build_markdown(
    locator: Locator,
    workspace: Path,
    target_root: Path,
    allowed: Set[str],
) -> MarkdownDocument:
    """Build the markdown document for every text file under `target_root`.

    Files are handled one at a time in walk order: extension filter, content
    sniffing, then a strict UTF-8 read. Binary, unreadable and undecodable
    files are skipped with a log notice; files excluded by extension are
    skipped silently.

    Args:
        locator (Locator): the parsed locator, used for the title
        workspace (Path): the clone root; headings are relative to it
        target_root (Path): the directory (or file) to export
        allowed (Set[str]): extension allow-list, empty for no filtering

    Returns:
        MarkdownDocument: the assembled document
    """
    doc = MarkdownDocument(locator.title)
    for entry in walk_files(target_root, workspace):
        if not passes_extension_filter(entry, allowed):
            continue
        if not is_likely_text(entry.path):
            logger.info("Skipping binary %s", entry.rel)
            continue
        try:
            text = read_text_verbatim(entry.path)
        except (OSError, UnicodeDecodeError) as e:
            logger.info("Skipping %s: %s", entry.rel, e)
            continue
        doc.append_file(entry.rel, entry.language, text)
        logger.info("Added %s", entry.rel)
    return doc


def write_document(filename: str | Path, content: str) -> Path:
    """Write the document, replacing any existing file of the same name.

    Args:
        filename (str | Path): output path
        content (str): the rendered markdown

    Raises:
        WriteFailedError: if the file cannot be written

    Returns:
        Path: the path written to
    """
    out_path = Path(filename)
    try:
        with out_path.open("w", encoding="utf-8", newline="") as f:
            f.write(content)
    except (OSError, ValueError) as e:
        raise WriteFailedError(filename=str(filename), reason=str(e)) from e
    return out_path
