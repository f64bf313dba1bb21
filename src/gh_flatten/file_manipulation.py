from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import TYPE_CHECKING

from gh_flatten.config import BOMS, SNIFF_BYTES, VCS_DIRS, FileEntry

if TYPE_CHECKING:
    from collections.abc import Iterator, Set


def relpath(path: Path, root: Path) -> str:
    """Send the relative path of path from root.

    Args:
        path (Path): the path to "relativise"
        root (Path): the root to relativise from

    Returns:
        str: the relative path from root to path, with POSIX separators.
            If path is not under root, returns the original path as a string.
    """
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)


def in_vcs_dir(path: Path, root: Path) -> bool:
    """Check if a path lies inside version-control metadata.

    Args:
        path (Path): the path to check
        root (Path): the workspace root; components above it are ignored

    Returns:
        bool: True if any component of `path` below `root` is a VCS directory
    """
    try:
        parts = path.relative_to(root).parts
    except ValueError:
        parts = path.parts
    return any(p in VCS_DIRS for p in parts)


def is_regular_file(path: Path) -> bool:
    """Check if a path is a regular file, without following symlinks.

    Args:
        path (Path): path to test.

    Returns:
        bool: True if the file is regular, False otherwise (including when it vanished).
    """
    try:
        st = path.lstat()
    except OSError:
        return False
    return stat.S_ISREG(st.st_mode)


def walk_files(root: Path, workspace: Path) -> Iterator[FileEntry]:
    """Walk `root` depth-first and yield its regular files.

    Directory and file names are visited in sorted order, files of a
    directory before its subdirectories. Symlinks are never followed nor
    yielded, `.git` subtrees are pruned, and entries that cannot be read are
    skipped.

    Args:
        root (Path): the directory to walk (or a single file)
        workspace (Path): the clone root used for relative paths

    Yields:
        Iterator[FileEntry]: the files found, in walk order
    """
    if in_vcs_dir(root, workspace):
        return
    if is_regular_file(root):
        yield FileEntry(path=root, rel=relpath(root, workspace))
        return
    for dirpath, dirs, files in os.walk(root, followlinks=False):
        current = Path(dirpath)
        dirs[:] = sorted(d for d in dirs if not in_vcs_dir(current / d, workspace))
        for f in sorted(files):
            p = current / f
            if is_regular_file(p):
                yield FileEntry(path=p, rel=relpath(p, workspace))


def passes_extension_filter(entry: FileEntry, allowed: Set[str]) -> bool:
    """Check an entry against the extension allow-list.

    An empty allow-list lets everything through. Otherwise the extension must
    be listed exactly, so files without an extension are dropped.

    Args:
        entry (FileEntry): the candidate file
        allowed (Set[str]): extensions without the leading dot

    Returns:
        bool: True if the file should be considered further
    """
    if not allowed:
        return True
    return entry.extension in allowed


def sniff_text(data: bytes) -> bool:
    """Classify raw bytes as text.

    A UTF-8/16/32 byte-order mark means text; otherwise a NUL byte in the
    leading `SNIFF_BYTES` bytes means binary.
    """
    if data.startswith(BOMS):
        return True
    return b"\x00" not in data[:SNIFF_BYTES]


def is_likely_text(path: Path) -> bool:
    """Check if a file is probably text by sniffing its content.

    Args:
        path (Path): the file path to check

    Returns:
        bool: True if the file looks like text, False if binary or unreadable
    """
    try:
        data = path.read_bytes()
    except OSError:
        return False
    return sniff_text(data)


def read_text_verbatim(path: Path) -> str:
    """Read a file as strict UTF-8, without newline translation.

    Raises:
        OSError: if the file cannot be read
        UnicodeDecodeError: if the content is not valid UTF-8
    """
    return path.read_bytes().decode("utf-8")
