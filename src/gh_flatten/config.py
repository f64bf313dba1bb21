from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, computed_field

_ = Path()

DEFAULT_HOST = "github.com"
DOCUMENT_SUFFIX = ".md"

# Directory names whose whole subtree is pruned from the walk.
VCS_DIRS = frozenset({".git"})

# Only this many leading bytes are scanned for NUL when sniffing content.
SNIFF_BYTES = 1024

BOMS = (
    b"\xef\xbb\xbf",
    b"\xff\xfe\x00\x00",
    b"\x00\x00\xfe\xff",
    b"\xff\xfe",
    b"\xfe\xff",
)

EXT2LANG: dict[str, str] = {
    "bat": "batch",
    "c": "c",
    "cc": "cpp",
    "cmd": "batch",
    "cpp": "cpp",
    "css": "css",
    "cxx": "cpp",
    "go": "go",
    "h": "c",
    "hpp": "c",
    "html": "html",
    "java": "java",
    "js": "javascript",
    "json": "json",
    "md": "markdown",
    "ps1": "powershell",
    "py": "python",
    "rs": "rust",
    "sh": "bash",
    "toml": "toml",
    "ts": "typescript",
    "xml": "xml",
    "yaml": "yaml",
    "yml": "yaml",
}


def guess_language(extension: str) -> str:
    """Get the code fence language for a file extension.

    The lookup is exact (no dot, case-sensitive); it only affects the label
    of the fence, never whether a file is included.

    Args:
        extension (str): The file extension without the leading dot.

    Returns:
        str: The language name for code fences, or empty string if unknown.
    """
    return EXT2LANG.get(extension, "")


class Locator(BaseModel):
    """A parsed `owner/repo[/sub/path]` locator.

    Attributes:
        raw: The string as typed by the user.
        owner: Repository owner (user or organisation).
        repository: Repository name.
        subpath: Path inside the repository to export, "" for the whole tree.
    """

    model_config = ConfigDict(frozen=True)

    raw: str = Field(..., description="Locator as given on the command line")
    owner: str = Field(..., min_length=1, description="Repository owner")
    repository: str = Field(..., min_length=1, description="Repository name")
    subpath: str = Field(default="", description="Sub path inside the repository")

    @computed_field
    @property
    def title(self) -> str:
        """The `owner/repo` pair used as the document title."""
        return f"{self.owner}/{self.repository}"


class FileEntry(BaseModel):
    """A file discovered while walking the cloned tree.

    Attributes:
        path: Absolute path to the file on disk.
        rel: Path relative to the workspace root, with POSIX separators.
        extension: Extension without the dot, as given; "" when there is none.
        language: Suggested code fence language (may be empty).
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    path: Path = Field(..., description="Absolute file path")
    rel: str = Field(..., description="File path relative to the workspace root")

    @computed_field
    @property
    def extension(self) -> str:
        """Text after the last dot of the file name, if it is not a leading dot."""
        name = self.path.name
        stem, dot, ext = name.rpartition(".")
        if not dot or not stem:
            return ""
        return ext

    @computed_field
    @property
    def language(self) -> str:
        """Get the suggested code fence language based on the extension."""
        return guess_language(self.extension)
