from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class GhFlattenError(Exception):
    """Base exception for errors in the gh_flatten module."""

    @property
    def message(self) -> str:
        return "gh_flatten failed"

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class MissingOwnerError(GhFlattenError):
    """Raised when a locator has no owner segment."""

    locator: str

    @property
    def message(self) -> str:
        return f"missing owner in locator {self.locator!r}"


@dataclass(eq=False)
class MissingRepositoryError(GhFlattenError):
    """Raised when a locator has an owner but no repository segment."""

    locator: str

    @property
    def message(self) -> str:
        return f"missing repository in locator {self.locator!r}"


@dataclass(eq=False)
class WorkspaceError(GhFlattenError):
    """Raised when the temporary clone directory cannot be created."""

    reason: str

    @property
    def message(self) -> str:
        return f"failed to create temporary directory: {self.reason}"


@dataclass(eq=False)
class CloneFailedError(GhFlattenError):
    """Raised when the shallow clone of the remote repository fails."""

    url: str
    reason: str = ""

    @property
    def message(self) -> str:
        msg = f"failed to clone {self.url}"
        return f"{msg}: {self.reason}" if self.reason else msg


@dataclass(eq=False)
class PathNotFoundError(GhFlattenError):
    """Raised when the requested subpath does not exist in the cloned tree."""

    path: str

    @property
    def message(self) -> str:
        return f"path '{self.path}' does not exist in repository"


@dataclass(eq=False)
class WriteFailedError(GhFlattenError):
    """Raised when the output document cannot be written."""

    filename: str
    reason: str = ""

    @property
    def message(self) -> str:
        msg = f"writing {self.filename!r} failed"
        return f"{msg}: {self.reason}" if self.reason else msg


@dataclass(eq=False)
class LogFileError(GhFlattenError):
    """Raised when the `--log-file` target cannot be opened."""

    filename: str
    reason: str = ""

    @property
    def message(self) -> str:
        msg = f"cannot open log file {self.filename!r}"
        return f"{msg}: {self.reason}" if self.reason else msg
