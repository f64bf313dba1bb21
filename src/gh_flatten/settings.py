from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from gh_flatten.config import DEFAULT_HOST

ENV_FILE = find_dotenv(usecwd=True)
load_dotenv(ENV_FILE)


class Settings(BaseModel):
    """Configuration settings for the gh_flatten module."""

    model_config = ConfigDict(frozen=True)

    repo: str = Field(..., description="Repository locator owner/repo[/sub/path].")
    extensions: frozenset[str] = Field(
        default_factory=frozenset,
        description="Extensions to include; empty means every text file.",
    )
    host: str = Field(
        default_factory=lambda: os.getenv("GH_FLATTEN_HOST", DEFAULT_HOST),
        description="Host serving the repository over HTTPS.",
    )
    log_file: str = Field(
        default_factory=lambda: os.getenv("GH_FLATTEN_LOG_FILE", ""),
        description="Log file path.",
    )

    @field_validator("extensions", mode="before")
    @classmethod
    def split_extensions(cls, value: object) -> object:
        """Flatten repeated, comma separated `--extensions` values into a set."""
        if value is None:
            return frozenset()
        if isinstance(value, str):
            value = [value]
        if isinstance(value, (list, tuple, set, frozenset)):
            items: set[str] = set()
            for chunk in value:
                items.update(part.strip() for part in str(chunk).split(","))
            items.discard("")
            return frozenset(items)
        return value

    @field_validator("host", mode="before")
    @classmethod
    def default_host(cls, value: object) -> object:
        """Fall back to the environment or the default host when unset."""
        if value is None or value == "":
            return os.getenv("GH_FLATTEN_HOST", DEFAULT_HOST)
        return value

    @field_validator("log_file", mode="before")
    @classmethod
    def default_log_file(cls, value: object) -> object:
        """Fall back to the environment when no log file is given."""
        if value is None:
            return os.getenv("GH_FLATTEN_LOG_FILE", "")
        return value
