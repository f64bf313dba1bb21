from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from gh_flatten import cli, fetch

if TYPE_CHECKING:
    from pytest_mock import MockerFixture

HELLO_WORLD = {
    "README.md": b"Hello\n",
    "logo.png": b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00",
    ".git/HEAD": b"ref: refs/heads/master\n",
    ".git/config": b"[core]\n\tbare = false\n",
}


def _remote(files: dict[str, bytes], calls: list[str] | None = None):  # noqa: ANN202
    def clone_from(url: str, to_path: Path, **kwargs: object) -> None:
        if calls is not None:
            calls.append(url)
        for rel, data in files.items():
            target = Path(to_path) / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)

    return clone_from


def test_end_to_end_hello_world(
    tmp_path: Path,
    mocker: MockerFixture,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.INFO)
    monkeypatch.chdir(tmp_path)
    calls: list[str] = []
    mocker.patch.object(fetch.Repo, "clone_from", side_effect=_remote(HELLO_WORLD, calls))

    exit_code = cli.main(["octocat/hello-world"])

    assert exit_code == 0
    assert calls == ["https://github.com/octocat/hello-world.git"]
    output = tmp_path / "octocat-hello-world.md"
    content = output.read_text(encoding="utf-8")
    assert content.startswith("# octocat/hello-world\n")
    assert "## README.md\n\n```markdown\nHello\n```\n" in content
    assert "logo.png" not in content
    assert ".git" not in content
    assert "logo.png" in caplog.text


def test_end_to_end_extension_filter(
    tmp_path: Path,
    mocker: MockerFixture,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.chdir(tmp_path)
    files = {"x.txt": b"x\n", "y.md": b"y", "LICENSE": b"MIT\n", "src/lib.rs": b"pub fn f() {}\n"}
    mocker.patch.object(fetch.Repo, "clone_from", side_effect=_remote(files))

    assert cli.main(["owner/repo", "--extensions", "md"]) == 0

    content = (tmp_path / "owner-repo.md").read_text(encoding="utf-8")
    assert content == "# owner/repo\n\n## y.md\n\n```markdown\ny\n```\n\n"


def test_end_to_end_missing_subpath(
    tmp_path: Path,
    mocker: MockerFixture,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.chdir(tmp_path)
    mocker.patch.object(fetch.Repo, "clone_from", side_effect=_remote({"README.md": b"Hello\n"}))

    exit_code = cli.main(["owner/repo/docs"])

    assert exit_code == 1
    assert "path 'docs' does not exist in repository" in capsys.readouterr().err
    assert not (tmp_path / "owner-repo-docs.md").exists()
    assert not list(tmp_path.iterdir())
