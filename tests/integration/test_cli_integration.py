from __future__ import annotations

import shutil
from pathlib import Path

import pytest
from git import Actor, Repo
from pytest_mock import MockerFixture

from gh_flatten import cli, fetch
from gh_flatten.exceptions import CloneFailedError

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available"),
]


@pytest.fixture
def origin(tmp_path: Path) -> Path:
    """A local repository with two commits, to check the clone is shallow."""
    src = tmp_path / "origin"
    src.mkdir()
    repo = Repo.init(src)
    actor = Actor("Tester", "tester@example.com")

    (src / "README.md").write_text("Hello\n", encoding="utf-8")
    repo.index.add(["README.md"])
    repo.index.commit("initial", author=actor, committer=actor)

    (src / "docs").mkdir()
    (src / "docs" / "guide.md").write_text("# Guide\n", encoding="utf-8")
    (src / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR")
    repo.index.add(["docs/guide.md", "logo.png"])
    repo.index.commit("docs", author=actor, committer=actor)
    repo.close()
    return src


@pytest.mark.integration
def test_shallow_clone_fetches_single_commit(origin: Path, tmp_path: Path) -> None:
    dest = tmp_path / "clone"

    fetch.shallow_clone(origin.as_uri(), dest)

    cloned = Repo(dest)
    try:
        assert len(list(cloned.iter_commits())) == 1
        assert (dest / "docs" / "guide.md").read_text(encoding="utf-8") == "# Guide\n"
    finally:
        cloned.close()


@pytest.mark.integration
def test_shallow_clone_missing_remote(tmp_path: Path) -> None:
    url = (tmp_path / "does-not-exist").as_uri()

    with pytest.raises(CloneFailedError) as exc_info:
        fetch.shallow_clone(url, tmp_path / "clone")

    assert exc_info.value.url == url


@pytest.mark.integration
def test_main_exports_real_clone(
    origin: Path,
    tmp_path: Path,
    mocker: MockerFixture,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    monkeypatch.chdir(out_dir)
    mocker.patch.object(cli, "repo_url", return_value=origin.as_uri())

    exit_code = cli.main(["octocat/hello-world/docs"])

    assert exit_code == 0
    content = (out_dir / "octocat-hello-world-docs.md").read_text(encoding="utf-8")
    assert content == "# octocat/hello-world\n\n## docs/guide.md\n\n```markdown\n# Guide\n```\n\n"
