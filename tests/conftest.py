"""Shared test fixtures."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from .fakes import FakeVersionControl, GitRepo, run_git


@pytest.fixture
def fake_vcs() -> FakeVersionControl:
    """A repository whose HEAD carries two tags, with two new commits."""
    return FakeVersionControl(
        decorations=[
            "HEAD -> master, origin/master",
            "tag: v1.1.1, tag: v1.0.9",
            "",
            "tag: v1.0.0",
        ],
        changelog=["abc1234 Add feature", "def5678 Fix bug"],
        branches=["* master  cc51028 [origin/master] Add feature"],
    )


@pytest.fixture
def git_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> GitRepo:
    """Create a repository with one pushed commit and chdir into it."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    for var in ("EDITOR", "VISUAL", "BUMPTAG_PREFIX"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")

    remote = tmp_path / "remote.git"
    remote.mkdir()
    run_git(remote, "init", "--bare")

    path = tmp_path / "repo"
    path.mkdir()
    run_git(path, "init")
    run_git(path, "symbolic-ref", "HEAD", "refs/heads/master")
    run_git(path, "config", "--local", "commit.gpgsign", "false")
    run_git(path, "config", "--local", "tag.gpgSign", "false")
    run_git(path, "remote", "add", "origin", str(remote))

    repo = GitRepo(path, remote)
    repo.commit()
    repo.git("push", "--set-upstream", "origin", "master")
    monkeypatch.chdir(path)
    return repo
