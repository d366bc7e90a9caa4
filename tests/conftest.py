"""Pytest configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path

import git
import pytest

# Fixed authored time used by the fixture commits (2023-11-14T22:13:20Z)
FIXED_EPOCH = 1_700_000_000


def _commit(
    repo_path: Path,
    repo: git.Repo,
    filename: str,
    content: str,
    message: str,
    **kwargs,
) -> git.Commit:
    (repo_path / filename).write_text(content)
    repo.index.add([filename])
    return repo.index.commit(
        message,
        author_date=f"{FIXED_EPOCH} +0000",
        commit_date=f"{FIXED_EPOCH} +0000",
        **kwargs,
    )


@pytest.fixture
def temp_repo(tmp_path: Path) -> Generator[tuple[Path, git.Repo], None, None]:
    """Create an empty git repository for testing."""
    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    repo = git.Repo.init(repo_path)

    # Configure git for commits
    with repo.config_writer() as config:
        config.set_value("user", "name", "Test User")
        config.set_value("user", "email", "test@example.com")

    yield repo_path, repo
    repo.close()


@pytest.fixture
def single_commit_repo(temp_repo):
    """Create a repository with a single root commit."""
    repo_path, repo = temp_repo
    _commit(repo_path, repo, "test.txt", "Hello, World!", "Initial commit")
    return repo_path, repo


@pytest.fixture
def linear_repo(temp_repo):
    """Create a repository with three commits and no merges."""
    repo_path, repo = temp_repo
    _commit(repo_path, repo, "test.txt", "Line 1\n", "Add test.txt")
    _commit(repo_path, repo, "test.txt", "Line 1\nLine 2\n", "Update test.txt")
    _commit(
        repo_path,
        repo,
        "fix.txt",
        "fixed\n",
        "  Fix bug  \n",
        author=git.Actor("Alice", "alice@example.com"),
    )
    return repo_path, repo


@pytest.fixture
def merge_repo(temp_repo):
    """Create a repository with four regular commits and one merge.

    History (HEAD at "After merge"):

        Root -- Left ------ Merge -- After merge
            \\             /
             `-- Right ---'
    """
    repo_path, repo = temp_repo
    root = _commit(repo_path, repo, "a.txt", "root\n", "Root")
    left = _commit(repo_path, repo, "a.txt", "left\n", "Left")
    right = _commit(
        repo_path, repo, "b.txt", "right\n", "Right", parent_commits=[root]
    )
    merge = _commit(
        repo_path, repo, "c.txt", "merge\n", "Merge", parent_commits=[left, right]
    )
    after = _commit(repo_path, repo, "d.txt", "after\n", "After merge")

    shas = {
        "root": root.hexsha,
        "left": left.hexsha,
        "right": right.hexsha,
        "merge": merge.hexsha,
        "after": after.hexsha,
    }
    return repo_path, repo, shas


@pytest.fixture
def fixed_epoch() -> int:
    """Authored time of every fixture commit."""
    return FIXED_EPOCH


@pytest.fixture
def delete_object():
    """Return a function that removes a loose object from a repository."""

    def _delete(repo: git.Repo, sha: str) -> None:
        path = Path(repo.git_dir) / "objects" / sha[:2] / sha[2:]
        path.chmod(0o644)
        path.unlink()

    return _delete
