"""Errors and dataclasses for repository access."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

# Error classes


class GitRepositoryError(Exception):
    """Base exception for GitRepository errors."""

    pass


class RepositoryOpenError(GitRepositoryError):
    """Path does not reference a valid git repository."""

    pass


class CommitResolutionError(GitRepositoryError):
    """Revision specifier does not resolve to any object."""

    pass


class NotACommitError(GitRepositoryError):
    """Resolved object cannot be peeled to a commit (e.g., tree or blob)."""

    pass


class WalkInitError(GitRepositoryError):
    """History walk cannot be started from HEAD."""

    pass


class NoEligibleCommitsError(GitRepositoryError):
    """No non-merge commit is reachable from HEAD."""

    pass


class SelectionError(GitRepositoryError):
    """Random selection over the eligible set failed."""

    pass


# Data classes


@dataclass(frozen=True)
class CommitMetadata:
    """Snapshot of a commit's metadata."""

    hash: str
    author: str
    date: datetime  # Always UTC, timezone-aware
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "hash": self.hash,
            "author": self.author,
            "date": self.date.isoformat(),
            "message": self.message,
        }


@dataclass(frozen=True)
class SkippedCommit:
    """A commit the eligibility filter dropped because it could not be read."""

    sha: str
    reason: str


@dataclass
class EligibleCommits:
    """Result of filtering the history reachable from HEAD.

    Attributes:
        shas: Non-merge commit ids, in walk order
        skipped: Commits excluded because reading them failed
        merges: Number of merge commits excluded
    """

    shas: list[str] = field(default_factory=list)
    skipped: list[SkippedCommit] = field(default_factory=list)
    merges: int = 0
