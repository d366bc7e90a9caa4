"""Git repository access for commitpick.

Provides exact commit lookup and random non-merge commit selection.
"""

from .base import (
    CommitMetadata,
    CommitResolutionError,
    EligibleCommits,
    GitRepositoryError,
    NoEligibleCommitsError,
    NotACommitError,
    RepositoryOpenError,
    SelectionError,
    SkippedCommit,
    WalkInitError,
)
from .repository import GitRepository

__all__ = [
    # Classes
    "GitRepository",
    # Data classes
    "CommitMetadata",
    "EligibleCommits",
    "SkippedCommit",
    # Errors
    "GitRepositoryError",
    "RepositoryOpenError",
    "CommitResolutionError",
    "NotACommitError",
    "WalkInitError",
    "NoEligibleCommitsError",
    "SelectionError",
]
