"""GitPython-based repository accessor."""

import random
from collections import deque
from datetime import UTC, datetime
from os import PathLike
from types import TracebackType
from typing import Any

import git
import structlog

from .base import (
    CommitMetadata,
    CommitResolutionError,
    EligibleCommits,
    NoEligibleCommitsError,
    NotACommitError,
    RepositoryOpenError,
    SelectionError,
    SkippedCommit,
    WalkInitError,
)

logger = structlog.get_logger(__name__)

# Errors GitPython raises when an object or name cannot be read
_LOOKUP_ERRORS = (ValueError, IndexError, git.exc.ODBError)

# rev_parse also raises these for missing paths and unsupported @{...} forms
_REVISION_ERRORS = _LOOKUP_ERRORS + (KeyError, NotImplementedError)

# Reading a walked commit can also fail inside the cat-file process
_READ_ERRORS = _LOOKUP_ERRORS + (git.GitCommandError,)


class GitRepository:
    """Read-only access to commit metadata of a local git repository.

    The accessor owns its ``git.Repo`` handle. It can be used as a context
    manager, but callers are not required to close it.
    """

    def __init__(
        self,
        repo_path: str | PathLike[str],
        search_parent_directories: bool = False,
        seed: int | None = None,
    ) -> None:
        try:
            self.repo = git.Repo(
                repo_path, search_parent_directories=search_parent_directories
            )
        except (git.InvalidGitRepositoryError, git.NoSuchPathError) as e:
            raise RepositoryOpenError(
                f"Failed to open git repository: {repo_path}"
            ) from e

        self._rng = random.Random(seed)
        logger.debug(
            "repository_opened",
            repo_path=str(repo_path),
            git_dir=str(self.repo.git_dir),
        )

    @classmethod
    def open(
        cls,
        repo_path: str | PathLike[str],
        search_parent_directories: bool = False,
        seed: int | None = None,
    ) -> "GitRepository":
        return cls(
            repo_path,
            search_parent_directories=search_parent_directories,
            seed=seed,
        )

    def close(self) -> None:
        self.repo.close()

    def __enter__(self) -> "GitRepository":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def get_commit(self, rev: str) -> CommitMetadata:
        """Look up a commit by revision specifier.

        Args:
            rev: Full or abbreviated hash, ref name, or any other syntax
                accepted by GitPython's rev_parse

        Returns:
            Metadata of the commit the specifier resolves to. Annotated
            tags are peeled to the object they point at.

        Raises:
            CommitResolutionError: If the specifier resolves to nothing
            NotACommitError: If the resolved object is not a commit
        """
        if not rev:
            raise CommitResolutionError("Empty revision specifier")

        try:
            obj = self.repo.rev_parse(rev)
        except _REVISION_ERRORS as e:
            raise CommitResolutionError(
                f"Invalid commit hash or commit not found: {rev}"
            ) from e

        try:
            while obj.type == "tag":
                obj = obj.object
        except _LOOKUP_ERRORS as e:
            raise NotACommitError(f"Cannot peel tag {rev} to a commit") from e

        if obj.type != "commit":
            raise NotACommitError(
                f"Object is not a commit: {rev} resolves to a {obj.type}"
            )

        return self.extract_metadata(obj)

    def eligible_commits(self) -> EligibleCommits:
        """Collect non-merge commits reachable from HEAD.

        History is walked breadth-first from HEAD along parent links. A
        commit that cannot be read is recorded in ``skipped`` and its
        ancestry is not followed; the rest of the walk continues. Root
        commits count as non-merge.

        Raises:
            WalkInitError: If HEAD does not resolve to a commit
        """
        try:
            head = self.repo.head.commit
        except _LOOKUP_ERRORS as e:
            raise WalkInitError(
                "Cannot start history walk: HEAD does not resolve to a commit"
            ) from e

        result = EligibleCommits()
        seen = {head.binsha}
        pending = deque([head])
        while pending:
            commit = pending.popleft()
            try:
                parents = commit.parents
            except _READ_ERRORS as e:
                result.skipped.append(
                    SkippedCommit(sha=commit.hexsha, reason=str(e))
                )
                logger.warning(
                    "commit_skipped",
                    sha=commit.hexsha,
                    error=str(e),
                )
                continue

            for parent in parents:
                if parent.binsha not in seen:
                    seen.add(parent.binsha)
                    pending.append(parent)

            if len(parents) <= 1:
                result.shas.append(commit.hexsha)
            else:
                result.merges += 1

        return result

    def random_commit(self, rng: random.Random | None = None) -> CommitMetadata:
        """Pick a non-merge commit reachable from HEAD uniformly at random.

        Args:
            rng: Random generator used for the draw. Defaults to the
                accessor's generator, seeded at construction.

        Raises:
            WalkInitError: If the history walk cannot be started
            NoEligibleCommitsError: If no non-merge commit exists
            SelectionError: If the draw fails
        """
        eligible = self.eligible_commits()
        if not eligible.shas:
            raise NoEligibleCommitsError("No non-merge commits found in repository")

        chooser = rng if rng is not None else self._rng
        try:
            sha = chooser.choice(eligible.shas)
        except IndexError as e:
            raise SelectionError("Failed to select random commit") from e

        logger.debug(
            "random_commit_selected",
            sha=sha,
            eligible=len(eligible.shas),
            merges=eligible.merges,
            skipped=len(eligible.skipped),
        )

        try:
            return self.extract_metadata(self.repo.commit(sha))
        except _LOOKUP_ERRORS as e:
            raise CommitResolutionError(
                f"Failed to read selected commit {sha}"
            ) from e

    @staticmethod
    def extract_metadata(commit: Any) -> CommitMetadata:
        """Build CommitMetadata from a GitPython commit.

        A missing author name becomes "Unknown" and an unusable authored
        timestamp becomes the current time.
        """
        sha = commit.hexsha

        author = commit.author.name if commit.author is not None else None
        if not author:
            logger.debug("author_name_missing", sha=sha)
            author = "Unknown"

        try:
            date = datetime.fromtimestamp(commit.authored_date, tz=UTC)
        except (OverflowError, OSError, ValueError, TypeError):
            logger.debug(
                "authored_date_invalid",
                sha=sha,
                authored_date=repr(commit.authored_date),
            )
            date = datetime.now(UTC)

        message = commit.message
        if message is None:
            message = ""
        elif isinstance(message, bytes):
            message = message.decode("utf-8", errors="replace")

        return CommitMetadata(
            hash=sha,
            author=author,
            date=date,
            message=message.strip(),
        )
