"""Locating git projects on disk.

Project detection is a plain existence check for ``<dir>/.git``.  Resolving
the top-level working directory shells out to ``git rev-parse`` behind the
``RepoRootResolver`` protocol so callers (and tests) can swap it out.
"""

import logging
import os
import subprocess
from pathlib import Path
from typing import Protocol

from henv.models import Project

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Raised when a ``git`` call returns a non-zero exit code."""


class RepoRootResolver(Protocol):
    """Anything that can map a directory to its repository top level."""

    def resolve(self, path: Path) -> Path | None:
        """Return the repository root containing ``path``, or None."""
        ...


class GitCli:
    """Shells out to the git executable."""

    def __init__(self, executable: str = "git") -> None:
        self._git = executable

    def resolve(self, path: Path) -> Path | None:
        """Return the top-level directory for ``path``.

        Returns None when ``path`` is not inside a repository or git is not
        installed.
        """
        try:
            output = self._run(["rev-parse", "--show-toplevel"], cwd=path)
        except (GitError, OSError) as exc:
            logger.debug("Could not resolve git root for %s: %s", path, exc)
            return None
        top_level = output.strip()
        return Path(top_level) if top_level else None

    def _run(self, args: list[str], cwd: Path) -> str:
        """Run a git command, returning stdout. Raises GitError on failure."""
        cmd = [self._git, *args]
        result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True)
        if result.returncode != 0:
            raise GitError(
                f"Command failed (exit {result.returncode}):\n"
                f"  {' '.join(cmd)}\n"
                f"  stderr: {result.stderr.strip()}"
            )
        return result.stdout


def is_git_repository(path: Path) -> bool:
    """Return True if ``path/.git`` exists (file or directory)."""
    try:
        return (Path(path) / ".git").exists()
    except OSError:
        return False


def get_git_root(path: Path, resolver: RepoRootResolver | None = None) -> Path | None:
    """Resolve the repository root for ``path`` using ``resolver`` (git by default)."""
    return (resolver or GitCli()).resolve(Path(path))


def find_git_projects(base_dir: Path) -> list[Project]:
    """List the immediate, non-hidden subdirectories of ``base_dir`` that are projects.

    The scan is not recursive.  An unlistable ``base_dir`` yields no projects.
    """
    base_dir = Path(base_dir)
    try:
        with os.scandir(base_dir) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        logger.debug("Could not list %s: %s", base_dir, exc)
        return []

    projects: list[Project] = []
    for entry in entries:
        if entry.name.startswith("."):
            continue
        try:
            if not entry.is_dir(follow_symlinks=False):
                continue
        except OSError:
            continue
        path = base_dir / entry.name
        if is_git_repository(path):
            projects.append(Project(name=entry.name, path=path))
    return projects
