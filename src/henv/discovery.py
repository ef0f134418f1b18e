"""Recursive discovery of environment files below a directory."""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from henv.constants import DEFAULT_ENVIRONMENT, DEFAULT_SEARCH_DEPTH
from henv.domain.envfile import (
    extract_environment,
    is_env_file,
    parse_env_file,
    should_skip_directory,
)
from henv.models import EnvFile

logger = logging.getLogger(__name__)


def sort_env_files(env_files: Iterable[EnvFile]) -> list[EnvFile]:
    """Order files with ``default`` first, then by environment label.

    Labels compare case-insensitively first and fall back to the raw label,
    so ``Staging`` and ``staging`` stay in a stable relative order.
    """
    return sorted(
        env_files,
        key=lambda f: (
            f.environment != DEFAULT_ENVIRONMENT,
            f.environment.casefold(),
            f.environment,
        ),
    )


def discover_env_files(
    root: Path,
    max_depth: int = DEFAULT_SEARCH_DEPTH,
) -> list[EnvFile]:
    """Return every env file under ``root`` down to ``max_depth`` levels.

    Files directly inside ``root`` are at depth 0, so ``max_depth=0`` never
    reads anything. Unreadable files and unlistable directories are skipped
    without aborting the walk. The result is sorted once, after the whole
    tree has been collected.
    """
    return sort_env_files(_walk(Path(root), max_depth, 0))


def _walk(directory: Path, max_depth: int, depth: int) -> list[EnvFile]:
    if depth >= max_depth:
        return []

    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        logger.debug("Skipping %s: %s", directory, exc)
        return []

    found: list[EnvFile] = []
    for entry in entries:
        path = directory / entry.name
        try:
            is_file = entry.is_file()
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            continue

        if is_file and is_env_file(entry.name):
            env_file = _load_env_file(path)
            if env_file is not None:
                found.append(env_file)
        elif is_dir and not should_skip_directory(entry.name):
            found.extend(_walk(path, max_depth, depth + 1))
    return found


def _load_env_file(path: Path) -> EnvFile | None:
    try:
        content = path.read_text(encoding="utf-8-sig", errors="replace")
    except OSError:
        logger.warning("Could not read %s at %s", path.name, path)
        return None
    return EnvFile(
        file_name=path.name,
        environment=extract_environment(path.name),
        path=path.absolute(),
        variables=tuple(parse_env_file(content)),
    )


def get_project_env_files(project_path: Path, max_depth: int | None = None) -> list[EnvFile]:
    """Discover env files for a project, using the default depth when unset."""
    return discover_env_files(project_path, DEFAULT_SEARCH_DEPTH if max_depth is None else max_depth)
