"""Domain models."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class EnvVariable:
    key: str
    value: str


@dataclass(frozen=True)
class EnvFile:
    """A parsed environment file.

    ``environment`` is derived from ``file_name`` at discovery time and
    ``variables`` keeps the physical line order of the source file.
    """

    file_name: str
    environment: str
    path: Path
    variables: tuple[EnvVariable, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Project:
    """A directory identified as the root of a git repository."""

    name: str
    path: Path


@dataclass(frozen=True)
class ProjectEnvFiles:
    project: Project
    env_files: list[EnvFile]


class MatchType(str, Enum):
    EXACT = "exact"
    PARTIAL = "partial"
    PATTERN = "pattern"


@dataclass(frozen=True)
class VariableMatch:
    """A single variable that satisfied a search query."""

    variable: EnvVariable
    env_file: EnvFile
    match_type: MatchType


@dataclass(frozen=True)
class SearchResult:
    """A match annotated with the project it was found in.

    ``env_file`` and ``variable`` are shared with the discovery result, never
    copied.
    """

    project_name: str
    project_path: Path
    env_file: EnvFile
    variable: EnvVariable
    match_type: MatchType
