"""Searching discovered variables by key."""

import logging
import re
from collections.abc import Iterable

from henv.models import EnvFile, MatchType, ProjectEnvFiles, SearchResult, VariableMatch

logger = logging.getLogger(__name__)


def search_variables(
    env_files: Iterable[EnvFile],
    term: str,
    is_pattern: bool = False,
    case_sensitive: bool = False,
) -> list[VariableMatch]:
    """Return every variable whose key matches ``term``, in traversal order.

    Text mode reports ``exact`` when the (optionally lower-cased) key equals
    the term and ``partial`` when it merely contains it; a variable is
    reported at most once.  Pattern mode treats ``term`` as a regular
    expression searched anywhere in the key.  An invalid expression matches
    nothing.
    """
    if is_pattern:
        try:
            regex = re.compile(term, 0 if case_sensitive else re.IGNORECASE)
        except re.error as exc:
            logger.warning("Invalid search pattern %r: %s", term, exc)
            return []
    else:
        needle = term if case_sensitive else term.lower()

    matches: list[VariableMatch] = []
    for env_file in env_files:
        for variable in env_file.variables:
            if is_pattern:
                match_type = MatchType.PATTERN if regex.search(variable.key) else None
            else:
                match_type = _text_match(variable.key, needle, case_sensitive)
            if match_type is not None:
                matches.append(VariableMatch(variable=variable, env_file=env_file, match_type=match_type))
    return matches


def _text_match(key: str, needle: str, case_sensitive: bool) -> MatchType | None:
    if not case_sensitive:
        key = key.lower()
    if key == needle:
        return MatchType.EXACT
    if needle in key:
        return MatchType.PARTIAL
    return None


def search_projects(
    project_files: Iterable[ProjectEnvFiles],
    term: str,
    is_pattern: bool = False,
    case_sensitive: bool = False,
) -> list[SearchResult]:
    """Search each project's files and tag the matches with the project."""
    results: list[SearchResult] = []
    for entry in project_files:
        for match in search_variables(entry.env_files, term, is_pattern, case_sensitive):
            results.append(
                SearchResult(
                    project_name=entry.project.name,
                    project_path=entry.project.path,
                    env_file=match.env_file,
                    variable=match.variable,
                    match_type=match.match_type,
                )
            )
    return results
