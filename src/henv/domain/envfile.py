"""Pure domain functions for .env file parsing and classification.

Nothing here touches the file system: the walker hands over file names,
directory names and raw file content, and gets plain values back.
"""

from henv.constants import (
    DEFAULT_ENVIRONMENT,
    ENV_FILE_PATTERN,
    ENV_LINE_PATTERN,
    ENV_PREFIX_PATTERN,
    MASK_ELLIPSIS,
    MASK_HEAD,
    MASK_TAIL,
    MASK_THRESHOLD,
    QUOTE_PATTERN,
    SKIP_DIRECTORIES,
)
from henv.models import EnvVariable


def parse_env_file(content: str) -> list[EnvVariable]:
    """Turn raw .env text into an ordered list of EnvVariable instances.

    Each line is stripped of surrounding whitespace, then:
    - Blank lines and lines starting with ``#`` are skipped.
    - Lines of the form ``KEY = value`` (``KEY`` being a shell identifier)
      produce one variable; everything after the first ``=`` is the value.
    - A leading ``"``/``'`` and a trailing ``"``/``'`` are stripped from the
      value independently, so mismatched pairs such as ``"bar'`` lose both.
    - Anything else (malformed lines, multi-line continuations) is dropped.

    Duplicate keys are kept as separate entries in file order.
    """
    variables: list[EnvVariable] = []
    for line in content.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        match = ENV_LINE_PATTERN.match(stripped)
        if match is None:
            continue
        key, raw_value = match.groups()
        variables.append(EnvVariable(key=key, value=QUOTE_PATTERN.sub("", raw_value)))
    return variables


def is_env_file(file_name: str) -> bool:
    """Return True for ``.env`` and ``.env.<label>`` (label without dots)."""
    return ENV_FILE_PATTERN.fullmatch(file_name) is not None


def extract_environment(file_name: str) -> str:
    """Derive the environment label from an env file name.

    ``.env`` maps to ``default``; ``.env.production`` maps to ``production``.
    """
    if file_name == ".env":
        return DEFAULT_ENVIRONMENT
    return ENV_PREFIX_PATTERN.sub("", file_name, count=1) or DEFAULT_ENVIRONMENT


def should_skip_directory(dir_name: str) -> bool:
    """Return True for hidden directories and well-known build/dependency dirs."""
    return dir_name.startswith(".") or dir_name in SKIP_DIRECTORIES


def mask_value(value: str, enabled: bool = True) -> str:
    """Shorten long values to ``head...tail`` for display.

    Values up to MASK_THRESHOLD characters, or any value when masking is
    disabled, are returned unchanged.
    """
    if not enabled or len(value) <= MASK_THRESHOLD:
        return value
    return value[:MASK_HEAD] + MASK_ELLIPSIS + value[-MASK_TAIL:]
