"""Config file loading and validation.

Schema on disk (~/.config/henv/config.json):

    {
        "search_depth": 5,
        "mask_env_variables": true,
        "interactive": false
    }

Every key is optional. Keys prefixed with "_" are reserved (e.g. "_comment")
and are stripped on load.
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from henv.constants import DEFAULT_SEARCH_DEPTH

logger = logging.getLogger(__name__)

CONFIG_PATH = Path("~/.config/henv/config.json").expanduser()

_README_PATH = Path("~/.config/henv/README.md").expanduser()

_README_CONTENT = """\
# henv configuration

Edit `config.json` in this directory to change the defaults used by henv.

## Schema

```json
{
    "search_depth": 7,
    "mask_env_variables": false,
    "interactive": true
}
```

- `search_depth`: how many directory levels to descend when `--depth` is not given.
- `mask_env_variables`: mask long values even without `--mask-env-variables`.
- `interactive`: allow `henv list` to open the project picker in a terminal.

Keys prefixed with `_` (e.g. `_comment`) are ignored by henv.
"""


class Settings(BaseModel):
    """User defaults applied when the command line leaves them unset."""

    model_config = ConfigDict(extra="forbid")

    search_depth: int = Field(default=DEFAULT_SEARCH_DEPTH, ge=1)
    mask_env_variables: bool = False
    interactive: bool = True


class ConfigError(Exception):
    """Raised when config.json exists but cannot be parsed or validated."""


def load_config() -> Settings:
    """Load and validate the config file.

    Creates the config directory, an empty config.json, and a README on first
    run, returning default settings.  Raises ConfigError if the file exists
    but is malformed.
    """
    if not CONFIG_PATH.exists():
        _bootstrap()
        return Settings()

    try:
        text = CONFIG_PATH.read_text()
    except OSError as exc:
        raise ConfigError(f"config.json could not be read: {exc}") from exc

    if not text.strip():
        return Settings()

    try:
        raw: object = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"config.json is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("config.json must be a JSON object at the top level")

    # Strip reserved/comment keys.
    values = {k: v for k, v in raw.items() if not k.startswith("_")}

    try:
        return Settings.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config: {exc}") from exc


def _bootstrap() -> None:
    """Create the config directory, an empty config.json, and a README.

    A read-only home directory is not an error; defaults still apply.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text("{}\n")
        if not _README_PATH.exists():
            _README_PATH.write_text(_README_CONTENT)
    except OSError as exc:
        logger.debug("Could not create %s: %s", CONFIG_PATH, exc)
