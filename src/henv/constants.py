"""Application-wide constants."""

import re

APP_TITLE = "henv"
APP_DESCRIPTION = "Interactive CLI tool for managing local environment variables"

DEFAULT_SEARCH_DEPTH: int = 7
DEFAULT_ENVIRONMENT: str = "default"

# Directories never descended into (in addition to any hidden directory).
SKIP_DIRECTORIES: frozenset[str] = frozenset(
    {
        "node_modules",
        ".git",
        ".next",
        "dist",
        "build",
        "coverage",
        ".nyc_output",
        "logs",
        ".cache",
        "vendor",
        "target",
        "bin",
    }
)

# Whole name is ".env" or ".env.<label>"; the ASCII label holds no dots.
ENV_FILE_PATTERN = re.compile(r"\.env(\.\w+)?", re.ASCII)
ENV_PREFIX_PATTERN = re.compile(r"^\.env\.?")
ENV_LINE_PATTERN = re.compile(r"^([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*)$")
QUOTE_PATTERN = re.compile(r"^[\"']|[\"']$")

# Values longer than MASK_THRESHOLD render as head + ellipsis + tail.
MASK_THRESHOLD = 20
MASK_HEAD = 10
MASK_TAIL = 5
MASK_ELLIPSIS = "..."

TABLE_COLUMNS = ("#", "Key", "Value")

HELP_TEXT = """\
Usage: henv <command> [options]

Commands:
  list [options]           List environment variables for the current project or discover projects
  search <term> [options]  Search for environment variables by name across projects
  help                     Show this help message

Options for "list":
  -d, --dir <directory>         Target directory to scan (defaults to current directory)
  -s, --depth <number>          Maximum depth to search for environment files (default: 7)
  -m, --mask-env-variables      Mask environment variable values

Options for "search":
  -d, --dir <directory>         Target directory to scan (defaults to current directory)
  -s, --depth <number>          Maximum depth to search for environment files (default: 7)
  -p, --pattern                 Use regex pattern matching instead of text search
  -c, --case-sensitive          Make search case sensitive
  -m, --mask-env-variables      Mask environment variable values

Examples:
  henv list
  henv list --dir ./apps --depth 5
  henv search API_KEY
  henv search "^LOG_" --pattern
  henv search api --case-sensitive
  henv search SECRET --mask-env-variables
  henv search PORT --depth 3
  henv search DATABASE --dir /path/to/projects

For more, run henv <command> --help.\
"""
