"""Command line interface: ``henv list``, ``henv search`` and ``henv help``."""

import logging
import sys
from collections.abc import Callable
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from henv.config import ConfigError, Settings, load_config
from henv.constants import APP_DESCRIPTION
from henv.display import (
    display_error,
    display_help,
    display_info,
    display_project_env_files,
    display_project_list,
    display_project_summary,
    display_search_results,
    display_tip,
)
from henv.screens.project_picker import select_project
from henv.search import search_projects
from henv.workspace import collect_env_files, resolve_workspace

app = typer.Typer(
    help=APP_DESCRIPTION,
    add_completion=False,
)

# Module-level defaults for Typer options
_DIR_HELP = "Target directory to scan (defaults to current directory)"
_DEPTH_HELP = "Maximum depth to search for environment files (default: 7)"
_MASK_HELP = "Mask environment variable values"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_time=False, show_path=False)],
    )


def _load_settings() -> Settings:
    try:
        return load_config()
    except ConfigError as exc:
        display_error(str(exc))
        raise typer.Exit(code=1) from exc


def _parse_depth(raw: str | None, default: int) -> int:
    """Validate ``--depth``; anything but an integer >= 1 exits with status 1."""
    if raw is None:
        return default
    digits = raw.strip()
    if digits.isascii() and digits.isdigit():
        depth = int(digits)
    else:
        depth = 0
    if depth < 1:
        display_error("Depth must be a positive number")
        raise typer.Exit(code=1)
    return depth


def _is_interactive(settings: Settings) -> bool:
    return settings.interactive and sys.stdin.isatty() and sys.stdout.isatty()


def _list(target_dir: Path, depth: int, mask: bool, interactive: bool) -> None:
    workspace = resolve_workspace(target_dir)

    if workspace.single_project:
        project = workspace.projects[0]
        display_info(f"Found git project: {project.name}")
        env_files = collect_env_files(workspace.projects, depth)[0].env_files
        display_project_env_files(project.name, env_files, mask)
        if not env_files:
            display_tip("Create environment files like .env, .env.development, .env.production to get started!")
        return

    display_info("Scanning for git projects...")
    if not workspace.projects:
        display_error("No git projects found in this directory.")
        display_tip("Navigate to a git repository or a directory containing git repositories.")
        return

    with_env = [entry for entry in collect_env_files(workspace.projects, depth) if entry.env_files]
    if not with_env:
        display_info(
            f"Found {len(workspace.projects)} git project(s), but none have environment files."
        )
        display_tip("Add .env files to your projects to manage environment variables.")
        display_project_list(workspace.projects)
        return

    display_info(f"Found {len(with_env)} project(s) with environment files:")
    display_project_summary(with_env)

    if not interactive:
        for entry in with_env:
            display_project_env_files(entry.project.name, entry.env_files, mask)
        return

    selected = select_project(with_env)
    if selected is None:
        display_info("Goodbye! 👋")
        return
    chosen = next(entry for entry in with_env if entry.project == selected)
    display_project_env_files(chosen.project.name, chosen.env_files, mask)


def _search(
    term: str,
    target_dir: Path,
    depth: int,
    is_pattern: bool,
    case_sensitive: bool,
    mask: bool,
) -> None:
    workspace = resolve_workspace(target_dir)

    if workspace.single_project:
        project = workspace.projects[0]
        display_info(f"Searching in git project: {project.name}")
        project_files = collect_env_files(workspace.projects, depth)
        if not project_files[0].env_files:
            display_error("No environment files found in this project.")
            return
    else:
        display_info("Scanning for git projects...")
        if not workspace.projects:
            display_error("No git projects found in this directory.")
            display_tip("Navigate to a git repository or a directory containing git repositories.")
            return
        project_files = collect_env_files(workspace.projects, depth)

    results = search_projects(project_files, term, is_pattern, case_sensitive)
    display_search_results(results, term, is_pattern, mask)


def _run(action: Callable[..., None], *args: object) -> None:
    """Run a command body; unexpected errors are reported and exit with 1."""
    try:
        action(*args)
    except Exception as exc:
        display_error(f"An unexpected error occurred: {exc}")
        raise typer.Exit(code=1) from exc


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Interactive CLI tool for managing local environment variables."""
    _configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        settings = _load_settings()
        _run(_list, Path.cwd(), settings.search_depth, settings.mask_env_variables, _is_interactive(settings))


@app.command("list")
def list_command(
    directory: Path | None = typer.Option(None, "--dir", "-d", help=_DIR_HELP),  # noqa: B008
    depth: str | None = typer.Option(None, "--depth", "-s", help=_DEPTH_HELP),
    mask: bool = typer.Option(False, "--mask-env-variables", "-m", help=_MASK_HELP),
) -> None:
    """List environment variables for the current project or discover projects."""
    settings = _load_settings()
    max_depth = _parse_depth(depth, settings.search_depth)
    _run(
        _list,
        directory or Path.cwd(),
        max_depth,
        mask or settings.mask_env_variables,
        _is_interactive(settings),
    )


@app.command("search")
def search_command(
    term: str | None = typer.Argument(None, help="Variable name, substring or pattern to find"),
    directory: Path | None = typer.Option(None, "--dir", "-d", help=_DIR_HELP),  # noqa: B008
    depth: str | None = typer.Option(None, "--depth", "-s", help=_DEPTH_HELP),
    pattern: bool = typer.Option(
        False, "--pattern", "-p", help="Use regex pattern matching instead of text search"
    ),
    case_sensitive: bool = typer.Option(
        False, "--case-sensitive", "-c", help="Make search case sensitive"
    ),
    mask: bool = typer.Option(False, "--mask-env-variables", "-m", help=_MASK_HELP),
) -> None:
    """Search for environment variables by name across projects."""
    settings = _load_settings()
    max_depth = _parse_depth(depth, settings.search_depth)
    if term is None or not term.strip():
        display_error("Search term is required.")
        typer.echo("\n💡 Usage: henv search <term> [options]")
        raise typer.Exit(code=1)
    _run(
        _search,
        term,
        directory or Path.cwd(),
        max_depth,
        pattern,
        case_sensitive,
        mask or settings.mask_env_variables,
    )


@app.command("help")
def help_command() -> None:
    """Show this help message."""
    display_help()
