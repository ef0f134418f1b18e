"""Terminal rendering of discovery and search results."""

from itertools import groupby

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from henv.constants import APP_TITLE, HELP_TEXT, TABLE_COLUMNS
from henv.domain.envfile import mask_value
from henv.models import EnvFile, MatchType, Project, ProjectEnvFiles, SearchResult

console = Console(highlight=False)

_MATCH_ICONS: dict[MatchType, str] = {
    MatchType.EXACT: "🎯",
    MatchType.PARTIAL: "📝",
    MatchType.PATTERN: "🔍",
}


def display_error(message: str) -> None:
    console.print(f"[bold red]❌ Error:[/] [red]{escape(message)}[/]")


def display_info(message: str) -> None:
    console.print(f"[bold blue]ℹ️ [/] [blue]{escape(message)}[/]")


def display_tip(message: str) -> None:
    console.print(f"\n💡 Tip: {escape(message)}")


def display_help() -> None:
    console.print(f"[bold cyan]🌱 {APP_TITLE.upper()} - Environment Variable Manager[/]\n")
    console.print(Text(HELP_TEXT))


def _variables_table(env_file: EnvFile, mask: bool) -> Table:
    """Build a three-column table of the file's variables, in file order."""
    table = Table(*TABLE_COLUMNS, show_edge=False, box=None, pad_edge=False)
    for i, var in enumerate(env_file.variables, start=1):
        table.add_row(
            str(i),
            Text(var.key, style="green"),
            Text(mask_value(var.value, mask), style="dim"),
        )
    return table


def display_project_env_files(project_name: str, env_files: list[EnvFile], mask: bool = False) -> None:
    """Print every file of a project with its variables."""
    if not env_files:
        display_info(f'No environment files found in project "{project_name}".')
        return

    console.print(f'\n[bold green]🌱 Environment files for project "{escape(project_name)}":[/]\n')
    for env_file in env_files:
        console.print(f"[bold cyan]📄 {escape(env_file.file_name)}[/]")
        console.print(f"[dim]   Environment: {escape(env_file.environment)}[/]")
        console.print(f"[dim]   Path: {escape(str(env_file.path))}[/]")
        console.print(f"[dim]   Variables: {len(env_file.variables)}[/]")
        if env_file.variables:
            console.print(_variables_table(env_file, mask))
        console.print()


def display_project_summary(entries: list[ProjectEnvFiles]) -> None:
    console.print()
    for entry in entries:
        console.print(
            f"📁 [cyan]{escape(entry.project.name)}[/] - "
            f"{len(entry.env_files)} environment file(s)"
        )


def display_project_list(projects: list[Project]) -> None:
    console.print("\nProjects found:")
    for project in projects:
        console.print(f"  📁 {escape(project.name)} [dim]({escape(str(project.path))})[/]")


def display_search_results(
    results: list[SearchResult],
    term: str,
    is_pattern: bool = False,
    mask: bool = False,
) -> None:
    """Print search hits grouped by project and then by file.

    Groups keep the order in which results were produced.
    """
    if not results:
        search_type = "pattern" if is_pattern else "text"
        display_error(f'No environment variables found matching {search_type}: "{term}"')
        display_tip("Try a different search term or use pattern matching with --pattern")
        return

    console.print(f'\n[bold green]🔍 Found {len(results)} result(s) for "{escape(term)}":[/]\n')

    for _, project_iter in groupby(results, key=lambda r: r.project_path):
        project_results = list(project_iter)
        first = project_results[0]
        console.print(f"[bold cyan]📁 Project: {escape(first.project_name)}[/]")
        console.print(f"[dim]   Path: {escape(str(first.project_path))}[/]\n")

        for _, file_iter in groupby(project_results, key=lambda r: r.env_file.path):
            file_results = list(file_iter)
            env_file = file_results[0].env_file
            console.print(
                f"  📄 [yellow]{escape(env_file.file_name)}[/] [dim]({escape(env_file.environment)})[/]"
            )
            for result in file_results:
                line = Text("    ")
                line.append(f"{_MATCH_ICONS[result.match_type]} ")
                line.append(result.variable.key, style="green")
                line.append(" = ")
                line.append(mask_value(result.variable.value, mask), style="dim")
                line.append(f" ({result.match_type.value})", style="bright_black")
                console.print(line)
            console.print()
