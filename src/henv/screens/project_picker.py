"""Project picker modal — choose which discovered project to inspect."""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import ListItem, ListView, Static

from henv.models import Project, ProjectEnvFiles


class ProjectPickerScreen(ModalScreen[Project | None]):
    """Modal that lets the user choose one project.

    Displays every project with its path and env file count, followed by
    an exit row.  Dismisses with the chosen ``Project`` on Enter, or
    ``None`` on the exit row or Escape/q.
    """

    BINDINGS = [
        Binding("escape", "cancel", show=False),
        Binding("q", "cancel", show=False),
        Binding("j", "cursor_down", show=False),
        Binding("k", "cursor_up", show=False),
    ]

    DEFAULT_CSS = """
    ProjectPickerScreen {
        align: center middle;
    }
    """

    def __init__(self, entries: list[ProjectEnvFiles]) -> None:
        super().__init__()
        # List-view index → project; the trailing exit row has no entry.
        self._index_map: list[Project] = [entry.project for entry in entries]
        self._entries = entries

    def compose(self) -> ComposeResult:
        items: list[ListItem] = []
        for entry in self._entries:
            label = (
                f"  {entry.project.name}  ({entry.project.path})"
                f" - {len(entry.env_files)} environment file(s)"
            )
            items.append(ListItem(Static(label, classes="picker-project"), classes="picker-item"))
        items.append(ListItem(Static("  ← Exit", classes="picker-exit"), classes="picker-item"))

        yield Static("  Select a project to view its environment variables:", id="picker-title")
        yield ListView(*items, id="picker-list")
        yield Static("  Enter to select · Esc/q to cancel", id="picker-hint")

    def on_mount(self) -> None:
        list_view = self.query_one("#picker-list", ListView)
        list_view.index = 0
        list_view.focus()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        list_index = event.list_view.index
        if list_index is None or list_index >= len(self._index_map):
            self.dismiss(None)
            return
        self.dismiss(self._index_map[list_index])

    def action_cursor_down(self) -> None:
        self.query_one("#picker-list", ListView).action_cursor_down()

    def action_cursor_up(self) -> None:
        self.query_one("#picker-list", ListView).action_cursor_up()

    def action_cancel(self) -> None:
        self.dismiss(None)


class ProjectPickerApp(App[Project | None]):
    """Minimal app hosting the picker; exits with the chosen project."""

    def __init__(self, entries: list[ProjectEnvFiles]) -> None:
        super().__init__()
        self._entries = entries

    def on_mount(self) -> None:
        self.push_screen(ProjectPickerScreen(self._entries), self.exit)


def select_project(entries: list[ProjectEnvFiles]) -> Project | None:
    """Run the picker in the terminal and return the selection, if any."""
    if not entries:
        return None
    return ProjectPickerApp(entries).run()
