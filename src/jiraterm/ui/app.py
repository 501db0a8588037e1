"""Main Textual application for jiraterm."""

import queue

from rich.text import Text
from textual import work
from textual.app import App, ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Input, Static

from jiraterm.db import JiraDatabase
from jiraterm.ui.loop import TerminalClosed, run_loop
from jiraterm.ui.navigator import Navigator
from jiraterm.ui.prompts import Prompts


class AppTerminal:
    """Terminal backed by JiraApp.

    The loop runs on a worker thread: output is marshalled onto the app's
    event loop and input lines arrive through a queue fed by the Input widget.
    """

    def __init__(self, app: "JiraApp") -> None:
        self.app = app
        self.closed = False
        self._lines: queue.Queue[str | None] = queue.Queue()

    def submit(self, line: str) -> None:
        self._lines.put(line)

    def close(self) -> None:
        self.closed = True
        self._lines.put(None)

    def clear(self) -> None:
        self.app.call_from_thread(self.app.clear_output)

    def write(self, text: str) -> None:
        self.app.call_from_thread(self.app.append_output, text)

    def read_line(self) -> str:
        line = self._lines.get()
        if line is None:
            raise TerminalClosed()
        return line

    def wait_for_key(self) -> None:
        self.read_line()


class JiraApp(App):
    """Terminal issue tracker for epics and stories."""

    CSS = """
    #output {
        height: 1fr;
        padding: 0 1;
    }
    #command {
        dock: bottom;
    }
    """

    TITLE = "jiraterm"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, db: JiraDatabase):
        super().__init__()
        self.db = db
        self.terminal = AppTerminal(self)
        self.navigator = Navigator(db, Prompts(self.terminal))
        self.output: list[str] = []

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="output"):
            yield Static(id="page")
        yield Input(placeholder="command", id="command")

    def on_mount(self) -> None:
        self.query_one("#command", Input).focus()
        self.run_navigator()

    @work(thread=True)
    def run_navigator(self) -> None:
        run_loop(self.navigator, self.terminal)
        if not self.terminal.closed:
            self.call_from_thread(self.exit)

    @property
    def output_text(self) -> str:
        return "\n".join(self.output)

    def clear_output(self) -> None:
        self.output.clear()
        self._refresh_output()

    def append_output(self, text: str) -> None:
        self.output.append(text)
        self._refresh_output()

    def _refresh_output(self) -> None:
        # Text, not markup: pages contain literal "[q]" style hints
        self.query_one("#page", Static).update(Text(self.output_text))
        self.query_one("#output", VerticalScroll).scroll_end(animate=False)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.input.value = ""
        self.append_output(f"> {event.value}")
        self.terminal.submit(event.value)

    def action_quit(self) -> None:
        """Stop the loop thread and quit."""
        self.terminal.close()
        self.exit()
