"""The driving loop: render the current page, read a line, apply the action."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from jiraterm.errors import JiraError

if TYPE_CHECKING:
    from jiraterm.ui.navigator import Navigator

logger = logging.getLogger(__name__)


class TerminalClosed(Exception):
    """Raised by a Terminal when no more input will arrive."""


class Terminal(Protocol):
    """Line-oriented text I/O used by the loop and the prompts."""

    def clear(self) -> None: ...

    def write(self, text: str) -> None: ...

    def read_line(self) -> str: ...

    def wait_for_key(self) -> None: ...


def report_error(terminal: Terminal, context: str, error: JiraError) -> None:
    """Show an error and block until the user acknowledges it."""
    logger.warning("%s: %s", context, error)
    terminal.write(f"{context}: {error}\nPress enter to continue...")
    terminal.wait_for_key()


def run_loop(navigator: Navigator, terminal: Terminal) -> None:
    """Drive the navigator until its page stack is empty or the terminal closes."""
    try:
        while navigator.current_page is not None:
            terminal.clear()
            try:
                terminal.write(navigator.render_current())
            except JiraError as e:
                report_error(terminal, "Error rendering page", e)

            line = terminal.read_line()
            try:
                action = navigator.handle_input(line)
                if action is not None:
                    navigator.handle_action(action)
            except JiraError as e:
                report_error(terminal, "Error handling user input", e)
    except TerminalClosed:
        logger.info("terminal closed, leaving loop")
