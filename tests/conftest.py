"""Shared fixtures."""

import pytest

from jiraterm.db import JiraDatabase
from jiraterm.storage import MemoryDatabase
from jiraterm.ui.loop import TerminalClosed


class ScriptedTerminal:
    """Terminal that replays canned input lines and records output."""

    def __init__(self, lines=()):
        self.lines = list(lines)
        self.written: list[str] = []
        self.clears = 0
        self.key_waits = 0

    def clear(self) -> None:
        self.clears += 1

    def write(self, text: str) -> None:
        self.written.append(text)

    def read_line(self) -> str:
        if not self.lines:
            raise TerminalClosed()
        return self.lines.pop(0)

    def wait_for_key(self) -> None:
        self.key_waits += 1
        self.read_line()

    @property
    def output(self) -> str:
        return "\n".join(self.written)


@pytest.fixture
def jira_db():
    """Repository backed by an empty in-memory database."""
    return JiraDatabase(MemoryDatabase())


@pytest.fixture
def terminal():
    return ScriptedTerminal()
