"""Tests for the driving loop."""

import pytest

from jiraterm.db import JiraDatabase
from jiraterm.errors import StorageIOError
from jiraterm.models import Epic, Status
from jiraterm.ui.actions import NavigateToEpicDetail
from jiraterm.ui.loop import run_loop
from jiraterm.ui.navigator import Navigator
from jiraterm.ui.prompts import Prompts


@pytest.fixture
def nav(jira_db, terminal):
    return Navigator(jira_db, Prompts(terminal))


def test_quit_from_home(nav, terminal):
    """q on the home page ends the loop after one render."""
    terminal.lines = ["q"]
    run_loop(nav, terminal)
    assert nav.current_page is None
    assert terminal.clears == 1
    assert "EPICS" in terminal.output


def test_back_then_quit(nav, terminal, jira_db):
    """Going back returns home, where q quits."""
    epic_id = jira_db.create_epic(Epic("Login", ""))
    terminal.lines = [str(epic_id), "p", "q"]
    run_loop(nav, terminal)
    assert nav.current_page is None


def test_unrecognized_input_rerenders(nav, terminal):
    """Unknown input redraws the page without an error."""
    terminal.lines = ["what", "q"]
    run_loop(nav, terminal)
    assert terminal.clears == 2
    assert terminal.key_waits == 0


def test_full_session(nav, terminal, jira_db):
    """Create, navigate, update and delete through typed input."""
    terminal.lines = [
        "c", "E1", "first epic",
        "1",
        "c", "S1", "first story",
        "2",
        "u", "4",
        "p",
        "d", "Y",
        "q",
    ]  # fmt: skip
    run_loop(nav, terminal)

    state = jira_db.read()
    assert state.epics == {}
    assert state.stories == {}
    assert state.last_item_id == 2


def test_closed_terminal_ends_loop(nav, terminal):
    """Running out of input stops the loop on the current page."""
    run_loop(nav, terminal)
    assert nav.current_page is not None


def test_action_error_is_reported(nav, terminal, jira_db, monkeypatch):
    """Repository errors are shown and the page stays."""
    epic_id = jira_db.create_epic(Epic("Login", ""))

    def fail(epic_id, status):
        raise StorageIOError("disk gone")

    monkeypatch.setattr(jira_db, "update_epic_status", fail)
    terminal.lines = [str(epic_id), "u", "4", "", "q"]
    run_loop(nav, terminal)

    assert "Error handling user input: disk gone" in terminal.output
    assert terminal.key_waits == 1
    assert jira_db.get_epic(epic_id).status is Status.OPEN
    # still on the epic page after the error, so "q" was not a command
    assert nav.current_page is not None


def test_render_error_is_reported(nav, terminal, jira_db):
    """A page whose epic vanished reports the error and still takes input."""
    epic_id = jira_db.create_epic(Epic("Login", ""))
    nav.handle_action(NavigateToEpicDetail(epic_id))
    jira_db.delete_epic(epic_id)

    terminal.lines = ["", "p", "q"]
    run_loop(nav, terminal)

    assert "Error rendering page: could not find epic" in terminal.output
    assert terminal.key_waits == 1
    assert nav.current_page is None


def test_corrupt_database_is_reported(tmp_path, terminal):
    """A database file that fails to decode is shown as an error, not raised."""
    path = tmp_path / "database.json"
    path.write_bytes(b"\xff\xfe")
    nav = Navigator(JiraDatabase.from_path(path), Prompts(terminal))

    terminal.lines = ["", "q", ""]
    run_loop(nav, terminal)

    assert "Error rendering page:" in terminal.output
    assert "Error handling user input:" in terminal.output
    assert "UTF-8" in terminal.output
    assert terminal.key_waits == 2
