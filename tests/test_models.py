"""Tests for data models."""

from jiraterm.models import DbState, Epic, Status, Story


def test_epic_defaults():
    """New epics are open with no stories."""
    epic = Epic("name", "description")
    assert epic.status is Status.OPEN
    assert epic.stories == []


def test_epics_do_not_share_story_lists():
    """Each epic gets its own story list."""
    a = Epic("a", "")
    b = Epic("b", "")
    a.stories.append(1)
    assert b.stories == []


def test_story_defaults():
    assert Story("name", "description").status is Status.OPEN


def test_empty_state():
    state = DbState()
    assert state.last_item_id == 0
    assert state.epics == {}
    assert state.stories == {}


def test_status_labels():
    """Labels replace underscores with spaces."""
    assert [s.label for s in Status] == ["OPEN", "IN PROGRESS", "RESOLVED", "CLOSED"]
    assert str(Status.IN_PROGRESS) == "IN PROGRESS"
