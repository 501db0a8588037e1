"""Pages of the terminal UI.

A page is a small immutable value holding the ids it is focused on. It
renders itself from a DbState snapshot and turns a line of user input
into an Action, or None when the input is not a command it knows.
"""

from dataclasses import dataclass

from jiraterm.errors import NotFound
from jiraterm.models import DbState, Epic, Story
from jiraterm.ui.actions import (
    Action,
    CreateEpic,
    CreateStory,
    DeleteEpic,
    DeleteStory,
    Exit,
    NavigateToEpicDetail,
    NavigateToPreviousPage,
    NavigateToStoryDetail,
    UpdateEpicStatus,
    UpdateStoryStatus,
)
from jiraterm.ui.formatting import get_column_string

_LIST_HEADER = "     id     |               name               |      status      "
_DETAIL_HEADER = "  id  |     name     |         description         |    status    "


def _list_row(item_id: int, item: Epic | Story) -> str:
    return " | ".join(
        [
            get_column_string(str(item_id), 11),
            get_column_string(item.name, 32),
            get_column_string(item.status.label, 17),
        ]
    )


def _detail_row(item_id: int, item: Epic | Story) -> str:
    return " | ".join(
        [
            get_column_string(str(item_id), 5),
            get_column_string(item.name, 12),
            get_column_string(item.description, 27),
            get_column_string(item.status.label, 13),
        ]
    )


def _parse_id(text: str) -> int | None:
    return int(text) if text.isascii() and text.isdigit() else None


@dataclass(frozen=True)
class HomePage:
    """List of all epics."""

    def render(self, state: DbState) -> str:
        lines = [
            "----------------------------- EPICS -----------------------------",
            _LIST_HEADER,
        ]
        lines += [_list_row(epic_id, state.epics[epic_id]) for epic_id in sorted(state.epics)]
        lines += ["", "", "[q] quit | [c] create epic | [:id:] navigate to epic"]
        return "\n".join(lines)

    def handle_input(self, text: str, state: DbState) -> Action | None:
        text = text.strip()
        if text == "q":
            return Exit()
        if text == "c":
            return CreateEpic()
        epic_id = _parse_id(text)
        if epic_id is not None and epic_id in state.epics:
            return NavigateToEpicDetail(epic_id)
        return None


@dataclass(frozen=True)
class EpicDetail:
    """One epic and the list of its stories."""

    epic_id: int

    def _epic(self, state: DbState) -> Epic:
        epic = state.epics.get(self.epic_id)
        if epic is None:
            raise NotFound("epic", self.epic_id)
        return epic

    def render(self, state: DbState) -> str:
        epic = self._epic(state)
        lines = [
            "------------------------------ EPIC ------------------------------",
            _DETAIL_HEADER,
            _detail_row(self.epic_id, epic),
            "",
            "---------------------------- STORIES ----------------------------",
            _LIST_HEADER,
        ]
        for story_id in epic.stories:
            story = state.stories.get(story_id)
            if story is None:
                raise NotFound("story", story_id)
            lines.append(_list_row(story_id, story))
        lines += [
            "",
            "",
            "[p] previous | [u] update epic | [d] delete epic | [c] create story | [:id:] navigate to story",
        ]
        return "\n".join(lines)

    def handle_input(self, text: str, state: DbState) -> Action | None:
        text = text.strip()
        if text == "p":
            return NavigateToPreviousPage()
        if text == "u":
            return UpdateEpicStatus(self.epic_id)
        if text == "d":
            return DeleteEpic(self.epic_id)
        if text == "c":
            return CreateStory(self.epic_id)
        story_id = _parse_id(text)
        epic = state.epics.get(self.epic_id)
        if story_id is not None and epic is not None and story_id in epic.stories:
            return NavigateToStoryDetail(self.epic_id, story_id)
        return None


@dataclass(frozen=True)
class StoryDetail:
    """A single story within its epic."""

    epic_id: int
    story_id: int

    def render(self, state: DbState) -> str:
        story = state.stories.get(self.story_id)
        if story is None:
            raise NotFound("story", self.story_id)
        return "\n".join(
            [
                "------------------------------ STORY ------------------------------",
                _DETAIL_HEADER,
                _detail_row(self.story_id, story),
                "",
                "",
                "[p] previous | [u] update story | [d] delete story",
            ]
        )

    def handle_input(self, text: str, state: DbState) -> Action | None:
        text = text.strip()
        if text == "p":
            return NavigateToPreviousPage()
        if text == "u":
            return UpdateStoryStatus(self.story_id)
        if text == "d":
            return DeleteStory(self.epic_id, self.story_id)
        return None


Page = HomePage | EpicDetail | StoryDetail
