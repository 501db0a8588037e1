"""Repository façade over a snapshot storage backend."""

import logging
from pathlib import Path

from jiraterm.errors import NotFound, StoryNotInEpic
from jiraterm.models import DbState, Epic, Status, Story
from jiraterm.storage import Database, JsonFileDatabase

logger = logging.getLogger(__name__)


class JiraDatabase:
    """Epic and story operations with full read-modify-write per call.

    Every mutation reads the whole snapshot, checks its preconditions,
    applies one change and writes the snapshot back. A failed precondition
    raises before anything is written.
    """

    def __init__(self, database: Database) -> None:
        self.database = database

    @classmethod
    def from_path(cls, path: str | Path) -> "JiraDatabase":
        """Build a repository backed by a JSON file."""
        return cls(JsonFileDatabase(path))

    def read(self) -> DbState:
        return self.database.read()

    def get_epic(self, epic_id: int) -> Epic:
        return _epic(self.read(), epic_id)

    def get_story(self, story_id: int) -> Story:
        return _story(self.read(), story_id)

    # -- epics --

    def create_epic(self, epic: Epic) -> int:
        state = self.read()
        epic_id = _allocate_id(state)
        state.epics[epic_id] = Epic(epic.name, epic.description, epic.status)
        self.database.write(state)
        logger.info("created epic %d", epic_id)
        return epic_id

    def delete_epic(self, epic_id: int) -> None:
        state = self.read()
        epic = _epic(state, epic_id)
        for story_id in epic.stories:
            state.stories.pop(story_id, None)
        del state.epics[epic_id]
        self.database.write(state)
        logger.info("deleted epic %d and %d stories", epic_id, len(epic.stories))

    def update_epic_status(self, epic_id: int, status: Status) -> None:
        state = self.read()
        _epic(state, epic_id).status = status
        self.database.write(state)
        logger.info("epic %d status -> %s", epic_id, status.value)

    # -- stories --

    def create_story(self, story: Story, epic_id: int) -> int:
        state = self.read()
        epic = _epic(state, epic_id)
        story_id = _allocate_id(state)
        state.stories[story_id] = Story(story.name, story.description, story.status)
        epic.stories.append(story_id)
        self.database.write(state)
        logger.info("created story %d in epic %d", story_id, epic_id)
        return story_id

    def delete_story(self, epic_id: int, story_id: int) -> None:
        state = self.read()
        epic = _epic(state, epic_id)
        if story_id not in epic.stories:
            raise StoryNotInEpic(epic_id, story_id)
        epic.stories.remove(story_id)
        state.stories.pop(story_id, None)
        self.database.write(state)
        logger.info("deleted story %d from epic %d", story_id, epic_id)

    def update_story_status(self, story_id: int, status: Status) -> None:
        state = self.read()
        _story(state, story_id).status = status
        self.database.write(state)
        logger.info("story %d status -> %s", story_id, status.value)


def _allocate_id(state: DbState) -> int:
    """Bump the shared id counter and return the new id."""
    state.last_item_id += 1
    return state.last_item_id


def _epic(state: DbState, epic_id: int) -> Epic:
    epic = state.epics.get(epic_id)
    if epic is None:
        raise NotFound("epic", epic_id)
    return epic


def _story(state: DbState, story_id: int) -> Story:
    story = state.stories.get(story_id)
    if story is None:
        raise NotFound("story", story_id)
    return story
