"""Page stack and action interpreter."""

import logging

from jiraterm.db import JiraDatabase
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
from jiraterm.ui.pages import EpicDetail, HomePage, Page, StoryDetail
from jiraterm.ui.prompts import Prompts

logger = logging.getLogger(__name__)


class Navigator:
    """Owns the page stack and applies actions to it and to the database.

    Repository errors propagate out of handle_action. They are always
    raised before the stack is touched, so the user stays on the page
    where the action failed.
    """

    def __init__(self, db: JiraDatabase, prompts: Prompts) -> None:
        self.db = db
        self.prompts = prompts
        self.pages: list[Page] = [HomePage()]

    @property
    def current_page(self) -> Page | None:
        return self.pages[-1] if self.pages else None

    def render_current(self) -> str:
        return self.current_page.render(self.db.read())

    def handle_input(self, text: str) -> Action | None:
        return self.current_page.handle_input(text, self.db.read())

    def handle_action(self, action: Action) -> None:
        logger.debug("handling %r", action)
        if isinstance(action, NavigateToEpicDetail):
            self.pages.append(EpicDetail(action.epic_id))
        elif isinstance(action, NavigateToStoryDetail):
            self.pages.append(StoryDetail(action.epic_id, action.story_id))
        elif isinstance(action, NavigateToPreviousPage):
            if self.pages:
                self.pages.pop()
        elif isinstance(action, CreateEpic):
            self.db.create_epic(self.prompts.create_epic())
        elif isinstance(action, CreateStory):
            self.db.create_story(self.prompts.create_story(), action.epic_id)
        elif isinstance(action, UpdateEpicStatus):
            status = self.prompts.update_status()
            if status is not None:
                self.db.update_epic_status(action.epic_id, status)
        elif isinstance(action, UpdateStoryStatus):
            status = self.prompts.update_status()
            if status is not None:
                self.db.update_story_status(action.story_id, status)
        elif isinstance(action, DeleteEpic):
            if self.prompts.delete_epic():
                self.db.delete_epic(action.epic_id)
                self.pages.pop()
        elif isinstance(action, DeleteStory):
            if self.prompts.delete_story():
                self.db.delete_story(action.epic_id, action.story_id)
                self.pages.pop()
        elif isinstance(action, Exit):
            self.pages.clear()
        else:
            raise TypeError(f"unknown action: {action!r}")
