"""Terminal UI for jiraterm."""

from jiraterm.ui.app import JiraApp
from jiraterm.ui.navigator import Navigator
from jiraterm.ui.pages import EpicDetail, HomePage, StoryDetail
from jiraterm.ui.prompts import Prompts

__all__ = [
    "EpicDetail",
    "HomePage",
    "JiraApp",
    "Navigator",
    "Prompts",
    "StoryDetail",
]
