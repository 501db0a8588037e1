"""Interactive prompts that turn raw input lines into model values."""

from jiraterm.models import Epic, Status, Story
from jiraterm.ui.loop import Terminal

SEPARATOR = "----------------------------"
CONFIRM_TOKEN = "Y"

STATUS_CHOICES = {
    "1": Status.OPEN,
    "2": Status.IN_PROGRESS,
    "3": Status.RESOLVED,
    "4": Status.CLOSED,
}


def parse_confirmation(answer: str) -> bool:
    """Only an exact "Y" confirms; everything else, including "y" and "", declines."""
    return answer.strip() == CONFIRM_TOKEN


def parse_status(answer: str) -> Status | None:
    """Map "1".."4" to a Status, anything else to None."""
    return STATUS_CHOICES.get(answer.strip())


class Prompts:
    """Asks the user for new items, confirmations and statuses."""

    def __init__(self, terminal: Terminal) -> None:
        self.terminal = terminal

    def _ask(self, question: str) -> str:
        self.terminal.write(question)
        return self.terminal.read_line()

    def _ask_item(self, kind: str) -> tuple[str, str]:
        self.terminal.write(SEPARATOR)
        name = self._ask(f"{kind} Name: ").strip()
        description = self._ask(f"{kind} Description: ").strip()
        return name, description

    def create_epic(self) -> Epic:
        name, description = self._ask_item("Epic")
        return Epic(name, description)

    def create_story(self) -> Story:
        name, description = self._ask_item("Story")
        return Story(name, description)

    def delete_epic(self) -> bool:
        self.terminal.write(SEPARATOR)
        return parse_confirmation(
            self._ask(
                "Are you sure you want to delete this epic? "
                "All stories in this epic will also be deleted [Y/n]: "
            )
        )

    def delete_story(self) -> bool:
        self.terminal.write(SEPARATOR)
        return parse_confirmation(self._ask("Are you sure you want to delete this story? [Y/n]: "))

    def update_status(self) -> Status | None:
        self.terminal.write(SEPARATOR)
        return parse_status(self._ask("New Status (1 - OPEN, 2 - IN-PROGRESS, 3 - RESOLVED, 4 - CLOSED): "))
