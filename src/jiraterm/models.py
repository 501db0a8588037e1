"""Data models for jiraterm."""

from dataclasses import dataclass, field
from enum import Enum


class Status(Enum):
    """Workflow status of an epic or story. Any status may follow any other."""

    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"

    @property
    def label(self) -> str:
        """Human readable label, e.g. "IN PROGRESS"."""
        return self.value.replace("_", " ")

    def __str__(self) -> str:
        return self.label


@dataclass
class Epic:
    """A top-level unit of work holding the ids of its stories in order."""

    name: str
    description: str
    status: Status = Status.OPEN
    stories: list[int] = field(default_factory=list)


@dataclass
class Story:
    """A unit of work. Ownership is recorded on the epic side only."""

    name: str
    description: str
    status: Status = Status.OPEN


@dataclass
class DbState:
    """The full persisted snapshot."""

    last_item_id: int = 0
    epics: dict[int, Epic] = field(default_factory=dict)
    stories: dict[int, Story] = field(default_factory=dict)
