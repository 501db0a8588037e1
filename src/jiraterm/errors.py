"""Exceptions raised by the storage and repository layers."""


class JiraError(Exception):
    """Base class for recoverable jiraterm errors."""


class StorageIOError(JiraError):
    """The database file could not be read or written."""


class FormatError(JiraError):
    """The database file does not hold a valid snapshot."""


class NotFound(JiraError):
    """An epic or story id does not resolve."""

    def __init__(self, kind: str, item_id: int, message: str | None = None) -> None:
        super().__init__(message or f"could not find {kind} {item_id} in database!")
        self.kind = kind
        self.item_id = item_id


class StoryNotInEpic(NotFound):
    """A story id is not linked to the given epic."""

    def __init__(self, epic_id: int, story_id: int) -> None:
        super().__init__("story", story_id, f"story {story_id} is not linked to epic {epic_id}")
        self.epic_id = epic_id
        self.story_id = story_id
