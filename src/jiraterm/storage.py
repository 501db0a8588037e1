"""Snapshot storage backends for the jiraterm database."""

import copy
import json
import logging
import os
import re
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from jiraterm.errors import FormatError, StorageIOError
from jiraterm.models import DbState, Epic, Status, Story

logger = logging.getLogger(__name__)

_STATE_FIELDS = {"last_item_id", "epics", "stories"}
_EPIC_FIELDS = {"name", "description", "status", "stories"}
_STORY_FIELDS = {"name", "description", "status"}
_ID_KEY_RE = re.compile(r"0|[1-9][0-9]*")


class Database(ABC):
    """Reads and writes a complete DbState snapshot."""

    @abstractmethod
    def read(self) -> DbState:
        """Return the stored snapshot."""

    @abstractmethod
    def write(self, state: DbState) -> None:
        """Replace the stored snapshot with state."""


class JsonFileDatabase(Database):
    """Stores the snapshot as a single JSON document on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def initialize(self) -> None:
        """Create an empty database file if none exists yet."""
        if self.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageIOError(f"cannot create {self.path.parent}: {e}") from e
        logger.info("creating empty database at %s", self.path)
        self.write(DbState())

    def read(self) -> DbState:
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise StorageIOError(f"cannot read {self.path}: {e}") from e
        try:
            data = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise FormatError(f"{self.path} is not UTF-8 text: {e}") from e
        except json.JSONDecodeError as e:
            raise FormatError(f"{self.path} is not valid JSON: {e}") from e
        logger.debug("read %d bytes from %s", len(raw), self.path)
        return state_from_dict(data)

    def write(self, state: DbState) -> None:
        content = json.dumps(state_to_dict(state), indent=2)
        # Write next to the target so os.replace stays on one filesystem
        try:
            fd, tmp = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
        except OSError as e:
            raise StorageIOError(f"cannot write {self.path}: {e}") from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except OSError as e:
            Path(tmp).unlink(missing_ok=True)
            raise StorageIOError(f"cannot write {self.path}: {e}") from e
        logger.debug("wrote %d bytes to %s", len(content), self.path)


class MemoryDatabase(Database):
    """In-memory backend. Copies on the way in and out so callers never alias stored state."""

    def __init__(self, state: DbState | None = None) -> None:
        self._state = copy.deepcopy(state) if state is not None else DbState()

    def read(self) -> DbState:
        return copy.deepcopy(self._state)

    def write(self, state: DbState) -> None:
        self._state = copy.deepcopy(state)


# --- JSON codec ---


def state_to_dict(state: DbState) -> dict[str, Any]:
    """Convert a DbState into plain JSON data. Map keys become strings."""
    return {
        "last_item_id": state.last_item_id,
        "epics": {
            str(epic_id): {
                "name": epic.name,
                "description": epic.description,
                "status": epic.status.value,
                "stories": list(epic.stories),
            }
            for epic_id, epic in state.epics.items()
        },
        "stories": {
            str(story_id): {
                "name": story.name,
                "description": story.description,
                "status": story.status.value,
            }
            for story_id, story in state.stories.items()
        },
    }


def state_from_dict(data: Any) -> DbState:
    """Build a DbState from JSON data, rejecting anything not exactly that shape.

    Besides the shape, the id invariants are checked: keys are canonical
    integers, no id is both an epic and a story, last_item_id covers every
    id, and each linked story exists and belongs to exactly one epic.
    """
    obj = _expect_object(data, _STATE_FIELDS, "database")
    epics = _expect_type(obj["epics"], dict, "epics")
    stories = _expect_type(obj["stories"], dict, "stories")
    state = DbState(
        last_item_id=_expect_uint(obj["last_item_id"], "last_item_id"),
        epics={_parse_key(k, "epics"): _epic_from_dict(v, f"epics.{k}") for k, v in epics.items()},
        stories={_parse_key(k, "stories"): _story_from_dict(v, f"stories.{k}") for k, v in stories.items()},
    )
    _check_ids(state)
    return state


def _check_ids(state: DbState) -> None:
    shared = state.epics.keys() & state.stories.keys()
    if shared:
        raise FormatError(f"ids used by both an epic and a story: {sorted(shared)}")

    highest = max([*state.epics, *state.stories], default=0)
    if state.last_item_id < highest:
        raise FormatError(f"last_item_id: {state.last_item_id} is below the highest id {highest}")

    owners: dict[int, int] = {}
    for epic_id, epic in state.epics.items():
        for story_id in epic.stories:
            if story_id not in state.stories:
                raise FormatError(f"epics.{epic_id}.stories: story {story_id} does not exist")
            if story_id in owners:
                raise FormatError(
                    f"epics.{epic_id}.stories: story {story_id} is already linked to epic {owners[story_id]}"
                )
            owners[story_id] = epic_id


def _epic_from_dict(data: Any, where: str) -> Epic:
    obj = _expect_object(data, _EPIC_FIELDS, where)
    story_ids = _expect_type(obj["stories"], list, f"{where}.stories")
    return Epic(
        name=_expect_type(obj["name"], str, f"{where}.name"),
        description=_expect_type(obj["description"], str, f"{where}.description"),
        status=_parse_status(obj["status"], f"{where}.status"),
        stories=[_expect_uint(sid, f"{where}.stories") for sid in story_ids],
    )


def _story_from_dict(data: Any, where: str) -> Story:
    obj = _expect_object(data, _STORY_FIELDS, where)
    return Story(
        name=_expect_type(obj["name"], str, f"{where}.name"),
        description=_expect_type(obj["description"], str, f"{where}.description"),
        status=_parse_status(obj["status"], f"{where}.status"),
    )


def _expect_object(data: Any, fields: set[str], where: str) -> dict:
    obj = _expect_type(data, dict, where)
    missing = fields - obj.keys()
    if missing:
        raise FormatError(f"{where}: missing field(s) {', '.join(sorted(missing))}")
    unknown = obj.keys() - fields
    if unknown:
        raise FormatError(f"{where}: unknown field(s) {', '.join(sorted(unknown))}")
    return obj


def _expect_type(value: Any, kind: type, where: str) -> Any:
    if not isinstance(value, kind):
        raise FormatError(f"{where}: expected {kind.__name__}, got {type(value).__name__}")
    return value


def _expect_uint(value: Any, where: str) -> int:
    # bool is an int subclass; JSON true/false is never an id
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise FormatError(f"{where}: expected a non-negative integer, got {value!r}")
    return value


def _parse_key(key: str, where: str) -> int:
    # One spelling per id, so "1" and "01" can never collide
    if not _ID_KEY_RE.fullmatch(key):
        raise FormatError(f"{where}: key {key!r} is not an integer id")
    return int(key)


def _parse_status(value: Any, where: str) -> Status:
    try:
        return Status(value)
    except ValueError:
        raise FormatError(f"{where}: unknown status {value!r}") from None
