"""Fixed locations and logging setup."""

import logging
from pathlib import Path

DB_PATH = Path("data/database.json")
LOG_PATH = Path("data/jiraterm.log")


def configure_logging(path: Path = LOG_PATH, level: int = logging.INFO) -> None:
    """Send log records to a file; the terminal belongs to the UI."""
    path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        filename=path,
        level=level,
    )
