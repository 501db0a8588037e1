"""Entry point for jiraterm."""

import sys

from jiraterm.config import DB_PATH, configure_logging
from jiraterm.db import JiraDatabase
from jiraterm.errors import JiraError
from jiraterm.storage import JsonFileDatabase


def main():
    configure_logging()

    database = JsonFileDatabase(DB_PATH)
    try:
        database.initialize()
    except JiraError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    from jiraterm.ui import JiraApp

    app = JiraApp(JiraDatabase(database))
    app.run()


if __name__ == "__main__":
    main()
