"""Tasklist CLI - a terminal task list with local storage and reminders."""

__version__ = "0.1.0"
