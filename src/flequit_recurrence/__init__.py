"""flequit-recurrence - recurrence rule evaluation for a personal task manager."""

__version__ = "0.1.0"
