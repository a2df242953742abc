"""Custom exceptions for flequit-recurrence."""


class RecurrenceError(Exception):
    """Base exception for all recurrence errors."""


class InvalidRuleError(RecurrenceError, ValueError):
    """Raised when a recurrence rule or one of its conditions is malformed."""


class InvalidTaskError(RecurrenceError, ValueError):
    """Raised when a task record cannot be validated."""
