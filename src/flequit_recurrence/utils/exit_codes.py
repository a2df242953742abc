"""
Exit codes for flequit-recur.

Scripts calling ``flequit-recur`` can tell a rule that failed validation (2)
apart from an input file that does not exist (5).
"""

SUCCESS = 0
ERROR_GENERAL = 1
ERROR_INVALID_ARGS = 2
ERROR_NOT_FOUND = 5

_EXIT_CODES: dict[int, tuple[str, str]] = {
    SUCCESS: ("SUCCESS", "Command executed successfully"),
    ERROR_GENERAL: ("ERROR_GENERAL", "A general error occurred"),
    ERROR_INVALID_ARGS: ("ERROR_INVALID_ARGS", "Invalid arguments or recurrence rule"),
    ERROR_NOT_FOUND: ("ERROR_NOT_FOUND", "Input file not found"),
}


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    if code in _EXIT_CODES:
        return _EXIT_CODES[code][0]
    return f"UNKNOWN({code})"


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    if code in _EXIT_CODES:
        return _EXIT_CODES[code][1]
    return "Unknown error"
