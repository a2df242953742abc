"""Services layer for flequit-recurrence."""
