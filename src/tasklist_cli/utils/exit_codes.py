"""
Exit codes for Tasklist CLI.

Scripts can branch on these to tell a bad invocation from a missing task.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Resource not found
ERROR_NOT_FOUND = 5
