"""
Exit codes for Pomodoro CLI.

Quitting and a broken command channel both end with SUCCESS once the
summary has been printed.
"""

# Success
SUCCESS = 0

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2
