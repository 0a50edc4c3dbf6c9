"""
Exception types raised by elp.

The CLI turns any ElpError into a one-line message on stderr; everything
else is treated as a bug and left to propagate.
"""

from typing import List


class ElpError(Exception):
    """Base class for all elp specific errors."""


class ExecutionError(ElpError):
    """Raised when an external program cannot be spawned."""

    def __init__(self, context: str, detail: str = ""):
        self.context = context
        self.detail = detail
        message = f"{context}: {detail}" if detail else context
        super().__init__(message)


class DecodeError(ExecutionError):
    """Raised when captured output is not valid text."""


class ConfigurationError(ElpError):
    """Raised for invalid flag combinations or an unreadable settings file."""


class PreferenceError(ElpError):
    """Raised when git rejects a single global preference value."""

    def __init__(self, key: str, detail: str = ""):
        self.key = key
        self.detail = detail
        message = f"could not set {key}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class PreferencesError(ElpError):
    """Raised after the setup loop when one or more preferences failed."""

    def __init__(self, failures: List[PreferenceError]):
        self.failures = failures
        keys = ", ".join(f.key for f in failures)
        super().__init__(f"failed to set {len(failures)} preference(s): {keys}")
