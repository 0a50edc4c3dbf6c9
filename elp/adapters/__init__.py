"""Adapters for the external programs elp drives (git, update scripts)."""

from .executor import ExecutionResult  # noqa: F401
from .git_adapter import GitAdapter  # noqa: F401
