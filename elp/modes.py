from dataclasses import dataclass
from typing import List, Optional

from .errors import ConfigurationError

QUIET_FLAG = "-q"
VERBOSE_FLAG = "-v"
VERY_VERBOSE_FLAG = "-vv"


@dataclass(frozen=True)
class OperationMode:
    verbosity: int = 0
    quiet: bool = False

    def __post_init__(self) -> None:
        if self.verbosity < 0:
            raise ConfigurationError(f"verbosity must be >= 0 (got {self.verbosity})")
        if self.verbosity > 0 and self.quiet:
            raise ConfigurationError("--verbose and --quiet cannot be used together")

    @property
    def tier(self) -> int:
        """0 for quiet/plain, 1 for verbose, 2 for very verbose."""
        if self.quiet:
            return 0
        return min(self.verbosity, 2)


@dataclass(frozen=True)
class CommitSpec:
    title: Optional[str] = None
    message: Optional[str] = None
    skip: bool = False


@dataclass(frozen=True)
class RemoteTarget:
    branch: Optional[str] = None
    url: Optional[str] = None


def mode_flags(
    mode: OperationMode,
    quiet_flag: Optional[str] = QUIET_FLAG,
    verbose_flag: str = VERBOSE_FLAG,
    very_verbose_flag: str = VERY_VERBOSE_FLAG,
) -> List[str]:
    """
    Return the extra flags a mode-sensitive step receives.

    Quiet always wins and suppresses verbosity. A step whose command has no
    quiet switch passes quiet_flag=None and gets no flag at all.
    """
    if mode.quiet:
        return [quiet_flag] if quiet_flag else []
    if mode.verbosity == 0:
        return []
    if mode.verbosity == 1:
        return [verbose_flag]
    return [very_verbose_flag]
