"""
Process execution for elp.

Every external program elp starts goes through this module so that spawn
failures and debug logging are handled in one place. Exit statuses are
returned, not raised: git's own output is what tells the user a step went
wrong.
"""

import logging
import os
import subprocess
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from ..errors import DecodeError, ExecutionError

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutionResult:
    returncode: int
    output: Optional[str] = None


class Executor(Protocol):
    """What GitAdapter and the update strategies need; this module satisfies it."""

    def run(self, program: str, args: Sequence[str], context: str) -> ExecutionResult: ...

    def run_capture_output(self, program: str, args: Sequence[str], context: str) -> str: ...

    def spawn_detached(self, program: str, args: Sequence[str], context: str) -> None: ...


def _command(program: str, args: Sequence[str]) -> list[str]:
    cmd = [program, *args]
    LOG.debug("Running command: %s", " ".join(cmd))
    return cmd


def run(program: str, args: Sequence[str], context: str) -> ExecutionResult:
    """Run program with inherited stdout/stderr and wait for it to finish."""
    cmd = _command(program, args)
    try:
        completed = subprocess.run(cmd, check=False)
    except OSError as exc:
        raise ExecutionError(context, str(exc)) from exc

    if completed.returncode != 0:
        LOG.debug("%s exited with status %d", program, completed.returncode)
    return ExecutionResult(returncode=completed.returncode)


def run_capture_output(program: str, args: Sequence[str], context: str) -> str:
    """
    Run program, wait, and return its stdout as text.

    Exactly one trailing newline is stripped, since the values queried this
    way (a branch name) occupy a single line.
    """
    cmd = _command(program, args)
    try:
        completed = subprocess.run(cmd, check=False, stdout=subprocess.PIPE)
    except OSError as exc:
        raise ExecutionError(context, str(exc)) from exc

    try:
        text = completed.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(context, "output is not valid UTF-8") from exc

    if text.endswith("\n"):
        text = text[:-1]
    return text


def spawn_detached(program: str, args: Sequence[str], context: str) -> None:
    """Start program without waiting; it keeps running after elp exits."""
    cmd = _command(program, args)
    kwargs = {}
    if os.name == "nt":
        kwargs["creationflags"] = (
            subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP
        )
    else:
        kwargs["start_new_session"] = True
    try:
        subprocess.Popen(cmd, close_fds=True, **kwargs)
    except OSError as exc:
        raise ExecutionError(context, str(exc)) from exc
