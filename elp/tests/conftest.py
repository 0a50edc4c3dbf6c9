from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

import pytest

from elp.adapters.executor import ExecutionResult
from elp.adapters.git_adapter import GitAdapter
from elp.config import Settings
from elp.errors import ExecutionError
from elp.workflow import Workflow


@dataclass
class RecordingExecutor:
    """Stand-in for elp.adapters.executor that records every call."""

    branch: str = "main"
    returncodes: Dict[str, int] = field(default_factory=dict)
    fail_on: Set[str] = field(default_factory=set)
    calls: List[Tuple[str, str, List[str]]] = field(default_factory=list)

    def run(self, program, args, context):
        if args[0] in self.fail_on:
            raise ExecutionError(context, "spawn failed")
        self.calls.append(("run", program, list(args)))
        key = args[-2] if args[:2] == ["config", "--global"] else args[0]
        return ExecutionResult(returncode=self.returncodes.get(key, 0))

    def run_capture_output(self, program, args, context):
        self.calls.append(("capture", program, list(args)))
        return self.branch

    def spawn_detached(self, program, args, context):
        self.calls.append(("detached", program, list(args)))

    @property
    def argvs(self) -> List[List[str]]:
        return [args for _, _, args in self.calls]

    @property
    def subcommands(self) -> List[str]:
        return [args[0] for args in self.argvs]


@pytest.fixture
def recorder():
    return RecordingExecutor()


@pytest.fixture
def git(recorder):
    return GitAdapter(executor=recorder)


@pytest.fixture
def workflow(git):
    return Workflow(git=git, settings=Settings())
