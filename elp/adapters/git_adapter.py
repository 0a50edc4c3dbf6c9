from pathlib import Path
from typing import List, Optional

from ..modes import OperationMode, mode_flags
from . import executor as default_executor
from .executor import ExecutionResult, Executor


class GitAdapter:
    """One method per git step elp runs; argument assembly lives here."""

    def __init__(
        self,
        program: str = "git",
        remote: str = "origin",
        executor: Executor = default_executor,
    ):
        self.program = program
        self.remote = remote
        self.executor = executor

    def _run(self, args: List[str], context: str) -> ExecutionResult:
        return self.executor.run(self.program, args, context)

    def init_repo(self) -> ExecutionResult:
        return self._run(["init"], "failed to initialize the repository")

    def stage_all(self, mode: OperationMode) -> ExecutionResult:
        # git add has no quiet switch and prints nothing unless asked to
        args = ["add", *mode_flags(mode, quiet_flag=None), "-A"]
        return self._run(args, "failed to add files to the local repository")

    def create_commit(
        self, title: str, mode: OperationMode, message: Optional[str] = None
    ) -> ExecutionResult:
        args = ["commit", *mode_flags(mode), "-m", title]
        if message:
            args.extend(["-m", message])
        return self._run(args, "failed to commit")

    def add_remote(self, url: str, mode: OperationMode) -> ExecutionResult:
        args = ["remote", *mode_flags(mode, quiet_flag=None), "add", self.remote, url]
        return self._run(args, f"failed to add the remote '{self.remote}'")

    def push(self, branch: str, mode: OperationMode) -> ExecutionResult:
        args = ["push", *mode_flags(mode), "--set-upstream", self.remote, branch]
        return self._run(args, "failed to push to the remote repository")

    def pull(self, branch: str, mode: OperationMode) -> ExecutionResult:
        args = ["pull", *mode_flags(mode), self.remote, branch]
        return self._run(args, "failed to pull from the remote repository")

    def current_branch(self) -> str:
        return self.executor.run_capture_output(
            self.program,
            ["branch", "--show-current"],
            "failed to determine the current branch",
        )

    def set_global_config(self, key: str, value: str) -> ExecutionResult:
        return self._run(["config", "--global", key, value], f"failed to set {key}")

    def clone(self, url: str, dest: Path, mode: OperationMode) -> ExecutionResult:
        args = ["clone", *mode_flags(mode), url, str(dest)]
        return self._run(args, f"failed to clone {url}")
