"""
Self-update strategies.

The strategy is picked once from the platform identifier. On Windows the
running executable cannot be replaced in place, so the update script is
started from a fresh clone in a detached process and elp exits right away
to release its files. Elsewhere the locally installed update script runs to
completion.
"""

import logging
import sys
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from .adapters import executor as default_executor
from .adapters.executor import Executor
from .adapters.git_adapter import GitAdapter
from .config import UPDATE_SCRIPT_TIERS, Settings
from .modes import OperationMode

LOG = logging.getLogger(__name__)


def script_name(mode: OperationMode, suffix: str) -> str:
    return f"{UPDATE_SCRIPT_TIERS[mode.tier]}{suffix}"


class UpdateStrategy(ABC):
    @abstractmethod
    def run(self, git: GitAdapter, mode: OperationMode) -> None:
        """Update the installed copy of elp."""


class LocalScriptUpdate(UpdateStrategy):
    shell = "sh"
    suffix = ".sh"

    def __init__(self, script_dir: Path, executor: Executor = default_executor):
        self.script_dir = script_dir
        self.executor = executor

    def run(self, git: GitAdapter, mode: OperationMode) -> None:
        script = self.script_dir / script_name(mode, self.suffix)
        LOG.info("Running update script %s", script)
        self.executor.run(self.shell, [str(script)], f"failed to run update script {script}")


class CloneAndSpawnUpdate(UpdateStrategy):
    shell = "cmd"
    suffix = ".bat"

    def __init__(self, repo_url: str, executor: Executor = default_executor):
        self.repo_url = repo_url
        self.executor = executor

    def run(self, git: GitAdapter, mode: OperationMode) -> None:
        dest = Path(tempfile.mkdtemp(prefix="elp-update-"))
        git.clone(self.repo_url, dest, mode)
        script = dest / script_name(mode, self.suffix)
        LOG.info("Starting detached update script %s", script)
        self.executor.spawn_detached(
            self.shell, ["/c", str(script)], f"failed to start update script {script}"
        )
        raise SystemExit(0)


def select_update_strategy(
    settings: Settings,
    platform: str = sys.platform,
    executor: Executor = default_executor,
) -> UpdateStrategy:
    if platform == "win32":
        return CloneAndSpawnUpdate(settings.update_repo_url, executor=executor)
    return LocalScriptUpdate(settings.update_script_dir, executor=executor)
