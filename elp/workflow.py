"""
Workflow dispatcher: the operations behind each elp command.

Each operation issues its git steps strictly one after another. A step that
cannot be spawned raises ExecutionError and the remaining steps are skipped;
whatever already happened (staged files, a commit) is left in place.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .adapters.git_adapter import GitAdapter
from .config import Settings
from .modes import CommitSpec, OperationMode
from .update import UpdateStrategy

LOG = logging.getLogger(__name__)


@dataclass
class Workflow:
    git: GitAdapter
    settings: Settings
    update_strategy: Optional[UpdateStrategy] = None

    def resolve_branch(self, explicit: Optional[str] = None) -> str:
        """Return explicit as-is, else ask git for the checked-out branch."""
        if explicit is not None:
            return explicit
        branch = self.git.current_branch()
        LOG.debug("Resolved current branch: %r", branch)
        return branch

    def initialize_and_link(
        self, url: Optional[str], branch: Optional[str], mode: OperationMode
    ) -> None:
        self.git.init_repo()
        self.git.stage_all(mode)
        if not url:
            return
        self.git.create_commit(self.settings.first_commit_title, mode)
        self.git.add_remote(url, mode)
        self.git.push(self.resolve_branch(branch), mode)

    def add_commit_push(
        self, commit: CommitSpec, branch: Optional[str], mode: OperationMode
    ) -> None:
        self.git.stage_all(mode)
        if not commit.skip:
            title = commit.title or self.settings.default_title
            self.git.create_commit(title, mode, message=commit.message)
        self.git.push(self.resolve_branch(branch), mode)

    def pull(self, branch: Optional[str], mode: OperationMode) -> None:
        self.git.pull(self.resolve_branch(branch), mode)

    def default_cycle(self, mode: OperationMode) -> None:
        branch = self.resolve_branch()
        self.git.pull(branch, mode)
        self.git.stage_all(mode)
        self.git.create_commit(self.settings.default_title, mode)
        self.git.push(branch, mode)

    def self_update(self, mode: OperationMode) -> None:
        if self.update_strategy is None:
            raise RuntimeError("no update strategy configured")
        self.update_strategy.run(self.git, mode)
