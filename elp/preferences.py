import logging
from typing import Callable, List, Optional

from .adapters.git_adapter import GitAdapter
from .config import PREFERENCE_PROMPTS
from .errors import PreferenceError, PreferencesError

LOG = logging.getLogger(__name__)


def _ask(prompt: Callable[[str], str], text: str) -> str:
    try:
        return prompt(text).strip()
    except EOFError:
        return ""


def configure_user_preferences(
    git: GitAdapter, prompt: Optional[Callable[[str], str]] = None
) -> List[str]:
    """
    Ask for each global preference and set the ones that were answered.

    Every item is attempted even if an earlier one fails; failures are
    raised together as PreferencesError. Returns the keys that were set.
    """
    ask = prompt or input
    updated: List[str] = []
    failures: List[PreferenceError] = []
    for key, text in PREFERENCE_PROMPTS:
        value = _ask(ask, text)
        if not value:
            continue
        result = git.set_global_config(key, value)
        if result.returncode != 0:
            LOG.debug("git config rejected %s=%r", key, value)
            failures.append(PreferenceError(key, f"git exited with status {result.returncode}"))
            continue
        updated.append(key)

    if failures:
        raise PreferencesError(failures)
    return updated
