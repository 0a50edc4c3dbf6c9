import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import ConfigurationError
from .utils import load_yaml

# Settings file
CONFIG_ENV = "ELP_CONFIG"
DEFAULT_CONFIG_FILE = Path.home() / ".config" / "elp" / "config.yaml"

# Git settings
DEFAULT_GIT = "git"
DEFAULT_REMOTE = "origin"
DEFAULT_COMMIT_TITLE = "Auto-commit"
FIRST_COMMIT_TITLE = "First commit"

# Self-update
DEFAULT_UPDATE_REPO_URL = "https://github.com/botahamec/elp.git"
DEFAULT_UPDATE_SCRIPT_DIR = Path.home() / ".elp"
UPDATE_SCRIPT_TIERS = ("update", "update-verbose", "update-very-verbose")

# Global preferences asked for by `elp setup`, in prompt order
PREFERENCE_PROMPTS = (
    ("user.name", "Name: "),
    ("user.email", "Email: "),
    ("color.ui", "Color output (auto/always/never): "),
    ("core.editor", "Editor: "),
)


@dataclass(frozen=True)
class Settings:
    git: str = DEFAULT_GIT
    remote: str = DEFAULT_REMOTE
    default_title: str = DEFAULT_COMMIT_TITLE
    first_commit_title: str = FIRST_COMMIT_TITLE
    update_repo_url: str = DEFAULT_UPDATE_REPO_URL
    update_script_dir: Path = field(default=DEFAULT_UPDATE_SCRIPT_DIR)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        update = data.get("update") or {}
        if not isinstance(update, dict):
            raise ConfigurationError("'update' must be a mapping")
        script_dir = _text(update, "script_dir", "update.script_dir")
        return cls(
            git=_text(data, "git") or DEFAULT_GIT,
            remote=_text(data, "remote") or DEFAULT_REMOTE,
            default_title=_text(data, "default_title") or DEFAULT_COMMIT_TITLE,
            first_commit_title=_text(data, "first_commit_title") or FIRST_COMMIT_TITLE,
            update_repo_url=_text(update, "repo_url", "update.repo_url") or DEFAULT_UPDATE_REPO_URL,
            update_script_dir=(
                Path(script_dir).expanduser() if script_dir else DEFAULT_UPDATE_SCRIPT_DIR
            ),
        )


def _text(section: Dict[str, Any], key: str, label: Optional[str] = None) -> Optional[str]:
    """Return a string setting, None when absent or empty."""
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"'{label or key}' must be a string (got {value!r})")
    return value.strip() or None


def settings_path() -> Path:
    override = os.environ.get(CONFIG_ENV)
    return Path(override).expanduser() if override else DEFAULT_CONFIG_FILE


def load_settings(path: Optional[Path] = None) -> Settings:
    """Read the YAML settings file; a missing or empty file yields defaults."""
    config_path = path or settings_path()
    data = load_yaml(config_path)
    try:
        return Settings.from_dict(data)
    except ConfigurationError as exc:
        raise ConfigurationError(f"invalid settings file {config_path}: {exc}") from exc
