import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from .errors import ConfigurationError


def load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"cannot read settings file {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"cannot parse settings file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"settings file {path} must contain a mapping")
    return data


def configure_logging(debug: bool = False, quiet: bool = False) -> None:
    """
    Configure the root logger.

    --debug -> DEBUG, --quiet -> ERROR, otherwise WARNING. The -v count is
    forwarded to git and does not affect elp's own log level.
    """
    if debug:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
