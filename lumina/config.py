"""
Application settings and logging setup.

Settings are read from ``settings.json`` in the per-user config directory.
Missing keys keep their defaults and unknown keys are ignored.
"""
import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .utils.resource_loader import get_config_dir

logger = logging.getLogger(__name__)

SETTINGS_FILE_NAME = "settings.json"
LOG_LEVEL_ENV = "LUMINA_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


@dataclass
class StatusMessages:
    """Texts shown in the search bar status line."""
    no_results: str = "No results found."
    results_found: str = "{count} result(s) found."
    search_error: str = "Error occurred during search."
    not_loaded: str = "Document is not loaded yet."
    indexing: str = "Indexing document..."

    def found(self, count: int) -> str:
        """Format ``results_found``, falling back to the default template."""
        try:
            return self.results_found.format(count=count)
        except (KeyError, IndexError, ValueError, AttributeError) as e:
            logger.warning("Bad results_found template %r: %s", self.results_found, e)
            return StatusMessages.results_found.format(count=count)


@dataclass
class Settings:
    dark_mode: bool = True
    log_level: str = "INFO"
    match_color: Optional[str] = None
    active_color: Optional[str] = None
    messages: StatusMessages = field(default_factory=StatusMessages)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Build settings from parsed JSON, ignoring unknown keys."""
        known = {f.name for f in fields(cls)} - {"messages"}
        values = {k: v for k, v in data.items() if k in known}
        if not isinstance(values.get("log_level", ""), str):
            logger.warning("Ignoring non-string log_level %r", values.pop("log_level"))

        message_data = data.get("messages") or {}
        if not isinstance(message_data, dict):
            logger.warning("Ignoring messages setting of type %s", type(message_data).__name__)
            message_data = {}
        message_keys = {f.name for f in fields(StatusMessages)}
        messages = StatusMessages(
            **{k: str(v) for k, v in message_data.items() if k in message_keys}
        )
        return cls(messages=messages, **values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def settings_path() -> Path:
    return get_config_dir() / SETTINGS_FILE_NAME


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings from disk.

    Args:
        path: Settings file, defaults to the per-user config location

    Returns:
        Loaded settings, or defaults if the file is missing or unreadable
    """
    path = Path(path) if path is not None else settings_path()
    if not path.exists():
        return Settings()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("top-level JSON value must be an object")
        return Settings.from_dict(data)
    except (OSError, ValueError, TypeError, AttributeError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return Settings()


def save_settings(settings: Settings, path: Optional[Union[str, Path]] = None) -> bool:
    path = Path(path) if path is not None else settings_path()
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(settings.to_dict(), f, indent=2)
        return True
    except OSError as e:
        logger.error("Failed to save settings to %s: %s", path, e)
        return False


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging; LUMINA_LOG_LEVEL overrides ``level``."""
    level_name = os.environ.get(LOG_LEVEL_ENV) or level or "INFO"
    numeric = getattr(logging, str(level_name).upper(), None)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
