import logging
import tomllib
from pathlib import Path

from structgrep import Language, UnknownLanguageError, get_language, language_for_path

logger = logging.getLogger(__name__)


class SearchConfig:
    """Handles loading of the [tool.structgrep] table from a TOML file"""

    def __init__(self, config_path: Path | None = None):
        self.language: str | None = None
        self.extensions: dict[str, str] = {}

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            # Fallback to defaults if parsing fails
            logger.warning("Ignoring unreadable config %s: %s", path, exc)
            return

        section = data.get("tool", {}).get("structgrep", {})
        self.language = section.get("language", self.language)
        self.extensions = {str(k): str(v) for k, v in section.get("extensions", {}).items()}
        logger.debug("Loaded config from %s: language=%s extensions=%s", path, self.language, self.extensions)

    def language_for(self, path: Path, override: str | None = None) -> Language:
        """--lang wins, then the configured extension map, then built-in extensions, then the default"""
        if override:
            return get_language(override)
        try:
            return language_for_path(path, self.extensions)
        except UnknownLanguageError:
            if self.language:
                return get_language(self.language)
            raise
