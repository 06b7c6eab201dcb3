"""
Parser for the YAML settings file.
"""
import os
from typing import Dict, Optional

import yaml
from pydantic import ValidationError

from ..MODELS.settings import Settings
from ..UTILS.errors import SettingsError

CONFIG_ENV_VAR = "CTK_CONFIG"
DEFAULT_CONFIG_PATH = os.path.join("~", ".config", "create-turbo-kit", "config.yml")


class SettingsParser:
    """
    Loads settings from YAML, falling back to defaults.
    """
    def __init__(self, environ: Optional[Dict[str, str]] = None):
        """
        :param environ: Environment used to locate the settings file.
        """
        self.environ = environ if environ is not None else dict(os.environ)

    def locate(self, path: Optional[str] = None) -> str:
        """
        Resolves which settings file to read: the explicit path, then
        ``$CTK_CONFIG``, then the per-user default.
        """
        return os.path.expanduser(path or self.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)

    def load(self, path: Optional[str] = None) -> Settings:
        """
        Loads settings.

        A missing file is only an error when it was asked for explicitly.

        :param path: Settings file given on the command line.
        :return: Validated settings.
        :raises SettingsError: If the file cannot be read or is invalid.
        """
        explicit = path or self.environ.get(CONFIG_ENV_VAR)
        location = self.locate(path)

        if not os.path.exists(location):
            if explicit:
                raise SettingsError(f"Settings file not found: {location}")
            return Settings()

        try:
            with open(location, 'r', encoding='utf-8') as f:
                content = f.read()
        except OSError as e:
            raise SettingsError(f"Cannot read settings file {location}: {e}") from e

        return self.parse_from_string(content, source=location)

    def parse_from_string(self, content: str, source: str = "<string>") -> Settings:
        """
        Parses settings from YAML text.

        :param content: YAML content.
        :param source: Where the content came from, for error messages.
        :return: Validated settings.
        """
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise SettingsError(f"Invalid YAML in {source}: {e}") from e

        if not data:
            data = {}
        if not isinstance(data, dict):
            raise SettingsError(f"Settings in {source} must be a mapping")

        try:
            return Settings(**data)
        except ValidationError as e:
            raise SettingsError(f"Invalid settings in {source}:\n{e}") from e
