"""
Minimal Configuration Reader for Quake Log Tools

A lightweight configuration system that provides:
- Profile-based configuration management
- JSON-based configuration storage with read-only access
- Secrets management for sensitive information (e.g. remote log credentials)
- Hierarchical configuration with dot-notation access

Usage:
    from config import Config
    config = Config(profile='my_server')
    log_path = config.get('paths.games_log')

The configuration system loads settings in this order (later overrides earlier):
1. Default or specified profile (profiles/<profile>.json)
2. Profile-specific secrets (secrets/<profile>_secrets.json)
"""

from typing import Dict, Any, Optional
from pathlib import Path

from quake_log_tools.base import JSONTool, logger


class Config(JSONTool):
    """
    A minimal JSON-based configuration reader for Quake log tools.

    Attributes:
        config_dir (str): Directory containing profile JSON files
        secrets_dir (str): Directory containing secrets JSON files
        profile (str): Currently active profile name
        data (dict): Loaded configuration data
    """

    DEFAULT_CONFIG_DIR = str(Path(__file__).parent / 'profiles')
    DEFAULT_SECRETS_DIR = str(Path(__file__).parent / 'secrets')
    DEFAULT_PROFILE = "default"

    # Written to profiles/default.json the first time it is missing
    DEFAULT_SETTINGS = {
        "general": {
            "log_level": "INFO",
            "output_path": "output",
        },
        "paths": {
            "games_log": "games.log",
        },
        "log_source": {
            "timeout": 30,
            "ssl_verify": True,
        },
        "kill_chart": {
            "output_dpi": 150,
        },
        "web": {
            "host": "127.0.0.1",
            "port": 5000,
        },
    }

    def __init__(self, config_dir: str = None, secrets_dir: str = None, profile: str = None,
                 config: Optional[Dict[str, Any]] = None):
        """
        Initialize the Config instance.

        Args:
            config_dir (str, optional): Directory for config profiles.
            secrets_dir (str, optional): Directory for secrets files.
            profile (str, optional): Profile name to use. Defaults to 'default'.
            config (dict, optional): Base configuration dictionary for JSONTool compatibility.
        """
        super().__init__(config)

        self.config_dir = config_dir or self.DEFAULT_CONFIG_DIR
        self.secrets_dir = secrets_dir or self.DEFAULT_SECRETS_DIR
        self.profile = profile or self.DEFAULT_PROFILE
        self.data = {}

        Path(self.config_dir).mkdir(parents=True, exist_ok=True)
        Path(self.secrets_dir).mkdir(parents=True, exist_ok=True)

        self._load()

    def run(self) -> Dict[str, Any]:
        """Return the full configuration dictionary."""
        return self.data

    def _load(self):
        """
        Load configuration from the profile JSON file and merge secrets.

        A missing default profile is created from DEFAULT_SETTINGS; a missing
        named profile results in an empty configuration.
        """
        profile_path = Path(self.config_dir) / f"{self.profile}.json"

        if not profile_path.exists():
            if self.profile == self.DEFAULT_PROFILE:
                self._create_default_profile(str(profile_path))
                return
            logger.warning(f"Profile '{self.profile}' not found. Using empty configuration.")
            self.data = {}
            return

        try:
            self.data = self.read_json(str(profile_path))
            logger.info(f"Loaded configuration from '{self.profile}'")
            self._load_secrets()
        except Exception as e:
            logger.error(f"Error loading configuration: {e}")
            self.data = {}

    def _create_default_profile(self, profile_path: str):
        """
        Create the default profile configuration file.

        Args:
            profile_path (str): Path where the default profile will be created
        """
        default_config = {section: dict(values) for section, values in self.DEFAULT_SETTINGS.items()}
        try:
            self.write_json(default_config, profile_path)
            logger.info(f"Created default profile at '{profile_path}'")
        except Exception as e:
            logger.error(f"Error creating default configuration: {e}")
        self.data = default_config

    def _load_secrets(self):
        """Deep-merge '<profile>_secrets.json' over the loaded profile, if present."""
        profile_secrets_path = Path(self.secrets_dir) / f"{self.profile}_secrets.json"
        if not profile_secrets_path.exists():
            logger.debug(f"No secrets file found for profile '{self.profile}'")
            return

        try:
            profile_secrets = self.read_json(str(profile_secrets_path))
            if isinstance(profile_secrets, dict):
                self._deep_merge(self.data, profile_secrets)
                logger.info(f"Loaded and merged secrets from '{profile_secrets_path}'")
        except Exception as e:
            logger.error(f"Error loading profile-specific secrets: {e}")

    def _deep_merge(self, target: Dict[str, Any], source: Dict[str, Any]):
        """
        Deep merge two dictionaries. Non-dict values in source replace values in target.

        Args:
            target (dict): The target dictionary to merge into
            source (dict): The source dictionary to merge from
        """
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._deep_merge(target[key], value)
            else:
                target[key] = value

    def get(self, path: str = None, default: Any = None) -> Any:
        """
        Get a configuration value by path using dot notation.

        Args:
            path (str, optional): Dot notation path to the value
                (e.g., "paths.games_log"). If None, returns the entire configuration.
            default (Any, optional): Value to return if path not found.

        Returns:
            Any: The configuration value at the specified path, or default if not found.

        Examples:
            >>> config.get('web.port', 5000)
            5000
        """
        if path is None:
            return self.data

        current = self.data
        for key in path.split('.'):
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default

        return current
