"""Configuration management for loosecat.

This module provides a clean interface for reading and writing
both repository-local and global configuration files.
"""

import os
import configparser
from pathlib import Path
from typing import Optional, Dict


class Config:
    """
    Manages loosecat configuration files.

    Configuration is stored in INI format:
    - Global config: ~/.loosecatconfig
    - Repository config: .git/loosecat.ini

    Repository config takes precedence over global config.
    Environment variables take highest precedence.
    """

    GLOBAL_CONFIG_NAME = '.loosecatconfig'
    ENV_PREFIX = 'LOOSECAT'

    def __init__(self, repo_config_path: Optional[Path] = None,
                 global_config_path: Optional[Path] = None):
        """
        Initialize Config manager.

        Args:
            repo_config_path: Path to repository config file, if in a repo
            global_config_path: Override for the global config file
        """
        self.repo_config_path = repo_config_path
        self.global_config_path = global_config_path or Path.home() / self.GLOBAL_CONFIG_NAME
        self._global_config = None
        self._repo_config = None

    @property
    def global_config(self) -> configparser.ConfigParser:
        """Load and return global configuration."""
        if self._global_config is None:
            self._global_config = configparser.ConfigParser()
            if self.global_config_path.exists():
                self._global_config.read(self.global_config_path)
        return self._global_config

    @property
    def repo_config(self) -> Optional[configparser.ConfigParser]:
        """Load and return repository configuration."""
        if self._repo_config is None and self.repo_config_path:
            self._repo_config = configparser.ConfigParser()
            if self.repo_config_path.exists():
                self._repo_config.read(self.repo_config_path)
        return self._repo_config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Priority order (highest to lowest):
        1. Environment variables (LOOSECAT_<SECTION>_<KEY>)
        2. Repository config
        3. Global config
        4. Fallback value

        Args:
            section: Config section (e.g., 'decode', 'color')
            key: Config key (e.g., 'mode_types')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_key = f"{self.ENV_PREFIX}_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        if self.repo_config and self.repo_config.has_option(section, key):
            return self.repo_config.get(section, key)

        if self.global_config.has_option(section, key):
            return self.global_config.get(section, key)

        return fallback

    def get_bool(self, section: str, key: str, fallback: bool = False) -> bool:
        """
        Get a boolean configuration value.

        Accepts 1/0, true/false, yes/no and on/off in any case.

        Raises:
            ValueError: If the stored value is not a boolean
        """
        value = self.get(section, key)
        if value is None:
            return fallback

        try:
            return configparser.ConfigParser.BOOLEAN_STATES[value.strip().lower()]
        except KeyError:
            raise ValueError(f"Not a boolean value for {section}.{key}: {value}") from None

    def _target(self, global_config: bool):
        if global_config:
            return self.global_config, self.global_config_path
        if not self.repo_config_path:
            raise ValueError("No repository config path available")
        return self.repo_config, self.repo_config_path

    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """
        Set a configuration value.

        Args:
            section: Config section
            key: Config key
            value: Value to set
            global_config: If True, write to global config; otherwise repo config
        """
        config, config_path = self._target(global_config)

        if not config.has_section(section):
            config.add_section(section)

        config.set(section, key, value)

        with open(config_path, 'w') as f:
            config.write(f)

    def unset(self, section: str, key: str, global_config: bool = False) -> bool:
        """
        Remove a configuration value.

        Args:
            section: Config section
            key: Config key
            global_config: If True, modify global config; otherwise repo config

        Returns:
            True if value was removed, False if it didn't exist
        """
        if not global_config and not self.repo_config_path:
            return False
        config, config_path = self._target(global_config)

        if not config.has_option(section, key):
            return False

        config.remove_option(section, key)

        # Remove empty sections
        if not config.options(section):
            config.remove_section(section)

        with open(config_path, 'w') as f:
            config.write(f)

        return True

    def list_all(self, global_only: bool = False, repo_only: bool = False) -> Dict[str, Dict[str, str]]:
        """
        List all configuration values.

        Args:
            global_only: Only show global config
            repo_only: Only show repo config

        Returns:
            Dict of sections to key-value dicts
        """
        result = {}

        if not repo_only:
            for section in self.global_config.sections():
                result.setdefault(section, {})
                for key, value in self.global_config.items(section):
                    result[section][f"{key} (global)"] = value

        if not global_only and self.repo_config:
            for section in self.repo_config.sections():
                result.setdefault(section, {})
                for key, value in self.repo_config.items(section):
                    result[section][key] = value

        return result

    def decode_options(self) -> Dict[str, bool]:
        """
        Decoder keyword arguments taken from the [decode] section.

        Returns:
            Dict with 'mode_types' and 'strict_size'
        """
        return {
            'mode_types': self.get_bool('decode', 'mode_types'),
            'strict_size': self.get_bool('decode', 'strict_size'),
        }

    @property
    def use_color(self) -> bool:
        """Whether CLI output should be colored (color.ui, default on)."""
        return self.get_bool('color', 'ui', fallback=True)


def get_config(repo=None) -> Config:
    """
    Get a Config instance.

    Args:
        repo: Repository instance, or None for global-only config

    Returns:
        Config instance
    """
    if repo:
        return Config(repo.config_file)
    return Config()
