"""
Configuration management for tag-editor.

Handles loading and managing configuration from files and environment
variables.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from .core.values import NULL_MARKER

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EditorConfig(BaseModel):
    """Main configuration for tag-editor."""

    # Text rendered for element children when reading values
    null_marker: str = NULL_MARKER

    # Logging
    log_level: str = "WARNING"

    # Serialization
    pretty_print: bool = False
    indent: str = "  "

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


class ConfigManager:
    """Manages tag-editor configuration from multiple sources."""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = config_dir or Path.home() / '.tag-editor'
        self.config_file = self.config_dir / 'config.yaml'
        self._config: Optional[EditorConfig] = None

    def load_config(self) -> EditorConfig:
        """Load configuration from all sources."""
        if self._config is not None:
            return self._config

        # Defaults, then file, then environment
        merged: Dict[str, Any] = {}
        if self.config_file.exists():
            merged.update(self._load_from_file())
        merged.update(self._load_from_env())

        try:
            config = EditorConfig.model_validate(merged)
        except ValidationError as e:
            logger.warning(f"Invalid configuration, using defaults: {e}")
            config = EditorConfig()

        self._config = config
        return config

    def _load_from_file(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        try:
            with open(self.config_file, 'r') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Could not load config file {self.config_file}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring config file {self.config_file}: expected a mapping")
            return {}
        return data

    def _load_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        env_config: Dict[str, Any] = {}

        null_marker = os.getenv('TAG_EDITOR_NULL_MARKER')
        if null_marker is not None:
            env_config['null_marker'] = null_marker

        log_level = os.getenv('TAG_EDITOR_LOG_LEVEL')
        if log_level:
            env_config['log_level'] = log_level

        pretty = os.getenv('TAG_EDITOR_PRETTY')
        if pretty:
            env_config['pretty_print'] = pretty.lower() in ('true', '1', 'yes', 'on')

        indent = os.getenv('TAG_EDITOR_INDENT')
        if indent is not None:
            env_config['indent'] = indent

        return env_config

    def load_file_config(self) -> EditorConfig:
        """Load the stored configuration, ignoring environment overrides."""
        data = self._load_from_file() if self.config_file.exists() else {}
        try:
            return EditorConfig.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Invalid configuration file, using defaults: {e}")
            return EditorConfig()

    def save_config(self, config: EditorConfig) -> None:
        """Save configuration to file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, 'w') as f:
            yaml.safe_dump(config.model_dump(), f, default_flow_style=False, indent=2)
        self._config = config

    def create_default_config(self) -> EditorConfig:
        """Create a default configuration file."""
        config = EditorConfig()
        self.save_config(config)
        logger.info(f"Created default configuration at {self.config_file}")
        return config

    def get_config_info(self) -> Dict[str, Any]:
        """Get information about current configuration."""
        config = self.load_config()

        return {
            'config_file': str(self.config_file),
            'config_exists': self.config_file.exists(),
            'null_marker': config.null_marker,
            'log_level': config.log_level,
            'pretty_print': config.pretty_print,
            'indent': config.indent,
        }


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the global config manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config() -> EditorConfig:
    """Load the current configuration."""
    return get_config_manager().load_config()
