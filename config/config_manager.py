"""
Configuration management for the yt-dlp menu front-end.

Configuration is read-only: the file supplies startup defaults and is never
written back.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional, Union
import logging

from models.core import AppConfig
from config.error_handling import ConfigurationError, ValidationError


VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class ConfigManager:
    """Manages configuration loading, validation, and merging."""

    DEFAULT_CONFIG_FILENAME = "ytmenu_config.json"

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize ConfigManager.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._default_config = self._create_default_config()

    def _create_default_config(self) -> Dict[str, Any]:
        """Create default configuration dictionary."""
        return {
            "tool_name": "yt-dlp",
            "default_output_directory": "",
            "log_level": "WARNING",
            "log_file": None
        }

    def load_config(self, config_path: Union[str, Path]) -> AppConfig:
        """
        Load configuration from JSON file.

        Args:
            config_path: Path to configuration file

        Returns:
            AppConfig instance

        Raises:
            ConfigurationError: If configuration file cannot be loaded or is invalid
        """
        config_path = Path(config_path)

        if not config_path.exists():
            self.logger.debug(f"Configuration file not found, using defaults: {config_path}")
            return self._create_app_config(self._default_config)

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in configuration file {config_path}: {str(e)}",
                details={"file_path": str(config_path), "json_error": str(e)}
            )
        except OSError as e:
            raise ConfigurationError(
                f"Failed to load configuration from {config_path}: {str(e)}",
                details={"file_path": str(config_path)},
                original_exception=e
            )

        if not isinstance(config_data, dict):
            raise ConfigurationError(
                f"Configuration file {config_path} must contain a JSON object",
                details={"file_path": str(config_path)}
            )

        self.logger.info(f"Loaded configuration from: {config_path}")

        merged_config = self._merge_configs(self._default_config, config_data)

        try:
            self._validate_config(merged_config)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in {config_path}: {e.message}",
                details={"file_path": str(config_path)},
                original_exception=e
            )

        return self._create_app_config(merged_config)

    def merge_cli_args(self, config: AppConfig, cli_args: Dict[str, Any]) -> AppConfig:
        """
        Merge CLI arguments with existing configuration.
        CLI arguments take precedence over configuration file values.

        Args:
            config: Base AppConfig instance
            cli_args: Dictionary of CLI arguments

        Returns:
            New AppConfig instance with merged values
        """
        config_dict = self._app_config_to_dict(config)

        cli_mapping = {
            'log_level': 'log_level',
            'log_file': 'log_file',
        }

        for cli_key, config_key in cli_mapping.items():
            if cli_key in cli_args and cli_args[cli_key] is not None:
                config_dict[config_key] = cli_args[cli_key]
                self.logger.debug(f"CLI override: {config_key} = {cli_args[cli_key]}")

        self._validate_config(config_dict)

        return self._create_app_config(config_dict)

    def _merge_configs(self, base_config: Dict[str, Any], override_config: Dict[str, Any]) -> Dict[str, Any]:
        """Overlay known keys from the file on top of the defaults."""
        merged = base_config.copy()

        for key, value in override_config.items():
            if key not in base_config:
                self.logger.warning(f"Ignoring unknown configuration key: {key}")
                continue
            merged[key] = value

        return merged

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """
        Validate configuration dictionary.

        Raises:
            ValidationError: If configuration is invalid
        """
        if not isinstance(config.get('tool_name'), str) or not config['tool_name'].strip():
            raise ValidationError("tool_name must be a non-empty string")

        if not isinstance(config.get('default_output_directory'), str):
            raise ValidationError("default_output_directory must be a string")

        log_level = config.get('log_level')
        if not isinstance(log_level, str) or log_level.upper() not in VALID_LOG_LEVELS:
            raise ValidationError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}"
            )

        log_file = config.get('log_file')
        if log_file is not None and not isinstance(log_file, str):
            raise ValidationError("log_file must be a string or null")

    def _create_app_config(self, config_dict: Dict[str, Any]) -> AppConfig:
        """Create AppConfig instance from dictionary."""
        return AppConfig(
            tool_name=config_dict['tool_name'].strip(),
            default_output_directory=config_dict['default_output_directory'],
            log_level=config_dict['log_level'].upper(),
            log_file=config_dict['log_file']
        )

    def _app_config_to_dict(self, config: AppConfig) -> Dict[str, Any]:
        """Convert AppConfig instance to dictionary."""
        return {
            'tool_name': config.tool_name,
            'default_output_directory': config.default_output_directory,
            'log_level': config.log_level,
            'log_file': config.log_file
        }

    def get_config_path(self, config_dir: Optional[Union[str, Path]] = None) -> Path:
        """
        Get the default configuration file path.

        Args:
            config_dir: Optional directory for configuration file

        Returns:
            Path to configuration file
        """
        if config_dir is None:
            config_dir = Path.cwd()
        else:
            config_dir = Path(config_dir)

        return config_dir / self.DEFAULT_CONFIG_FILENAME
