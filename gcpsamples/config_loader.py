"""Handles loading configuration from YAML files."""

import copy
import yaml
import os
import logging
from typing import Optional
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    'project': None,
    'log_dir': None,
    'log_file': 'gcpsamples.log',
    'speech': {
        'encoding': 'LINEAR16',
        'sample_rate_hertz': 32000,
        'language_code': 'en-US',
        'enable_automatic_punctuation': True,
    },
}

class ConfigLoader:
    """Loads configuration settings from a YAML file."""

    def load_config(self, config_path: str) -> dict:
        """
        Loads configuration from the specified YAML file path.

        Args:
            config_path: The path to the YAML configuration file.

        Returns:
            A dictionary containing the loaded configuration settings.

        Raises:
            FileNotFoundError: If the configuration file does not exist.
            ConfigurationError: If the file cannot be parsed as YAML or
                              if there are other reading errors.
        """
        logger.info(f"Attempting to load configuration from: {config_path}")
        if not os.path.exists(config_path):
            logger.error(f"Configuration file not found at path: {config_path}")
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        if not os.path.isfile(config_path):
            logger.error(f"Configuration path is not a file: {config_path}")
            raise ConfigurationError(f"Configuration path is not a file: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Error parsing YAML configuration file {config_path}: {e}", exc_info=True)
            raise ConfigurationError(f"Invalid YAML format in {config_path}: {e}") from e
        except IOError as e:
            logger.error(f"Error reading configuration file {config_path}: {e}", exc_info=True)
            raise ConfigurationError(f"Could not read configuration file {config_path}: {e}") from e

        if not isinstance(config, dict):
            # An empty file or a bare scalar is not a usable configuration
            logger.error(f"Configuration file {config_path} did not load as a dictionary (root object).")
            raise ConfigurationError(f"Invalid YAML structure in {config_path}. Root must be a mapping (dictionary).")
        if 'speech' in config and not isinstance(config['speech'], dict):
            raise ConfigurationError(f"'speech' in {config_path} must be a mapping.")
        logger.info(f"Configuration loaded successfully from {config_path}")
        return config

    def load_with_defaults(self, config_path: Optional[str] = None) -> dict:
        """
        Returns DEFAULT_CONFIG, overlaid with the file at ``config_path`` if given.

        The ``speech`` section is merged key by key; every other key is replaced.
        """
        config = copy.deepcopy(DEFAULT_CONFIG)
        if config_path is None:
            logger.debug("No configuration file given, using built-in defaults.")
            return config

        loaded = self.load_config(config_path)
        for key, value in loaded.items():
            if key == 'speech':
                config['speech'].update(value)
            else:
                config[key] = value
        return config
