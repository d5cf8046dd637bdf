import os
import yaml
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)

# Default configuration
DEFAULT_CONFIG = {
    "evaluation": {
        "max_iterations": 1000,
        "max_candidates": None,
        "show_progress": False,
    },
    "relations": {
        "check_arity": True,
    },
}


class Config:
    """Configuration manager for the Datalog engine."""

    _instance = None
    _config_dict = None
    _config_file = None

    @classmethod
    def get_instance(cls) -> 'Config':
        """Get the singleton instance of Config."""
        if cls._instance is None:
            cls._instance = Config()
        return cls._instance

    def __init__(self):
        """Initialize with default configuration."""
        if Config._instance is not None:
            raise RuntimeError("Config is a singleton. Use Config.get_instance() instead.")
        self._config_dict = _deep_copy(DEFAULT_CONFIG)

    def load_from_file(self, config_file: str) -> None:
        """Load configuration from a YAML file."""
        if not os.path.exists(config_file):
            logger.warning(f"Config file {config_file} not found. Using default configuration.")
            return

        with open(config_file, 'r') as f:
            loaded = yaml.safe_load(f)

        if not loaded:
            logger.warning("Empty config file. Using default configuration.")
            return
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {config_file} must contain a mapping, got {type(loaded).__name__}")

        # Update configuration, maintaining defaults for missing values
        self._update_dict_recursive(self._config_dict, loaded)
        self._config_file = config_file
        logger.info(f"Loaded configuration from {config_file}")

    def _update_dict_recursive(self, target: Dict, source: Dict) -> None:
        """Recursively update a dictionary, preserving keys not in source."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_dict_recursive(target[key], value)
            else:
                target[key] = value

    def get(self, path: str, default: Any = None) -> Any:
        """Get configuration value by dot-notation path."""
        parts = path.split('.')
        current = self._config_dict

        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default

        return current

    def set(self, path: str, value: Any) -> None:
        """Set configuration value by dot-notation path."""
        parts = path.split('.')
        current = self._config_dict

        # Navigate to the parent of the target
        for part in parts[:-1]:
            if part not in current or not isinstance(current[part], dict):
                current[part] = {}
            current = current[part]

        current[parts[-1]] = value

    def reset(self) -> None:
        """Restore the default configuration."""
        self._config_dict = _deep_copy(DEFAULT_CONFIG)
        self._config_file = None

    def get_max_iterations(self) -> Optional[int]:
        return self.get('evaluation.max_iterations', DEFAULT_CONFIG['evaluation']['max_iterations'])

    def get_max_candidates(self) -> Optional[int]:
        return self.get('evaluation.max_candidates', DEFAULT_CONFIG['evaluation']['max_candidates'])

    def get_show_progress(self) -> bool:
        return bool(self.get('evaluation.show_progress', DEFAULT_CONFIG['evaluation']['show_progress']))

    def get_check_arity(self) -> bool:
        return bool(self.get('relations.check_arity', DEFAULT_CONFIG['relations']['check_arity']))

    def save(self, config_file: Optional[str] = None) -> None:
        """Save current configuration to a YAML file."""
        file_path = config_file or self._config_file

        if not file_path:
            logger.warning("No config file specified for saving.")
            return

        with open(file_path, 'w') as f:
            yaml.dump(self._config_dict, f, default_flow_style=False)
        logger.info(f"Saved configuration to {file_path}")


def _deep_copy(d: Dict) -> Dict:
    return {k: _deep_copy(v) if isinstance(v, dict) else v for k, v in d.items()}


# Singleton instance
config = Config.get_instance()
