# anyparams/core/config.py
import copy
import logging
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .exceptions import ConfigurationError
from ..params.converter import to_param_str
from ..params.parameter_set import ParameterSet

logger = logging.getLogger(__name__)

class SimpleConfigLoader:
    """
    Loads a YAML configuration file and keeps a shielded deep copy of it.

    Besides generic dotted-key lookups, the loader turns the 'methods' section
    into (method name, ParameterSet) pairs:

        methods:
          - name: sw-graph
            params: ["NN=10", "efConstruction=200"]
          - name: brute_force
    """

    def __init__(self, config_file_path: str):
        self.config_file_path: str = config_file_path
        self._raw_config_data: Optional[Dict[str, Any]] = None
        self._config_data: Dict[str, Any] = {}

        logger.debug(f"SimpleConfigLoader instance {id(self)} creating for {config_file_path}.")
        self._load_and_shield_config()

    def _load_and_shield_config(self):
        """Loads the configuration and immediately creates a deep copy for internal use."""
        try:
            with open(self.config_file_path, 'r', encoding='utf-8') as f:
                raw_data = yaml.safe_load(f)
        except FileNotFoundError:
            logger.error(f"Configuration file not found: {self.config_file_path}")
            self._raw_config_data = {}
            self._config_data = {}
            raise ConfigurationError(f"Configuration file not found: {self.config_file_path}")
        except yaml.YAMLError as e:
            logger.error(f"Error parsing YAML configuration file '{self.config_file_path}': {e}")
            self._raw_config_data = {}
            self._config_data = {}
            raise ConfigurationError(f"Error parsing YAML configuration file: {e}") from e

        if raw_data is None:
            logger.warning(f"Configuration file '{self.config_file_path}' is empty or contains no valid YAML. Raw config is empty.")
            raw_data = {}
        if not isinstance(raw_data, dict):
            logger.error(f"Configuration file '{self.config_file_path}' must contain a mapping at the top level.")
            raise ConfigurationError(f"Top level of '{self.config_file_path}' must be a mapping, got {type(raw_data).__name__}")

        self._raw_config_data = raw_data
        self._config_data = copy.deepcopy(self._raw_config_data)
        logger.debug(f"ConfigLoader {id(self)}: configuration loaded from '{self.config_file_path}'")

    def get(self, config_key: str, default_value: Any = None) -> Any:
        """Look up a top-level or dotted ('logging.level') key; dicts and lists are returned as copies."""
        current_level_data: Any = self._config_data
        for key_part in config_key.split('.'):
            if isinstance(current_level_data, dict) and key_part in current_level_data:
                current_level_data = current_level_data[key_part]
            else:
                logger.debug(f"ConfigLoader {id(self)}: Key '{config_key}' not found. Returning default_value.")
                return default_value
        if isinstance(current_level_data, (dict, list)):
            return copy.deepcopy(current_level_data)
        return current_level_data

    def get_all_config(self) -> Dict[str, Any]:
        """Returns a deep copy of the entire (shielded) configuration data."""
        return copy.deepcopy(self._config_data)

    def get_method_params(self, config_key: str = 'methods') -> List[Tuple[str, ParameterSet]]:
        """
        Build a (method name, ParameterSet) pair for each entry under config_key.

        'params' may be a list of '<name>=<value>' tokens or a mapping; mapping
        values are serialized the same way ParameterSet.change_param() does.
        """
        entries = self.get(config_key, [])
        if entries is None:
            return []
        if not isinstance(entries, list):
            logger.error(f"Config key '{config_key}' must hold a list of methods, got {type(entries).__name__}")
            raise ConfigurationError(f"'{config_key}' must be a list of method entries")

        methods = []
        for i, entry in enumerate(entries):
            if not isinstance(entry, dict) or not entry.get('name'):
                logger.error(f"Method entry #{i} under '{config_key}' has no 'name': {entry!r}")
                raise ConfigurationError(f"Method entry #{i} under '{config_key}' must be a mapping with a 'name'")
            params = entry.get('params') or []
            if isinstance(params, dict):
                tokens = [f"{name}={to_param_str(value)}" for name, value in params.items()]
            elif isinstance(params, list):
                tokens = [str(token) for token in params]
            else:
                logger.error(f"Parameters of method '{entry['name']}' must be a list or a mapping")
                raise ConfigurationError(f"Parameters of method '{entry['name']}' must be a list or a mapping")
            methods.append((str(entry['name']), ParameterSet(tokens)))
            logger.debug(f"Method '{entry['name']}' loaded with {len(tokens)} parameter(s)")
        return methods

    def reload_config(self):
        logger.debug(f"Reloading configuration from '{self.config_file_path}'...")
        self._load_and_shield_config()
        logger.debug("Configuration reloaded.")
