import copy
import logging
import os
from typing import Any, ClassVar, Dict, Optional, Tuple, Type

import yaml
from pydantic import BaseModel, ValidationError

# Set up logger
logger = logging.getLogger(__name__)


class BaseConfig:
    """
    YAML configuration validated against a pydantic settings model.

    Subclasses set ``settings_model`` and build their domain objects from
    get_settings(). The raw mapping stays editable through dotted keys
    (``learning.alpha``) until it is validated.
    """

    settings_model: ClassVar[Optional[Type[BaseModel]]] = None

    def __init__(self, config_path: Optional[str] = None, preload: bool = False):
        """
        Args:
            config_path (str): Path to the YAML configuration file.
            preload (bool): If True, reads the file immediately.

        Raises:
            FileNotFoundError: If preloading and the file does not exist.
            ValueError: If preloading without a path, or the file cannot be parsed.
        """
        self.config_path = config_path
        self.config: Dict[str, Any] = {}

        if preload:
            if not config_path:
                raise ValueError("Configuration path must be provided for preloading.")
            self.config = self._load_config(config_path)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """Build a configuration from an in-memory mapping, without a backing file."""
        config = cls()
        config.config = copy.deepcopy(dict(data))
        return config

    def _load_config(self, config_path: str) -> Dict[str, Any]:
        if not os.path.isfile(config_path):
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as file:
                data = yaml.safe_load(file) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML configuration file: {e}")

        if not isinstance(data, dict):
            raise ValueError(
                f"Configuration file must contain a mapping, got {type(data).__name__}"
            )

        logger.info(f"Configuration loaded from: {config_path}")
        return data

    def reload_config(self) -> None:
        """Re-read the backing file, discarding unsaved edits."""
        if not self.config_path:
            raise ValueError("No configuration path set, nothing to reload.")
        self.config = self._load_config(self.config_path)

    def save_config(self, output_path: Optional[str] = None) -> None:
        """
        Write the configuration as YAML, to ``output_path`` or the backing file.

        Raises:
            ValueError: If there is no path to save to, or writing fails.
        """
        save_path = output_path or self.config_path
        if not save_path:
            raise ValueError("No output path given and no configuration path set.")

        directory = os.path.dirname(save_path)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(save_path, "w", encoding="utf-8") as file:
                yaml.safe_dump(self.config, file, default_flow_style=False, indent=2)
        except OSError as e:
            logger.error(f"Failed to save configuration to {save_path}: {e}")
            raise ValueError(f"Failed to save configuration: {e}")

        logger.info(f"Configuration saved to: {save_path}")

    def get_value(self, key: str, default: Any = None) -> Any:
        """Read a dotted key such as ``learning.alpha``; ``default`` if any part is missing."""
        node: Any = self.config
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def set_value(self, key: str, value: Any) -> None:
        """Write a dotted key, creating intermediate sections as needed."""
        *parents, leaf = key.split(".")
        node = self.config
        for part in parents:
            node = node.setdefault(part, {})
        node[leaf] = value
        logger.debug(f"Set configuration value: {key} = {value}")

    def _settings_model(self) -> Type[BaseModel]:
        if self.settings_model is None:
            raise NotImplementedError(f"{self.__class__.__name__} does not define settings_model")
        return self.settings_model

    def get_settings(self) -> BaseModel:
        """
        Validate the configuration and return the parsed settings.

        Raises:
            ValueError: If the configuration does not match the settings model.
        """
        try:
            return self._settings_model().model_validate(self.config)
        except ValidationError as e:
            raise ValueError(f"Invalid {self.__class__.__name__} configuration: {e}")

    def validate_config(self) -> Tuple[bool, str]:
        """
        Returns:
            Tuple[bool, str]: Validity flag and a message describing the problems, if any.
        """
        try:
            self.get_settings()
        except ValueError as e:
            return False, str(e)
        return True, f"{self.__class__.__name__} configuration is valid."
