"""
Configuration management for spamBench.

This module loads run settings from YAML/JSON files and keyword overrides
into an ExperimentConfig.
"""

import copy
from typing import Any, Dict, Iterable, List, Union
import yaml
import json
from pathlib import Path
from dataclasses import asdict

from ..core.base import ExperimentConfig, ModelConfig
from ..config.default_config import DEFAULT_CONFIG
from .logger import get_logger


def build_model_configs(entries: Iterable[Union[ModelConfig, Dict[str, Any]]]) -> List[ModelConfig]:
    """Convert registry entries (dicts from YAML or ModelConfig) to ModelConfig."""
    configs = []
    for entry in entries:
        if isinstance(entry, ModelConfig):
            configs.append(copy.deepcopy(entry))
            continue
        if 'name' not in entry:
            raise ValueError(f"Model entry is missing 'name': {entry}")
        unknown = set(entry) - {'name', 'backend', 'grid', 'params'}
        if unknown:
            raise ValueError(f"Unknown keys in model entry '{entry['name']}': {sorted(unknown)}")
        configs.append(ModelConfig(
            name=entry['name'],
            backend=entry.get('backend', entry['name']),
            grid=copy.deepcopy(entry.get('grid') or {}),
            params=copy.deepcopy(entry.get('params') or {}),
        ))
    return configs


def default_experiment_config() -> ExperimentConfig:
    """ExperimentConfig populated from DEFAULT_CONFIG."""
    data = copy.deepcopy(DEFAULT_CONFIG)
    data['models'] = build_model_configs(data['models'])
    return ExperimentConfig(**data)


class ConfigManager:
    """Configuration manager for spamBench."""

    def __init__(self):
        self.logger = get_logger("ConfigManager")
        self.config = default_experiment_config()

    def load_from_file(self, config_path: Union[str, Path]) -> 'ConfigManager':
        """
        Load configuration from a file.

        Args:
            config_path: Path to configuration file

        Returns:
            Self for method chaining
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        self.logger.info(f"Loading configuration from {config_path}")

        if config_path.suffix.lower() in ('.yaml', '.yml'):
            self._load_yaml(config_path)
        elif config_path.suffix.lower() == '.json':
            self._load_json(config_path)
        else:
            raise ValueError(f"Unsupported configuration file format: {config_path.suffix}")

        return self

    def _load_yaml(self, config_path: Path) -> None:
        """Load configuration from YAML file."""
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        self._update_config(config_data)

    def _load_json(self, config_path: Path) -> None:
        """Load configuration from JSON file."""
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)

        self._update_config(config_data)

    def _update_config(self, config_data: Dict[str, Any]) -> None:
        """Update configuration with loaded data."""
        if not isinstance(config_data, dict):
            raise ValueError("Configuration file must contain a mapping")
        self.update_config(**config_data)
        self.logger.info("Configuration loaded successfully")

    def save_to_file(self, config_path: Union[str, Path]) -> None:
        """
        Save configuration to a file.

        Args:
            config_path: Path to save configuration file
        """
        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        self.logger.info(f"Saving configuration to {config_path}")

        config_data = asdict(self.config)

        if config_path.suffix.lower() in ('.yaml', '.yml'):
            with open(config_path, 'w', encoding='utf-8') as f:
                yaml.safe_dump(config_data, f, default_flow_style=False, indent=2, sort_keys=False)
        elif config_path.suffix.lower() == '.json':
            with open(config_path, 'w', encoding='utf-8') as f:
                json.dump(config_data, f, indent=2)
        else:
            raise ValueError(f"Unsupported configuration file format: {config_path.suffix}")

        self.logger.info("Configuration saved successfully")

    def get_config(self) -> ExperimentConfig:
        """Get the current configuration."""
        return self.config

    def update_config(self, **kwargs) -> 'ConfigManager':
        """
        Update configuration with new values; None values are ignored.

        Args:
            **kwargs: Configuration parameters to update

        Returns:
            Self for method chaining
        """
        for key, value in kwargs.items():
            if value is None:
                continue
            if key == 'models':
                value = build_model_configs(value)
            if hasattr(self.config, key):
                setattr(self.config, key, value)
            else:
                self.logger.warning(f"Unknown configuration key: {key}")

        return self

    def select_models(self, names: Iterable[str]) -> 'ConfigManager':
        """Keep only the named registry entries, in the requested order."""
        names = list(names)
        by_name = {m.name: m for m in self.config.models}
        missing = [n for n in names if n not in by_name]
        if missing:
            raise ValueError(f"Unknown model(s) {missing}; registered: {list(by_name)}")
        self.config.models = [by_name[n] for n in names]
        return self
