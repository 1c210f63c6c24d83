# file: undoredo/utils/config_loader.py

import copy
import json
import logging
import datetime
from pathlib import Path
from typing import Dict, Any
from undoredo.core.exceptions import ConfigurationError

class ConfigLoader:
    """
    Manages loading and saving JSON configuration files in one directory.
    Creates default config files if they don't exist.
    """

    def __init__(self, config_dir: Path):
        self.config_dir = Path(config_dir)
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.configs: Dict[str, Any] = {}
        self.logger = logging.getLogger(self.__class__.__name__)
        self._defaults = {
            "system_config.json": {
                "logging": {"level": "INFO"}
            },
            # max_history <= 0 keeps the whole undo history
            "commands_config.json": {"max_history": 0},
        }

    def load_all_configs(self):
        """Loads all default and existing .json config files."""
        self.configs = {}

        for filename, default_data in self._defaults.items():
            self.configs[filename] = self._load_config(filename, default_data)

        # Load any other JSON files present that are not in defaults
        for path in sorted(self.config_dir.glob("*.json")):
            if path.name not in self.configs:
                self.configs[path.name] = self._load_config(path.name, {})

    def _load_config(self, filename: str, default_data: Dict) -> Dict:
        """
        Loads a single config file. If missing, creates it with default_data.
        If invalid, backs it up and returns default_data.
        """
        file_path = self.config_dir / filename

        if not file_path.exists():
            self.logger.info(f"Config '{filename}' not found. Creating with defaults.")
            try:
                self.save_config(filename, default_data)
            except ConfigurationError as e:
                self.logger.error(f"Failed to create default config for {filename}: {e}")
            return copy.deepcopy(default_data)

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError:
            self.logger.error(f"Error reading {filename}. Backing up and using defaults.")
            timestamp = datetime.datetime.now().strftime('%Y%m%d%H%M%S')
            backup_path = file_path.with_suffix(f"{file_path.suffix}.{timestamp}.bak")
            try:
                file_path.rename(backup_path)
                self.logger.info(f"Backed up corrupted config to: {backup_path}")
            except OSError as e_rename:
                self.logger.error(f"Failed to rename corrupted config {filename}: {e_rename}")
            return copy.deepcopy(default_data)
        except OSError as e:
            self.logger.error(f"Failed to load {filename}: {e}")
            return copy.deepcopy(default_data)

    def get_config(self, filename: str) -> Dict:
        """Gets a specific loaded config."""
        if filename not in self.configs:
            self.logger.warning(f"Config '{filename}' was not loaded. Returning defaults.")
        return self.configs.get(filename, copy.deepcopy(self._defaults.get(filename, {})))

    def save_config(self, filename: str, data: Dict):
        """Saves data to a specific config file."""
        file_path = self.config_dir / filename
        self.configs[filename] = copy.deepcopy(data)
        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=4)
        except (OSError, TypeError, ValueError) as e:
            self.logger.error(f"Failed to save {filename}: {e}")
            raise ConfigurationError(f"Could not write to file {filename}: {e}") from e

    def get_data_dir(self) -> Path:
        """Returns the root directory for all app data."""
        return self.config_dir
