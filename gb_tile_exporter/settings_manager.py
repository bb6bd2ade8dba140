"""
Settings manager for the tile exporter
Remembers the last export parameters between runs
"""

import json
import os
from pathlib import Path
from typing import Any, Optional

from .logging_config import get_logger

logger = get_logger("settings_manager")


class SettingsManager:
    """Manages application settings with persistence"""

    def __init__(self, app_name="gb_tile_exporter"):
        self.app_name = app_name
        self.settings_file = self._get_settings_path()
        self.settings = self._load_settings()

    def _get_settings_path(self) -> Path:
        """Get the appropriate settings directory for the platform"""
        if os.name == "nt":  # Windows
            base = Path(os.environ.get("APPDATA", os.path.expanduser("~")))
            settings_dir = base / self.app_name
        else:  # Linux/Mac
            base = Path(os.path.expanduser("~"))
            settings_dir = base / f".{self.app_name}"

        settings_dir.mkdir(parents=True, exist_ok=True)
        return settings_dir / "settings.json"

    def _load_settings(self) -> dict[str, Any]:
        """Load settings from file"""
        if self.settings_file.exists():
            try:
                with open(self.settings_file) as f:
                    return json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Ignoring unreadable settings file {self.settings_file}: {e}")
                return self._get_default_settings()
        return self._get_default_settings()

    def _get_default_settings(self) -> dict[str, Any]:
        """Get default settings"""
        return {
            "export": {
                "asset_name": "",
                "output_dir": "",
                "bank": 0,
            },
            "recent_inputs": [],
            "preferences": {
                "log_level": "INFO",
                "max_recent_files": 10,
            },
        }

    def save_settings(self):
        """Save current settings to file"""
        try:
            with open(self.settings_file, "w") as f:
                json.dump(self.settings, f, indent=2)
        except OSError as e:
            logger.warning(f"Could not save settings to {self.settings_file}: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value"""
        keys = key.split(".")
        value = self.settings
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any):
        """Set a setting value"""
        keys = key.split(".")
        target = self.settings
        for k in keys[:-1]:
            if k not in target:
                target[k] = {}
            target = target[k]
        target[keys[-1]] = value
        self.save_settings()

    def add_recent_input(self, file_path: str):
        """Add an input image to the recent files list"""
        file_path = str(file_path)

        recent_list = self.settings.setdefault("recent_inputs", [])
        if file_path in recent_list:
            recent_list.remove(file_path)
        recent_list.insert(0, file_path)

        max_recent = self.get("preferences.max_recent_files", 10)
        self.settings["recent_inputs"] = recent_list[:max_recent]

        self.save_settings()

    def get_recent_inputs(self) -> list:
        return self.settings.get("recent_inputs", [])

    def update_export_params(self, asset_name: Optional[str] = None,
                             output_dir: Optional[str] = None,
                             bank: Optional[int] = None):
        """Update last used export parameters"""
        if asset_name is not None:
            self.set("export.asset_name", asset_name)
        if output_dir is not None:
            self.set("export.output_dir", str(output_dir))
        if bank is not None:
            self.set("export.bank", bank)

    def get_export_params(self) -> dict[str, Any]:
        """Get last used export parameters"""
        return {
            "asset_name": self.get("export.asset_name", ""),
            "output_dir": self.get("export.output_dir", ""),
            "bank": self.get("export.bank", 0),
        }

    def reset_settings(self):
        """Reset all settings to defaults"""
        self.settings = self._get_default_settings()
        self.save_settings()


# Singleton instance
_settings_instance = None


def get_settings() -> SettingsManager:
    """Get the singleton settings instance"""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = SettingsManager()
    return _settings_instance
