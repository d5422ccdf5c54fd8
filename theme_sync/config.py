"""
Configuration management for Theme Sync.
"""

import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Any, Optional

from .core.exceptions import ConfigurationError
from .core.models import PriorityTier
from .utils.logging import get_logger


@dataclass
class UIConfig:
    """Configuration for the demo window."""
    window_title: str = "Theme Sync"
    label_text: str = "Hello, world!"
    window_width: int = 275
    window_height: int = 50
    application_id: str = "com.example.theme-sync"
    style: str = "Fusion"  # Empty string keeps the platform default style


@dataclass
class StylingConfig:
    """Configuration for the platform-following style sheet."""
    priority: str = "application"
    follow_system: bool = True  # False starts unstyled, as if no settings existed

    @property
    def priority_tier(self) -> PriorityTier:
        return PriorityTier.from_name(self.priority)


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    file_path: str = "theme_sync.log"
    max_file_size: int = 5 * 1024 * 1024
    backup_count: int = 3
    log_to_console: bool = True


class Config:
    """Main configuration class."""

    def __init__(self):
        self.ui = UIConfig()
        self.styling = StylingConfig()
        self.logging = LoggingConfig()
        self.logger = get_logger(__name__)

    @classmethod
    def load_from_file(cls, config_path: Optional[str] = None) -> 'Config':
        """Load configuration from file, keeping defaults for anything missing."""
        if config_path is None:
            config_path = cls.get_default_config_path()

        config_file = Path(config_path)
        config = cls()

        if config_file.exists():
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    data = json.load(f)

                config._update_from_dict(data)
                config.logger.info(f"Config loaded from {config_file}")

            except (OSError, ValueError) as e:
                config.logger.warning(f"Failed to load config from {config_file}: {e}")
                config.logger.info("Using default configuration")
        else:
            config.logger.info("No config file found, using defaults")

        return config

    def save_to_file(self, config_path: Optional[str] = None):
        """Save configuration to file."""
        if config_path is None:
            config_path = self.get_default_config_path()

        config_file = Path(config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(config_file, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, indent=2)

            self.logger.info(f"Config saved to {config_file}")

        except OSError as e:
            self.logger.error(f"Failed to save config to {config_file}: {e}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'ui': asdict(self.ui),
            'styling': asdict(self.styling),
            'logging': asdict(self.logging),
        }

    def _update_from_dict(self, data: Dict[str, Any]):
        """Update configuration from dictionary."""
        if not isinstance(data, dict):
            raise ValueError("Config root must be a JSON object")

        if 'ui' in data:
            self._update_dataclass(self.ui, data['ui'])

        if 'styling' in data:
            self._update_dataclass(self.styling, data['styling'])

        if 'logging' in data:
            self._update_dataclass(self.logging, data['logging'])

    def _update_dataclass(self, instance, data: Dict[str, Any]):
        """Update a dataclass instance from dictionary."""
        for key, value in data.items():
            if hasattr(instance, key):
                setattr(instance, key, value)
            else:
                self.logger.warning(f"Ignoring unknown config key '{key}'")

    @staticmethod
    def get_default_config_path() -> str:
        """Get the default configuration file path."""
        config_dir = Path.home() / ".config" / "theme_sync"
        return str(config_dir / "config.json")

    def validate(self) -> bool:
        """Validate configuration values, auto-fixing the ones with safe defaults."""
        fixed_values = []

        if self.ui.window_width <= 0:
            self.ui.window_width = UIConfig.window_width
            fixed_values.append(f"window_width reset to {self.ui.window_width}")

        if self.ui.window_height <= 0:
            self.ui.window_height = UIConfig.window_height
            fixed_values.append(f"window_height reset to {self.ui.window_height}")

        for fix in fixed_values:
            self.logger.info(f"Config auto-fix: {fix}")

        try:
            self.styling.priority_tier
        except ConfigurationError as e:
            self.logger.error(f"Config validation error: {e}")
            return False

        return True
