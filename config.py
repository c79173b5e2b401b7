"""
Central configuration for the chess board.
Pydantic models for type-safe settings, loadable from env vars or JSON.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == 'true'


class UISettings(BaseModel):
    """Console display settings."""

    model_config = ConfigDict(validate_assignment=True)

    use_unicode: bool = Field(default=False, description="Draw pieces with Unicode chess glyphs")
    show_coordinates: bool = Field(default=True, description="Print row/column numbers around the board")


class GameRulesSettings(BaseModel):
    """Game rules and interaction settings."""

    model_config = ConfigDict(validate_assignment=True)

    allow_undo: bool = Field(default=True, description="Allow undoing moves")
    notify_checkmate: bool = Field(default=True, description="Notify listeners when the checkmate probe fires")


class LoggingSettings(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(validate_assignment=True)

    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_to_file: bool = Field(default=False, description="Write logs to file")
    log_file_path: str = Field(default="chessboard.log", description="Log file path")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
        v_upper = v.upper() if isinstance(v, str) else str(v).upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper


class ChessConfig(BaseModel):
    """Main configuration model."""

    ui: UISettings = Field(default_factory=UISettings)
    rules: GameRulesSettings = Field(default_factory=GameRulesSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    version: str = Field(default="1.0.0", description="Configuration version")
    config_file: Optional[str] = Field(default=None, description="Path to config file")

    @classmethod
    def from_env(cls) -> 'ChessConfig':
        """Create configuration from environment variables."""
        return cls(
            ui=UISettings(
                use_unicode=_env_flag('CHESS_UNICODE', 'false'),
                show_coordinates=_env_flag('CHESS_COORDS', 'true'),
            ),
            rules=GameRulesSettings(
                allow_undo=_env_flag('CHESS_ALLOW_UNDO', 'true'),
                notify_checkmate=_env_flag('CHESS_NOTIFY_CHECKMATE', 'true'),
            ),
            logging=LoggingSettings(
                log_level=os.getenv('CHESS_LOG_LEVEL', 'INFO'),
                log_to_file=_env_flag('CHESS_LOG_FILE', 'false'),
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'ui': self.ui.model_dump(),
            'rules': self.rules.model_dump(),
            'logging': self.logging.model_dump(),
            'version': self.version,
            'config_file': self.config_file,
        }

    def save_to_file(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        config_dict = self.to_dict()
        config_dict['config_file'] = filepath

        with open(filepath, 'w') as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str) -> 'ChessConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)

        return cls(
            ui=UISettings(**data.get('ui', {})),
            rules=GameRulesSettings(**data.get('rules', {})),
            logging=LoggingSettings(**data.get('logging', {})),
            version=data.get('version', '1.0.0'),
            config_file=filepath,
        )

    def update_from_dict(self, updates: Dict[str, Any]) -> None:
        """Update configuration sections from a nested dictionary."""
        for section, settings in updates.items():
            if hasattr(self, section) and isinstance(settings, dict):
                section_model = getattr(self, section)
                for key, value in settings.items():
                    if hasattr(section_model, key):
                        setattr(section_model, key, value)


# Global configuration instance
_config: Optional[ChessConfig] = None


def get_config() -> ChessConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = ChessConfig.from_env()
    return _config


def load_config_from_file(filepath: str) -> ChessConfig:
    """Load configuration from file and update global instance."""
    global _config
    _config = ChessConfig.load_from_file(filepath)
    return _config


def reset_config() -> None:
    """Reset the global configuration to defaults."""
    global _config
    _config = None


def get_ui_settings() -> UISettings:
    return get_config().ui


def get_game_rules() -> GameRulesSettings:
    return get_config().rules


def get_logging_settings() -> LoggingSettings:
    return get_config().logging


def setup_logging() -> None:
    """Configure root logging once from the logging settings."""
    if getattr(setup_logging, "_configured", False):
        return
    settings = get_logging_settings()
    level: int = getattr(logging, settings.log_level, logging.INFO)
    handlers = [logging.StreamHandler()]
    if settings.log_to_file:
        handlers.append(logging.FileHandler(settings.log_file_path))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
