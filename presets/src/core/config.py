import os
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from common.src.constants import FALLBACK_CHARACTER_CLASS, PLAYER_TEMPLATES_FILE


DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config.yml"


def load_presets_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load preset configuration from config.yml"""
    if config_path is None:
        config_path = Path(os.getenv("PRESETS_CONFIG", str(DEFAULT_CONFIG_PATH)))

    if config_path.exists():
        with open(config_path, "r") as f:
            return (yaml.safe_load(f) or {}).get("presets", {})
    return {}


# Load preset config from YAML
presets_config = load_presets_config()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # File locations from config.yml with fallbacks
    CONFIG_DIR: str = os.getenv(
        "CONFIG_DIR",
        presets_config.get("paths", {}).get("config_dir", "~/.config/presets"),
    )
    PLAYER_TEMPLATES_FILE: str = os.getenv(
        "PLAYER_TEMPLATES_FILE",
        presets_config.get("paths", {}).get("player_templates_file", PLAYER_TEMPLATES_FILE),
    )

    # Character class settings
    FALLBACK_CHARACTER_CLASS: str = presets_config.get(
        "fallback_character_class", FALLBACK_CHARACTER_CLASS
    )
    CHARACTER_CLASSES: List[str] = presets_config.get(
        "character_classes", [FALLBACK_CHARACTER_CLASS]
    )

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    @field_validator("PLAYER_TEMPLATES_FILE")
    @classmethod
    def validate_templates_file(cls, value: str) -> str:
        """The templates file must be a bare file name inside CONFIG_DIR."""
        if not value or Path(value).name != value:
            raise ValueError(
                "PLAYER_TEMPLATES_FILE must be a file name, not a path. "
                "Set CONFIG_DIR to change the directory."
            )
        return value


settings = Settings()


def get_config_file_path(filename: str, config: Optional[Settings] = None) -> Path:
    """
    Resolve a file name against the configured config directory.

    Args:
        filename: Bare file name (e.g., "players.json")
        config: Settings to use, defaults to the module settings

    Returns:
        Absolute path with "~" expanded
    """
    config = config or settings
    return Path(config.CONFIG_DIR).expanduser() / filename


def get_player_templates_path(config: Optional[Settings] = None) -> Path:
    """Path of the player templates file."""
    config = config or settings
    return get_config_file_path(config.PLAYER_TEMPLATES_FILE, config)
