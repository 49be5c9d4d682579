"""
Configuration loader (TOML).

Stores defaults for the document title, stylesheet and logging.
Uses Pydantic for validation.
"""

from pathlib import Path
import tomllib

from pydantic import ValidationError

from hypa.errors import ConfigError

from .models import HypaConfigModel

HypaConfig = HypaConfigModel


def load_config(config_path: Path | None = None) -> HypaConfig:
    """
    Loads and validates the configuration from a TOML file.

    Args:
        config_path: Path to the configuration file, or None for defaults.

    Returns:
        A validated HypaConfig object.

    Raises:
        ConfigError: If the file does not exist, is not valid TOML, or
            contains unknown or invalid fields.
    """
    if config_path is None:
        return HypaConfig()

    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    try:
        return HypaConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}:\n{e}") from e
