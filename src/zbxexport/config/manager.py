"""Settings loading for zbxexport."""

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..api.exceptions import ConfigError
from ..models.config import Settings


def load_settings(env_file: Path | None = None, **overrides: Any) -> Settings:
    """Load settings from the environment and an env file.

    Process environment variables take precedence over the env file. When
    ``env_file`` is None the default ``.env`` is read if present.

    Args:
        env_file: Explicit env file, which must exist
        **overrides: Field values replacing the loaded ones; None values are ignored

    Returns:
        Loaded settings

    Raises:
        ConfigError: If the env file is missing or a value is invalid
    """
    if env_file is not None and not env_file.is_file():
        raise ConfigError(f"Environment file not found at {env_file}")

    try:
        if env_file is None:
            settings = Settings()
        else:
            settings = Settings(_env_file=env_file)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}")

    updates = {k: v for k, v in overrides.items() if v is not None}
    unknown = set(updates) - set(Settings.model_fields)
    if unknown:
        raise ConfigError(f"Unknown settings: {', '.join(sorted(unknown))}")
    if updates:
        settings = settings.model_copy(update=updates)
    return settings
