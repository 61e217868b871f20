"""YAML configuration loader with environment variable overrides.

Configuration is layered, later layers winning:

  1. ``config/config.yaml`` -- static defaults checked into the repo
  2. ``.env`` file          -- local overrides (not committed)
  3. Environment variables  -- set at deploy time

``load_config`` reads the YAML file and deep-merges the values resolved by
:class:`Settings` on top of it.
"""

from pathlib import Path

import yaml

from moviemonster.config.settings import Settings
from moviemonster.utils.errors import ConfigurationError


def load_config(path: str = "config/config.yaml", settings: Settings | None = None) -> dict:
    """Load YAML config and merge with environment-based Settings.

    Args:
        path: Path to the YAML configuration file.  A missing file is
            treated as empty.
        settings: Resolved settings to merge in.  Built from the
            environment when omitted.

    Returns:
        Fully resolved configuration dictionary.

    Raises:
        ConfigurationError: If the file exists but is not a YAML mapping.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path) as f:
            try:
                yaml_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ConfigurationError(f"Cannot parse {config_path}: {exc}") from exc
        if not isinstance(yaml_config, dict):
            raise ConfigurationError(f"{config_path} must contain a mapping")
    else:
        yaml_config = {}

    settings = settings or Settings()
    env_overrides = {
        "app": {
            "host": settings.app_host,
            "port": settings.app_port,
            "env": settings.app_env,
        },
        "metadata": {
            "url_prefix": settings.metadata_url_prefix,
            "url_suffix": settings.metadata_url_suffix,
        },
        "poster": {
            "url_prefix": settings.image_url_prefix,
            "directory": settings.poster_dir,
        },
        "logging": {
            "level": settings.log_level,
        },
    }

    _deep_merge(yaml_config, env_overrides)
    return yaml_config


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place."""
    for key, value in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
