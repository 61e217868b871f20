"""Configuration module: exports Settings and load_config."""

from moviemonster.config.loader import load_config
from moviemonster.config.settings import Settings

__all__ = ["Settings", "load_config"]
