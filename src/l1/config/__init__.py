"""Configuration package."""

from l1.config.settings import L1Settings, load_settings

__all__ = [
    "L1Settings",
    "load_settings",
]
