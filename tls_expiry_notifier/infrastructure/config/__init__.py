"""Application configuration."""

from .settings import Settings, build_parser, load_settings

__all__ = [
    "Settings",
    "build_parser",
    "load_settings",
]
