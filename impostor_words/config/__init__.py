"""Room configuration module."""

from .room_config import RoomConfig, default_config, random_room_code
from .config_loader import load_config, load_config_from_yaml, save_config_to_yaml, load_theme_catalog

__all__ = [
    'RoomConfig',
    'default_config',
    'random_room_code',
    'load_config',
    'load_config_from_yaml',
    'save_config_to_yaml',
    'load_theme_catalog',
]
