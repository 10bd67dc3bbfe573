"""
Configuration loader for YAML-based room configurations and theme catalogs.
"""

import yaml
from dataclasses import asdict, fields
from pathlib import Path
from typing import Optional

from ..core.themes import DEFAULT_CATALOG, ThemeCatalog
from .room_config import RoomConfig, default_config

INT_FIELDS = ("round_number", "impostor_count", "word_refresh", "pair_index")


def load_config_from_yaml(config_path: str) -> RoomConfig:
    """
    Load room configuration from a YAML file.
    
    Args:
        config_path: Path to the YAML configuration file
        
    Returns:
        RoomConfig instance with values from YAML file
        
    Raises:
        FileNotFoundError: If the config file doesn't exist
        yaml.YAMLError: If the YAML file is invalid
        ValueError: If the document or a field has the wrong shape
    """
    config_file = Path(config_path)
    
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    with open(config_file, 'r', encoding='utf-8') as f:
        config_dict = yaml.safe_load(f)
    
    if config_dict is None:
        return default_config()
    
    if not isinstance(config_dict, dict):
        raise ValueError(f"Config file must contain a mapping of settings: {config_path}")
    
    config = default_config()
    known = {f.name for f in fields(RoomConfig)}
    
    for key, value in config_dict.items():
        if key in known:
            setattr(config, key, value)
        else:
            # Warn about unknown keys but don't fail
            print(f"Warning: Unknown config key '{key}' in YAML file")
    
    roster = config.roster if config.roster is not None else []
    if not isinstance(roster, list):
        raise ValueError(f"'roster' must be a list of names in {config_path}")
    
    for key in INT_FIELDS:
        value = getattr(config, key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"'{key}' must be an integer in {config_path}, got {value!r}")
    
    config.seed = str(config.seed)
    config.roster = [str(name) for name in roster]
    return config


def load_config(config_path: Optional[str] = None) -> RoomConfig:
    """
    Load configuration from YAML file or return default.
    
    Args:
        config_path: Optional path to YAML config file. If None, returns default config.
        
    Returns:
        RoomConfig instance
    """
    if config_path is None:
        return default_config()
    
    return load_config_from_yaml(config_path)


def save_config_to_yaml(config: RoomConfig, config_path: str) -> None:
    """Persist room state so the admin can pick up where they left off."""
    with open(config_path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(asdict(config), f, sort_keys=False, allow_unicode=True)


def load_theme_catalog(themes_path: Optional[str] = None) -> ThemeCatalog:
    """
    Load a theme catalog from YAML, or the built-in catalog if no path is given.

    The file holds a list of ``{main: {label, words}, impostor: {label, words}}`` entries,
    optionally under a top-level ``pairs`` key.

    Raises:
        FileNotFoundError: If the themes file doesn't exist
        ValueError: If an entry is incomplete or a pair shares words
    """
    if themes_path is None:
        return DEFAULT_CATALOG
    
    themes_file = Path(themes_path)
    if not themes_file.exists():
        raise FileNotFoundError(f"Themes file not found: {themes_path}")
    
    with open(themes_file, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    
    if isinstance(data, dict):
        data = data.get("pairs")
    if not isinstance(data, list):
        raise ValueError(f"Themes file must contain a list of pairs: {themes_path}")
    
    try:
        return ThemeCatalog.from_dicts(data)
    except (KeyError, TypeError) as e:
        raise ValueError(f"Incomplete theme entry in {themes_path}: {e}") from e
