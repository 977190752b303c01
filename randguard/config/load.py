"""
randguard.config.load

Config loading and saving.
"""

import yaml
from pathlib import Path
from typing import Union, Dict, Any

from .schema import GuardConfig
from ..core.exceptions import ConfigError


def load_config(path: Union[str, Path]) -> GuardConfig:
    """Load configuration from YAML file."""
    path = Path(path)
    
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")
    
    # Empty file
    if raw is None:
        raw = {}
    
    return config_from_dict(raw)


def config_from_dict(d: Dict[str, Any]) -> GuardConfig:
    """Create GuardConfig from dictionary.
    
    Accepts either a flat mapping or one nested under a "guards" key.
    """
    if not isinstance(d, dict):
        raise ConfigError(f"Config must be a mapping, got {type(d).__name__}")
    
    guards = d.get("guards", d)
    if not isinstance(guards, dict):
        raise ConfigError(f"'guards' must be a mapping, got {type(guards).__name__}")
    
    try:
        return GuardConfig(**guards)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config: {e}")


def save_config(config: GuardConfig, path: Union[str, Path]) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    
    d = config_to_dict(config)
    
    with open(path, "w") as f:
        yaml.dump(d, f, default_flow_style=False, sort_keys=False)


def config_to_dict(config: GuardConfig) -> Dict[str, Any]:
    """Convert GuardConfig to dictionary."""
    return {
        "guards": {
            "int_dtype": config.int_dtype,
            "float_dtype": config.float_dtype,
            "index_dtype": config.index_dtype,
        },
    }
