"""
Configuration for the parse/simplify/draw pipeline.

Settings live in a dataclass; they can be loaded from and saved to a JSON file.
"""

import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, Union

from .logging_system import LogLevel, log_warning

# Each nesting level costs a few interpreter frames in the recursive
# evaluate/print/simplify passes; this keeps them well under the default
# recursion limit of 1000.
DEFAULT_MAX_DEPTH = 256


def validate_max_depth(max_depth: int) -> int:
    if not 1 <= max_depth <= DEFAULT_MAX_DEPTH:
        raise ValueError(f"max_depth must be between 1 and {DEFAULT_MAX_DEPTH}, got {max_depth}")
    return max_depth


@dataclass
class DrawerConfig:
    max_depth: int = DEFAULT_MAX_DEPTH
    max_x: float = 10.0
    max_y: float = 10.0
    samples: int = 600      # one sample per pixel column of a 600px window
    width: int = 600
    height: int = 600
    simplify: bool = True
    log_level: LogLevel = LogLevel.MODERATE

    def __post_init__(self):
        if isinstance(self.log_level, str):
            self.log_level = LogLevel.from_name(self.log_level)
        validate_max_depth(self.max_depth)
        if self.max_x <= 0 or self.max_y <= 0:
            raise ValueError("max_x and max_y must be positive")
        if self.samples < 2:
            raise ValueError(f"samples must be at least 2, got {self.samples}")

    @classmethod
    def from_dict(cls, settings: Dict[str, Any]) -> 'DrawerConfig':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(settings) - known)
        if unknown:
            log_warning(f"Ignoring unknown configuration keys: {', '.join(unknown)}")
        return cls(**{key: value for key, value in settings.items() if key in known})

    def to_dict(self) -> Dict[str, Any]:
        settings = asdict(self)
        settings['log_level'] = self.log_level.name
        return settings


def load_config(path: Union[str, Path]) -> DrawerConfig:
    """Load settings from a JSON file, falling back to defaults when it is missing or unreadable."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        log_warning(f"Using default configuration, could not read {path}: {e}")
        return DrawerConfig()

    if not isinstance(settings, dict):
        log_warning(f"Using default configuration, {path} does not hold a JSON object")
        return DrawerConfig()
    return DrawerConfig.from_dict(settings)


def save_config(config: DrawerConfig, path: Union[str, Path]) -> Path:
    path = Path(path)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(config.to_dict(), f, indent=4)
    return path
