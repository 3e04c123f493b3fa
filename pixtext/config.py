# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Render configuration

RenderConfig is passed explicitly to the pipeline and renderer. Values
can come from a plain key=value configuration file; command-line flags
override them.

Example configuration file:

    # pixtext.cfg
    width = 120
    height = 50
    color = true
    characters =  .:-=+*#%@

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Dict, Any, Mapping, Union

from pixtext.exceptions import ConfigError
from pixtext.renderer import DEFAULT_RAMP, CharacterRamp

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 40

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off'}


@dataclass(frozen=True)
class RenderConfig:
    """Options for one image-to-text conversion."""
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    color: bool = False
    ramp: CharacterRamp = field(default=DEFAULT_RAMP)
    apply_mirroring: bool = False
    quiet: bool = False

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Output size must be positive, got {self.width}x{self.height}")

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> 'RenderConfig':
        """
        Build a configuration from string or typed option values.

        Args:
            options: Mapping of option names to values; 'characters' sets the ramp

        Returns:
            RenderConfig with defaults for missing options

        Raises:
            ConfigError: If an option is unknown or its value is invalid
        """
        return cls().with_options(options)

    def with_options(self, options: Mapping[str, Any]) -> 'RenderConfig':
        """Return a copy with the given options applied."""
        known = {f.name for f in fields(self)}
        changes: Dict[str, Any] = {}
        for key, value in options.items():
            if value is None:
                continue
            if key == 'ramp' and isinstance(value, CharacterRamp):
                changes['ramp'] = value
            elif key in ('characters', 'ramp'):
                if not str(value):
                    raise ConfigError(f"Option '{key}' must not be empty")
                changes['ramp'] = CharacterRamp(str(value))
            elif key in ('width', 'height'):
                changes[key] = _parse_int(key, value)
            elif key in ('color', 'apply_mirroring', 'quiet'):
                changes[key] = _parse_bool(key, value)
            elif key not in known:
                raise ConfigError(f"Unknown configuration option: {key}")
            else:
                changes[key] = value
        return replace(self, **changes)


def _parse_int(key: str, value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Option '{key}' must be an integer, got {value!r}")


def _parse_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigError(f"Option '{key}' must be true or false, got {value!r}")


def load_config_file(config_path: Union[str, Path]) -> Dict[str, str]:
    """
    Read a key=value configuration file.

    Blank lines and lines starting with '#' are ignored. Keys are
    stripped; for 'characters' only the line ending is removed from the
    value so a leading space (the darkest character) is kept.

    Args:
        config_path: Path to the configuration file

    Returns:
        Dictionary of raw option strings

    Raises:
        ConfigError: If the file cannot be read or a line has no '='
    """
    options: Dict[str, str] = {}
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e.strerror or e}")

    for line_number, line in enumerate(lines, 1):
        stripped = line.strip()
        if not stripped or stripped.startswith('#'):
            continue
        if '=' not in line:
            raise ConfigError(f"{config_path}:{line_number}: expected key=value")
        key, value = line.split('=', 1)
        key = key.strip()
        if key == 'characters':
            # One separator space after '=' is allowed
            options[key] = value[1:] if value.startswith(' ') else value
        else:
            options[key] = value.strip()
    return options
