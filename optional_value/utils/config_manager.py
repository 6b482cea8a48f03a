"""
Configuration Manager for the optional-value package.

Logging and debug settings come from defaults, ``OPTIONAL_VALUE_*``
environment variables, or a JSON file shaped like ``to_dict()``::

    {"logging": {"log_level": "DEBUG"}, "debug": {"module_debug": {"optional": true}}}

Nothing in the container depends on this module; only ``logging_utils``
reads it.
"""

import os
import json
from typing import Dict, Any, Union, Mapping
from pathlib import Path
from dataclasses import dataclass, field, fields, asdict

from optional_value.utils.error_manager import ConfigurationError, ErrorCode

ENV_PREFIX = "OPTIONAL_VALUE_"
DEBUG_ENV = f"{ENV_PREFIX}DEBUG"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_flag(text: str) -> bool:
    return text.strip().lower() in ("true", "1", "yes")


def _coerce(current: Any, raw: str, source: str) -> Any:
    """Convert an environment string to the type of the field's current value."""
    if isinstance(current, bool):
        return _parse_flag(raw)
    try:
        return type(current)(raw)
    except ValueError as e:
        raise ConfigurationError(f"Invalid value for {source}: {raw!r}", cause=e) from e


@dataclass
class LoggingConfig:
    """Configuration settings for logging."""

    log_level: str = "WARNING"
    console_logging: bool = True
    enable_file_logging: bool = False
    log_dir: str = field(default_factory=lambda: os.path.join(os.getcwd(), "logs"))

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Normalize the log level and create log_dir if file logging is on."""
        if not isinstance(self.log_level, str) or self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level: {self.log_level!r}. Must be one of {list(VALID_LOG_LEVELS)}",
                field="log_level",
            )
        self.log_level = self.log_level.upper()

        if self.enable_file_logging:
            os.makedirs(self.log_dir, exist_ok=True)


@dataclass
class DebugConfig:
    """Configuration settings for debugging."""

    global_debug: bool = False
    module_debug: Dict[str, bool] = field(default_factory=dict)

    def is_debug_enabled(self, module_name: str) -> bool:
        """
        Resolve debug mode for a module.

        Precedence: OPTIONAL_VALUE_DEBUG_<MODULE> env var, then
        module_debug, then global_debug.
        """
        override = os.environ.get(f"{DEBUG_ENV}_{module_name.upper()}")
        if override is not None:
            return _parse_flag(override)
        return self.module_debug.get(module_name, self.global_debug)


def _update_section(section: Any, values: Any, section_name: str) -> None:
    """Copy known keys from a mapping onto a config section."""
    if not isinstance(values, Mapping):
        raise ConfigurationError(
            f"Section '{section_name}' must be an object, got {type(values).__name__}"
        )
    known = {f.name for f in fields(section)}
    for key in known.intersection(values):
        setattr(section, key, values[key])


@dataclass
class OptionalValueConfig:
    """
    Central configuration class for the optional-value package.
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)

    def validate(self) -> None:
        self.logging.validate()
        if not isinstance(self.debug.module_debug, dict):
            raise ConfigurationError("debug.module_debug must be an object")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> "OptionalValueConfig":
        """
        Build a configuration from environment variables.

        Logging fields are read from OPTIONAL_VALUE_LOGGING_<FIELD>, e.g.
        OPTIONAL_VALUE_LOGGING_LOG_LEVEL=DEBUG. OPTIONAL_VALUE_DEBUG sets the
        global debug flag and OPTIONAL_VALUE_DEBUG_<MODULE> a per-module one.
        """
        cfg = cls()

        for f in fields(cfg.logging):
            var = f"{ENV_PREFIX}LOGGING_{f.name.upper()}"
            if var in environ:
                current = getattr(cfg.logging, f.name)
                setattr(cfg.logging, f.name, _coerce(current, environ[var], var))

        if DEBUG_ENV in environ:
            cfg.debug.global_debug = _parse_flag(environ[DEBUG_ENV])

        module_prefix = f"{DEBUG_ENV}_"
        cfg.debug.module_debug.update(
            (name[len(module_prefix):].lower(), _parse_flag(value))
            for name, value in environ.items()
            if name.startswith(module_prefix)
        )

        cfg.validate()
        return cfg

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "OptionalValueConfig":
        """
        Load configuration from a JSON file.

        Unknown sections and keys are ignored. Any unreadable or malformed
        file raises ConfigurationError.
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {file_path}",
                code=ErrorCode.CONFIG_MISSING,
            )

        try:
            data = json.loads(file_path.read_text())
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Could not read configuration file {file_path}: {e}", cause=e
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration root must be an object, got {type(data).__name__}"
            )

        cfg = cls()
        for section_name in (f.name for f in fields(cfg)):
            if section_name in data:
                _update_section(getattr(cfg, section_name), data[section_name], section_name)

        cfg.validate()
        return cfg

    def to_dict(self) -> Dict[str, Any]:
        """Nested dict of all sections, the same shape from_file accepts."""
        return asdict(self)

    def save_to_file(self, file_path: Union[str, Path]) -> None:
        """Write the configuration as indented JSON, creating parent directories."""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(json.dumps(self.to_dict(), indent=2))

    def get_debug_mode(self, module_name: str) -> bool:
        """Get debug mode for a specific module."""
        return self.debug.is_debug_enabled(module_name)


# Global configuration instance
config = OptionalValueConfig.from_env()


def get_debug_mode(module_name: str) -> bool:
    """Get debug mode for a specific module from the global configuration."""
    return config.get_debug_mode(module_name)
