"""
Settings - environment-driven configuration for the sound conversion tools
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


ENV_DEBUG = "HVAC_SOUND_DEBUG"
ENV_DEBUG_LEVEL = "HVAC_SOUND_DEBUG_LEVEL"
ENV_DEBUG_FILE = "HVAC_SOUND_DEBUG_FILE"
ENV_PRECISION = "HVAC_SOUND_PRECISION"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Resolved configuration values"""
    debug_enabled: bool = False
    debug_level: str = "INFO"
    debug_file: Optional[str] = None
    display_precision: int = 1

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """
        Read settings from environment variables

        Unparseable values fall back to the defaults.
        """
        env = os.environ if environ is None else environ

        debug_enabled = str(env.get(ENV_DEBUG, "")).strip().lower() in _TRUE_VALUES
        debug_level = str(env.get(ENV_DEBUG_LEVEL, "INFO")).strip().upper() or "INFO"
        debug_file = env.get(ENV_DEBUG_FILE) or None

        try:
            precision = int(env.get(ENV_PRECISION, 1))
        except (TypeError, ValueError):
            precision = 1
        precision = max(0, precision)

        return cls(
            debug_enabled=debug_enabled,
            debug_level=debug_level,
            debug_file=debug_file,
            display_precision=precision,
        )


# Global instance
_settings = None


def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings.from_environment()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the environment is read again"""
    global _settings
    _settings = None
