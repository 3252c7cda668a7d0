"""Configuration settings for the numdisplay command line"""

import os
import logging
from typing import Optional, Tuple
try:
    from dotenv import load_dotenv, find_dotenv  # type: ignore
    # Load environment variables from a .env file if present
    _env_path = find_dotenv(usecwd=True)
    if _env_path:
        load_dotenv(_env_path)
except Exception:
    # dotenv is optional; environment can still be provided by the OS
    pass

from ..utils.constants import MAX_DECIMALS, ROUND_TRIP_DECIMALS_LIMIT
from .options import PRESETS, FormatOptions

logger = logging.getLogger(__name__)

DEFAULT_PRESET = "f64"
DEFAULT_MIN_DECIMALS = 0
DEFAULT_MAX_DECIMALS = 10
DEFAULT_LOG_LEVEL = "WARNING"

_WARNED_INVALID = False


def _env_int(name: str, default: int) -> Tuple[int, bool]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default, True
    try:
        return int(raw), True
    except ValueError:
        return default, False


class DisplayConfig:
    """Defaults for the command line, read from the environment"""

    def __init__(self):
        invalid = []
        self.preset_name = (os.getenv("NUMDISPLAY_PRESET") or DEFAULT_PRESET).strip().lower()
        if self.preset_name not in PRESETS:
            invalid.append(f"NUMDISPLAY_PRESET={self.preset_name!r}")
            self.preset_name = DEFAULT_PRESET
        self.min_decimals, ok = _env_int("NUMDISPLAY_MIN_DECIMALS", DEFAULT_MIN_DECIMALS)
        if not ok or self.min_decimals < 0:
            invalid.append("NUMDISPLAY_MIN_DECIMALS")
            self.min_decimals = DEFAULT_MIN_DECIMALS
        self.max_decimals, ok = _env_int("NUMDISPLAY_MAX_DECIMALS", DEFAULT_MAX_DECIMALS)
        if not ok or self.max_decimals < 0:
            invalid.append("NUMDISPLAY_MAX_DECIMALS")
            self.max_decimals = DEFAULT_MAX_DECIMALS
        self.log_level = (os.getenv("NUMDISPLAY_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            invalid.append(f"NUMDISPLAY_LOG_LEVEL={self.log_level!r}")
            self.log_level = DEFAULT_LOG_LEVEL
        self._warn_if_invalid(invalid)

    def _warn_if_invalid(self, invalid) -> None:
        """Warn once per process about settings that fell back to defaults."""
        global _WARNED_INVALID
        if not invalid or _WARNED_INVALID:
            return
        _WARNED_INVALID = True
        logger.warning("Ignoring invalid settings, using defaults: %s", ", ".join(invalid))

    def get_preset(self) -> FormatOptions:
        """Get the configured formatting preset"""
        return PRESETS[self.preset_name]

    def get_decimal_range(self) -> Tuple[int, int]:
        """Return the inclusive (min, max) decimal range for round-trip formatting.

        The maximum is kept below the round-trip search limit and the minimum
        never exceeds the maximum.
        """
        max_decimals = min(self.max_decimals, ROUND_TRIP_DECIMALS_LIMIT - 1, MAX_DECIMALS)
        return min(self.min_decimals, max_decimals), max_decimals

    def get_log_level(self) -> int:
        """Get the log level as a logging constant"""
        return logging.getLevelName(self.log_level)


def load_config(preset: Optional[str] = None) -> DisplayConfig:
    """Read a fresh configuration, optionally overriding the preset name."""
    conf = DisplayConfig()
    if preset is not None:
        if preset not in PRESETS:
            raise ValueError(f"Unknown preset {preset!r}; expected one of {sorted(PRESETS)}")
        conf.preset_name = preset
    return conf
