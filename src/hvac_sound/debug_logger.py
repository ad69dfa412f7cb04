"""
Debug logging framework for sound conversions
Centralizes and standardizes debug output across the conversion engine
"""

import json
import logging
from typing import Any, Dict, Optional

from .settings import get_settings


class SoundDebugLogger:
    """Centralized debug logger for the sound conversion engine"""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.configure()
            SoundDebugLogger._initialized = True

    def configure(self):
        """(Re)initialize the logging configuration from settings"""
        settings = get_settings()
        self.debug_enabled = settings.debug_enabled

        self.logger = logging.getLogger('hvac_sound')
        self.logger.setLevel(getattr(logging, settings.debug_level, logging.INFO))
        self.logger.propagate = False

        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        # Only add handlers if debug is enabled
        if self.debug_enabled:
            formatter = logging.Formatter(
                '%(asctime)s [SOUND-%(levelname)s] %(component)s: %(message)s',
                datefmt='%H:%M:%S'
            )
            console_handler = logging.StreamHandler()
            console_handler.setLevel(logging.DEBUG)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

            if settings.debug_file:
                file_handler = logging.FileHandler(settings.debug_file)
                file_handler.setLevel(logging.DEBUG)
                file_handler.setFormatter(formatter)
                self.logger.addHandler(file_handler)

    def debug(self, component: str, message: str, data: Optional[Dict[str, Any]] = None):
        """Log debug message with component context"""
        self._log(logging.DEBUG, component, message, data)

    def info(self, component: str, message: str, data: Optional[Dict[str, Any]] = None):
        """Log info message with component context"""
        self._log(logging.INFO, component, message, data)

    def warning(self, component: str, message: str, data: Optional[Dict[str, Any]] = None):
        """Log warning message with component context"""
        self._log(logging.WARNING, component, message, data)

    def error(self, component: str, message: str, error: Optional[Exception] = None,
              data: Optional[Dict[str, Any]] = None):
        """Log error message with component context"""
        if error:
            message = f"{message} Error: {error}"
        self._log(logging.ERROR, component, message, data)

    def _log(self, level: int, component: str, message: str, data: Optional[Dict[str, Any]]):
        if not self.debug_enabled:
            return
        if data:
            message = f"{message} {self._format_debug_data(data)}"
        self.logger.log(level, message, extra={'component': component})

    def _format_debug_data(self, data: Dict[str, Any]) -> str:
        """Format debug data for logging"""
        formatted = {}
        for key, value in data.items():
            if key in ('spectrum', 'octave_bands', 'curve'):
                if hasattr(value, 'to_list'):
                    value = value.to_list()
                if isinstance(value, (list, tuple)) and len(value) == 8:
                    formatted[key] = [f"{float(v):.1f}" for v in value]
                else:
                    formatted[key] = value
            elif key.endswith('dba') and isinstance(value, (int, float)):
                formatted[key] = f"{float(value):.1f}dBA"
            elif key == 'nc' and value is not None:
                formatted[key] = int(value)
            elif hasattr(value, 'value') and not isinstance(value, (int, float, str)):
                # Enum members
                formatted[key] = value.value
            else:
                formatted[key] = value
        return json.dumps(formatted, separators=(',', ':'), default=str)


# Global logger instance
debug_logger = SoundDebugLogger()
