import json
import logging
from enum import Enum
from typing import Any, Optional

from app.core.config import settings


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    SUCCESS = "SUCCESS"


class Colors:
    """ANSI color codes for console output"""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'

    BRIGHT_BLACK = '\033[90m'
    BRIGHT_RED = '\033[91m'
    BRIGHT_GREEN = '\033[92m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_CYAN = '\033[96m'
    WHITE = '\033[37m'


# SUCCESS is reported through the INFO channel of the stdlib logger
_STDLIB_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.SUCCESS: logging.INFO,
}


class ServiceLogger:
    """Colorized service logger for FitPlan with consistent formatting.

    Messages are emitted through the standard ``logging`` module under
    ``fitplan.<service>`` so handlers and levels configured for the app apply.
    """

    def __init__(self, service_name: str = "FITPLAN", enable_colors: Optional[bool] = None):
        self.service_name = service_name.upper()
        self.enable_colors = settings.LOG_COLORS if enable_colors is None else enable_colors
        self.logger = logging.getLogger(f"fitplan.{service_name.lower()}")

        self.level_colors = {
            LogLevel.DEBUG: Colors.BRIGHT_CYAN,
            LogLevel.INFO: Colors.BRIGHT_BLUE,
            LogLevel.WARNING: Colors.BRIGHT_YELLOW,
            LogLevel.ERROR: Colors.BRIGHT_RED,
            LogLevel.SUCCESS: Colors.BRIGHT_GREEN,
        }

        self.level_emojis = {
            LogLevel.DEBUG: "🔍",
            LogLevel.INFO: "ℹ️",
            LogLevel.WARNING: "⚠️",
            LogLevel.ERROR: "❌",
            LogLevel.SUCCESS: "✅",
        }

    def _colorize(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled"""
        if not self.enable_colors:
            return text
        return f"{color}{text}{Colors.RESET}"

    def _format_message(self, level: LogLevel, message: str, context: Optional[str] = None) -> str:
        """Format the log message with consistent structure"""
        emoji = self.level_emojis.get(level, "")
        level_color = self.level_colors.get(level, Colors.WHITE)

        # Format: 🔍 [SERVICE/CONTEXT] [DEBUG] Message
        level_text = self._colorize(f"[{level.value}]", level_color + Colors.BOLD)
        service_context = self.service_name
        if context:
            service_context += f"/{context.upper()}"
        service_text = self._colorize(f"[{service_context}]", Colors.BRIGHT_BLACK)

        return f"{emoji} {service_text} {level_text} {message}"

    @staticmethod
    def _format_value(value: Any) -> str:
        if isinstance(value, (dict, list)):
            value_str = json.dumps(value, indent=None, separators=(',', ':'), default=str)
            if len(value_str) > 100:
                return value_str[:100] + "..."
            return value_str
        return str(value)

    def _log(self, level: LogLevel, message: str, context: Optional[str] = None, **kwargs):
        """Internal logging method"""
        formatted_message = self._format_message(level, message, context)

        if kwargs:
            extras = ", ".join(f"{key}={self._format_value(value)}" for key, value in kwargs.items())
            formatted_message += self._colorize(f" | {extras}", Colors.DIM)

        self.logger.log(_STDLIB_LEVELS[level], formatted_message)

    def debug(self, message: str, context: Optional[str] = None, **kwargs):
        """Log debug message"""
        self._log(LogLevel.DEBUG, message, context, **kwargs)

    def info(self, message: str, context: Optional[str] = None, **kwargs):
        """Log info message"""
        self._log(LogLevel.INFO, message, context, **kwargs)

    def warning(self, message: str, context: Optional[str] = None, **kwargs):
        """Log warning message"""
        self._log(LogLevel.WARNING, message, context, **kwargs)

    def error(self, message: str, context: Optional[str] = None, **kwargs):
        """Log error message"""
        self._log(LogLevel.ERROR, message, context, **kwargs)

    def success(self, message: str, context: Optional[str] = None, **kwargs):
        """Log success message"""
        self._log(LogLevel.SUCCESS, message, context, **kwargs)


def configure_logging() -> None:
    """Set up the root handler once, honouring LOG_LEVEL."""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="[%(asctime)s] %(message)s",
        datefmt="%H:%M:%S",
    )


# Global logger instances for different services
plan_logger = ServiceLogger("PLAN")
profile_logger = ServiceLogger("PROFILE")
api_logger = ServiceLogger("API")
