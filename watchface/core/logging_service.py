"""
Logging Service - stdout handler and level for the ``watchface`` logger tree
"""
import sys
import logging
from typing import Any, Dict, List, Optional


LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
BANNER_RULE = '=' * 60


class LoggingService:
    """
    Owns the handler of the top-level ``watchface`` logger.

    Modules log through ``logging.getLogger(__name__)``; their records
    reach this handler by propagation. The service only decides the
    destination, the format and the level.
    """

    def __init__(self, name: str = 'watchface', level: str = 'INFO'):
        self._logger = logging.getLogger(name)
        self._handler = logging.StreamHandler(sys.stdout)
        self._handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

        self._logger.handlers.clear()
        self._logger.addHandler(self._handler)
        self._logger.propagate = False
        self.set_level(level)

    def set_level(self, level: str) -> None:
        """
        Change logging level of the logger and its handler.

        Args:
            level: Level name; unknown names fall back to INFO
        """
        log_level = logging.getLevelName(str(level).upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO
        self._logger.setLevel(log_level)
        self._handler.setLevel(log_level)

    def log_startup(self, version: str, config: Dict[str, Any]) -> None:
        """Banner with the face settings in effect"""
        face = config.get('face', {})
        display = config.get('display', {})
        self._banner([
            f"Watch face v{version} starting up",
            f"Python: {sys.version.split()[0]}",
            f"Timezone: {config.get('timezone', 'local')}",
            f"Surface: {display.get('width', 0)}x{display.get('height', 0)}",
            f"Burn-in offset: +/-{face.get('burn_in_max_offset', 15)}px",
            f"Silent mode: {'enabled' if face.get('silent_mode_enabled') else 'disabled'}",
            f"Image background: {'enabled' if face.get('image_background') else 'disabled'}",
        ])

    def log_shutdown(self) -> None:
        self._banner(["Watch face shutting down"])

    def _banner(self, lines: List[str]) -> None:
        for line in [BANNER_RULE, *lines, BANNER_RULE]:
            self._logger.info(line)

    @property
    def logger(self) -> logging.Logger:
        """Get underlying logger instance"""
        return self._logger


# Global singleton instance
_logging_service: Optional[LoggingService] = None


def get_logger(name: str = 'watchface', level: str = 'INFO') -> LoggingService:
    """
    Get or create logging service singleton.

    Args:
        name: Logger name
        level: Log level

    Returns:
        LoggingService instance
    """
    global _logging_service
    if _logging_service is None:
        _logging_service = LoggingService(name, level)
    return _logging_service
