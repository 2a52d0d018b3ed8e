"""
Clock Service - Time source and timezone handling
Converts epoch milliseconds into local wall-clock time for the face
"""
import time
import logging
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


logger = logging.getLogger(__name__)

LOCAL_TIMEZONE = 'local'


class ClockService:
    """
    Centralized clock/time service with timezone support.
    """

    def __init__(self, timezone: str = LOCAL_TIMEZONE):
        """
        Initialize clock service with timezone.

        Args:
            timezone: IANA timezone string (e.g., 'Europe/London') or 'local'
                to follow the host's zone
        """
        self._requested = timezone
        self._timezone = timezone
        self._tz_obj: Optional[ZoneInfo] = None
        self._load_timezone()

    def _load_timezone(self) -> None:
        """Load timezone object, fallback to the host zone on error"""
        if self._timezone == LOCAL_TIMEZONE:
            self._tz_obj = None
            return
        try:
            self._tz_obj = ZoneInfo(self._timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            logger.warning(f"Invalid timezone '{self._timezone}', using local: {e}")
            self._timezone = LOCAL_TIMEZONE
            self._tz_obj = None

    def set_timezone(self, timezone: str) -> bool:
        """
        Change timezone dynamically.

        Args:
            timezone: IANA timezone string or 'local'

        Returns:
            True if the zone changed, False otherwise
        """
        # Compare with the last request so a bad zone warns only once
        if timezone == self._requested:
            return False
        self._requested = timezone
        old_tz = self._timezone
        self._timezone = timezone
        self._load_timezone()
        if self._timezone != old_tz:
            logger.info(f"Timezone changed: {old_tz} -> {self._timezone}")
            return True
        return False

    def now_ms(self) -> int:
        """Current wall-clock time as epoch milliseconds"""
        return int(time.time() * 1000)

    def to_local(self, now_ms: int) -> datetime:
        """
        Convert epoch milliseconds to an aware datetime in the configured zone.

        Args:
            now_ms: Epoch milliseconds

        Returns:
            Timezone-aware datetime object
        """
        if self._tz_obj is None:
            return datetime.fromtimestamp(now_ms / 1000.0).astimezone()
        return datetime.fromtimestamp(now_ms / 1000.0, self._tz_obj)

    @property
    def timezone(self) -> str:
        """Get current timezone string"""
        return self._timezone
