"""
Battery provider - host battery level via psutil
"""
import logging
from typing import Optional

import psutil


logger = logging.getLogger(__name__)


class BatteryMonitor:
    """
    Reads the host battery percentage.
    """

    def __init__(self):
        self._warned = False

    def percentage(self) -> Optional[int]:
        """
        Returns:
            Battery level 0..100, or None when the host has no battery
        """
        battery = psutil.sensors_battery()
        if battery is None:
            if not self._warned:
                logger.warning("No battery reported by the host")
                self._warned = True
            return None
        return int(round(battery.percent))

    __call__ = percentage
