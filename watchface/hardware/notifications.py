"""
Notifications - mute control for the host notification channel
"""
import logging
import subprocess
from threading import Thread


logger = logging.getLogger(__name__)


class NotificationVolume:
    """
    Mutes or unmutes an ALSA mixer control with ``amixer``.

    The mixer call runs on a daemon thread so the caller never waits on
    the child process; failures are logged there.
    """

    def __init__(self, mixer_control: str = 'Master'):
        self._control = mixer_control
        self._muted = False

    def set_muted(self, muted: bool) -> Thread:
        """
        Start the mixer change in the background.

        Args:
            muted: True to mute, False to unmute

        Returns:
            The worker thread running amixer
        """
        worker = Thread(target=self._run_amixer, args=(muted,), daemon=True)
        worker.start()
        return worker

    def _run_amixer(self, muted: bool) -> None:
        try:
            result = subprocess.run(
                ['amixer', '-q', 'set', self._control, 'mute' if muted else 'unmute'],
                capture_output=True,
                text=True,
                timeout=2
            )
        except (subprocess.SubprocessError, OSError) as e:
            logger.warning(f"amixer failed: {e}")
            return
        if result.returncode != 0:
            logger.warning(f"amixer failed: {result.stderr.strip() or f'exited {result.returncode}'}")
            return
        self._muted = muted
        logger.info(f"Notifications {'muted' if muted else 'unmuted'} ({self._control})")

    @property
    def muted(self) -> bool:
        return self._muted
