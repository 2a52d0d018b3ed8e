"""
Main entry point for the watch face
"""
import sys
import signal

from watchface.core.config_service import config
from watchface.core.clock_service import ClockService
from watchface.core.logging_service import get_logger
from watchface.engine.engine import WatchFaceEngine
from watchface.engine.state import FaceConfig
from watchface.hardware.actuators import ActuatorDispatcher
from watchface.hardware.audio import ToneGenerator
from watchface.hardware.battery import BatteryMonitor
from watchface.hardware.haptics import Haptics
from watchface.hardware.notifications import NotificationVolume
from watchface.ui.background import BackgroundImage
from watchface.ui.fonts import FontBook
from watchface.ui.main_window import MainWindow


class Application:
    """
    Main application orchestrator.
    """

    def __init__(self):
        """Initialize application"""
        config.reload()

        log_level = config.get('logging.level', 'INFO')
        self._logging = get_logger('watchface', log_level)
        self._logger = self._logging.logger

        version = config.get('app.version', '1.0.0')
        self._logging.log_startup(version, self._get_config_summary())

        self._clock_service = None
        self._engine = None
        self._dispatcher = None
        self._tones = None
        self._main_window = None

    def _get_config_summary(self) -> dict:
        """Get configuration summary for logging"""
        return {
            'timezone': config.get('timezone', 'local'),
            'display': {
                'width': config.get('display.width', 454),
                'height': config.get('display.height', 454),
            },
            'face': {
                **config.get('face', {}),
                'burn_in_max_offset': FaceConfig.from_config(config).burn_in_max_offset,
            },
        }

    def _initialize_services(self) -> None:
        """Initialize clock, engine and actuators"""
        self._logger.info("Initializing services")

        timezone = config.get('timezone', 'local')
        self._clock_service = ClockService(timezone)
        self._logger.info(f"Clock service initialized: timezone={self._clock_service.timezone}")

        face_config = FaceConfig.from_config(config)
        self._engine = WatchFaceEngine(
            face_config,
            measurer=FontBook(),
            to_local=self._clock_service.to_local,
            battery_provider=BatteryMonitor(),
        )
        self._logger.info("Watch face engine initialized")

        self._tones = ToneGenerator()
        self._dispatcher = ActuatorDispatcher(
            haptics=Haptics(config.get('haptics.backend', 'log'), self._tones),
            tones=self._tones,
            notifications=NotificationVolume(config.get('notifications.mixer_control', 'Master')),
        )

    def _initialize_ui(self) -> None:
        """Initialize host window"""
        self._logger.info("Initializing UI")

        background = None
        if config.get('face.image_background', False):
            background = BackgroundImage(config.get('face.background_image', ''))
            if not background.load():
                background = None

        self._main_window = MainWindow(
            engine=self._engine,
            clock_service=self._clock_service,
            dispatcher=self._dispatcher,
            config=config,
            background=background,
            width=config.get('display.width', 454),
            height=config.get('display.height', 454),
            fullscreen=config.get('display.fullscreen', False),
        )

        self._main_window.initialize()
        self._logger.info("UI initialized successfully")

    def _setup_signal_handlers(self) -> None:
        """Setup signal handlers for graceful shutdown"""
        def signal_handler(signum, frame):
            self._logger.info(f"Received signal {signum}, shutting down")
            self.shutdown()
            sys.exit(0)

        signal.signal(signal.SIGINT, signal_handler)
        signal.signal(signal.SIGTERM, signal_handler)

    def run(self) -> None:
        """Run the application"""
        try:
            self._setup_signal_handlers()
            self._initialize_services()
            self._initialize_ui()

            self._logger.info("Application started successfully")

            # Blocks until the window closes
            self._main_window.start()

        except KeyboardInterrupt:
            self._logger.info("Keyboard interrupt received")
        except Exception as e:
            self._logger.critical(f"Fatal error: {e}", exc_info=True)
            raise
        finally:
            self.shutdown()

    def shutdown(self) -> None:
        """Cleanup and shutdown"""
        self._logger.info("Shutting down application")

        if self._main_window and self._main_window.is_running():
            self._main_window.stop()

        if self._tones:
            self._tones.close()
            self._tones = None

        self._logging.log_shutdown()


def main():
    """Main entry point"""
    app = Application()
    app.run()


if __name__ == '__main__':
    main()
