"""
Fonts - TrueType loading and text measurement for the renderer
"""
import os
import logging
from typing import Dict, List, Optional, Protocol, Tuple

from PIL import ImageFont

from .theme import Theme


logger = logging.getLogger(__name__)

# Candidates per face font, first existing file wins
FONT_PATHS: Dict[str, List[str]] = {
    Theme.FONT_TIME: [
        '/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf',
        '/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf',
    ],
    Theme.FONT_DATE: [
        '/usr/share/fonts/truetype/dejavu/DejaVuSerif.ttf',
        '/usr/share/fonts/truetype/liberation/LiberationSerif-Regular.ttf',
        '/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf',
    ],
    Theme.FONT_BATTERY: [
        '/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf',
        '/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf',
    ],
}


class TextMeasurer(Protocol):
    def measure(self, text: str, size: int, font: str) -> Tuple[float, float]:
        """Return (advance width, bounds height) in pixels"""
        ...


class FontBook:
    """
    Measures text with Pillow, caching one ImageFont per (font, size).
    """

    def __init__(self, font_paths: Optional[Dict[str, List[str]]] = None):
        self._font_paths = font_paths or FONT_PATHS
        self._files: Dict[str, Optional[str]] = {}
        self._cache: Dict[Tuple[str, int], ImageFont.ImageFont] = {}

    def font_file(self, font: str) -> Optional[str]:
        """Resolve the TrueType file for a face font, None if none installed"""
        if font not in self._files:
            found = None
            for path in self._font_paths.get(font, []):
                if os.path.exists(path):
                    found = path
                    break
            if found:
                logger.info(f"Using TrueType font for {font}: {found}")
            else:
                logger.warning(f"No TrueType font for {font}, using default PIL font")
            self._files[font] = found
        return self._files[font]

    def get(self, font: str, size: int):
        key = (font, size)
        if key not in self._cache:
            path = self.font_file(font)
            try:
                if path:
                    self._cache[key] = ImageFont.truetype(path, size)
                else:
                    self._cache[key] = ImageFont.load_default(size)
            except OSError as e:
                logger.error(f"Failed to load font {path} at {size}px: {e}")
                self._cache[key] = ImageFont.load_default(size)
        return self._cache[key]

    def measure(self, text: str, size: int, font: str) -> Tuple[float, float]:
        pil_font = self.get(font, size)
        left, top, right, bottom = pil_font.getbbox(text)
        return (pil_font.getlength(text), bottom - top)
