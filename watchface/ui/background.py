"""
Background - bitmap background scaled to the surface, with a grayscale copy
"""
import logging
from pathlib import Path
from typing import Optional

from PIL import Image, ImageOps


logger = logging.getLogger(__name__)


class BackgroundImage:
    """
    Holds the source bitmap plus its scaled color and ambient variants.
    """

    def __init__(self, path: str):
        self._path = Path(path) if path else None
        self._source: Optional[Image.Image] = None
        self._scaled: Optional[Image.Image] = None
        self._gray: Optional[Image.Image] = None

    def load(self) -> bool:
        """
        Returns:
            True if the bitmap is available
        """
        if self._path is None or not self._path.exists():
            logger.warning(f"Background image not found: {self._path}")
            return False
        try:
            with Image.open(self._path) as img:
                self._source = img.convert('RGB')
        except OSError as e:
            logger.error(f"Failed to load background {self._path}: {e}")
            return False
        logger.info(f"Background image loaded: {self._path} {self._source.size}")
        return True

    def resize(self, width: int) -> None:
        """Scale to the surface width, keeping the aspect ratio"""
        if self._source is None or width <= 0:
            return
        scale = width / float(self._source.width)
        size = (max(1, int(self._source.width * scale)), max(1, int(self._source.height * scale)))
        self._scaled = self._source.resize(size, Image.LANCZOS)
        # Saturation 0, kept as RGB for the same blit path
        self._gray = ImageOps.grayscale(self._scaled).convert('RGB')

    def variant(self, grayscale: bool) -> Optional[Image.Image]:
        return self._gray if grayscale else self._scaled
