"""
Image set shown on the members page.
"""
import logging
import random
from pathlib import Path
from typing import Optional

from portal.core.errors import GalleryError

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".gif", ".svg", ".webp"}


class ImageGallery:
    """
    Directory of images with a cached listing.

    The listing is re-read only when the directory's mtime changes, which
    happens whenever a file is added, removed, or renamed.
    """

    def __init__(self, directory: Path, rng: Optional[random.Random] = None):
        self.directory = Path(directory)
        self._rng = rng or random.Random()
        self._cached_mtime: Optional[float] = None
        self._cached_images: list[str] = []

    def list_images(self) -> list[str]:
        """
        Return image file names in the gallery, sorted.

        Raises:
            GalleryError: If the directory cannot be read
        """
        try:
            mtime = self.directory.stat().st_mtime
            if mtime != self._cached_mtime:
                self._cached_images = sorted(
                    entry.name
                    for entry in self.directory.iterdir()
                    if entry.is_file()
                    and not entry.name.startswith(".")
                    and entry.suffix.lower() in IMAGE_SUFFIXES
                )
                self._cached_mtime = mtime
                logger.debug("Gallery listing refreshed: %d images", len(self._cached_images))
        except OSError as e:
            raise GalleryError(f"Cannot read image directory {self.directory}: {e}") from e
        return list(self._cached_images)

    def choose(self) -> str:
        """
        Pick one image uniformly at random.

        Raises:
            GalleryError: If the gallery is empty or unreadable
        """
        images = self.list_images()
        if not images:
            raise GalleryError(f"No images found in {self.directory}")
        return self._rng.choice(images)
