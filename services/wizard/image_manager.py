# -*- coding: utf-8 -*-
"""
Image upload manager for the Add Property wizard.

Keeps the locally selected image files in display order together with one
preview per file. A preview is a scaled PNG thumbnail written to a
session-owned temporary directory and addressed by a file:// URL. Each
preview is released (its thumbnail deleted) exactly once: when its image is
removed, or when the manager is released as a whole.
"""

import shutil
import tempfile
import uuid
import weakref
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QImage

from app.config import Config
from services.exceptions import WizardStateException
from utils.logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ImagePreview:
    """Displayable preview of one selected image file."""
    handle: str
    source: Path
    thumbnail_path: Optional[Path] = None
    error: Optional[str] = None

    @property
    def url(self) -> Optional[str]:
        if self.thumbnail_path is None:
            return None
        return self.thumbnail_path.as_uri()

    @property
    def is_available(self) -> bool:
        return self.thumbnail_path is not None


class ImageUploadManager:
    """
    Owns the selected image files and their previews.

    Usage:
        with ImageUploadManager() as images:
            images.add_images(["/photos/front.jpg", "/photos/kitchen.png"])
            images.remove_image(0)
        # every remaining preview is released here
    """

    def __init__(self, preview_dir: Optional[PathLike] = None,
                 thumbnail_size: int = None):
        parent = preview_dir if preview_dir is not None else Config.PREVIEW_DIR
        if parent is not None:
            Path(parent).mkdir(parents=True, exist_ok=True)
        self._session_dir = Path(tempfile.mkdtemp(prefix="listing-previews-", dir=parent))
        # Removes the session dir at garbage collection or interpreter exit
        # when release_all() is never called.
        self._finalizer = weakref.finalize(self, shutil.rmtree, str(self._session_dir), True)
        self._thumbnail_size = thumbnail_size or Config.PREVIEW_THUMBNAIL_SIZE
        self._files: List[Path] = []
        self._previews: List[ImagePreview] = []
        self._closed = False
        logger.debug(f"Preview session opened at {self._session_dir}")

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def files(self) -> Tuple[Path, ...]:
        return tuple(self._files)

    @property
    def previews(self) -> Tuple[ImagePreview, ...]:
        return tuple(self._previews)

    @property
    def session_dir(self) -> Path:
        return self._session_dir

    @property
    def is_closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        return len(self._files)

    # =========================================================================
    # Operations
    # =========================================================================

    def add_images(self, files: Iterable[PathLike]) -> List[ImagePreview]:
        """
        Append files in the given order and create one preview per file.

        A file that cannot be decoded is still appended; its preview carries
        an error instead of a thumbnail.

        Returns:
            The new previews, in the same order as files
        """
        self._ensure_open()
        added = []
        for file in files:
            path = Path(file)
            preview = self._create_preview(path)
            self._files.append(path)
            self._previews.append(preview)
            added.append(preview)

        if added:
            logger.info(f"Added {len(added)} image(s) (total {len(self._files)})")
        return added

    def remove_image(self, index: int) -> Path:
        """
        Remove the file and preview at index and release the preview.

        Raises:
            IndexError: index out of range
        """
        self._ensure_open()
        if not 0 <= index < len(self._files):
            raise IndexError(f"image index {index} out of range (0-{len(self._files) - 1})")

        path = self._files.pop(index)
        preview = self._previews.pop(index)
        self._release(preview)
        logger.info(f"Removed image {index}: {path.name} (total {len(self._files)})")
        return path

    def release_all(self):
        """Release every preview and delete the session directory."""
        if self._closed:
            return
        for preview in self._previews:
            self._release(preview)
        self._files.clear()
        self._previews.clear()
        self._finalizer()
        self._closed = True
        logger.debug(f"Preview session closed at {self._session_dir}")

    def __enter__(self) -> "ImageUploadManager":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release_all()
        return False

    # =========================================================================
    # Preview lifecycle
    # =========================================================================

    def _create_preview(self, path: Path) -> ImagePreview:
        handle = uuid.uuid4().hex
        image = QImage(str(path))
        if image.isNull():
            logger.warning(f"Cannot decode image {path}")
            return ImagePreview(handle=handle, source=path, error="Unsupported or unreadable image")

        size = self._thumbnail_size
        thumbnail = image.scaled(size, size, Qt.KeepAspectRatio, Qt.SmoothTransformation)
        thumbnail_path = self._session_dir / f"{handle}.png"
        if not thumbnail.save(str(thumbnail_path), "PNG"):
            logger.warning(f"Cannot write preview for {path}")
            return ImagePreview(handle=handle, source=path, error="Preview could not be generated")

        logger.debug(f"Preview {handle} created for {path.name}")
        return ImagePreview(handle=handle, source=path, thumbnail_path=thumbnail_path)

    def _release(self, preview: ImagePreview):
        if preview.thumbnail_path is None:
            return
        try:
            preview.thumbnail_path.unlink()
            logger.debug(f"Preview {preview.handle} released")
        except FileNotFoundError:
            logger.warning(f"Preview {preview.handle} was already gone")

    def _ensure_open(self):
        if self._closed:
            raise WizardStateException("Image upload manager has been released", state="released")
