"""Content-addressed image storage"""

import hashlib
import io
import shutil
from pathlib import Path
from typing import BinaryIO, Union

from ..utils.errors import ImageNotFound, InvalidImageName, StorageError
from ..utils.logging import get_logger
from ..utils.metrics import record_image_fallback, record_image_stored

logger = get_logger(__name__)

IMAGE_SUFFIX = ".jpg"
CHUNK_SIZE = 1024 * 1024


def image_filename(data: bytes) -> str:
    """Name under which ``data`` is stored: lowercase sha256 hex plus .jpg"""
    return hashlib.sha256(data).hexdigest() + IMAGE_SUFFIX


class ImageStore:
    """
    Directory of images keyed by the SHA-256 of their bytes

    Bytes are written verbatim whatever their actual format, so identical
    uploads always land on the same path. Files are never deleted.
    """

    def __init__(self, image_dir: Union[str, Path], default_image: str = "default.jpg"):
        self.image_dir = Path(image_dir)
        self.default_image = default_image

    def save(self, data: bytes) -> str:
        """
        Store raw bytes

        Args:
            data: Image content

        Returns:
            Generated filename (relative to the image directory)
        """
        return self.save_file(io.BytesIO(data))

    def save_file(self, fileobj: BinaryIO) -> str:
        """
        Hash a seekable file object in chunks, then copy it into the store

        Args:
            fileobj: Binary file object, e.g. an uploaded file

        Returns:
            Generated filename (relative to the image directory)

        Raises:
            StorageError: If the directory or file cannot be written
        """
        try:
            fileobj.seek(0)
            hasher = hashlib.sha256()
            for chunk in iter(lambda: fileobj.read(CHUNK_SIZE), b""):
                hasher.update(chunk)
            filename = hasher.hexdigest() + IMAGE_SUFFIX

            self.image_dir.mkdir(parents=True, exist_ok=True)
            fileobj.seek(0)
            with open(self.image_dir / filename, "wb") as out:
                shutil.copyfileobj(fileobj, out, CHUNK_SIZE)
        except OSError as e:
            raise StorageError(str(e)) from e

        logger.info("Image stored", image_name=filename)
        record_image_stored()
        return filename

    def resolve(self, name: str) -> Path:
        """
        Map a requested image name to a file on disk

        Missing images fall back to the default image.

        Raises:
            InvalidImageName: If the name does not end in .jpg or escapes the directory
            ImageNotFound: If neither the image nor the default image exists
        """
        if not name.endswith(IMAGE_SUFFIX):
            raise InvalidImageName("Image path does not end with .jpg")

        root = self.image_dir.resolve()
        path = (root / name).resolve()
        if root not in path.parents:
            raise InvalidImageName("Image path is outside the image directory")

        if not path.is_file():
            logger.debug("Image not found, serving default", image_name=name)
            record_image_fallback()
            path = root / self.default_image
            if not path.is_file():
                raise ImageNotFound("Image not found")

        return path
