"""Read a source image's size from its header with Pillow."""

from PIL import Image, UnidentifiedImageError

from .config import ConfigurationError


def source_size(path):
    """Return ``(width, height)`` of the image at ``path``.

    Pillow opens images lazily, so only the header is read.
    """
    try:
        with Image.open(path) as img:
            return img.width, img.height
    except (OSError, UnidentifiedImageError) as exc:
        raise ConfigurationError(f"Cannot read source image {path}: {exc}") from exc
