"""Plain-text (P2) PGM writing for coordinate maps.

The maps are written as 16-bit grayscale images whose sample values are the
source coordinates. ffmpeg's remap filter reads them as-is.
"""

import numpy as np

# Largest grid the writer accepts
MAX_ROWS = 4500
MAX_COLS = 4500

MAXVAL = 65535


class PgmWriteError(OSError):
    """A map file could not be written. ``written`` is always 0."""

    def __init__(self, message, path, written=0):
        super().__init__(message)
        self.path = path
        self.written = written


def check_dimensions(rows, cols, path):
    """Raise PgmWriteError if a rows x cols map is too large to write."""
    if rows > MAX_ROWS or cols > MAX_COLS:
        raise PgmWriteError(
            f"row/col specifications larger than image array: {rows}x{cols} "
            f"(max {MAX_ROWS}x{MAX_COLS})",
            path,
        )


def write_pgm_ascii(path, image, rows, cols, comment=None):
    """Write ``image`` (rows x cols integers) to ``path`` as a P2 PGM.

    Returns the number of values written. Raises PgmWriteError if the
    dimensions exceed MAX_ROWS x MAX_COLS or the file cannot be opened;
    in both cases nothing is written.
    """
    check_dimensions(rows, cols, path)

    image = np.asarray(image)
    if image.shape != (rows, cols):
        raise ValueError(f"image shape {image.shape} does not match {rows}x{cols}")

    try:
        f = open(path, "w", encoding="ascii")
    except OSError as exc:
        raise PgmWriteError(f"file open failed: {path}: {exc.strerror}", path) from exc

    with f:
        f.write("P2\n")
        if comment is not None:
            f.write(f"# {comment} \n")
        f.write(f"{cols} {rows} \n")
        f.write(f"{MAXVAL}\n")
        np.savetxt(f, image, fmt="%d", delimiter=" ")
        f.write("\n")

    nwritten = image.size
    print(f"\nNumber of pixels total (from rows * cols): {rows * cols}")
    print(f"Number of pixels written in file {path}: {nwritten}\n")
    return nwritten
