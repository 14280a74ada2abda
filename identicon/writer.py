"""Persisting encoded images.

The file name is the raw input followed by ``.png``; it is not sanitized, so
an input containing path separators writes outside the target directory.
"""

import logging
import os
import uuid
from pathlib import Path
from typing import Optional, Union

log = logging.getLogger("identicon.writer")

PathLike = Union[str, "os.PathLike[str]"]


def output_path(name: str, directory: Optional[PathLike] = None) -> Path:
    """Return ``<directory>/<name>.png`` (``directory`` defaults to the CWD)."""
    base = Path(directory) if directory is not None else Path.cwd()
    return base / f"{name}.png"


def _temp_path(path: Path) -> Path:
    # Fixed-length name so it fits wherever the target name fits.
    return path.parent / f".identicon-{uuid.uuid4().hex[:12]}.tmp"


def save_image(
    image_bytes: bytes, name: str, directory: Optional[PathLike] = None
) -> Path:
    """Write ``image_bytes`` to ``<name>.png``, replacing any existing file.

    The bytes go to a temporary file in the destination directory which is
    then renamed over the target, so a failed write never leaves a truncated
    image behind. The file is created with mode ``0o666`` minus the umask,
    like a plain ``open(..., "wb")``.

    Raises:
        OSError: The destination cannot be written (missing directory,
            permissions, disk full). The error is not retried.
    """
    path = output_path(name, directory)
    tmp_path = _temp_path(path)
    fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o666)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(image_bytes)
        os.replace(tmp_path, path)
    except OSError:
        if tmp_path.exists():
            tmp_path.unlink()
        raise
    log.info("Wrote %s (%d bytes)", path, len(image_bytes))
    return path
