"""
Reading and writing buffer contents to disk.
"""

import logging
import os

from .buffer import ByteBuffer
from .errors import SaveError

logger = logging.getLogger(__name__)


def load_file(filename: str) -> ByteBuffer:
    """
    Load a file into a new buffer.

    A file that does not exist yet gives an empty buffer, so a new file
    can be created by editing and saving. Other read errors propagate.

    Args:
        filename: Path of the file to read

    Returns:
        ByteBuffer: Buffer holding the file contents
    """

    try:
        with open(filename, 'rb') as f:
            data = f.read()
    except FileNotFoundError:
        logger.info("%s does not exist, starting with an empty buffer", filename)
        return ByteBuffer()

    logger.info("Loaded %s (%d bytes)", filename, len(data))
    return ByteBuffer(data)


def save_file(filename: str, buffer: ByteBuffer) -> None:
    """
    Write the buffer to ``filename``, replacing its contents.

    Raises:
        SaveError: If the file could not be written
    """

    try:
        with open(filename, 'wb') as f:
            f.write(buffer.to_bytes())
    except OSError as e:
        logger.error("Failed to save %s: %s", filename, e)
        raise SaveError(filename, e.strerror or str(e)) from e

    logger.info("Saved %s (%d bytes)", filename, len(buffer))


def file_exists(filename: str) -> bool:
    return os.path.exists(filename)
