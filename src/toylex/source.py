"""
Source File Reading
===================

Reads a whole source file into memory before scanning starts. The
scanner itself never touches the filesystem.
"""

import logging
from pathlib import Path
from typing import Union

from toylex.errors import SourceReadError

logger = logging.getLogger(__name__)


def read_source(path: Union[str, Path]) -> tuple[bytes, int]:
    """
    Read an entire file as raw bytes.

    Args:
        path: The file to read

    Returns:
        (contents, length) where length is the number of bytes read

    Raises:
        SourceReadError: If the file cannot be opened or read
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SourceReadError(str(path), e.strerror or str(e)) from e

    logger.debug(f"Read {len(data)} bytes from {path}")
    return data, len(data)
