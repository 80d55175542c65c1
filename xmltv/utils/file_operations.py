"""
File operation utilities

Reading and writing XMLTV documents on disk, with transparent gzip support.
"""
import gzip
import logging
import os
import tempfile
from pathlib import Path


logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"


def read_document_bytes(file_path: Path | str) -> bytes:
    """
    Read a document, decompressing it when it is gzip-compressed

    Compression is detected from the file content, not its name.

    Args:
        file_path: Path to the document

    Returns:
        Raw XML bytes

    Raises:
        FileNotFoundError: If file doesn't exist
        OSError: If file can't be read or decompressed
    """
    file_path = Path(file_path)
    data = file_path.read_bytes()
    logger.debug(f"Read {len(data) / 1024:.1f} KB from {file_path}")

    if data[:2] == GZIP_MAGIC:
        data = gzip.decompress(data)
        logger.debug(f"Decompressed gzip content to {len(data) / 1024:.1f} KB")

    return data


def write_file_atomically(file_path: Path | str, data: bytes, compresslevel: int = 9) -> Path:
    """
    Write data next to the target and move it into place

    The file is gzip-compressed when its name ends in '.gz'. A reader never
    sees a partially written document.

    Args:
        file_path: Destination path
        data: Bytes to write
        compresslevel: gzip compression level (0-9)

    Returns:
        Destination path
    """
    file_path = Path(file_path)
    if file_path.suffix == ".gz":
        # mtime=0 keeps output reproducible
        data = gzip.compress(data, compresslevel=compresslevel, mtime=0)

    fd, temp_name = tempfile.mkstemp(dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp")
    temp_file = Path(temp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(temp_file, 0o644)
        os.replace(temp_file, file_path)
    except BaseException:
        cleanup_temp_file(temp_file)
        raise

    logger.debug(f"Wrote {len(data) / 1024:.1f} KB to {file_path}")
    return file_path


def cleanup_temp_file(file_path: Path) -> bool:
    """
    Remove a half-written document left behind by a failed atomic write

    Returns:
        True if the partial file was removed
    """
    if not file_path or not file_path.exists():
        return False

    try:
        file_path.unlink()
        logger.debug(f"Cleaned up temporary file: {file_path}")
        return True
    except (OSError, PermissionError) as e:
        logger.warning(f"Failed to delete temporary file {file_path}: {e}")
        return False
