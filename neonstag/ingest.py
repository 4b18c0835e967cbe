"""Reading SVG files and uploads."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from .exceptions import UnsupportedFileError

logger = logging.getLogger(__name__)

SVG_MIME_TYPE = "image/svg+xml"
SVG_EXTENSION = ".svg"


def is_svg_upload(content_type: Optional[str] = None, filename: Optional[str] = None) -> bool:
    """Check the MIME type (parameters such as charset ignored) or file extension."""
    if content_type:
        mime = content_type.split(";")[0].strip().lower()
        if mime == SVG_MIME_TYPE:
            return True
    if filename:
        return Path(filename).suffix.lower() == SVG_EXTENSION
    return False


def decode_svg_upload(
    data: bytes,
    content_type: Optional[str] = None,
    filename: Optional[str] = None,
) -> str:
    """Validate and decode an uploaded SVG.

    :param data: Raw file content
    :param content_type: MIME type reported by the client
    :param filename: Original file name
    :return: SVG text
    :raises UnsupportedFileError: Not an SVG upload, or not UTF-8 text
    """
    if not is_svg_upload(content_type, filename):
        raise UnsupportedFileError(
            f"Please upload a valid SVG file (got {content_type or filename or 'unknown type'})."
        )
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise UnsupportedFileError(f"Failed to read the file: {e}") from e
    logger.debug(f"Read SVG upload {filename or ''} ({len(data)} bytes)")
    return text


def read_svg_file(path: Union[str, os.PathLike]) -> str:
    """Read an SVG file from disk.

    :raises UnsupportedFileError: Not an .svg file, or not UTF-8 text
    """
    path = Path(path)
    return decode_svg_upload(path.read_bytes(), filename=path.name)
