"""Source file decoding."""

from __future__ import annotations

import logging
import os

import chardet

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


def decode_source(contents: bytes) -> str:
    """Decode raw file contents to text.

    UTF-8 is tried first (a BOM is dropped). Otherwise the encoding is
    detected with chardet and undecodable bytes are replaced.
    """
    try:
        return contents.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass

    detected = chardet.detect(contents)["encoding"]
    encoding = detected if detected is not None else DEFAULT_ENCODING
    logger.debug("Decoding as %s (detected %s)", encoding, detected)
    try:
        return contents.decode(encoding, errors="replace")
    except LookupError:
        return contents.decode(DEFAULT_ENCODING, errors="replace")


def read_source_text(path: str | os.PathLike[str]) -> str:
    """Read a source file as text.

    Raises:
        OSError: If the file cannot be read.
    """
    with open(path, "rb") as f:
        return decode_source(f.read())
