"""
Inline "upload": binary content becomes a self-contained data URI that
can be stored in a catalog field in place of a URL.
"""

from __future__ import annotations

import asyncio
import base64
import mimetypes
import os
from pathlib import Path
from typing import BinaryIO, Union

DEFAULT_MIME_TYPE = "application/octet-stream"

UploadSource = Union[bytes, bytearray, memoryview, str, os.PathLike, BinaryIO]


class StorageReadFailure(Exception):
    """The upload source could not be read."""


def _guess_mime(mime_type: str | None, filename: str | None) -> str:
    if mime_type:
        return mime_type
    if filename:
        guessed, _ = mimetypes.guess_type(filename)
        if guessed:
            return guessed
    return DEFAULT_MIME_TYPE


def _read_source(source: UploadSource) -> tuple[bytes, str | None]:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source), None
    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        try:
            return path.read_bytes(), path.name
        except OSError as exc:
            raise StorageReadFailure(f"Could not read {path}: {exc}") from exc
    read = getattr(source, "read", None)
    if read is None:
        raise StorageReadFailure(f"Unsupported upload source: {type(source).__name__}")
    try:
        data = read()
    except (OSError, ValueError) as exc:
        raise StorageReadFailure(f"Could not read upload stream: {exc}") from exc
    if not isinstance(data, (bytes, bytearray)):
        raise StorageReadFailure("Upload stream must be opened in binary mode")
    name = getattr(source, "name", None)
    return bytes(data), os.path.basename(name) if isinstance(name, str) else None


def encode_data_uri(data: bytes, mime_type: str = DEFAULT_MIME_TYPE) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


async def upload_binary(
    source: UploadSource,
    mime_type: str | None = None,
    filename: str | None = None,
) -> str:
    """Read ``source`` off the event loop and return it as a base64 data URI.

    Raises StorageReadFailure when the source cannot be read.
    """
    data, source_name = await asyncio.to_thread(_read_source, source)
    return encode_data_uri(data, _guess_mime(mime_type, filename or source_name))
