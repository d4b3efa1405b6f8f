"""
Fast Music Generator - Result Presentation
Download naming and payloads for the generated audio.
"""

import re
import base64
import binascii
from typing import Optional, Tuple

from schemas import MusicResult

WHITESPACE_REGEX = re.compile(r"\s+")
DOWNLOAD_EXTENSION = ".mp3"


def download_filename(title: str) -> str:
    """'My Song 1' -> 'My_Song_1.mp3'"""
    return f"{WHITESPACE_REGEX.sub('_', title)}{DOWNLOAD_EXTENSION}"


def is_data_uri(location: Optional[str]) -> bool:
    return bool(location) and location.startswith("data:")


def decode_data_uri(uri: str) -> Tuple[bytes, str]:
    """Decode a base64 data: URI into (content, media_type)."""
    header, sep, payload = uri.partition(",")
    if not sep:
        raise ValueError("Malformed data URI")

    params = header[len("data:"):].split(";")
    media_type = params[0] or "application/octet-stream"
    if "base64" not in params[1:]:
        raise ValueError("Only base64 data URIs are supported")

    try:
        content = base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e
    return content, media_type


def presentation_fields(result: Optional[MusicResult]) -> dict:
    """Fields the page needs to render the player and download link."""
    if result is None:
        return {"download_filename": None}
    return {"download_filename": download_filename(result.title)}
