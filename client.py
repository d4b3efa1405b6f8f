"""
Fast Music Generator - Generation Client
One POST to the music generation API per submission.
"""

import asyncio
from typing import Optional

import requests

from config import (
    GENERATION_ENDPOINT, REQUEST_TIMEOUT_SECONDS,
    GENERATION_DURATION_SECONDS, GENERATION_FORMAT, GENERATION_QUALITY,
    DEFAULT_TITLE, DEFAULT_DURATION_SECONDS
)
from errors import GenerationError, ValidationError, ApiError, TransportError
from schemas import MusicResult

# ============================================================================
# Request Building
# ============================================================================

def validate_inputs(prompt: Optional[str], api_key: Optional[str]):
    """Fail fast before any network call."""
    if not prompt or not prompt.strip():
        raise ValidationError("missing prompt")
    if not api_key or not api_key.strip():
        raise ValidationError("missing key")


def build_headers(api_key: str) -> dict:
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }


def build_payload(prompt: str) -> dict:
    return {
        "prompt": prompt,
        "duration": GENERATION_DURATION_SECONDS,
        "format": GENERATION_FORMAT,
        "quality": GENERATION_QUALITY,
    }


def _as_seconds(value) -> int:
    """Whole seconds from a numeric or numeric-string duration, else the default."""
    try:
        seconds = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_DURATION_SECONDS
    return seconds or DEFAULT_DURATION_SECONDS


def _as_text(value) -> Optional[str]:
    return None if value is None else str(value)


def parse_result(data) -> MusicResult:
    """Build a result from the API response body, applying defaults."""
    if not isinstance(data, dict):
        raise GenerationError(
            f"Unexpected response from generation API: expected an object, got {type(data).__name__}"
        )
    return MusicResult(
        audio_location=_as_text(data.get("audio_url")),
        title=_as_text(data.get("title")) or DEFAULT_TITLE,
        duration_seconds=_as_seconds(data.get("duration")),
        id=_as_text(data.get("id")),
    )


def _preview(prompt: str) -> str:
    return f"{prompt[:50]}{'...' if len(prompt) > 50 else ''}"

# ============================================================================
# Generation Request
# ============================================================================

def request_generation(
    prompt: str,
    api_key: str,
    endpoint: str = GENERATION_ENDPOINT,
    timeout: float = REQUEST_TIMEOUT_SECONDS,
) -> MusicResult:
    """Send the generation request (blocking).

    Raises ValidationError for missing inputs, ApiError for a non-2xx status
    and TransportError when the endpoint cannot be reached.
    """
    validate_inputs(prompt, api_key)

    print(f"[CLIENT] Requesting generation: '{_preview(prompt)}'", flush=True)
    try:
        resp = requests.post(
            endpoint,
            headers=build_headers(api_key),
            json=build_payload(prompt),
            timeout=timeout,
        )
    except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
        print(f"[CLIENT] Endpoint unreachable: {e}", flush=True)
        raise TransportError(str(e)) from e

    if not 200 <= resp.status_code < 300:
        print(f"[CLIENT] Request failed with status {resp.status_code}", flush=True)
        raise ApiError(resp.status_code)

    result = parse_result(resp.json())
    print(f"[CLIENT] Generation complete: '{result.title}' ({result.duration_seconds}s)", flush=True)
    return result


async def request_generation_async(prompt: str, api_key: str) -> MusicResult:
    """Send the generation request (non-blocking)."""
    return await asyncio.to_thread(request_generation, prompt, api_key)
