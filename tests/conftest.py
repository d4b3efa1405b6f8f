"""
Shared fixtures for Fast Music Generator tests.
"""

import pytest

from generation import GenerationController
from schemas import MusicResult


class FakeRequest:
    """Stands in for the async generation request and records calls."""

    def __init__(self, result=None, error=None):
        self.result = result or MusicResult(
            audio_location="https://cdn.example.com/song.mp3",
            title="T",
            duration_seconds=45,
            id="1",
        )
        self.error = error
        self.calls = []

    async def __call__(self, prompt, api_key):
        self.calls.append((prompt, api_key))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_request():
    return FakeRequest()


@pytest.fixture
def make_controller():
    """Controller with short timers so lifecycle tests run quickly."""
    def _make(request_fn, demo_fallback=True):
        return GenerationController(
            request_fn=request_fn,
            progress_interval=0.01,
            demo_fallback=demo_fallback,
            fallback_delay=0.05,
        )
    return _make
