"""
Fast Music Generator - Demo Fallback
Placeholder result used when the generation endpoint is unreachable.
"""

import io
import time
import wave
import base64

from config import DEMO_TITLE, GENERATION_DURATION_SECONDS
from schemas import MusicResult

DEMO_SAMPLE_RATE = 8000
DEMO_CLIP_SECONDS = 1


def silent_wav_bytes(seconds: int = DEMO_CLIP_SECONDS, sample_rate: int = DEMO_SAMPLE_RATE) -> bytes:
    """Mono 8-bit PCM silence."""
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(1)
        wav.setframerate(sample_rate)
        # 8-bit PCM is unsigned, 0x80 is the zero level
        wav.writeframes(b"\x80" * (seconds * sample_rate))
    return buffer.getvalue()


def silent_wav_data_uri() -> str:
    encoded = base64.b64encode(silent_wav_bytes()).decode("ascii")
    return f"data:audio/wav;base64,{encoded}"


def demo_id() -> str:
    return f"demo-{int(time.time() * 1000)}"


def build_demo_result() -> MusicResult:
    """Synthesize the placeholder result."""
    result = MusicResult(
        audio_location=silent_wav_data_uri(),
        title=DEMO_TITLE,
        duration_seconds=GENERATION_DURATION_SECONDS,
        id=demo_id(),
        is_demo=True,
    )
    print(f"[DEMO] Substituted demo result {result.id}", flush=True)
    return result
