"""
Fast Music Generator - Generation Logic
Session state and the generation request lifecycle.
"""

import asyncio
import contextlib
from dataclasses import dataclass
from typing import Optional, Callable, Awaitable

from config import (
    PROGRESS_INTERVAL_SECONDS, DEMO_FALLBACK_ENABLED, DEMO_FALLBACK_DELAY_SECONDS
)
from client import validate_inputs, request_generation_async
from demo import build_demo_result
from errors import ValidationError, TransportError, GenerationInProgressError
from presenter import presentation_fields
from progress import simulate_progress
from schemas import MusicResult, SessionSnapshot

RequestFn = Callable[[str, str], Awaitable[MusicResult]]

# ============================================================================
# State
# ============================================================================

@dataclass
class SessionState:
    prompt: str = ""
    api_key: str = ""  # memory only, never serialized
    api_setup_visible: bool = True
    generation_in_progress: bool = False
    progress_percent: int = 0
    last_error: str = ""
    result: Optional[MusicResult] = None

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            prompt=self.prompt,
            has_api_key=bool(self.api_key.strip()),
            api_setup_visible=self.api_setup_visible,
            generation_in_progress=self.generation_in_progress,
            progress_percent=self.progress_percent,
            last_error=self.last_error,
            result=self.result,
            **presentation_fields(self.result),
        )

# ============================================================================
# Controller
# ============================================================================

class GenerationController:
    """Owns the session state and runs one generation at a time."""

    def __init__(
        self,
        request_fn: RequestFn = request_generation_async,
        progress_interval: float = PROGRESS_INTERVAL_SECONDS,
        demo_fallback: bool = DEMO_FALLBACK_ENABLED,
        fallback_delay: float = DEMO_FALLBACK_DELAY_SECONDS,
    ):
        self.state = SessionState()
        self.request_fn = request_fn
        self.progress_interval = progress_interval
        self.demo_fallback = demo_fallback
        self.fallback_delay = fallback_delay
        self.task: Optional[asyncio.Task] = None

    # ------------------------------------------------------------------
    # Prompt and credentials
    # ------------------------------------------------------------------

    def set_prompt(self, prompt: str):
        self.state.prompt = prompt

    def set_api_key(self, api_key: str):
        if not api_key or not api_key.strip():
            raise ValidationError("missing key")
        self.state.api_key = api_key
        self.state.api_setup_visible = False

    def clear_api_key(self):
        self.state.api_key = ""
        self.state.api_setup_visible = True

    def show_api_setup(self):
        self.state.api_setup_visible = True

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def is_generation_active(self) -> bool:
        return self.state.generation_in_progress

    def submit(self, prompt: Optional[str] = None, api_key: Optional[str] = None) -> asyncio.Task:
        """Validate and start a generation in the background.

        Must be called from the running event loop. Validation failures are
        recorded in last_error and re-raised without any network call.
        """
        if self.state.generation_in_progress:
            raise GenerationInProgressError("Generation already in progress")

        prompt = self.state.prompt if prompt is None else prompt
        api_key = self.state.api_key if api_key is None else api_key

        try:
            validate_inputs(prompt, api_key)
        except ValidationError as e:
            self.state.last_error = str(e)
            raise

        self.state.prompt = prompt
        self.state.api_key = api_key

        self.state.generation_in_progress = True
        self.state.last_error = ""
        self.state.progress_percent = 0
        self.state.result = None

        self.task = asyncio.create_task(
            self.run_generation(self.state.prompt, self.state.api_key)
        )
        return self.task

    async def run_generation(self, prompt: str, api_key: str):
        """Request, progress and settlement for one submission."""
        state = self.state
        print("[GEN] Starting generation...", flush=True)

        try:
            progress_task = asyncio.create_task(
                simulate_progress(state, interval=self.progress_interval)
            )
            try:
                result = await self.request_fn(prompt, api_key)
            finally:
                progress_task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await progress_task

            state.progress_percent = 100
            state.result = result
            state.last_error = ""
            print(f"[GEN] Completed: '{result.title}'", flush=True)

        except TransportError as e:
            if not self.demo_fallback:
                print(f"[GEN] ERROR: {e}", flush=True)
                state.last_error = str(e)
            else:
                print(f"[GEN] Endpoint unreachable, using demo result in {self.fallback_delay}s", flush=True)
                await asyncio.sleep(self.fallback_delay)
                state.progress_percent = 100
                state.result = build_demo_result()
                state.last_error = ""

        except Exception as e:
            print(f"[GEN] ERROR: {e}", flush=True)
            state.last_error = str(e)

        finally:
            state.generation_in_progress = False

    async def shutdown(self):
        """Cancel an outstanding generation task."""
        if self.task and not self.task.done():
            self.task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self.task
