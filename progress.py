"""
Fast Music Generator - Progress Simulation
Cosmetic progress while a generation request is in flight.

The generation API reports no progress, so the percentage advances on a fixed
timer and stops short of completion until the request settles.
"""

import asyncio

from config import PROGRESS_INTERVAL_SECONDS, PROGRESS_STEP, PROGRESS_CAP


def next_progress(current: int, step: int = PROGRESS_STEP, cap: int = PROGRESS_CAP) -> int:
    """Advance by one step, never past the cap."""
    if current >= cap:
        return current
    return min(current + step, cap)


async def simulate_progress(
    state,
    interval: float = PROGRESS_INTERVAL_SECONDS,
    step: int = PROGRESS_STEP,
    cap: int = PROGRESS_CAP,
):
    """Tick state.progress_percent until cancelled or the generation ends."""
    while state.generation_in_progress:
        await asyncio.sleep(interval)
        if not state.generation_in_progress:
            break
        state.progress_percent = next_progress(state.progress_percent, step, cap)
