"""
Fast Music Generator - Configuration
Paths, generation parameters and environment overrides.
"""

import os
from pathlib import Path

# ============================================================================
# Paths
# ============================================================================

BASE_DIR = Path(__file__).resolve().parent
STATIC_DIR = BASE_DIR / "static"

# ============================================================================
# Server
# ============================================================================

HOST = os.environ.get("FASTMUSIC_HOST", "127.0.0.1")
PORT = int(os.environ.get("FASTMUSIC_PORT", "8000"))

# ============================================================================
# Generation API
# ============================================================================

GENERATION_ENDPOINT = os.environ.get(
    "FASTMUSIC_ENDPOINT", "https://api.sunoapi.com/v1/music/generate"
)
REQUEST_TIMEOUT_SECONDS = float(os.environ.get("FASTMUSIC_REQUEST_TIMEOUT", "120"))

# Fixed request parameters (30 seconds keeps generation fast)
GENERATION_DURATION_SECONDS = 30
GENERATION_FORMAT = "mp3"
GENERATION_QUALITY = "standard"

# Response defaults
DEFAULT_TITLE = "Generated Music"
DEFAULT_DURATION_SECONDS = 30

# ============================================================================
# Progress Simulation
# ============================================================================

PROGRESS_INTERVAL_SECONDS = 2.0
PROGRESS_STEP = 10
PROGRESS_CAP = 90

# ============================================================================
# Demo Fallback
# ============================================================================

DEMO_FALLBACK_ENABLED = os.environ.get("FASTMUSIC_DEMO_FALLBACK", "1") == "1"
DEMO_FALLBACK_DELAY_SECONDS = 3.0
DEMO_TITLE = "Demo Generated Music"

# ============================================================================
# Quick Prompts
# ============================================================================

QUICK_PROMPTS = [
    "Gentle piano melody for relaxation and meditation",
    "Uplifting acoustic folk guitar with soft vocals",
    "Ambient electronic music with nature sounds",
    "Traditional Indian classical with sitar and tabla",
    "Calm orchestral strings for background narration",
    "Peaceful flute music with soft percussion",
    "Modern lo-fi hip hop beats for studying",
]


def log_startup_info():
    """Log the effective configuration."""
    print(f"[CONFIG] Base directory: {BASE_DIR}")
    print(f"[CONFIG] Generation endpoint: {GENERATION_ENDPOINT}")
    print(f"[CONFIG] Request timeout: {REQUEST_TIMEOUT_SECONDS}s")
    print(f"[CONFIG] Demo fallback: {'enabled' if DEMO_FALLBACK_ENABLED else 'disabled'}")
    if not STATIC_DIR.exists():
        print(f"[CONFIG] Warning: static directory not found at {STATIC_DIR}")
