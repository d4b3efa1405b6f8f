"""
Fast Music Generator - Pydantic Schemas
Data models for API requests and responses.
"""

from typing import Optional, List
from pydantic import BaseModel

# ============================================================================
# Request Models
# ============================================================================

class GenerateRequest(BaseModel):
    # Omitted fields fall back to the values stored in the session
    prompt: Optional[str] = None
    api_key: Optional[str] = None


class PromptRequest(BaseModel):
    prompt: str


class ApiKeyRequest(BaseModel):
    api_key: str

# ============================================================================
# Response Models
# ============================================================================

class MusicResult(BaseModel):
    audio_location: Optional[str] = None  # URL or data: URI
    title: str
    duration_seconds: int
    id: Optional[str] = None
    is_demo: bool = False


class SessionSnapshot(BaseModel):
    prompt: str
    has_api_key: bool
    api_setup_visible: bool
    generation_in_progress: bool
    progress_percent: int
    last_error: str
    result: Optional[MusicResult] = None
    download_filename: Optional[str] = None


class QuickPrompts(BaseModel):
    prompts: List[str]
