"""
Fast Music Generator - Main Application
FastAPI app, routes, and entry point.
"""

import argparse
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse, RedirectResponse
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

# Local imports
from config import HOST, PORT, STATIC_DIR, QUICK_PROMPTS, log_startup_info
from errors import ValidationError, GenerationInProgressError
from generation import GenerationController
from presenter import download_filename, is_data_uri, decode_data_uri
from schemas import (
    GenerateRequest, PromptRequest, ApiKeyRequest,
    MusicResult, SessionSnapshot, QuickPrompts
)

# ============================================================================
# Startup Initialization
# ============================================================================

log_startup_info()

# ============================================================================
# FastAPI App
# ============================================================================

@asynccontextmanager
async def lifespan(app):
    app.state.controller = GenerationController()
    yield
    await app.state.controller.shutdown()

app = FastAPI(title="Fast Music Generator", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_controller(request: Request) -> GenerationController:
    return request.app.state.controller

# ============================================================================
# API Routes
# ============================================================================

@app.get("/")
async def root():
    index_path = STATIC_DIR / "index.html"
    if index_path.exists():
        response = FileResponse(index_path)
        response.headers["Cache-Control"] = "no-cache"
        return response
    return {"message": "Fast Music Generator API", "status": "running"}


@app.get("/api/health")
async def health_check():
    return {"status": "ok"}


@app.get("/api/prompts", response_model=QuickPrompts)
async def list_quick_prompts():
    return QuickPrompts(prompts=QUICK_PROMPTS)


@app.get("/api/session", response_model=SessionSnapshot)
async def get_session(request: Request):
    return get_controller(request).state.snapshot()


@app.put("/api/session/prompt", response_model=SessionSnapshot)
async def update_prompt(payload: PromptRequest, request: Request):
    controller = get_controller(request)
    controller.set_prompt(payload.prompt)
    return controller.state.snapshot()


@app.put("/api/session/api-key", response_model=SessionSnapshot)
async def store_api_key(payload: ApiKeyRequest, request: Request):
    controller = get_controller(request)
    try:
        controller.set_api_key(payload.api_key)
    except ValidationError as e:
        raise HTTPException(400, str(e))
    print("[API] API key stored for session", flush=True)
    return controller.state.snapshot()


@app.delete("/api/session/api-key", response_model=SessionSnapshot)
async def forget_api_key(request: Request):
    controller = get_controller(request)
    controller.clear_api_key()
    print("[API] API key cleared", flush=True)
    return controller.state.snapshot()


@app.post("/api/session/setup", response_model=SessionSnapshot)
async def show_api_setup(request: Request):
    controller = get_controller(request)
    controller.show_api_setup()
    return controller.state.snapshot()


@app.post("/api/generate")
async def generate_music(payload: GenerateRequest, request: Request):
    controller = get_controller(request)
    try:
        controller.submit(payload.prompt, payload.api_key)
    except GenerationInProgressError as e:
        raise HTTPException(409, str(e))
    except ValidationError as e:
        print(f"[API] Rejected generation: {e}", flush=True)
        raise HTTPException(400, str(e))
    return {"status": "started"}


@app.get("/api/result", response_model=MusicResult)
async def get_result(request: Request):
    result = get_controller(request).state.result
    if result is None:
        raise HTTPException(404, "No result available")
    return result


@app.get("/api/result/download")
async def download_result(request: Request):
    result = get_controller(request).state.result
    if result is None or not result.audio_location:
        raise HTTPException(404, "No audio available")

    filename = download_filename(result.title)

    if not is_data_uri(result.audio_location):
        return RedirectResponse(result.audio_location)

    try:
        content, media_type = decode_data_uri(result.audio_location)
    except ValueError as e:
        print(f"[API] Could not decode embedded audio: {e}", flush=True)
        raise HTTPException(500, f"Could not decode embedded audio: {e}")

    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


# Static files
if STATIC_DIR.exists():
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# ============================================================================
# Main Entry Point
# ============================================================================

def main():
    parser = argparse.ArgumentParser(description="Fast Music Generator Server")
    parser.add_argument("--host", default=HOST)
    parser.add_argument("--port", type=int, default=PORT)
    args = parser.parse_args()

    print()
    print("=" * 60)
    print("  Fast Music Generator")
    print(f"  Open http://{args.host}:{args.port} in your browser")
    print("=" * 60)
    print()

    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
