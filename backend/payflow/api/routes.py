from pathlib import Path
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import FileResponse, JSONResponse

from payflow import __version__
from payflow.inference.base import LLMClient
from payflow.inference.config import get_llm_client, has_api_key
from payflow.inference.prompt import build_messages
from payflow.ir.errors import FlowError
from payflow.llm.parser import parse_generation
from payflow.presets import get_preset_registry
from payflow.schemas import (
    EnvStatusResponse,
    ErrorResponse,
    FlowResponse,
    GlossaryTermResponse,
    HealthResponse,
    PresetResponse,
)
from payflow.utils.log import get_logger
from payflow.validation import validate_narrative


logger = get_logger(__name__)

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

router = APIRouter()


async def _read_json_object(request: Request) -> Dict[str, Any]:
    """Request body as a dict. Anything that is not a JSON object reads as {}."""
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


@router.post(
    "/api/flow",
    response_model=FlowResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_flow(request: Request, client: LLMClient = Depends(get_llm_client)):
    try:
        body = await _read_json_object(request)
        flow = validate_narrative(body.get("flow"))
        logger.info("Generating diagram for narrative (%d chars)", len(flow))

        # ============================
        # 1️⃣ UPSTREAM CALL (blocking, no retry)
        # ============================
        content = await run_in_threadpool(client.generate, build_messages(flow))

        # ============================
        # 2️⃣ SHAPE VALIDATION
        # ============================
        result = parse_generation(content)

        logger.info(
            "Diagram generated (%d chars of mermaid, %d chars of notes)",
            len(result.mermaid),
            len(result.notes),
        )
        return FlowResponse(mermaid=result.mermaid, notes=result.notes)

    except FlowError:
        raise

    except Exception as e:
        logger.exception("Unexpected error while generating diagram")
        return JSONResponse(
            status_code=500,
            content={"error": str(e) or "Unknown error"},
        )


@router.get("/api/env", response_model=EnvStatusResponse)
def env_status():
    return EnvStatusResponse(has_key=has_api_key())


@router.get("/api/presets", response_model=List[PresetResponse])
def list_presets():
    registry = get_preset_registry()
    return [
        PresetResponse(id=p.id, label=p.label, text=p.text)
        for p in registry.list_all()
    ]


@router.get("/api/presets/{preset_id}", response_model=PresetResponse)
def get_preset(preset_id: str):
    preset = get_preset_registry().get(preset_id)
    if preset is None:
        raise HTTPException(status_code=404, detail=f"Preset not found: {preset_id}")
    return PresetResponse(id=preset.id, label=preset.label, text=preset.text)


@router.get("/api/glossary", response_model=List[GlossaryTermResponse])
def list_glossary():
    return [
        GlossaryTermResponse(term=t.term, definition=t.definition)
        for t in get_preset_registry().list_terms()
    ]


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok", version=__version__)


@router.get("/", include_in_schema=False)
def index():
    return FileResponse(STATIC_DIR / "index.html")
