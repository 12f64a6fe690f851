"""
Coldcall Objection Routes
API endpoints the conversation orchestrator calls on each prospect utterance
"""

import logging
from fastapi import APIRouter
from pydantic import BaseModel

from .objection_handler import (
    DetectedObjection,
    ObjectionType,
    detect_interest,
    detect_objection,
    get_example_phrases,
    get_objection_response,
    handle_objection,
    list_objection_types,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/objections", tags=["objections"])


# ============ REQUEST MODELS ============

class UtteranceRequest(BaseModel):
    text: str = ""


class DetectionRequest(BaseModel):
    type: str = ObjectionType.UNKNOWN.value
    confidence: float = 0.0
    matched_phrase: str = ""


# ============ CATALOG ============

@router.get("")
async def get_objection_types():
    """All objection types in matching order"""
    return {"types": [t.value for t in list_objection_types()]}


@router.get("/{objection_type}/phrases")
async def get_phrases(objection_type: str):
    """Trigger phrases for a type (empty list for unknown types)"""
    return {"type": objection_type, "phrases": get_example_phrases(objection_type)}


# ============ DETECTION ============

@router.post("/detect")
async def detect(data: UtteranceRequest):
    return detect_objection(data.text).to_dict()


@router.post("/respond")
async def respond(data: DetectionRequest):
    """Reply bundle for a detection made elsewhere - unrecognized types get the fallback reply"""
    try:
        obj_type = ObjectionType(data.type)
    except ValueError:
        logger.warning(f"Unrecognized objection type '{data.type}', using fallback reply")
        obj_type = ObjectionType.UNKNOWN

    detection = DetectedObjection(
        type=obj_type,
        confidence=data.confidence,
        matched_phrase=data.matched_phrase,
    )
    return get_objection_response(detection).to_dict()


@router.post("/handle")
async def handle(data: UtteranceRequest):
    return handle_objection(data.text).to_dict()


@router.post("/interest")
async def interest(data: UtteranceRequest):
    return detect_interest(data.text).to_dict()
