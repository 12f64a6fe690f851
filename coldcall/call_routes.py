"""
Coldcall Call Routes
Script personalization before the call, outcome classification after it
"""

import logging
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import Optional, List, Dict

from .config import settings
from .call_script import (
    ProspectData,
    ScriptTemplateNotFound,
    list_script_templates,
    personalize_script,
)
from .call_outcome import (
    TranscriptTurn,
    analyze_transcript,
    classify_answered_by,
    should_leave_voicemail,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["calls"])


# ============ REQUEST MODELS ============

class ProspectRequest(BaseModel):
    first_name: str
    company: str
    observation: Optional[str] = None
    industry: Optional[str] = None
    website: Optional[str] = None
    city: Optional[str] = None


class PersonalizeRequest(BaseModel):
    prospect: ProspectRequest
    template_id: Optional[str] = None


class TurnRequest(BaseModel):
    role: str
    message: str = ""


class OutcomeRequest(BaseModel):
    transcript: List[TurnRequest] = []
    dynamic_vars: Optional[Dict[str, str]] = {}


class AMDRequest(BaseModel):
    answered_by: Optional[str] = None


# ============ SCRIPTS ============

@router.get("/scripts")
async def get_scripts():
    return {"templates": [t.to_dict() for t in list_script_templates()]}


@router.post("/scripts/personalize")
async def personalize(data: PersonalizeRequest):
    template_id = data.template_id or settings.default_template_id
    prospect = ProspectData(**data.prospect.model_dump())

    try:
        script = personalize_script(template_id, prospect)
    except ScriptTemplateNotFound:
        raise HTTPException(status_code=404, detail=f"Unknown script template: {template_id}")

    return script.to_dict()


# ============ OUTCOMES ============

@router.post("/calls/outcome")
async def call_outcome(data: OutcomeRequest):
    """Classify a finished call from its transcript"""
    turns = [TranscriptTurn(role=t.role, message=t.message) for t in data.transcript]
    return analyze_transcript(turns, data.dynamic_vars).to_dict()


@router.post("/calls/amd")
async def amd_check(data: AMDRequest):
    """Map the carrier's answeredBy value and decide whether to drop a voicemail"""
    check = classify_answered_by(data.answered_by)
    return {
        "result": check.result.value,
        "confidence": check.confidence,
        "leave_voicemail": should_leave_voicemail(check.result),
    }
