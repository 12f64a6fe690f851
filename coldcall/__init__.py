"""
Coldcall Application Package
"""

__version__ = "0.1.0"

from .config import settings
from .objection_handler import (
    ObjectionType,
    CaptureInfo,
    DetectedObjection,
    ObjectionResponse,
    InterestSignal,
    OBJECTION_PATTERNS,
    OBJECTION_RESPONSES,
    detect_objection,
    get_objection_response,
    handle_objection,
    detect_interest,
    list_objection_types,
    get_example_phrases,
)
from .call_script import (
    ProspectData,
    AgentConfig,
    ScriptTemplate,
    PersonalizedScript,
    ScriptTemplateNotFound,
    SCRIPT_TEMPLATES,
    DEFAULT_AGENT_CONFIG,
    personalize_script,
    generate_observation,
    get_script_template,
    list_script_templates,
    generate_voicemail_script,
    generate_conversation_prompt,
)
from .call_outcome import (
    CallOutcome,
    AMDResult,
    TranscriptTurn,
    OutcomeAnalysis,
    VoicemailDelivery,
    analyze_transcript,
    classify_answered_by,
    should_leave_voicemail,
    get_voicemail_stats,
)

__all__ = [
    "settings",
    # Objection Handling
    "ObjectionType",
    "CaptureInfo",
    "DetectedObjection",
    "ObjectionResponse",
    "InterestSignal",
    "OBJECTION_PATTERNS",
    "OBJECTION_RESPONSES",
    "detect_objection",
    "get_objection_response",
    "handle_objection",
    "detect_interest",
    "list_objection_types",
    "get_example_phrases",
    # Call Scripts
    "ProspectData",
    "AgentConfig",
    "ScriptTemplate",
    "PersonalizedScript",
    "ScriptTemplateNotFound",
    "SCRIPT_TEMPLATES",
    "DEFAULT_AGENT_CONFIG",
    "personalize_script",
    "generate_observation",
    "get_script_template",
    "list_script_templates",
    "generate_voicemail_script",
    "generate_conversation_prompt",
    # Call Outcomes
    "CallOutcome",
    "AMDResult",
    "TranscriptTurn",
    "OutcomeAnalysis",
    "VoicemailDelivery",
    "analyze_transcript",
    "classify_answered_by",
    "should_leave_voicemail",
    "get_voicemail_stats",
]
