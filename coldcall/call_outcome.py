"""
Coldcall - Call Outcome Classification
======================================
Turns a finished call into a disposition:
- Transcript analysis (voicemail, not interested, callback, booked, ...)
- Answering machine detection (AMD) result mapping
- Voicemail delivery stats for a batch of calls
"""

import re
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)


class CallOutcome(str, Enum):
    BOOKED = "booked"
    INTERESTED = "interested"
    CALLBACK = "callback"
    NOT_INTERESTED = "not_interested"
    EMAIL_REQUESTED = "email_requested"
    VOICEMAIL = "voicemail"
    NO_ANSWER = "no_answer"
    UNKNOWN = "unknown"


class AMDResult(str, Enum):
    HUMAN = "human"
    MACHINE = "machine"
    UNKNOWN = "unknown"
    TIMEOUT = "timeout"


@dataclass
class TranscriptTurn:
    role: str  # "agent" / "assistant" or "user"
    message: str


@dataclass
class OutcomeAnalysis:
    outcome: CallOutcome = CallOutcome.UNKNOWN
    booked: bool = False
    selected_time: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            "outcome": self.outcome.value,
            "booked": self.booked,
            "selected_time": self.selected_time,
            "email": self.email,
            "name": self.name,
        }


@dataclass
class AMDCheck:
    result: AMDResult
    confidence: float


@dataclass
class VoicemailDelivery:
    amd_result: AMDResult
    delivered: bool
    success: bool = True


# ============ TRANSCRIPT PATTERNS ============

AGENT_ROLES = {"agent", "assistant"}

VOICEMAIL_PHRASES = [
    "leave a message", "leave your message", "after the beep", "voicemail",
]

NOT_INTERESTED_RE = re.compile(
    r"\b(not interested|no thanks|no thank you|don't call|stop calling|remove me)\b"
)
CALLBACK_RE = re.compile(r"\b(call back|call me later|try again|busy right now|bad time)\b")

BOOKING_CONFIRMATION_RES = [
    re.compile(r"you'?re all set", re.I),
    re.compile(r"i'?ll send you a calendar invite", re.I),
    re.compile(r"calendar invite.*email", re.I),
    re.compile(r"booked|appointment.*confirmed|scheduled", re.I),
    re.compile(r"(monday|tuesday|wednesday|thursday|friday|saturday|sunday).*(morning|afternoon|evening|at \d)", re.I),
]
USER_AGREEMENT_RE = re.compile(
    r"\b(works|sounds good|perfect|yes|yeah|that works|let'?s do it|"
    r"monday|tuesday|wednesday|thursday|friday|morning|afternoon|evening)\b",
    re.I,
)
EMAIL_REQUEST_RE = re.compile(
    r"\b(email me|send me an email|send (?:me )?(?:some )?(?:info|information|details))\b"
)
INTEREST_RE = re.compile(r"\b(interested|tell me more|sounds good|sounds great|learn more)\b")

EMAIL_RE = re.compile(r"(?:email|e-mail).*?([a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})", re.I | re.S)
BOOKED_TIME_RE = re.compile(
    r"\b(monday|tuesday|wednesday|thursday|friday|saturday|sunday|tomorrow)\b"
    r"(?:\s+(?:morning|afternoon|evening))?"
    r"(?:\s+at\s+\d{1,2}(?::\d{2})?\s*(?:am|pm)?)?",
    re.I,
)


def extract_booked_time(turns: List[TranscriptTurn]) -> Optional[str]:
    """Latest day/time reference, preferring what the prospect said"""
    user_text = " ".join(t.message for t in turns if t.role not in AGENT_ROLES)
    agent_text = " ".join(t.message for t in turns if t.role in AGENT_ROLES)

    for text in (user_text, agent_text):
        matches = [m.group(0).strip() for m in BOOKED_TIME_RE.finditer(text)]
        if matches:
            return matches[-1].lower()
    return None


def analyze_transcript(
    turns: List[TranscriptTurn],
    dynamic_vars: Optional[Dict[str, str]] = None,
) -> OutcomeAnalysis:
    """
    Classify a finished call from its transcript.

    Checks run in priority order; the first one that fires decides.
    dynamic_vars are the prospect fields sent with the call (email, first_name, ...).
    """
    dynamic_vars = dynamic_vars or {}
    first_name = dynamic_vars.get("first_name")
    result = OutcomeAnalysis(
        email=dynamic_vars.get("email") or None,
        name=f"{first_name} {dynamic_vars.get('last_name', '')}".strip() if first_name else None,
    )

    if not any(t.message.strip() for t in turns):
        result.outcome = CallOutcome.NO_ANSWER
        return result

    full_text = "\n".join(f"{t.role}: {t.message}" for t in turns).lower()
    agent_text = " ".join(t.message for t in turns if t.role in AGENT_ROLES)
    user_text = " ".join(t.message for t in turns if t.role not in AGENT_ROLES).lower()

    if any(phrase in full_text for phrase in VOICEMAIL_PHRASES):
        result.outcome = CallOutcome.VOICEMAIL
    elif NOT_INTERESTED_RE.search(full_text):
        result.outcome = CallOutcome.NOT_INTERESTED
    elif CALLBACK_RE.search(full_text):
        result.outcome = CallOutcome.CALLBACK
        result.selected_time = extract_booked_time(turns)
    elif any(p.search(agent_text) for p in BOOKING_CONFIRMATION_RES) and USER_AGREEMENT_RE.search(user_text):
        result.outcome = CallOutcome.BOOKED
        result.booked = True
        result.selected_time = extract_booked_time(turns)
    elif EMAIL_REQUEST_RE.search(user_text):
        result.outcome = CallOutcome.EMAIL_REQUESTED
    elif INTEREST_RE.search(user_text):
        result.outcome = CallOutcome.INTERESTED

    if result.outcome in (CallOutcome.BOOKED, CallOutcome.EMAIL_REQUESTED):
        email_match = EMAIL_RE.search(full_text)
        if email_match:
            result.email = email_match.group(1)

    logger.info(f"Transcript analyzed: {result.outcome.value} ({len(turns)} turns)")
    return result


# ============ ANSWERING MACHINE DETECTION ============

def classify_answered_by(answered_by: Optional[str]) -> AMDCheck:
    """Map the carrier's answeredBy value (human, machine_start, fax, ...) to AMDResult"""
    value = (answered_by or "").lower()

    if "human" in value:
        result = AMDResult.HUMAN
    elif "machine" in value:
        result = AMDResult.MACHINE
    elif "unknown" in value:
        result = AMDResult.UNKNOWN
    else:
        result = AMDResult.TIMEOUT

    return AMDCheck(result=result, confidence=0.9 if value else 0.5)


def should_leave_voicemail(result: AMDResult) -> bool:
    return result in (AMDResult.MACHINE, AMDResult.UNKNOWN)


def get_voicemail_stats(results: Iterable[VoicemailDelivery]) -> Dict[str, int]:
    stats = {
        "total": 0,
        "delivered": 0,
        "failed": 0,
        "humans": 0,
        "machines": 0,
        "unknown": 0,
    }

    for result in results:
        stats["total"] += 1
        if result.delivered:
            stats["delivered"] += 1
        if not result.success:
            stats["failed"] += 1

        if result.amd_result == AMDResult.HUMAN:
            stats["humans"] += 1
        elif result.amd_result == AMDResult.MACHINE:
            stats["machines"] += 1
        else:
            stats["unknown"] += 1

    return stats
