"""
Coldcall Objection Handler
==========================
Detects common cold-call objections and picks the canned reply.

Architecture:
1. Normalize the utterance (lowercase, trimmed)
2. Walk OBJECTION_PATTERNS in declaration order - first phrase hit wins
3. Score the hit by phrase length (longer phrase = more specific)
4. Look up the reply bundle in OBJECTION_RESPONSES

Matching is plain substring containment, so "no timeout" still hits
"no time". Category order is the tie-break when several categories match.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Union

logger = logging.getLogger(__name__)


class ObjectionType(str, Enum):
    NOT_INTERESTED = "not_interested"
    TOO_EXPENSIVE = "too_expensive"
    NO_TIME = "no_time"
    ALREADY_HAVE_SOLUTION = "already_have_solution"
    SEND_EMAIL = "send_email"
    CALL_BACK_LATER = "call_back_later"
    WRONG_PERSON = "wrong_person"
    DO_NOT_CALL = "do_not_call"
    NEED_TO_THINK = "need_to_think"
    NO_BUDGET = "no_budget"
    NOT_DECISION_MAKER = "not_decision_maker"
    HAPPY_WITH_CURRENT = "happy_with_current"
    UNKNOWN = "unknown"


class CaptureInfo(str, Enum):
    """What the orchestrator should try to collect after the reply"""
    EMAIL = "email"
    CALLBACK_TIME = "callback_time"
    DECISION_MAKER = "decision_maker"


@dataclass(frozen=True)
class DetectedObjection:
    """Result of objection detection"""
    type: ObjectionType = ObjectionType.UNKNOWN
    confidence: float = 0.0
    matched_phrase: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "confidence": self.confidence,
            "matched_phrase": self.matched_phrase,
        }


@dataclass(frozen=True)
class ObjectionResponse:
    """Reply bundle handed back to the conversation orchestrator"""
    type: ObjectionType
    confidence: float
    response: str
    follow_up: Optional[str] = None

    # False = wrap the call up after this reply
    should_continue: bool = True
    capture_info: Optional[CaptureInfo] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "confidence": self.confidence,
            "response": self.response,
            "follow_up": self.follow_up,
            "should_continue": self.should_continue,
            "capture_info": self.capture_info.value if self.capture_info else None,
        }


@dataclass(frozen=True)
class InterestSignal:
    interested: bool = False
    confidence: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {"interested": self.interested, "confidence": self.confidence}


# =============================================================================
# OBJECTION PATTERNS - order matters, first match wins
# =============================================================================

OBJECTION_PATTERNS = MappingProxyType({
    ObjectionType.NOT_INTERESTED: (
        "not interested", "don't want", "no thanks", "not looking",
        "pass", "i'm good", "no thank you", "not right now",
        "maybe later", "don't need",
    ),
    ObjectionType.TOO_EXPENSIVE: (
        "too expensive", "cost too much", "too much", "can't afford",
        "don't have money", "out of budget", "prices are high",
        "how much", "what does it cost", "pricing",
    ),
    ObjectionType.NO_TIME: (
        "no time", "don't have time", "busy", "in a meeting",
        "call me back", "not a good time", "bad time", "rushed",
    ),
    ObjectionType.ALREADY_HAVE_SOLUTION: (
        "already have", "already use", "we have a website",
        "we have someone", "already working with", "have a guy",
        "have a company", "already covered",
    ),
    ObjectionType.SEND_EMAIL: (
        "send me an email", "email me", "send information", "send info",
        "email information", "send details",
    ),
    ObjectionType.CALL_BACK_LATER: (
        "call back later", "call me later", "try again later",
        "call tomorrow", "call next week", "later today",
    ),
    ObjectionType.WRONG_PERSON: (
        "wrong number", "wrong person", "not me", "who is this",
        "you have the wrong",
    ),
    ObjectionType.DO_NOT_CALL: (
        "do not call", "stop calling", "remove me", "take me off",
        "dnc", "do not contact", "unsubscribe",
    ),
    ObjectionType.NEED_TO_THINK: (
        "need to think", "let me think", "discuss with", "talk to my",
        "need to check", "run it by",
    ),
    ObjectionType.NO_BUDGET: (
        "no budget", "budget is tight", "cutting costs", "no money",
        "frozen budget",
    ),
    # "talk to my boss" is caught by NEED_TO_THINK ("talk to my") first
    ObjectionType.NOT_DECISION_MAKER: (
        "can't decide", "not the decision", "my manager", "my partner",
        "my wife", "my husband", "not up to me",
    ),
    ObjectionType.HAPPY_WITH_CURRENT: (
        "happy with", "satisfied with", "works fine", "no complaints",
        "doing well", "all good",
    ),
    ObjectionType.UNKNOWN: (),
})


# =============================================================================
# RESPONSE TEMPLATES - confidence here is authoring confidence only,
# get_objection_response() replaces it with the detection confidence
# =============================================================================

OBJECTION_RESPONSES = MappingProxyType({
    ObjectionType.NOT_INTERESTED: ObjectionResponse(
        type=ObjectionType.NOT_INTERESTED,
        confidence=0.9,
        response="Totally understand. Just out of curiosity, are you happy with how your website converts visitors right now?",
        follow_up="No pressure at all, I'll let you go. Have a great day!",
        should_continue=False,
    ),
    ObjectionType.TOO_EXPENSIVE: ObjectionResponse(
        type=ObjectionType.TOO_EXPENSIVE,
        confidence=0.85,
        response="It depends on what you need - a basic website revamp starts around $500, and the AI assistant is a monthly service.",
        follow_up="That's exactly what the 15-min call covers - no commitment, just a quick look at what would work for you.",
        should_continue=True,
    ),
    ObjectionType.NO_TIME: ObjectionResponse(
        type=ObjectionType.NO_TIME,
        confidence=0.9,
        response="No problem! When would be a better time? I can call back this afternoon or tomorrow.",
        follow_up="What time works best for you?",
        should_continue=True,
        capture_info=CaptureInfo.CALLBACK_TIME,
    ),
    ObjectionType.ALREADY_HAVE_SOLUTION: ObjectionResponse(
        type=ObjectionType.ALREADY_HAVE_SOLUTION,
        confidence=0.85,
        response="That's great! When was the last time it was updated? A lot of businesses we work with had sites but they weren't mobile-optimized or converting visitors into leads.",
        follow_up="Would you be open to a quick 15-minute review to see if there are any gaps?",
        should_continue=True,
    ),
    ObjectionType.SEND_EMAIL: ObjectionResponse(
        type=ObjectionType.SEND_EMAIL,
        confidence=0.9,
        response="Absolutely! What's the best email address? I'll have our team send over some examples of what we've done for similar businesses.",
        follow_up="Perfect, I'll make sure that gets sent today. Is there anything specific you'd like to see?",
        should_continue=True,
        capture_info=CaptureInfo.EMAIL,
    ),
    ObjectionType.CALL_BACK_LATER: ObjectionResponse(
        type=ObjectionType.CALL_BACK_LATER,
        confidence=0.9,
        response="No problem! When's a better time? I'll make sure to call back then.",
        follow_up="Would later today or tomorrow work better?",
        should_continue=True,
        capture_info=CaptureInfo.CALLBACK_TIME,
    ),
    ObjectionType.WRONG_PERSON: ObjectionResponse(
        type=ObjectionType.WRONG_PERSON,
        confidence=0.95,
        response="I apologize for the confusion. Could you point me in the right direction? Who should I speak with about the website?",
        follow_up="Would you be able to transfer me or provide their contact information?",
        should_continue=True,
        capture_info=CaptureInfo.DECISION_MAKER,
    ),
    ObjectionType.DO_NOT_CALL: ObjectionResponse(
        type=ObjectionType.DO_NOT_CALL,
        confidence=1.0,
        response="I completely understand. I'll remove you from our calling list right away. I apologize for any inconvenience.",
        follow_up="You won't hear from us again. Have a great day!",
        should_continue=False,
    ),
    ObjectionType.NEED_TO_THINK: ObjectionResponse(
        type=ObjectionType.NEED_TO_THINK,
        confidence=0.8,
        response="Of course, it's smart to think it over. Is there anyone else you need to discuss this with?",
        follow_up="Would it help if I sent some information you could review and share with them?",
        should_continue=True,
        capture_info=CaptureInfo.EMAIL,
    ),
    ObjectionType.NO_BUDGET: ObjectionResponse(
        type=ObjectionType.NO_BUDGET,
        confidence=0.85,
        response="I understand budgets are tight. Even a small investment in your web presence can have a big impact on lead generation.",
        follow_up="Would it be worth a 15-minute conversation just to see what options might fit your situation? No commitment required.",
        should_continue=True,
    ),
    ObjectionType.NOT_DECISION_MAKER: ObjectionResponse(
        type=ObjectionType.NOT_DECISION_MAKER,
        confidence=0.9,
        response="That makes sense. Who would be the best person for me to speak with about the website?",
        follow_up="Would you be able to connect me or should I reach out to them directly?",
        should_continue=True,
        capture_info=CaptureInfo.DECISION_MAKER,
    ),
    ObjectionType.HAPPY_WITH_CURRENT: ObjectionResponse(
        type=ObjectionType.HAPPY_WITH_CURRENT,
        confidence=0.85,
        response="I'm glad to hear things are going well! Just out of curiosity, how many leads does your website generate per week?",
        follow_up="If there was an opportunity to increase that by 20-30%, would that be worth a brief conversation?",
        should_continue=True,
    ),
    ObjectionType.UNKNOWN: ObjectionResponse(
        type=ObjectionType.UNKNOWN,
        confidence=0.0,
        response="I understand. Let me ask you this - are you currently looking to grow your business or improve your online presence?",
        follow_up="Even a small improvement in your website can make a big difference in lead generation.",
        should_continue=True,
    ),
})


# =============================================================================
# INTEREST INDICATORS - counted once per entry, not per occurrence
# =============================================================================

POSITIVE_INDICATORS = (
    "interested", "sounds good", "tell me more", "that sounds",
    "would like", "want to learn", "book a call", "schedule",
    "when can we", "let's do it", "sign me up", "yes", "sure",
    "okay", "go ahead", "send me", "email me", "call me",
)


# =============================================================================
# DETECTION FUNCTIONS
# =============================================================================

def _calculate_confidence(pattern: str) -> float:
    """Longer phrases are more specific, so they score higher (0.7 - 0.9)"""
    length_bonus = min(len(pattern) * 0.02, 0.2)
    return min(0.7 + length_bonus, 0.95)


def _coerce_type(value: Any) -> ObjectionType:
    try:
        return ObjectionType(value)
    except (ValueError, TypeError):
        return ObjectionType.UNKNOWN


def detect_objection(text: str) -> DetectedObjection:
    """
    Detect the objection type in a transcribed utterance.

    Args:
        text: What the prospect just said

    Returns:
        DetectedObjection - UNKNOWN with confidence 0 when nothing matches
    """
    if not isinstance(text, str):
        return DetectedObjection()

    text_lower = text.lower().strip()

    for obj_type, patterns in OBJECTION_PATTERNS.items():
        if obj_type is ObjectionType.UNKNOWN:
            continue

        for pattern in patterns:
            if pattern in text_lower:
                logger.debug(f"Detected {obj_type.value} with pattern '{pattern}'")
                return DetectedObjection(
                    type=obj_type,
                    confidence=_calculate_confidence(pattern),
                    matched_phrase=pattern,
                )

    logger.debug("No objection detected")
    return DetectedObjection()


def get_objection_response(objection: DetectedObjection) -> ObjectionResponse:
    """Reply bundle for a detection, carrying the detection's confidence"""
    obj_type = _coerce_type(objection.type)
    template = OBJECTION_RESPONSES.get(obj_type, OBJECTION_RESPONSES[ObjectionType.UNKNOWN])
    return replace(template, confidence=objection.confidence)


def handle_objection(user_message: str) -> ObjectionResponse:
    """Detect and respond in one step"""
    response = get_objection_response(detect_objection(user_message))
    logger.info(f"Objection handled: {response.type.value} (continue={response.should_continue})")
    return response


def detect_interest(text: str) -> InterestSignal:
    """
    Check if a message reads as positive / interested.

    One indicator alone (confidence 0.3) is not enough - it takes two.
    """
    if not isinstance(text, str):
        return InterestSignal()

    text_lower = text.lower()
    matches = sum(1 for indicator in POSITIVE_INDICATORS if indicator in text_lower)

    confidence = min(matches * 0.3, 0.95)
    return InterestSignal(interested=confidence > 0.3, confidence=confidence)


def list_objection_types() -> List[ObjectionType]:
    return list(OBJECTION_PATTERNS.keys())


def get_example_phrases(objection_type: Union[ObjectionType, str]) -> List[str]:
    return list(OBJECTION_PATTERNS.get(_coerce_type(objection_type), ()))
