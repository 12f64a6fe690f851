"""
Coldcall - Call Scripts
=======================
Personalized openings, voicemail drops and the conversation prompt
handed to the voice agent. Templates are plain string.Template text so
a missing field leaves its $placeholder in place instead of failing.
"""

import logging
from dataclasses import dataclass, asdict
from string import Template
from typing import Dict, List, Optional

from .config import settings
from .objection_handler import OBJECTION_RESPONSES, ObjectionType

logger = logging.getLogger(__name__)


class ScriptTemplateNotFound(KeyError):
    """Raised when a template id is not in SCRIPT_TEMPLATES"""


@dataclass
class ProspectData:
    first_name: str
    company: str
    observation: Optional[str] = None
    industry: Optional[str] = None
    website: Optional[str] = None
    city: Optional[str] = None


@dataclass
class AgentConfig:
    agent_name: str
    company_name: str
    callback_number: str = ""


@dataclass
class ScriptTemplate:
    id: str
    name: str
    description: str
    opening: str
    voicemail: str
    value_prop: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class PersonalizedScript:
    template_id: str
    opening: str
    voicemail: str
    system_prompt: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


DEFAULT_AGENT_CONFIG = AgentConfig(
    agent_name=settings.agent_name,
    company_name=settings.company_name,
    callback_number=settings.callback_number,
)


# ============ TEMPLATES ============

SCRIPT_TEMPLATES: Dict[str, ScriptTemplate] = {
    "web-design": ScriptTemplate(
        id="web-design",
        name="Website Modernization",
        description="Website refresh plus AI-powered customer follow-up",
        opening=(
            "Hi $first_name, this is $agent_name calling from $company_name. "
            "I took a look at $company's website and noticed $observation. "
            "We help businesses like yours modernize their web presence and add "
            "AI-powered customer follow-up. Are you currently looking to update "
            "your website or improve how you handle incoming leads?"
        ),
        voicemail=(
            "Hi $first_name, this is $agent_name from $company_name. "
            "I was looking at $company's website and noticed $observation. "
            "We've helped similar businesses increase lead conversion by 40%. "
            "Give me a call back at $callback_number when you get a chance. Thanks!"
        ),
        value_prop="We help businesses increase lead conversion by 40%",
    ),
    "ai-receptionist": ScriptTemplate(
        id="ai-receptionist",
        name="AI Receptionist",
        description="24/7 AI phone answering and appointment booking",
        opening=(
            "Hi $first_name, this is $agent_name with $company_name. "
            "Quick question about $company - when a customer calls after hours, "
            "who picks up? We set up an AI receptionist that answers every call "
            "and books appointments around the clock. Is that something you've "
            "looked into?"
        ),
        voicemail=(
            "Hi $first_name, $agent_name here from $company_name. "
            "I help businesses like $company stop missing calls with an AI "
            "receptionist that books appointments 24/7. "
            "You can reach me at $callback_number. Talk soon!"
        ),
        value_prop="Every call answered and booked, even after hours",
    ),
}


# ============ OBSERVATIONS ============

INDUSTRY_OBSERVATIONS = {
    "dental": "your booking flow could be easier for new patients on mobile",
    "restaurant": "your menu and reservations aren't easy to find on mobile",
    "plumbing": "there's no quick way for customers to request an emergency callback",
    "legal": "visitors don't have an easy way to request a consultation",
    "real estate": "your listings page could capture more buyer leads",
}

DEFAULT_OBSERVATION = "it could use some modernization"


def generate_observation(prospect: ProspectData) -> str:
    """Observation line for the opening - explicit one first, then by industry"""
    if prospect.observation:
        return prospect.observation

    industry = (prospect.industry or "").lower()
    for key, observation in INDUSTRY_OBSERVATIONS.items():
        if key in industry:
            return observation

    return DEFAULT_OBSERVATION


def get_script_template(template_id: str) -> ScriptTemplate:
    try:
        return SCRIPT_TEMPLATES[template_id]
    except KeyError:
        raise ScriptTemplateNotFound(template_id) from None


def list_script_templates() -> List[ScriptTemplate]:
    return list(SCRIPT_TEMPLATES.values())


def _template_vars(prospect: ProspectData, agent: AgentConfig) -> Dict[str, str]:
    return {
        "first_name": prospect.first_name,
        "company": prospect.company,
        "observation": generate_observation(prospect),
        "agent_name": agent.agent_name,
        "company_name": agent.company_name,
        "callback_number": agent.callback_number,
    }


def generate_voicemail_script(
    prospect: ProspectData,
    template_id: str = "web-design",
    agent: AgentConfig = DEFAULT_AGENT_CONFIG,
) -> str:
    template = get_script_template(template_id)
    return Template(template.voicemail).safe_substitute(_template_vars(prospect, agent))


def generate_conversation_prompt(
    prospect: ProspectData,
    template_id: str = "web-design",
    agent: AgentConfig = DEFAULT_AGENT_CONFIG,
) -> str:
    """
    System prompt for the conversational voice agent.

    The objection section is built from OBJECTION_RESPONSES so the agent
    and the keyword handler give the same answers.
    """
    template = get_script_template(template_id)
    variables = _template_vars(prospect, agent)

    objection_lines = []
    for obj_type, reply in OBJECTION_RESPONSES.items():
        if obj_type is ObjectionType.UNKNOWN:
            continue
        label = obj_type.value.replace("_", " ")
        line = f'- "{label}" -> {reply.response}'
        if not reply.should_continue:
            line += " Then end the call politely."
        objection_lines.append(line)

    prompt = Template(
        "You are $agent_name, a friendly sales representative from $company_name.\n"
        "\n"
        "You are calling $first_name from $company. You noticed: $observation\n"
        "\n"
        "CONVERSATION FLOW:\n"
        "1. INTRO: \"Hi $first_name, this is $agent_name calling from $company_name.\"\n"
        "2. HOOK: Mention what you noticed\n"
        "3. QUALIFY: Ask if they're looking to improve this\n"
        "4. PITCH: $value_prop\n"
        "5. BOOK: Try to schedule a 15-minute call\n"
        "\n"
        "OBJECTION HANDLING:\n"
        "$objections\n"
        "\n"
        "RULES:\n"
        "- Be friendly but concise - this is a cold call\n"
        "- Listen more than you talk\n"
        "- Don't be pushy - one objection response then move on\n"
        "- If they want to end the call, be polite and professional"
    )
    return prompt.safe_substitute(
        variables,
        value_prop=template.value_prop,
        objections="\n".join(objection_lines),
    )


def personalize_script(
    template_id: str,
    prospect: ProspectData,
    agent: AgentConfig = DEFAULT_AGENT_CONFIG,
) -> PersonalizedScript:
    """Fill every part of a template for one prospect"""
    template = get_script_template(template_id)
    variables = _template_vars(prospect, agent)

    logger.info(f"Personalizing '{template_id}' for {prospect.first_name} @ {prospect.company}")

    return PersonalizedScript(
        template_id=template.id,
        opening=Template(template.opening).safe_substitute(variables),
        voicemail=generate_voicemail_script(prospect, template_id, agent),
        system_prompt=generate_conversation_prompt(prospect, template_id, agent),
    )
