"""Tests for coldcall.call_script."""

from __future__ import annotations

import pytest

from coldcall.call_script import (
    DEFAULT_OBSERVATION,
    SCRIPT_TEMPLATES,
    AgentConfig,
    ProspectData,
    ScriptTemplateNotFound,
    generate_conversation_prompt,
    generate_observation,
    generate_voicemail_script,
    get_script_template,
    list_script_templates,
    personalize_script,
)


class TestGenerateObservation:
    def test_explicit_observation_wins(self, prospect):
        assert generate_observation(prospect) == "the site isn't mobile-friendly"

    def test_industry_observation(self):
        p = ProspectData(first_name="Sam", company="Sam's Pipes", industry="Plumbing & Heating")
        assert "emergency callback" in generate_observation(p)

    def test_default_observation(self):
        p = ProspectData(first_name="Sam", company="Acme")
        assert generate_observation(p) == DEFAULT_OBSERVATION


class TestTemplates:
    def test_default_template_registered(self):
        assert "web-design" in SCRIPT_TEMPLATES
        assert get_script_template("web-design").id == "web-design"

    def test_unknown_template_raises(self):
        with pytest.raises(ScriptTemplateNotFound):
            get_script_template("nope")

    def test_not_found_is_key_error(self):
        with pytest.raises(KeyError):
            get_script_template("nope")

    def test_list_templates_in_registry_order(self):
        assert [t.id for t in list_script_templates()] == list(SCRIPT_TEMPLATES)


class TestPersonalizeScript:
    def test_opening_filled(self, prospect, agent):
        script = personalize_script("web-design", prospect, agent)
        assert script.template_id == "web-design"
        assert script.opening.startswith("Hi Dana, this is Alex calling from RenderWiseAI.")
        assert "Bright Smile Dental's website" in script.opening
        assert "the site isn't mobile-friendly" in script.opening
        assert "$" not in script.opening

    def test_voicemail_includes_callback_number(self, prospect, agent):
        script = personalize_script("web-design", prospect, agent)
        assert "555-0100" in script.voicemail
        assert script.voicemail == generate_voicemail_script(prospect, "web-design", agent)

    def test_other_template(self, prospect, agent):
        script = personalize_script("ai-receptionist", prospect, agent)
        assert "AI receptionist" in script.opening
        assert "Bright Smile Dental" in script.voicemail

    def test_unknown_template(self, prospect, agent):
        with pytest.raises(ScriptTemplateNotFound):
            personalize_script("missing", prospect, agent)

    def test_dollar_in_prospect_data_is_kept(self, agent):
        p = ProspectData(first_name="Lee", company="$5 Pizza", observation="prices start at $5")
        script = personalize_script("web-design", p, agent)
        assert "$5 Pizza's website" in script.opening
        assert "prices start at $5" in script.opening

    def test_to_dict(self, prospect, agent):
        data = personalize_script("web-design", prospect, agent).to_dict()
        assert set(data) == {"template_id", "opening", "voicemail", "system_prompt"}


class TestConversationPrompt:
    def test_mentions_prospect_and_agent(self, prospect, agent):
        prompt = generate_conversation_prompt(prospect, "web-design", agent)
        assert "You are Alex" in prompt
        assert "You are calling Dana from Bright Smile Dental" in prompt

    def test_objection_guidance_included(self, prospect, agent):
        prompt = generate_conversation_prompt(prospect, "web-design", agent)
        assert '"too expensive" ->' in prompt
        assert '"do not call" ->' in prompt
        assert '"unknown"' not in prompt

    def test_terminating_objections_end_call(self, prospect, agent):
        prompt = generate_conversation_prompt(prospect, "web-design", agent)
        dnc_line = next(line for line in prompt.splitlines() if line.startswith('- "do not call"'))
        assert dnc_line.endswith("Then end the call politely.")
