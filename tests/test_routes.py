"""Tests for the Coldcall HTTP API."""

from __future__ import annotations

import pytest


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"


class TestObjectionRoutes:
    def test_list_types(self, client):
        resp = client.get("/api/objections")
        assert resp.status_code == 200
        types = resp.json()["types"]
        assert types[0] == "not_interested"
        assert types[-1] == "unknown"
        assert len(types) == 13

    def test_phrases(self, client):
        resp = client.get("/api/objections/send_email/phrases")
        assert resp.status_code == 200
        assert "email me" in resp.json()["phrases"]

    def test_phrases_unknown_type(self, client):
        resp = client.get("/api/objections/bogus/phrases")
        assert resp.status_code == 200
        assert resp.json()["phrases"] == []

    def test_detect(self, client):
        resp = client.post("/api/objections/detect", json={"text": "That's too expensive for us"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["type"] == "too_expensive"
        assert data["matched_phrase"] == "too expensive"
        assert data["confidence"] == pytest.approx(0.9)

    def test_detect_empty(self, client):
        resp = client.post("/api/objections/detect", json={"text": ""})
        assert resp.json() == {"type": "unknown", "confidence": 0.0, "matched_phrase": ""}

    def test_handle(self, client):
        resp = client.post("/api/objections/handle", json={"text": "Can you send me an email?"})
        data = resp.json()
        assert data["type"] == "send_email"
        assert data["capture_info"] == "email"
        assert data["should_continue"] is True

    def test_respond_overrides_confidence(self, client):
        resp = client.post("/api/objections/respond", json={"type": "do_not_call", "confidence": 0.77})
        data = resp.json()
        assert data["type"] == "do_not_call"
        assert data["confidence"] == 0.77
        assert data["should_continue"] is False

    def test_respond_unrecognized_type(self, client):
        resp = client.post("/api/objections/respond", json={"type": "whatever", "confidence": 0.5})
        assert resp.status_code == 200
        assert resp.json()["type"] == "unknown"

    def test_interest(self, client):
        resp = client.post("/api/objections/interest", json={"text": "Sounds good, yes let's do it"})
        data = resp.json()
        assert data["interested"] is True
        assert data["confidence"] >= 0.6

    def test_missing_text_validation(self, client):
        resp = client.post("/api/objections/detect", json={"text": 123})
        assert resp.status_code == 422


class TestCallRoutes:
    def test_list_scripts(self, client):
        resp = client.get("/api/scripts")
        ids = [t["id"] for t in resp.json()["templates"]]
        assert "web-design" in ids

    def test_personalize(self, client):
        resp = client.post("/api/scripts/personalize", json={
            "template_id": "web-design",
            "prospect": {"first_name": "Dana", "company": "Bright Smile Dental"},
        })
        assert resp.status_code == 200
        data = resp.json()
        assert "Hi Dana" in data["opening"]
        assert "Bright Smile Dental" in data["system_prompt"]

    def test_personalize_default_template(self, client):
        resp = client.post("/api/scripts/personalize", json={
            "prospect": {"first_name": "Dana", "company": "Acme"},
        })
        assert resp.json()["template_id"] == "web-design"

    def test_personalize_unknown_template(self, client):
        resp = client.post("/api/scripts/personalize", json={
            "template_id": "nope",
            "prospect": {"first_name": "Dana", "company": "Acme"},
        })
        assert resp.status_code == 404

    def test_outcome(self, client):
        resp = client.post("/api/calls/outcome", json={
            "transcript": [
                {"role": "agent", "message": "Hi, this is Alex."},
                {"role": "user", "message": "Stop calling me."},
            ],
        })
        assert resp.status_code == 200
        assert resp.json()["outcome"] == "not_interested"

    def test_outcome_empty(self, client):
        resp = client.post("/api/calls/outcome", json={"transcript": []})
        assert resp.json()["outcome"] == "no_answer"

    def test_amd(self, client):
        resp = client.post("/api/calls/amd", json={"answered_by": "machine_end_beep"})
        assert resp.json() == {"result": "machine", "confidence": 0.9, "leave_voicemail": True}
