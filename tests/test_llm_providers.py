"""원격 채점 Provider 보조 함수 테스트 (네트워크 호출 없음)"""
from __future__ import annotations

import asyncio
from types import ModuleType, SimpleNamespace
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from config import ScoringPolicy
from color_utils import DualColor, SingleColor
from llm_providers import GeminiScorer, RemoteScoreRequest, build_scoring_prompt, parse_score_payload


def test_parse_plain_json():
    assert parse_score_payload('{"funny": 3.5, "accurate": 4.0, "popular": 2.5}') == {
        "funny": 3.5,
        "accurate": 4.0,
        "popular": 2.5,
    }


def test_parse_fenced_json():
    text = '```json\n{"funny": 1.0, "accurate": 2.0, "popular": 3.0}\n```'
    assert parse_score_payload(text)["popular"] == 3.0


def test_parse_falls_back_to_axis_pattern():
    text = "Scores -> funny: 4.2, accurate: 3, popular: -1.5 (thanks!)"
    assert parse_score_payload(text) == {"funny": 4.2, "accurate": 3.0, "popular": -1.5}


def test_parse_rejects_text_without_scores():
    with pytest.raises(RuntimeError):
        parse_score_payload("I cannot rate this.")


def test_prompt_single_and_dual():
    single = build_scoring_prompt(RemoteScoreRequest("ocean", SingleColor("#3b82f6")))
    assert "COLOR: #3b82f6" in single
    assert 'DESCRIPTION: "ocean"' in single
    assert "BOTH colors" not in single
    assert '{"funny": X.X, "accurate": X.X, "popular": X.X}' in single

    dual = build_scoring_prompt(RemoteScoreRequest("sunset", DualColor("#ff6b5c", "#facc15")))
    assert "GRADIENT: #ff6b5c -> #facc15" in dual
    assert "BOTH colors" in dual


def test_request_payload_omits_missing_credential():
    payload = RemoteScoreRequest("ocean", SingleColor("#3b82f6")).to_payload()
    assert payload == {"description": "ocean", "colorTarget": {"hex": "#3b82f6"}}


def test_gemini_without_key_raises():
    with pytest.raises(RuntimeError):
        asyncio.run(GeminiScorer().score(RemoteScoreRequest("ocean", SingleColor("#3b82f6"))))


def test_policy_from_env(monkeypatch):
    monkeypatch.setenv("AI_SCORING_ENABLED", "true")
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    monkeypatch.setenv("AI_SCORING_TIMEOUT", "2.5")
    monkeypatch.delenv("GEMINI_MODEL", raising=False)
    policy = ScoringPolicy.from_env()
    assert policy.remote_enabled is True
    assert policy.api_key == "secret"
    assert policy.remote_timeout == 2.5
    assert policy.model_name == "gemini-2.5-flash"
    assert policy.wants_remote()

    scorer = GeminiScorer.from_policy(policy)
    assert scorer.api_key == "secret"
    assert scorer.model_name == "gemini-2.5-flash"


def _install_fake_genai(monkeypatch, reply_text):
    calls = {}

    class FakeModel:
        def __init__(self, model_name, generation_config=None):
            calls["model_name"] = model_name
            calls["generation_config"] = generation_config

        async def generate_content_async(self, prompt):
            calls["prompt"] = prompt
            return SimpleNamespace(text=reply_text)

    genai = ModuleType("google.generativeai")
    genai.configure = lambda api_key=None: calls.__setitem__("api_key", api_key)
    genai.GenerativeModel = FakeModel
    google = ModuleType("google")
    google.generativeai = genai
    monkeypatch.setitem(sys.modules, "google", google)
    monkeypatch.setitem(sys.modules, "google.generativeai", genai)
    return calls


def test_gemini_scores_with_request_credential(monkeypatch):
    calls = _install_fake_genai(monkeypatch, '{"funny": 3.2, "accurate": 4.1, "popular": 2.5}')
    scorer = GeminiScorer(api_key="server-key")
    request = RemoteScoreRequest("blue and yellow", DualColor("#3b82f6", "#facc15"), credential="caller-key")

    scores = asyncio.run(scorer.score(request))

    assert scores == {"funny": 3.2, "accurate": 4.1, "popular": 2.5}
    assert calls["api_key"] == "caller-key"
    assert calls["model_name"] == "gemini-2.5-flash"
    assert calls["generation_config"] == {
        "temperature": 0.3,
        "max_output_tokens": 1024,
        "response_mime_type": "application/json",
    }
    assert "GRADIENT: #3b82f6 -> #facc15" in calls["prompt"]
    assert 'DESCRIPTION: "blue and yellow"' in calls["prompt"]


def test_gemini_falls_back_to_configured_key(monkeypatch):
    calls = _install_fake_genai(monkeypatch, '```json\n{"funny": 1, "accurate": 2, "popular": 3}\n```')
    scores = asyncio.run(GeminiScorer(api_key="server-key").score(RemoteScoreRequest("ocean", SingleColor("#3b82f6"))))
    assert calls["api_key"] == "server-key"
    assert scores == {"funny": 1, "accurate": 2, "popular": 3}


@pytest.mark.parametrize("reply", ["", "   ", None])
def test_gemini_empty_reply_raises(monkeypatch, reply):
    _install_fake_genai(monkeypatch, reply)
    with pytest.raises(RuntimeError, match="Gemini 채점 실패"):
        asyncio.run(GeminiScorer(api_key="k").score(RemoteScoreRequest("ocean", SingleColor("#3b82f6"))))
