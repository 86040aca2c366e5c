"""
원격 채점 Provider 어댑터

모든 주석/로그는 한국어로 작성합니다.
현재는 Gemini 전용 구현을 제공하며, 채점 요청/응답 계약은 RemoteScorer 인터페이스로 고정합니다.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import json
import re

from config import ScoringPolicy
from color_utils import ColorTarget, DualColor

AXES = ("funny", "accurate", "popular")

_AXIS_RE = re.compile(r'"?(funny|accurate|popular)"?\s*:\s*(-?\d+(?:\.\d+)?)', re.IGNORECASE)

SCORING_PROMPT = """You are an expert judge for a creative color description game. Rate the following description on three criteria:

{color_block}
DESCRIPTION: "{description}"

Rate each criterion from 0.0 to 5.0 (decimal precision):

1. FUNNY: How humorous, creative, or entertaining is this description?
   - Consider wordplay, metaphors, cultural references, unexpected comparisons
   - 0.0 = No humor, 5.0 = Genuinely hilarious

2. ACCURATE: How well does this description match the actual {accuracy_subject}?
   - Consider color theory, shade precision, visual accuracy{dual_rule}
   - 0.0 = Completely wrong, 5.0 = Perfectly accurate

3. POPULAR: Does this strike the right balance between unique and understandable?
   - 2.5 = Perfect balance (creative but accessible)
   - 0.0 = Too obscure/confusing, 5.0 = Too common/boring

Return ONLY this JSON format:
{{"funny": X.X, "accurate": X.X, "popular": X.X}}"""


@dataclass(frozen=True)
class RemoteScoreRequest:
    description: str
    target: ColorTarget
    # 호출 측이 넘긴 자격 증명. 이 객체 밖으로 저장/로깅하지 않는다.
    credential: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "description": self.description,
            "colorTarget": self.target.to_payload(),
        }
        if self.credential:
            payload["credential"] = self.credential
        return payload

    def __repr__(self) -> str:
        masked = "***" if self.credential else None
        return f"RemoteScoreRequest(description={self.description!r}, target={self.target!r}, credential={masked!r})"


class RemoteScorer:
    """Provider 인터페이스: 설명 하나를 채점해 {funny, accurate, popular} 매핑을 돌려준다."""

    async def score(self, request: RemoteScoreRequest) -> Mapping[str, Any]:  # pragma: no cover - 간단 인터페이스
        raise NotImplementedError


def build_scoring_prompt(request: RemoteScoreRequest) -> str:
    target = request.target
    if isinstance(target, DualColor):
        color_block = f"GRADIENT: {target.color_a} -> {target.color_b}"
        subject = "two gradient colors"
        dual_rule = "\n   - The description must cover BOTH colors to score high"
    else:
        color_block = f"COLOR: {target.hex}"
        subject = "color"
        dual_rule = ""
    return SCORING_PROMPT.format(
        color_block=color_block,
        description=request.description,
        accuracy_subject=subject,
        dual_rule=dual_rule,
    )


def _strip_fences(text: str) -> str:
    raw = text.strip()
    if "```" not in raw:
        return raw
    for part in raw.split("```"):
        part = part.strip()
        if part.startswith("json"):
            part = part[4:].strip()
        if part.startswith("{"):
            return part
    return raw


def parse_score_payload(text: str) -> Dict[str, Any]:
    """모델 응답에서 점수 JSON 을 꺼낸다. 값 검증은 호출 측(중재기) 몫."""
    raw = _strip_fences(text or "")
    try:
        data = json.loads(raw)
        if isinstance(data, dict):
            return data
    except ValueError:
        pass
    # JSON 파싱 실패 시, "축: 숫자" 패턴 추출
    found = {name.lower(): float(value) for name, value in _AXIS_RE.findall(raw)}
    if not found:
        raise RuntimeError("LLM 응답에서 점수를 찾지 못했습니다")
    return found


@dataclass
class GeminiScorer(RemoteScorer):
    """
    Google Gemini 로 설명을 채점한다.
    실패 시 예외를 던지고, 상위 레이어(ScoringArbitrator)에서 휴리스틱으로 폴백하도록 한다.
    """

    api_key: Optional[str] = None
    model_name: str = "gemini-2.5-flash"
    temperature: float = 0.3
    # 2.5 계열은 사고(thinking) 토큰도 출력 예산에서 쓴다
    max_output_tokens: int = 1024

    @classmethod
    def from_policy(cls, policy: ScoringPolicy) -> "GeminiScorer":
        return cls(api_key=policy.api_key, model_name=policy.model_name)

    async def score(self, request: RemoteScoreRequest) -> Mapping[str, Any]:
        # API 키는 절대 로그에 출력하지 않는다.
        key = request.credential or self.api_key
        if not key:
            raise RuntimeError("Gemini API 키가 설정되지 않았습니다")
        try:
            import google.generativeai as genai
        except Exception as e:
            raise RuntimeError("Gemini 라이브러리를 불러오지 못했습니다: " + str(e))

        try:
            genai.configure(api_key=key)
            model = genai.GenerativeModel(
                self.model_name,
                generation_config={
                    "temperature": self.temperature,
                    "max_output_tokens": self.max_output_tokens,
                    "response_mime_type": "application/json",
                },
            )
            resp = await model.generate_content_async(build_scoring_prompt(request))
            text = (resp.text or "").strip()
            if not text:
                raise RuntimeError("Gemini 응답이 비어 있습니다")
            return parse_score_payload(text)
        except Exception as e:
            # 한국어 에러 메시지로 래핑하여 상위 레이어에 전달
            raise RuntimeError(f"Gemini 채점 실패: {e}")
