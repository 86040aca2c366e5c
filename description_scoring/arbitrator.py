"""휴리스틱/원격 채점 중재기

요청 하나의 흐름: 판단 → (로컬 | 원격) → 원격 실패 시 로컬 폴백 → 완료.
원격 결과만 캐시에 들어가며, 설명/색상 때문에 생기는 실패는 모두 흡수해서
호출 측은 항상 점수를 받는다.
"""
from __future__ import annotations

import asyncio
import logging
import math
import time
from numbers import Real
from typing import Any, Mapping, Optional, Tuple

from color_utils import ColorTarget, clamp
from config import AXIS_MAX, AXIS_MIN, DEFAULT_POLICY, ScoringPolicy
from description_scoring.aggregate import aggregate
from description_scoring.cache import ResponseCache, make_key
from description_scoring.heuristic import score_description
from description_scoring.models import SOURCE_HEURISTIC, SOURCE_REMOTE, ScoreResponse, ScoreResult
from llm_providers import AXES, RemoteScorer, RemoteScoreRequest

logger = logging.getLogger("whats_that_color")


class ScoringConfigurationError(RuntimeError):
    """원격 채점을 강제했는데 원격 채점기가 연결되지 않은 배선 오류."""


class RemoteContractError(ValueError):
    pass


def validate_remote_scores(payload: Any) -> Tuple[float, float, float]:
    """원격 응답에서 세 축을 꺼내 [0, 5] 로 자른다. 원격은 신뢰하지 않는다."""
    if not isinstance(payload, Mapping):
        raise RemoteContractError(f"원격 응답 형식 오류: {type(payload).__name__}")
    values = []
    for axis in AXES:
        value = payload.get(axis)
        if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
            raise RemoteContractError(f"원격 응답의 {axis} 값이 숫자가 아님: {value!r}")
        values.append(clamp(float(value), AXIS_MIN, AXIS_MAX))
    funny, accurate, popular = values
    return funny, accurate, popular


class ScoringArbitrator:
    def __init__(
        self,
        remote: Optional[RemoteScorer] = None,
        cache: Optional[ResponseCache] = None,
        policy: Optional[ScoringPolicy] = None,
    ) -> None:
        self.remote = remote
        self.cache = cache if cache is not None else ResponseCache()
        self.policy = policy or DEFAULT_POLICY

    def score_local(self, description: str, target: ColorTarget) -> ScoreResponse:
        started = time.perf_counter()
        result = score_description(description, target)
        return ScoreResponse(
            scores=result,
            cached_hit=False,
            source=SOURCE_HEURISTIC,
            processing_time_ms=(time.perf_counter() - started) * 1000.0,
        )

    def _use_remote(self, credential: Optional[str]) -> bool:
        if not self.policy.wants_remote(credential):
            return False
        if self.remote is None:
            if self.policy.require_remote:
                raise ScoringConfigurationError("원격 채점이 요구되었지만 원격 채점기가 연결되지 않았습니다")
            logger.warning("[경고] 원격 채점기가 없어 휴리스틱 채점으로 진행")
            return False
        return True

    async def score(self, description: str, target: ColorTarget, credential: Optional[str] = None) -> ScoreResponse:
        text = (description or "").strip()
        if not text:
            return ScoreResponse(scores=ScoreResult.zero(), cached_hit=False, source=SOURCE_HEURISTIC)

        if not self._use_remote(credential):
            return self.score_local(text, target)

        key = make_key(text, target)
        cached = self.cache.get(key)
        if cached is not None:
            logger.info("[정보] 캐시 적중: %s", key)
            return cached

        started = time.perf_counter()
        request = RemoteScoreRequest(
            description=text,
            target=target.normalized(),
            credential=credential or self.policy.api_key,
        )
        try:
            payload = await self._call_remote(request)
            funny, accurate, popular = validate_remote_scores(payload)
        except Exception as e:
            logger.warning("[경고] 원격 채점 실패, 휴리스틱으로 폴백: %s", e)
            return self.score_local(text, target)

        response = ScoreResponse(
            scores=aggregate(funny, accurate, popular),
            cached_hit=False,
            source=SOURCE_REMOTE,
            processing_time_ms=(time.perf_counter() - started) * 1000.0,
        )
        self.cache.set(key, response)
        logger.info(
            "[정보] 원격 채점 완료: 유머=%.1f, 정확도=%.1f, 대중성=%.1f → 종합 %.1f",
            response.scores.funny,
            response.scores.accurate,
            response.scores.popular,
            response.scores.overall,
        )
        return response

    async def _call_remote(self, request: RemoteScoreRequest) -> Any:
        call = self.remote.score(request)
        if self.policy.remote_timeout is not None:
            return await asyncio.wait_for(call, timeout=self.policy.remote_timeout)
        return await call
