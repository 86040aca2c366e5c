"""채점 입출력 데이터 모델"""
from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict

SOURCE_REMOTE = "remote"
SOURCE_HEURISTIC = "heuristic"


@dataclass(frozen=True)
class ScoreResult:
    funny: float
    accurate: float
    popular: float
    overall: float

    @classmethod
    def zero(cls) -> "ScoreResult":
        return cls(funny=0.0, accurate=0.0, popular=0.0, overall=0.0)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class ScoreResponse:
    scores: ScoreResult
    cached_hit: bool = False
    source: str = SOURCE_HEURISTIC
    processing_time_ms: float = 0.0

    def as_cache_hit(self) -> "ScoreResponse":
        return replace(self, cached_hit=True)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scores": self.scores.to_dict(),
            "cachedHit": self.cached_hit,
            "source": self.source,
            "processingTime": round(self.processing_time_ms, 1),
        }
