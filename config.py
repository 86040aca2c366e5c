"""채점 전역 설정과 색상 분류 파라미터"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class AxisWeights:
    accurate: float = 0.4
    funny: float = 0.3
    popular: float = 0.3


# 가중치는 사용자 설정 대상이 아니다 (합계 1.0)
AXIS_WEIGHTS = AxisWeights()

AXIS_MIN = 0.0
AXIS_MAX = 5.0


# 색상 계열 hue 구간 (시작 이상, 끝 미만). red 는 0도를 감싸므로 두 구간으로 나눈다.
HUE_BANDS: Tuple[Tuple[str, float, float], ...] = (
    ("red", 0.0, 15.0),
    ("orange", 15.0, 45.0),
    ("yellow", 45.0, 75.0),
    ("green", 75.0, 165.0),
    ("blue", 165.0, 255.0),
    ("purple", 255.0, 345.0),
    ("red", 345.0, 360.0),
)


@dataclass(frozen=True)
class BrownCarveOut:
    """오렌지 hue 대역 안의 저채도/저명도 영역을 brown 으로 본다 (경험적 튜닝값)."""

    hue_min: float = 20.0
    hue_max: float = 45.0
    saturation_below: float = 50.0
    lightness_below: float = 60.0


BROWN_CARVE_OUT = BrownCarveOut()


@dataclass(frozen=True)
class AchromaticThresholds:
    black_lightness_below: float = 15.0
    white_lightness_above: float = 85.0
    white_saturation_below: float = 20.0
    gray_saturation_below: float = 15.0


ACHROMATIC = AchromaticThresholds()


@dataclass
class CacheConfig:
    max_size: int = 100
    ttl_seconds: float = 24 * 60 * 60


DEFAULT_CACHE_CONFIG = CacheConfig()


@dataclass
class ScoringPolicy:
    remote_enabled: bool = False
    api_key: Optional[str] = None
    # True 이면 원격 채점기 미연결을 배선 오류로 보고 예외를 던진다
    require_remote: bool = False
    remote_timeout: Optional[float] = None
    model_name: str = "gemini-2.5-flash"

    def wants_remote(self, credential: Optional[str] = None) -> bool:
        return self.remote_enabled and bool(credential or self.api_key)

    @classmethod
    def from_env(cls) -> "ScoringPolicy":
        enabled = os.environ.get("AI_SCORING_ENABLED", "").strip().lower() in ("1", "true", "yes")
        timeout_raw = os.environ.get("AI_SCORING_TIMEOUT", "").strip()
        timeout = float(timeout_raw) if timeout_raw else None
        return cls(
            remote_enabled=enabled,
            api_key=os.environ.get("GEMINI_API_KEY") or None,
            remote_timeout=timeout,
            model_name=os.environ.get("GEMINI_MODEL", cls.model_name),
        )


DEFAULT_POLICY = ScoringPolicy()
