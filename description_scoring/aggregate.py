"""세 축 점수를 가중 합산한 종합 점수"""
from __future__ import annotations

from color_utils import round1
from config import AXIS_WEIGHTS
from description_scoring.models import ScoreResult


def overall_score(funny: float, accurate: float, popular: float) -> float:
    weighted = AXIS_WEIGHTS.accurate * accurate + AXIS_WEIGHTS.funny * funny + AXIS_WEIGHTS.popular * popular
    return round1(weighted)


def aggregate(funny: float, accurate: float, popular: float) -> ScoreResult:
    """축 점수를 소수 첫째 자리로 반올림한 뒤, 반올림된 값으로 종합 점수를 계산한다."""
    f, a, p = round1(funny), round1(accurate), round1(popular)
    return ScoreResult(funny=f, accurate=a, popular=p, overall=overall_score(f, a, p))
