"""어휘/구조 기반 휴리스틱 채점기

원격 채점이 꺼져 있거나 실패했을 때 쓰는 로컬 채점 경로다. 입출력 없이
(설명, 대상 색상) 만으로 결정되며, 세 축 점수는 각각 [0, 5] 로 잘린다.

- funny: 길이, 유머 어휘, 대중문화 언급, 구어체 패턴, 비유, 감정어, 느낌표
- accurate: 대표 색상 계열과 설명 속 색 이름의 일치도, 명도/채도 묘사
- popular: 3.0 에서 출발해 길이, 창의어 밀도, 구체성/모호성으로 가감
"""
from __future__ import annotations

import string
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from color_metrics.classify import ColorProfile, profile_hex
from color_utils import ColorTarget, brightness, clamp
from config import AXIS_MAX, AXIS_MIN
from description_scoring.aggregate import aggregate
from description_scoring.models import ScoreResult
from lexicon import (
    CLOSE_FAMILIES,
    COLOR_TOKEN_PATTERNS,
    COMPARISON_MARKERS_RE,
    CONVERSATIONAL_PATTERNS,
    DARKNESS_RE,
    EMOTIONAL_RE,
    GENERIC_RE,
    GENERIC_SET,
    HUMOR_KEYWORDS,
    LIGHTNESS_RE,
    MUTED_RE,
    POP_CULTURE_RE,
    SPECIFICITY_RE,
    VAGUENESS_RE,
    VIVIDNESS_RE,
)

NO_COLOR_TOKEN_CAP = 1.5


@dataclass
class AxisScores:
    funny: float
    accurate: float
    popular: float


@dataclass(frozen=True)
class ColorMention:
    start: int
    family: str
    token: str


def _capped(count: int, per_match: float, cap: float) -> float:
    return min(count * per_match, cap)


def _conversational_count(lower: str) -> int:
    return sum(len(p.findall(lower)) for p in CONVERSATIONAL_PATTERNS)


def find_color_mentions(lower: str) -> List[ColorMention]:
    mentions = [
        ColorMention(start=m.start(), family=family, token=m.group("base"))
        for family, pattern in COLOR_TOKEN_PATTERNS.items()
        for m in pattern.finditer(lower)
    ]
    mentions.sort(key=lambda m: m.start)
    return mentions


def mention_credit(mention: ColorMention, dominant: str) -> float:
    if mention.family == dominant:
        return 3.5 + (0.5 if len(mention.token) > 5 else 0.0)
    if mention.family in CLOSE_FAMILIES.get(dominant, frozenset()):
        return 2.0
    return 0.5


def _descriptor_bonus(lower: str, profile: ColorProfile) -> float:
    if profile.rgb is None:
        return 0.0
    bonus = 0.0
    level = brightness(profile.rgb)
    if level > 180 and LIGHTNESS_RE.search(lower):
        bonus += 1.0
    elif level < 80 and DARKNESS_RE.search(lower):
        bonus += 1.0
    if profile.saturation > 70 and VIVIDNESS_RE.search(lower):
        bonus += 0.5
    elif profile.saturation < 30 and MUTED_RE.search(lower):
        bonus += 0.5
    return bonus


def _color_score(credit: float, bonus: float, any_mention: bool) -> float:
    total = credit + bonus
    if not any_mention:
        total = min(total, NO_COLOR_TOKEN_CAP)
    return clamp(total, AXIS_MIN, AXIS_MAX)


def _top_two(credits: Sequence[float]) -> List[int]:
    return sorted(range(len(credits)), key=lambda i: credits[i], reverse=True)[:2]


def _best_dual_credits(mentions: Sequence[ColorMention], dominant_a: str, dominant_b: str) -> Tuple[float, float]:
    # 하나의 언급은 한쪽 색에만 배정된다
    if not mentions:
        return 0.0, 0.0
    credits_a = [mention_credit(m, dominant_a) for m in mentions]
    credits_b = [mention_credit(m, dominant_b) for m in mentions]
    if len(mentions) == 1:
        return max((credits_a[0], 0.0), (0.0, credits_b[0]), key=sum)
    best: Tuple[float, float] = (0.0, 0.0)
    for i in _top_two(credits_a):
        for j in _top_two(credits_b):
            if i != j and credits_a[i] + credits_b[j] > sum(best):
                best = (credits_a[i], credits_b[j])
    return best


def score_funny(text: str) -> float:
    lower = text.lower()
    words = lower.split()
    n = len(words)
    score = 0.0

    if n >= 12:
        score += 1.5
    elif n >= 8:
        score += 1.0
    elif n >= 5:
        score += 0.5

    humor_hits = {kw for kw in HUMOR_KEYWORDS if any(kw in w for w in words)}
    score += _capped(len(humor_hits), 0.6, 2.5)
    score += _capped(len(POP_CULTURE_RE.findall(lower)), 0.8, 1.5)
    score += _capped(_conversational_count(lower), 0.4, 1.0)
    if COMPARISON_MARKERS_RE.search(lower):
        score += 0.7
    score += _capped(len(EMOTIONAL_RE.findall(lower)), 0.5, 1.0)

    generic = len(GENERIC_RE.findall(lower))
    score -= 0.8 * generic
    if n > 3 and generic == 0:
        score += 0.5

    score += _capped(lower.count("!"), 0.3, 0.6)
    return clamp(score, AXIS_MIN, AXIS_MAX)


def score_accuracy(text: str, target: ColorTarget) -> float:
    lower = text.lower()
    mentions = find_color_mentions(lower)
    profiles = [profile_hex(h) for h in target.hexes]
    any_mention = bool(mentions)

    if len(profiles) == 1:
        profile = profiles[0]
        credit = max((mention_credit(m, profile.family) for m in mentions), default=0.0)
        return _color_score(credit, _descriptor_bonus(lower, profile), any_mention)

    profile_a, profile_b = profiles
    credit_a, credit_b = _best_dual_credits(mentions, profile_a.family, profile_b.family)
    score_a = _color_score(credit_a, _descriptor_bonus(lower, profile_a), any_mention)
    score_b = _color_score(credit_b, _descriptor_bonus(lower, profile_b), any_mention)
    return clamp((score_a + score_b) / 2.0, AXIS_MIN, AXIS_MAX)


def _length_shape(n: int) -> float:
    if n < 2:
        return -2.0
    if n < 4:
        return -1.0
    if 5 <= n <= 10:
        return 1.5
    if 4 <= n <= 12:
        return 0.8
    if n > 20:
        return -1.5
    if n >= 15:
        return -0.8
    return 0.0


def score_popularity(text: str) -> float:
    lower = text.lower()
    words = lower.split()
    score = 3.0

    score -= 0.7 * len(GENERIC_RE.findall(lower))
    score += _length_shape(len(words))

    stripped = (w.strip(string.punctuation) for w in words)
    creative = [w for w in stripped if len(w) > 6 and w not in GENERIC_SET]
    if 1 <= len(creative) <= 4:
        score += 0.8
    elif len(creative) > 4:
        # 너무 빽빽하면 오히려 접근성이 떨어진다
        score -= 0.3

    score += _capped(len(POP_CULTURE_RE.findall(lower)), 0.6, 1.2)
    score += _capped(len(EMOTIONAL_RE.findall(lower)), 0.4, 1.0)
    score += _capped(_conversational_count(lower), 0.5, 1.0)
    if SPECIFICITY_RE.search(lower):
        score += 0.5
    score -= 0.4 * len(VAGUENESS_RE.findall(lower))
    if "?" in text:
        score += 0.4
    return clamp(score, AXIS_MIN, AXIS_MAX)


def heuristic_axes(description: str, target: ColorTarget) -> AxisScores:
    """반올림 전 축 점수. 공백뿐인 설명은 모두 0."""
    text = (description or "").strip()
    if not text:
        return AxisScores(funny=0.0, accurate=0.0, popular=0.0)
    return AxisScores(
        funny=score_funny(text),
        accurate=score_accuracy(text, target),
        popular=score_popularity(text),
    )


def score_description(description: str, target: ColorTarget) -> ScoreResult:
    axes = heuristic_axes(description, target)
    return aggregate(axes.funny, axes.accurate, axes.popular)
