"""무작위 색상/듀얼 색상 쌍 생성"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from color_metrics.distance import color_distance
from color_utils import DualColor, rgb_to_hex

logger = logging.getLogger("whats_that_color")

DIFFERENT_COLOR_MAX_ATTEMPTS = 10
DUAL_PAIR_MAX_ATTEMPTS = 20


def generate_random_color(rng: Optional[np.random.Generator] = None) -> str:
    gen = rng if rng is not None else np.random.default_rng()
    r, g, b = (int(v) for v in gen.integers(0, 256, size=3))
    return rgb_to_hex(r, g, b)


def generate_different_color(previous: str, rng: Optional[np.random.Generator] = None) -> str:
    """직전 색과 다른 색을 뽑는다. 시도 횟수 상한을 넘기면 같은 색이 나올 수도 있다."""
    gen = rng if rng is not None else np.random.default_rng()
    color = generate_random_color(gen)
    attempts = 0
    while color.lower() == (previous or "").lower() and attempts < DIFFERENT_COLOR_MAX_ATTEMPTS:
        color = generate_random_color(gen)
        attempts += 1
    return color


def generate_dual_color_pair(min_distance: float = 100.0, rng: Optional[np.random.Generator] = None) -> DualColor:
    gen = rng if rng is not None else np.random.default_rng()
    color_a = generate_random_color(gen)
    color_b = generate_random_color(gen)
    attempts = 0
    while color_distance(color_a, color_b) < min_distance and attempts < DUAL_PAIR_MAX_ATTEMPTS:
        color_b = generate_random_color(gen)
        attempts += 1
    if color_distance(color_a, color_b) < min_distance:
        logger.info("[정보] 듀얼 색상 최소 거리 %.1f 미달 (%s, %s), 최선 결과 사용", min_distance, color_a, color_b)
    return DualColor(color_a=color_a, color_b=color_b)
