"""RGB 공간 색 거리"""
from __future__ import annotations

import numpy as np

from color_utils import hex_to_rgb

# sqrt(3 * 255^2)
MAX_RGB_DISTANCE = float(np.sqrt(3 * 255.0 ** 2))


def color_distance(hex_a: str, hex_b: str) -> float:
    """유클리드 RGB 거리 (0 ~ 약 441). 어느 한쪽이라도 파싱 불가면 0."""
    rgb_a = hex_to_rgb(hex_a)
    rgb_b = hex_to_rgb(hex_b)
    if rgb_a is None or rgb_b is None:
        return 0.0
    diff = np.asarray(rgb_a, dtype=float) - np.asarray(rgb_b, dtype=float)
    return float(np.linalg.norm(diff))
