"""HSL 기반 대표 색상 계열 분류"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from color_utils import hex_to_rgb, rgb_to_hsl
from config import ACHROMATIC, BROWN_CARVE_OUT, HUE_BANDS

FAMILIES = ("red", "orange", "yellow", "green", "blue", "purple", "brown", "gray", "black", "white")

NEUTRAL_FAMILY = "gray"


def classify_dominant_family(hsl: Tuple[float, float, float]) -> str:
    h, s, l = hsl
    if l < ACHROMATIC.black_lightness_below:
        return "black"
    if l > ACHROMATIC.white_lightness_above and s < ACHROMATIC.white_saturation_below:
        return "white"
    if s < ACHROMATIC.gray_saturation_below:
        return "gray"

    hue = h % 360.0
    brown = BROWN_CARVE_OUT
    if brown.hue_min <= hue < brown.hue_max and s < brown.saturation_below and l < brown.lightness_below:
        return "brown"

    for family, start, end in HUE_BANDS:
        if start <= hue < end:
            return family
    return NEUTRAL_FAMILY


@dataclass(frozen=True)
class ColorProfile:
    family: str
    rgb: Optional[Tuple[int, int, int]]
    saturation: float


def profile_hex(hex_color: str) -> ColorProfile:
    """HEX 를 계열/RGB/채도로. 파싱 불가 입력은 중립(gray), rgb=None."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return ColorProfile(family=NEUTRAL_FAMILY, rgb=None, saturation=0.0)
    hsl = rgb_to_hsl(*rgb)
    return ColorProfile(family=classify_dominant_family(hsl), rgb=rgb, saturation=hsl[1])


def family_of_hex(hex_color: str) -> str:
    return profile_hex(hex_color).family
