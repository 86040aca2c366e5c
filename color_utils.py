"""색상 변환 유틸"""
from __future__ import annotations

import colorsys
import re
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

HEX_RE = re.compile(r"^#([0-9A-Fa-f]{6})$")


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def round1(x: float) -> float:
    return round(float(x), 1)


def validate_hex(s: str) -> bool:
    return isinstance(s, str) and bool(HEX_RE.match(s.strip()))


def hex_to_rgb(s: str) -> Optional[Tuple[int, int, int]]:
    """#RRGGBB 를 RGB 로 변환한다. 형식이 틀리면 예외 대신 None."""
    if not isinstance(s, str):
        return None
    m = HEX_RE.match(s.strip())
    if not m:
        return None
    val = m.group(1)
    return int(val[0:2], 16), int(val[2:4], 16), int(val[4:6], 16)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    if not (0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255):
        raise ValueError("RGB 범위는 0~255야.")
    return f"#{r:02X}{g:02X}{b:02X}"


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """h 는 [0, 360), s/l 은 [0, 100]. 무채색이면 h=0."""
    h, l, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
    return (h * 360.0) % 360.0, s * 100.0, l * 100.0


def brightness(rgb: Tuple[int, int, int]) -> float:
    r, g, b = rgb
    return (r + g + b) / 3.0


def relative_luminance(r: int, g: int, b: int) -> float:
    # WCAG 상대 휘도
    def _channel(c: int) -> float:
        v = c / 255.0
        return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4

    return 0.2126 * _channel(r) + 0.7152 * _channel(g) + 0.0722 * _channel(b)


def is_light_color(hex_color: str) -> bool:
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        # 파싱 불가 시 밝은 배경으로 간주
        return True
    return relative_luminance(*rgb) > 0.5


def contrasting_text_color(hex_color: str) -> str:
    return "black" if is_light_color(hex_color) else "white"


# 채점 대상 색상: 단색 또는 2색 그라데이션
@dataclass(frozen=True)
class SingleColor:
    hex: str

    @property
    def hexes(self) -> Tuple[str, ...]:
        return (self.hex,)

    def normalized(self) -> "SingleColor":
        return SingleColor(hex=self.hex.strip().lower())

    def key_fragment(self) -> str:
        return self.hex.strip().lower()

    def to_payload(self) -> Dict[str, str]:
        return {"hex": self.hex}


@dataclass(frozen=True)
class DualColor:
    color_a: str
    color_b: str

    @property
    def hexes(self) -> Tuple[str, ...]:
        return (self.color_a, self.color_b)

    def normalized(self) -> "DualColor":
        return DualColor(color_a=self.color_a.strip().lower(), color_b=self.color_b.strip().lower())

    def key_fragment(self) -> str:
        # 순서 고정: colorA_colorB
        return f"{self.color_a.strip().lower()}_{self.color_b.strip().lower()}"

    def to_payload(self) -> Dict[str, str]:
        return {"colorA": self.color_a, "colorB": self.color_b}


ColorTarget = Union[SingleColor, DualColor]

