from __future__ import annotations

import random
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from description_scoring.aggregate import aggregate, overall_score
from description_scoring.heuristic import (
    heuristic_axes,
    score_accuracy,
    score_description,
    score_funny,
    score_popularity,
)
from color_utils import DualColor, SingleColor
from description_scoring.models import ScoreResult
from lexicon import COLOR_FAMILY_TOKENS, GENERIC_PHRASES, HUMOR_KEYWORDS, POP_CULTURE_REFERENCES

BLUE = SingleColor("#3B82F6")
NAVY = SingleColor("#1E3A8A")
GRAY = SingleColor("#808080")
BLUE_YELLOW = DualColor("#3B82F6", "#FACC15")


def assert_overall_invariant(result: ScoreResult) -> None:
    expected = round(0.4 * result.accurate + 0.3 * result.funny + 0.3 * result.popular, 1)
    assert result.overall == expected


@pytest.mark.parametrize("text", ["", "   ", "\n\t "])
@pytest.mark.parametrize("target", [BLUE, BLUE_YELLOW])
def test_empty_description_scores_zero(text, target):
    assert score_description(text, target) == ScoreResult.zero()


def test_no_color_token_caps_accuracy():
    # 파란색이지만 파란 계열 단어가 없다
    assert score_accuracy("sad robot tears", BLUE) <= 1.5
    assert score_accuracy("sad robot tears", BLUE) == 0.0
    # 묘사 보너스가 있어도 색 이름이 없으면 1.5 를 넘지 않는다
    assert score_accuracy("so bright and vibrant", SingleColor("#7DF9FF")) == 1.5


def test_single_common_word_blue():
    result = score_description("blue", BLUE)
    assert result.accurate == 3.5
    assert result.funny == 0.0
    assert result.popular == 1.0
    assert_overall_invariant(result)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("sapphire", 4.0),  # 긴(구체적인) 이름 가산
        ("purple", 2.0),  # 인접 계열
        ("yellow", 0.5),  # 다른 계열
        ("yellow or blue", 3.5),  # 가장 높은 크레딧
        ("dark navy", 3.5),  # 밝은 파랑이라 어두움 보너스 없음
    ],
)
def test_accuracy_family_credit(text, expected):
    assert score_accuracy(text, BLUE) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["green", "greens", "greenish"])
def test_inflection_does_not_earn_long_name_bonus(text):
    assert score_accuracy(text, SingleColor("#22C55E")) == pytest.approx(3.5)


def test_accuracy_descriptor_bonuses():
    assert score_accuracy("dark navy", NAVY) == pytest.approx(4.5)
    assert score_accuracy("dusty gray", GRAY) == pytest.approx(4.0)


def test_accuracy_unparseable_color_falls_back_to_gray():
    assert score_accuracy("gray", SingleColor("not-a-color")) == pytest.approx(3.5)


def test_dual_accuracy_rewards_both_colors():
    both = score_accuracy("blue and yellow", BLUE_YELLOW)
    only_one = score_accuracy("blue", BLUE_YELLOW)
    same_twice = score_accuracy("blue sky", BLUE_YELLOW)
    # 파랑 3.5 + 노랑("yellow" 는 6자라 +0.5) 4.0 의 평균
    assert both == pytest.approx(3.75)
    assert only_one == pytest.approx(1.75)
    assert only_one < both
    assert same_twice < both


@pytest.mark.parametrize(
    "text, expected",
    [
        ("nice", 0.0),
        ("a funky groovy sassy wild crazy thing", 3.5),
        ("wow!!!!", 0.6),
        ("like a pickle", 0.7),
        ("sad robot tears", 0.5),
    ],
)
def test_funny_axis(text, expected):
    assert score_funny(text) == pytest.approx(expected)


def test_funny_length_tiers():
    assert score_funny("cat " * 4) == pytest.approx(0.5)
    assert score_funny("cat " * 5) == pytest.approx(1.0)
    assert score_funny("cat " * 8) == pytest.approx(1.5)
    assert score_funny("cat " * 12) == pytest.approx(2.0)


@pytest.mark.parametrize(
    "count, expected",
    [(1, 1.0), (3, 2.0), (4, 3.8), (5, 4.5), (10, 4.5), (11, 3.8), (13, 3.0), (16, 2.2), (25, 1.5)],
)
def test_popularity_word_count_tiers(count, expected):
    assert score_popularity(" ".join(["cat"] * count)) == pytest.approx(expected)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("marvelous splendid glorious fantastic", 4.6),
        ("marvelous splendid glorious fantastic wonderful", 4.2),
        ("maybe cat maybe dog", 3.0),
        ("nice good pretty cat", 1.7),
        ("sad robot tears", 2.4),
    ],
)
def test_popularity_axis(text, expected):
    assert score_popularity(text) == pytest.approx(expected)


def _random_description(rng: random.Random, length: int) -> str:
    vocab = (
        [t for tokens in COLOR_FAMILY_TOKENS.values() for t in tokens]
        + list(HUMOR_KEYWORDS)
        + list(GENERIC_PHRASES)
        + list(POP_CULTURE_REFERENCES)
        + ["like", "kind of", "looks like", "exactly", "maybe", "dark", "bright", "muted", "vivid", "!", "?", "zzz"]
    )
    parts = []
    size = 0
    while size < length:
        word = rng.choice(vocab)
        parts.append(word)
        size += len(word) + 1
    return " ".join(parts)[:length]


@pytest.mark.parametrize("length", [0, 1, 7, 40, 300, 2000, 10000])
def test_axes_stay_in_range(length):
    rng = random.Random(length)
    targets = [BLUE, NAVY, GRAY, BLUE_YELLOW, SingleColor("#FFFFFF"), DualColor("#000000", "#6F4E37")]
    for _ in range(5):
        text = _random_description(rng, length)
        for target in targets:
            axes = heuristic_axes(text, target)
            for value in (axes.funny, axes.accurate, axes.popular):
                assert 0.0 <= value <= 5.0
            result = score_description(text, target)
            assert 0.0 <= result.overall <= 5.0
            assert_overall_invariant(result)


def test_aggregate_rounds_axes_then_weights():
    result = aggregate(2.04, 3.96, 1.26)
    assert (result.funny, result.accurate, result.popular) == (2.0, 4.0, 1.3)
    assert result.overall == 2.6
    assert_overall_invariant(result)
    assert overall_score(5.0, 5.0, 5.0) == 5.0
    assert overall_score(0.0, 0.0, 0.0) == 0.0
