"""설명 채점용 어휘 테이블 (프로세스 전역 상수, 런타임 변경 없음)"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Iterable, Mapping, Pattern, Tuple


def _word_pattern(terms: Iterable[str], suffix: str = "") -> Pattern[str]:
    alternation = "|".join(re.escape(t) for t in sorted(terms, key=len, reverse=True))
    return re.compile(rf"\b(?:{alternation}){suffix}\b", re.IGNORECASE)


def _prefix_pattern(terms: Iterable[str]) -> Pattern[str]:
    alternation = "|".join(re.escape(t) for t in sorted(terms, key=len, reverse=True))
    return re.compile(rf"\b(?:{alternation})", re.IGNORECASE)


def _color_pattern(terms: Iterable[str]) -> Pattern[str]:
    # 어미(s/es/ish)는 매칭만 하고 "base" 그룹에서는 뺀다
    alternation = "|".join(re.escape(t) for t in sorted(terms, key=len, reverse=True))
    return re.compile(rf"\b(?P<base>{alternation})(?:s|es|ish)?\b", re.IGNORECASE)


COLOR_FAMILY_TOKENS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "red": ("red", "crimson", "scarlet", "cherry", "ruby", "maroon", "burgundy", "vermilion", "brick"),
    "pink": ("pink", "rose", "blush", "fuchsia", "salmon", "flamingo", "bubblegum"),
    "orange": ("orange", "tangerine", "peach", "coral", "apricot", "rust", "pumpkin"),
    "yellow": ("yellow", "gold", "golden", "amber", "lemon", "canary", "butter", "mustard", "banana"),
    "green": ("green", "emerald", "jade", "lime", "olive", "mint", "forest", "sage", "moss", "avocado"),
    "blue": ("blue", "navy", "azure", "cyan", "turquoise", "teal", "cobalt", "sapphire", "sky", "ocean", "denim", "cerulean"),
    "purple": ("purple", "violet", "magenta", "plum", "lavender", "orchid", "indigo", "lilac", "grape", "mauve"),
    "brown": ("brown", "tan", "beige", "mocha", "chocolate", "coffee", "caramel", "chestnut", "khaki", "taupe"),
    "gray": ("gray", "grey", "silver", "charcoal", "ash", "slate", "pewter", "smoke"),
    "black": ("black", "onyx", "ebony", "coal", "midnight", "obsidian", "jet"),
    "white": ("white", "cream", "ivory", "pearl", "snow", "vanilla", "chalk"),
})

COLOR_TOKEN_PATTERNS: Mapping[str, Pattern[str]] = MappingProxyType({
    family: _color_pattern(tokens)
    for family, tokens in COLOR_FAMILY_TOKENS.items()
})

CLOSE_FAMILIES: Mapping[str, frozenset] = MappingProxyType({
    "red": frozenset({"pink", "orange", "purple"}),
    "orange": frozenset({"red", "yellow", "brown"}),
    "yellow": frozenset({"orange", "green"}),
    "green": frozenset({"yellow", "blue"}),
    "blue": frozenset({"green", "purple"}),
    "purple": frozenset({"blue", "red", "pink"}),
    "pink": frozenset({"red", "purple"}),
    "brown": frozenset({"orange", "red"}),
})

HUMOR_PATTERNS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "attitude": ("funky", "groovy", "sassy", "wild", "crazy", "wacky", "zesty", "spicy", "fierce"),
    "drama": ("dramatic", "moody", "rebellious", "mysterious", "sulky", "grumpy", "cursed"),
    "fantasy": ("electric", "cosmic", "magical", "dreamy", "enchanted", "alien", "haunted"),
    "food": ("soggy", "burnt", "moldy", "greasy", "cheesy", "expired", "leftover"),
    "absurd": ("goofy", "silly", "ridiculous", "awkward", "embarrass", "confused", "chaotic"),
})

HUMOR_KEYWORDS: Tuple[str, ...] = tuple(kw for tokens in HUMOR_PATTERNS.values() for kw in tokens)

POP_CULTURE_REFERENCES: Tuple[str, ...] = (
    "shrek", "barbie", "minecraft", "pikachu", "pokemon", "hulk", "grinch", "yoda",
    "simpsons", "spongebob", "smurf", "elmo", "kermit", "minion", "batman", "joker",
    "starbucks", "mcdonalds", "ikea", "lego", "nintendo", "tiktok", "netflix",
    "star wars", "harry potter", "the matrix", "oompa loompa", "willy wonka", "gatsby",
)
POP_CULTURE_RE = _word_pattern(POP_CULTURE_REFERENCES, suffix="(?:'s|s)?")

CONVERSATIONAL_PATTERNS: Tuple[Pattern[str], ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"\bkind of\b",
        r"\bsort of\b",
        r"\blooks like\b",
        r"\bfeels like\b",
        r"\bsmells like\b",
        r"\bmakes \w+ feel\b",
        r"\byou know\b",
        r"\bbasically\b",
        r"\bimagine\b",
        r"\bwhen you\b",
    )
)

COMPARISON_MARKERS_RE = _word_pattern(("like", "as if", "reminds me"))

EMOTIONAL_WORDS: Tuple[str, ...] = (
    "happy", "sad", "angry", "lonely", "joyful", "cozy", "calm", "anxious",
    "nostalgic", "gloomy", "cheerful", "melancholy", "excited", "peaceful",
    "bitter", "hopeful", "nervous", "furious", "heartbroken", "love",
)
EMOTIONAL_RE = _word_pattern(EMOTIONAL_WORDS)

GENERIC_PHRASES: Tuple[str, ...] = (
    "nice", "pretty", "good", "okay", "ok", "normal", "regular", "standard",
    "basic", "simple", "plain", "boring", "ugly", "bad", "weird", "cool", "fine",
)
GENERIC_SET = frozenset(GENERIC_PHRASES)
GENERIC_RE = _word_pattern(GENERIC_PHRASES)

LIGHTNESS_RE = _prefix_pattern(("light", "bright", "pale", "pastel", "washed", "faded"))
DARKNESS_RE = _prefix_pattern(("dark", "deep", "rich", "intense", "bold", "vivid"))
VIVIDNESS_RE = _prefix_pattern(("vibrant", "saturated", "vivid"))
MUTED_RE = _prefix_pattern(("muted", "dull", "dusty", "grayish", "greyish", "desaturated"))

SPECIFICITY_RE = _word_pattern(("exactly", "precisely", "specifically", "distinctly", "particularly"))
VAGUENESS_RE = _word_pattern(("somewhat", "maybe", "possibly", "unclear", "undefined"))
