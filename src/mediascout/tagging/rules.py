"""Keyword table used to tag release titles."""

from __future__ import annotations

import re
from dataclasses import dataclass

from mediascout.shared.enums import TagCategory


@dataclass(frozen=True)
class TagRule:
    """One probe: when ``pattern`` matches a title, ``label`` joins ``category``."""

    category: TagCategory
    label: str
    pattern: re.Pattern[str]

    def matches(self, title: str) -> bool:
        return self.pattern.search(title) is not None


def make_rule(category: TagCategory, label: str, *tokens: str) -> TagRule:
    """Build a case-insensitive rule matching any of ``tokens`` as whole words.

    Tokens are regex fragments, so optional separators (``web-?dl``) can be
    expressed inline. Word boundaries are ASCII-only: a non-ASCII letter
    (Cyrillic, for instance) next to a token still counts as a boundary.
    """
    alternation = "|".join(tokens)
    return TagRule(category, label, re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE | re.ASCII))


_R = TagCategory.RESOLUTION
_S = TagCategory.SOURCE
_C = TagCategory.CODEC
_A = TagCategory.AUDIO
_O = TagCategory.OTHER

TAG_RULES: tuple[TagRule, ...] = (
    # Resolution
    make_rule(_R, "4K", r"2160p", r"4k"),
    make_rule(_R, "1080p", r"1080p"),
    make_rule(_R, "720p", r"720p"),
    make_rule(_R, "480p", r"480p"),
    # Source
    make_rule(_S, "BluRay", r"bluray", r"blu-ray", r"bdrip", r"brrip"),
    make_rule(_S, "WEB", r"web-?dl", r"web-?rip", r"web"),
    make_rule(_S, "DVD", r"dvdrip", r"dvd"),
    make_rule(_S, "HDRip", r"hdrip"),
    make_rule(_S, "CAM", r"cam", r"hdcam"),
    # "ts" and "tc" are short enough to hit unrelated tokens such as initials.
    make_rule(_S, "TS", r"ts", r"hd-?ts", r"television sync"),
    make_rule(_S, "TC", r"tc", r"hd-?tc", r"telecine"),
    make_rule(_S, "Screener", r"scr", r"screener", r"dvdscr"),
    # Codec
    make_rule(_C, "x265", r"x265", r"h\.?265", r"hevc"),
    make_rule(_C, "x264", r"x264", r"h\.?264", r"avc"),
    make_rule(_C, "AV1", r"av1"),
    make_rule(_C, "XviD", r"xvid"),
    make_rule(_C, "DivX", r"divx"),
    # Audio
    make_rule(_A, "Atmos", r"atmos"),
    make_rule(_A, "DTS", r"dts", r"dts-?hd"),
    make_rule(_A, "AC3", r"ac3", r"ddp", r"eac3"),
    make_rule(_A, "AAC", r"aac"),
    make_rule(_A, "5.1", r"5\.1"),
    make_rule(_A, "7.1", r"7\.1"),
    # Other
    make_rule(_O, "HDR", r"hdr"),
    make_rule(_O, "10bit", r"10bit"),
    make_rule(_O, "3D", r"3d"),
    make_rule(_O, "Repack", r"repack"),
    make_rule(_O, "REMUX", r"remux"),
)


def rules_for(category: TagCategory) -> tuple[TagRule, ...]:
    """Return the rules of one category in table order."""
    return tuple(rule for rule in TAG_RULES if rule.category is category)


def known_labels() -> dict[TagCategory, tuple[str, ...]]:
    """Return every label each category can produce, sorted."""
    return {category: tuple(sorted({rule.label for rule in rules_for(category)})) for category in TagCategory}
