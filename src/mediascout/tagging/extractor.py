"""Release-title tag extraction."""

from __future__ import annotations

from mediascout.shared.enums import TagCategory
from mediascout.shared.models import TagSet
from mediascout.tagging.rules import TAG_RULES, TagRule


def extract_tags(title: str, rules: tuple[TagRule, ...] = TAG_RULES) -> TagSet:
    """Classify a free-text release title into quality/codec/audio labels.

    Every rule is probed independently, so a category may collect several
    labels (``5.1`` and ``7.1`` together, for instance).

    Args:
        title: Raw release title, possibly empty.
        rules: Probe table; defaults to the built-in keyword table.

    Returns:
        A ``TagSet`` whose categories are sorted and duplicate-free.
    """
    found: dict[TagCategory, set[str]] = {category: set() for category in TagCategory}
    for rule in rules:
        if rule.matches(title):
            found[rule.category].add(rule.label)

    return TagSet(**{category.name.lower(): tuple(sorted(labels)) for category, labels in found.items()})
