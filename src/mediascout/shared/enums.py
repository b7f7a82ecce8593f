"""Domain enumerations used across all modules."""

from __future__ import annotations

from enum import Enum, unique


@unique
class MediaKind(str, Enum):
    """Kinds of titles the discovery endpoint can list."""

    MOVIE = "movie"
    TV = "tv"


@unique
class TagCategory(str, Enum):
    """Groups of labels the title tagger can emit."""

    RESOLUTION = "Resolution"
    SOURCE = "Source"
    CODEC = "Codec"
    AUDIO = "Audio"
    OTHER = "Other"
