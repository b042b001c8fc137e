"""Heuristic text analysis over profile records."""

from .achievements import extract_stats
from .landing import build_landing_context
from .models import AboutSegments, AchievementStat
from .segmenter import segment_about
from .traits import derive_traits

__all__ = [
    "AboutSegments",
    "AchievementStat",
    "build_landing_context",
    "derive_traits",
    "extract_stats",
    "segment_about",
]
