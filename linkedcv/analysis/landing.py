"""Assemble everything the landing page needs from a profile record."""

import logging

from linkedcv.analysis.achievements import extract_stats
from linkedcv.analysis.segmenter import segment_about
from linkedcv.analysis.traits import derive_traits
from linkedcv.profile.models import ProfileRecord

logger = logging.getLogger("linkedcv.analysis")

NAV_SECTIONS = [
    ("about", "About"),
    ("experience", "Experience"),
    ("skills", "Skills"),
    ("education", "Education"),
    ("contact", "Contact"),
]


def _has_section(profile: ProfileRecord, section: str) -> bool:
    if section == "about":
        return bool(profile.about)
    if section == "contact":
        return not profile.contact.is_empty
    return bool(getattr(profile, section))


def build_landing_context(profile: ProfileRecord) -> dict:
    """Run every analysis over ``profile`` and return plain, JSON-ready data.

    ``stats`` is parallel to ``profile["experience"]``: one list per role.
    """
    segments = segment_about(profile.about)
    traits = derive_traits(profile)
    stats = [[s.to_dict() for s in extract_stats(role.description)] for role in profile.experience]

    logger.info(
        "Built landing context for %s: %d highlights, %d traits, %d stats",
        profile.name or "Unknown",
        len(segments.highlights),
        len(traits),
        sum(len(s) for s in stats),
    )

    return {
        "profile": profile.to_dict(),
        "about": segments.to_dict(),
        "traits": traits,
        "stats": stats,
        "initials": profile.initials,
        "first_name": profile.first_name,
        "nav_links": [
            {"id": section, "label": label}
            for section, label in NAV_SECTIONS
            if _has_section(profile, section)
        ],
    }
