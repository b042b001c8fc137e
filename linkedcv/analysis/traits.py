"""Derive descriptive trait labels from a profile's text via keyword rules."""

import logging
import re
from dataclasses import dataclass
from typing import Callable

from linkedcv.profile.models import ProfileRecord

logger = logging.getLogger("linkedcv.analysis.traits")

MAX_TRAITS = 8

# Structural thresholds
MANY_SKILLS = 10
MANY_CERTIFICATIONS = 2
MANY_ROLES = 4

TRAIT_VOCABULARY = (
    "Natural Leader",
    "Strategic Thinker",
    "Results-Driven",
    "Innovator",
    "Collaborative",
    "Problem Solver",
    "Creative",
    "Analytical",
    "Lifelong Learner",
    "Customer-Focused",
    "Global Mindset",
    "Seasoned Professional",
    "Driven",
    "Resilient",
    "Team Player",
)


@dataclass(frozen=True)
class TraitContext:
    """Everything a trait rule may look at."""

    text: str
    titles: tuple[str, ...]
    skill_count: int = 0
    certification_count: int = 0
    role_count: int = 0

    @classmethod
    def from_profile(cls, profile: ProfileRecord) -> "TraitContext":
        return cls(
            text=profile.text_surface(),
            titles=tuple(role.title.lower() for role in profile.experience if role.title),
            skill_count=len(profile.skills or []),
            certification_count=len(profile.certifications or []),
            role_count=len(profile.experience or []),
        )

    def text_matches(self, pattern: re.Pattern) -> bool:
        return pattern.search(self.text) is not None

    def title_matches(self, pattern: re.Pattern) -> bool:
        return any(pattern.search(title) for title in self.titles)


@dataclass(frozen=True)
class TraitRule:
    label: str
    predicate: Callable[[TraitContext], bool]


def _words(*stems: str) -> re.Pattern:
    """Word-boundary regex matching any stem; a trailing ``*`` allows a suffix."""
    parts = [re.escape(s[:-1]) + r"\w*" if s.endswith("*") else re.escape(s) for s in stems]
    return re.compile(r"\b(?:" + "|".join(parts) + r")\b")


_LEADER_TITLES = _words(
    "lead*", "head", "director", "manager", "chief", "vp", "founder", "co-founder",
    "principal", "president",
)
_LEADER_TEXT = _words("led a team", "managed a team", "leading a team", "mentor*")
_STRATEGY_TITLES = _words("strateg*", "consultant", "architect", "advisor", "adviser")
_STRATEGY_TEXT = _words("strateg*", "roadmap*", "vision")
_RESULTS_TEXT = _words(
    "revenue", "growth", "grew", "increased", "delivered", "exceeded", "roi", "kpi*",
)
_RESULTS_FIGURE = re.compile(r"\d\s*%|[$£€]\s?\d")
_INNOVATOR_TEXT = _words(
    "innovat*", "pioneer*", "transform*", "disrupt*", "founded", "invented", "patent*",
)
_COLLABORATIVE_TEXT = _words(
    "collaborat*", "cross-functional", "partnership*", "stakeholder*", "together",
)
_PROBLEM_TEXT = _words("problem*", "solv*", "troubleshoot*", "optimi*", "debug*")
_CREATIVE_TEXT = _words("creativ*", "design*", "brand*", "storytelling", "content")
_ANALYTICAL_TEXT = _words("analy*", "data", "insight*", "research*", "metric*")
_LEARNER_TEXT = _words("learn*", "curious", "curiosity", "continuous improvement", "continuously improv*")
_CUSTOMER_TEXT = _words("customer*", "client*", "user experience", "patient*")
_GLOBAL_TEXT = _words(
    "international*", "global*", "worldwide", "multicultural", "emea", "apac", "cross-border",
)
_DRIVEN_TEXT = _words("passion*", "driven", "ambitio*", "motivated", "dedicated")


TRAIT_RULES: list[TraitRule] = [
    TraitRule(
        "Natural Leader",
        lambda c: c.title_matches(_LEADER_TITLES) or c.text_matches(_LEADER_TEXT),
    ),
    TraitRule(
        "Strategic Thinker",
        lambda c: c.title_matches(_STRATEGY_TITLES) or c.text_matches(_STRATEGY_TEXT),
    ),
    TraitRule(
        "Results-Driven",
        lambda c: c.text_matches(_RESULTS_FIGURE) or c.text_matches(_RESULTS_TEXT),
    ),
    TraitRule("Innovator", lambda c: c.text_matches(_INNOVATOR_TEXT)),
    TraitRule("Collaborative", lambda c: c.text_matches(_COLLABORATIVE_TEXT)),
    TraitRule("Problem Solver", lambda c: c.text_matches(_PROBLEM_TEXT)),
    TraitRule("Creative", lambda c: c.text_matches(_CREATIVE_TEXT)),
    TraitRule("Analytical", lambda c: c.text_matches(_ANALYTICAL_TEXT)),
    TraitRule(
        "Lifelong Learner",
        lambda c: (
            c.skill_count >= MANY_SKILLS
            or c.certification_count >= MANY_CERTIFICATIONS
            or c.text_matches(_LEARNER_TEXT)
        ),
    ),
    TraitRule("Customer-Focused", lambda c: c.text_matches(_CUSTOMER_TEXT)),
    TraitRule("Global Mindset", lambda c: c.text_matches(_GLOBAL_TEXT)),
    TraitRule("Seasoned Professional", lambda c: c.role_count >= MANY_ROLES),
    TraitRule("Driven", lambda c: c.text_matches(_DRIVEN_TEXT)),
]


def derive_traits(profile: ProfileRecord) -> list[str]:
    """Return up to ``MAX_TRAITS`` labels describing ``profile``.

    Rules run in table order and each contributes its label at most once.
    Fallbacks guarantee "Driven" plus at least four labels overall.
    """
    context = TraitContext.from_profile(profile)
    traits: list[str] = []

    for rule in TRAIT_RULES:
        if rule.label not in traits and rule.predicate(context):
            traits.append(rule.label)

    if "Driven" not in traits:
        traits.append("Driven")
    if len(traits) < 3:
        traits.append("Resilient")
    if len(traits) < 4:
        traits.append("Team Player")

    traits = _truncate_keeping(traits, "Driven", MAX_TRAITS)
    logger.debug("Derived traits for %s: %s", profile.name or "profile", traits)
    return traits


def _truncate_keeping(labels: list[str], required: str, limit: int) -> list[str]:
    if len(labels) <= limit or required in labels[:limit]:
        return labels[:limit]
    return labels[: limit - 1] + [required]
