"""Result types produced by the text analysis functions."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AboutSegments:
    """An about-blob split into intro, bullet highlights and a closing remark."""

    intro: str = ""
    highlights: list[str] = field(default_factory=list)
    closing: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.intro or self.highlights or self.closing)

    def to_dict(self) -> dict:
        return {
            "intro": self.intro,
            "highlights": list(self.highlights),
            "closing": self.closing,
        }


@dataclass(frozen=True)
class AchievementStat:
    """A headline figure pulled from a role description, e.g. ("35%", "Revenue Growth")."""

    value: str
    label: str

    def to_dict(self) -> dict:
        return {"value": self.value, "label": self.label}
