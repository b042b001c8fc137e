"""Pull headline figures (money, percentages, counts) out of a role description."""

import logging
import re

from linkedcv.analysis.models import AchievementStat

logger = logging.getLogger("linkedcv.analysis.achievements")

MAX_STATS = 4

# Context windows (characters) inspected around a match when choosing a label
CURRENCY_WINDOW_BEFORE = 35
CURRENCY_WINDOW_AFTER = 35
PERCENT_WINDOW_BEFORE = 45
PERCENT_WINDOW_AFTER = 35
LEADERSHIP_WINDOW = 25

# A whole count, either plain ("1200") or comma-grouped ("1,200")
_COUNT = r"(?<![\w.,])(\d{1,3}(?:,\d{3})+|\d+)"

_CURRENCY_RE = re.compile(r"([$£€])\s?(\d+(?:[.,]\d+)?)\s?([kmb])\b", re.IGNORECASE)
_PERCENT_RE = re.compile(r"\d+(?:\.\d+)?%")
_HEADCOUNT_RE = re.compile(
    _COUNT + r"\+?\s+(?:people|staff|engineers|developers|employees|reports|"
    r"members|professionals|specialists|analysts|designers|consultants|fte)\b",
    re.IGNORECASE,
)
_LEADERSHIP_RE = re.compile(r"\b(?:lead|led|leading|manag\w*|oversee\w*|oversaw|supervis\w*)\b", re.IGNORECASE)
_TEAM_OF_RE = re.compile(r"\bteam of " + _COUNT + r"(?![\d,]*\d)", re.IGNORECASE)
_CLIENTS_RE = re.compile(_COUNT + r"(\+?)\s+(?:clients?|customers?|users?|accounts?)\b", re.IGNORECASE)
_PROJECTS_RE = re.compile(
    _COUNT + r"(\+?)\s+(?:projects?|products?|initiatives?|programmes?|programs?)\b", re.IGNORECASE
)
_MARKETS_RE = re.compile(
    _COUNT + r"(\+?)\s+(?:countries|country|markets?|regions?|offices?|sites?)\b", re.IGNORECASE
)

CURRENCY_LABELS: list[tuple[re.Pattern, str]] = [
    (re.compile(r"\bsav(?:e|ed|es|ing|ings)\b|cost reduction", re.I), "Savings"),
    (re.compile(r"\brevenue|\bsales\b|\barr\b|\bturnover\b", re.I), "Revenue"),
    (re.compile(r"\bfund|\brais(?:e|ed|ing)\b|\binvestment", re.I), "Funding"),
    (re.compile(r"\bcontracts?\b|\bdeals?\b|\bwon\b|\bpipeline\b", re.I), "Contracts"),
    (re.compile(r"\bbudgets?\b|p&l", re.I), "Budget"),
]

PERCENT_LABELS: list[tuple[re.Pattern, str]] = [
    (re.compile(r"\brevenue|\bsales\b|\bgrowth\b|\bgrew\b|\barr\b", re.I), "Revenue Growth"),
    (re.compile(r"\bcosts?\b|\bspend|\bexpenses?\b", re.I), "Cost Reduction"),
    (re.compile(r"efficien|productiv|\bfaster\b|\btime\b", re.I), "Efficiency Gain"),
    (re.compile(r"retention|\bchurn|\bretain", re.I), "Retention"),
    (re.compile(r"conversion|\bconvert", re.I), "Conversion"),
    (re.compile(r"\breduc|\bdecreas|\bcut\b|\blower", re.I), "Reduction"),
]


def _label_for(context: str, table: list[tuple[re.Pattern, str]], default: str) -> str:
    for pattern, label in table:
        if pattern.search(context):
            return label
    return default


def _window(text: str, start: int, end: int, before: int, after: int) -> str:
    return text[max(0, start - before):end + after]


class _StatCollector:
    """Shared budget of stats across pattern families, deduplicated by value."""

    def __init__(self, limit: int = MAX_STATS):
        self.limit = limit
        self.stats: list[AchievementStat] = []
        self._seen: set[str] = set()

    @property
    def full(self) -> bool:
        return len(self.stats) >= self.limit

    def add(self, value: str, label: str) -> None:
        if self.full or value in self._seen:
            return
        self._seen.add(value)
        self.stats.append(AchievementStat(value=value, label=label))


def extract_stats(description: str) -> list[AchievementStat]:
    """Return up to ``MAX_STATS`` figures found in ``description``.

    Families are scanned in priority order (currency, percentage, team size,
    clients, projects, markets), all drawing on the same budget.
    """
    if not description:
        return []

    text = description
    collector = _StatCollector()

    for m in _CURRENCY_RE.finditer(text):
        if collector.full:
            break
        value = f"{m.group(1)}{m.group(2)}{m.group(3).upper()}"
        context = _window(text, m.start(), m.end(), CURRENCY_WINDOW_BEFORE, CURRENCY_WINDOW_AFTER)
        collector.add(value, _label_for(context, CURRENCY_LABELS, "Value"))

    for m in _PERCENT_RE.finditer(text):
        if collector.full:
            break
        context = _window(text, m.start(), m.end(), PERCENT_WINDOW_BEFORE, PERCENT_WINDOW_AFTER)
        collector.add(m.group(0), _label_for(context, PERCENT_LABELS, "Improvement"))

    for _, value in _team_sizes(text):
        if collector.full:
            break
        collector.add(value, "Team Size")

    for pattern, label in ((_CLIENTS_RE, "Clients"), (_PROJECTS_RE, "Projects"), (_MARKETS_RE, "Markets")):
        for m in pattern.finditer(text):
            if collector.full:
                break
            # Clients and markets always read as "N+"
            plus = m.group(2) if label == "Projects" else "+"
            collector.add(m.group(1) + plus, label)

    logger.debug("Extracted %d stats from %d chars", len(collector.stats), len(text))
    return collector.stats


def _team_sizes(text: str) -> list[tuple[int, str]]:
    """Headcounts introduced by a leadership verb, plus "team of N", in text order."""
    found = []
    for m in _HEADCOUNT_RE.finditer(text):
        preceding = text[max(0, m.start() - LEADERSHIP_WINDOW):m.start()]
        if _LEADERSHIP_RE.search(preceding):
            found.append((m.start(), m.group(1)))
    for m in _TEAM_OF_RE.finditer(text):
        found.append((m.start(), m.group(1)))
    found.sort(key=lambda item: item[0])
    return found
