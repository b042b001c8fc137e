"""Split a free-text "about" blob into intro, highlights and closing."""

import logging
import re

from linkedcv.analysis.models import AboutSegments

logger = logging.getLogger("linkedcv.analysis.segmenter")

BULLET_GLYPHS = "•·"

# A last highlight longer than this is prose, not a bullet
CLOSING_MIN_LENGTH = 150
# ...as is one this long that dwarfs every other highlight
CLOSING_RELATIVE_MIN_LENGTH = 100
CLOSING_RELATIVE_FACTOR = 3

_BULLET_RE = re.compile(f"[{BULLET_GLYPHS}]")
_BULLET_CHUNK_RE = re.compile(f"[{BULLET_GLYPHS}][^{BULLET_GLYPHS}]*")
_PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")
_SENTENCE_BREAK_RE = re.compile(r"[.!?]\s")


def segment_about(text: str) -> AboutSegments:
    """Split ``text`` into an :class:`AboutSegments`.

    Without bullet glyphs the text is split into paragraphs: the last one is
    the closing remark and the rest form the intro. With bullets, whatever
    precedes the first glyph is the intro and each glyph starts a highlight;
    a last highlight that reads like prose is moved to the closing remark.
    """
    if not text or not text.strip():
        return AboutSegments()

    match = _BULLET_RE.search(text)
    if match is None:
        return _segment_paragraphs(text)
    return _segment_bullets(text, match.start())


def _segment_paragraphs(text: str) -> AboutSegments:
    paragraphs = [p.strip() for p in _PARAGRAPH_BREAK_RE.split(text)]
    paragraphs = [p for p in paragraphs if p]

    if not paragraphs:
        return AboutSegments(intro=text)
    if len(paragraphs) == 1:
        return AboutSegments(intro=paragraphs[0])
    return AboutSegments(intro="\n\n".join(paragraphs[:-1]), closing=paragraphs[-1])


def _segment_bullets(text: str, first_bullet: int) -> AboutSegments:
    intro = text[:first_bullet].strip()
    highlights = []
    for chunk in _BULLET_CHUNK_RE.findall(text[first_bullet:]):
        item = chunk[1:].strip()
        if item:
            highlights.append(item)

    closing = ""
    if highlights and _reads_as_closing(highlights[-1], highlights[:-1]):
        closing = highlights.pop()

    logger.debug(
        "Segmented about text: %d highlights, closing=%s", len(highlights), bool(closing)
    )
    return AboutSegments(intro=intro, highlights=highlights, closing=closing)


def _reads_as_closing(candidate: str, others: list[str]) -> bool:
    if len(_SENTENCE_BREAK_RE.findall(candidate)) >= 2:
        return True
    if len(candidate) > CLOSING_MIN_LENGTH:
        return True
    if others and len(candidate) >= CLOSING_RELATIVE_MIN_LENGTH:
        longest_other = max(len(h) for h in others)
        return len(candidate) >= CLOSING_RELATIVE_FACTOR * longest_other
    return False
