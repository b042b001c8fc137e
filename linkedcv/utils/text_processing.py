"""Text clean-up for pasted profile content."""

import re

from bs4 import BeautifulSoup

_TAG_RE = re.compile(r"<\s*(?:p|div|span|br|li|ul|section|h[1-6]|a|strong|em)\b[^>]*>", re.IGNORECASE)


def looks_like_html(text: str) -> bool:
    return bool(_TAG_RE.search(text or ""))


def html_to_text(raw: str) -> str:
    """Visible text of an HTML fragment, one block per line."""
    soup = BeautifulSoup(raw, "lxml")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    return collapse_whitespace(soup.get_text(separator="\n"))


def collapse_whitespace(text: str) -> str:
    text = re.sub(r"[ \t\u00a0]+", " ", text)
    text = re.sub(r" *\n *", "\n", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def clean_pasted_text(text: str) -> str:
    """Normalize pasted profile text, stripping markup if it was pasted as HTML."""
    if not text:
        return ""
    if looks_like_html(text):
        return html_to_text(text)
    return collapse_whitespace(text)
