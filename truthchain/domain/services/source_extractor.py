"""Recovery of citation lists from model output."""

import logging
import re
from typing import List, Sequence

from ..models.payloads import SourcePayload
from ..models.verification import Source

logger = logging.getLogger(__name__)

TEXT_CREDIBILITY = 85
STRUCTURED_CREDIBILITY = 90

DEFAULT_SOURCES = (
    Source(title="VERA Files Fact Check", url="https://verafiles.org", credibility_score=95),
    Source(title="Rappler Fact Check", url="https://rappler.com/fact-check", credibility_score=95),
)

_URL_PATTERN = re.compile(r"https?://[^\s]+")
_TRAILING_CHARS = ")]>}.,;:!?'\""


def find_urls(text: str) -> List[str]:
    """Find absolute http(s) URLs in free text.

    Trailing brackets and punctuation picked up by the match are stripped.
    """
    urls = []
    for match in _URL_PATTERN.findall(text or ""):
        url = match.rstrip(_TRAILING_CHARS)
        if url.split("://", 1)[1]:
            urls.append(url)
    return urls


def extract_sources(text: str) -> List[Source]:
    """Build a source list from URLs found in free text.

    Args:
        text: Raw model output

    Returns:
        Sources titled ``Source 1..n``, or the default fact-check pair when
        the text holds no URL. Never empty.
    """
    sources = [
        Source(title=f"Source {index}", url=url, credibility_score=TEXT_CREDIBILITY)
        for index, url in enumerate(find_urls(text), 1)
    ]
    if not sources:
        logger.debug("No URLs in model output, using default fact-check sources")
        return list(DEFAULT_SOURCES)
    return sources


def sources_from_payload(entries: Sequence[SourcePayload], text: str) -> List[Source]:
    """Build a source list from a structured ``sources`` array.

    Falls back to scanning ``text`` when the array holds nothing usable.
    """
    sources = [
        Source(
            title=entry.title or "Source",
            url=entry.url or "#",
            credibility_score=STRUCTURED_CREDIBILITY,
            relevance=entry.relevance,
        )
        for entry in entries
        if entry.title or entry.url
    ]
    return sources or extract_sources(text)


def default_source_urls() -> List[str]:
    """URLs of the default fact-check pair."""
    return [source.url for source in DEFAULT_SOURCES]
