"""Normalization of free-form model replies into typed records.

Every reply goes through two stages. The structured stage decodes the span
between the first ``{`` and the last ``}`` against the schema of the
requested analysis. When that span is missing or does not decode, the
lexical stage classifies the reply by keyword and salvages what it can
from the text. Normalization never raises on malformed model output.
"""

import json
import logging
import re
from typing import Any, Dict, List, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..errors import MalformedModelOutput, NoStructuredData
from ..models.normalized import NormalizedClaim, NormalizedDebate, NormalizedVerification
from ..models.payloads import ClaimPayload, DebatePayload, VerificationPayload
from ..models.verdict import AnalysisKind, BiasFlag, Verdict
from .confidence import LEXICAL_DECISIVE, LEXICAL_UNDECIDED, resolve_confidence
from .explanation_composer import (
    compose_explanation,
    compose_lexical_why_fake,
    compose_why_fake,
    parse_bias_flag,
)
from .source_extractor import default_source_urls, extract_sources, find_urls, sources_from_payload
from .vocabulary import map_status

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)
NormalizedRecord = Union[NormalizedVerification, NormalizedDebate, NormalizedClaim]

# Substring matches: "construed" counts as "true", "falsehood" as "false"
FALSE_KEYWORDS = ("false", "fake", "misleading")
TRUE_KEYWORD = "true"

SUMMARY_MAX_LENGTH = 200
DEFAULT_SUMMARY = "AI verification completed"
UNIDENTIFIED_CLAIM = "Main claim not identified"
NO_SUMMARY = "No summary provided"

_SENTENCE_END = re.compile(r"[.!?]")


def extract_structured_span(raw_text: str) -> Dict[str, Any]:
    """Decode the first-brace-to-last-brace span of a reply.

    Raises:
        NoStructuredData: If the reply holds no brace-delimited span
        MalformedModelOutput: If the span is not a JSON object
    """
    start = raw_text.find("{")
    end = raw_text.rfind("}")
    if start < 0 or end < start:
        raise NoStructuredData("No brace-delimited span in model output")

    # ValueError also covers integers past the digit limit; RecursionError deep nesting
    try:
        decoded = json.loads(raw_text[start:end + 1])
    except (ValueError, RecursionError) as e:
        raise MalformedModelOutput(f"Span is not valid JSON: {type(e).__name__}: {e}") from e

    if not isinstance(decoded, dict):
        raise MalformedModelOutput(f"Span decodes to {type(decoded).__name__}, not an object")
    return decoded


def decode_payload(raw_text: str, schema: Type[PayloadT]) -> PayloadT:
    """Decode a reply against a payload schema.

    Raises:
        NoStructuredData: If the reply holds no brace-delimited span
        MalformedModelOutput: If the span does not fit the schema
    """
    data = extract_structured_span(raw_text)
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise MalformedModelOutput(f"Span does not match {schema.__name__}: {e}") from e


def classify_lexically(raw_text: str) -> Tuple[Verdict, int]:
    """Classify a reply by keyword.

    False-leaning keywords are checked first and win over "true".

    Returns:
        Verdict (VERIFIED, FALSE or UNVERIFIED) and its confidence
    """
    lowered = raw_text.lower()
    if any(keyword in lowered for keyword in FALSE_KEYWORDS):
        return Verdict.FALSE, LEXICAL_DECISIVE
    if TRUE_KEYWORD in lowered:
        return Verdict.VERIFIED, LEXICAL_DECISIVE
    return Verdict.UNVERIFIED, LEXICAL_UNDECIDED


def extract_summary(raw_text: str) -> str:
    """First sentence of a reply, truncated to 200 characters."""
    first = _SENTENCE_END.split(raw_text, maxsplit=1)[0].strip()
    return first[:SUMMARY_MAX_LENGTH] or DEFAULT_SUMMARY


def normalize_answer(answer: Any) -> str:
    """Map a reported trivia answer onto TRUE or FALSE.

    A missing answer counts as TRUE; other labels go through the status
    vocabulary.
    """
    if not answer:
        return "TRUE"
    label = str(answer).strip().upper()
    if label in ("TRUE", "FALSE"):
        return label
    return "TRUE" if map_status(label) is Verdict.VERIFIED else "FALSE"


def _source_urls(urls: List[str], raw_text: str) -> List[str]:
    return urls or find_urls(raw_text) or default_source_urls()


class ResponseNormalizer:
    """Turns raw model text into normalized records for each analysis kind."""

    def parse(self, raw_text: str, kind: AnalysisKind) -> NormalizedRecord:
        """Normalize a reply for the given analysis kind.

        Args:
            raw_text: Reply exactly as returned by the model
            kind: Which analysis the reply answers

        Returns:
            The normalized record for ``kind``
        """
        handlers = {
            AnalysisKind.VERIFICATION: self.normalize_verification,
            AnalysisKind.DEBATE: self.normalize_debate,
            AnalysisKind.CLAIM: self.normalize_claim,
        }
        return handlers[AnalysisKind(kind)](raw_text)

    def normalize_verification(self, raw_text: str) -> NormalizedVerification:
        """Normalize a fact-check reply."""
        raw_text = raw_text or ""
        try:
            payload = decode_payload(raw_text, VerificationPayload)
        except NoStructuredData:
            logger.debug("🔤 No structured span in verification reply, classifying lexically")
            return self._lexical_verification(raw_text)
        except MalformedModelOutput as e:
            logger.warning(f"⚠️ Malformed verification payload, classifying lexically: {e}")
            return self._lexical_verification(raw_text)

        verdict = map_status(payload.status)
        sources = sources_from_payload(payload.sources, raw_text)
        explanation = compose_explanation(
            payload.summary,
            payload.detailed_explanation,
            parse_bias_flag(payload.biased),
            payload.tips,
            bias_note=payload.biased,
        )
        why_fake = None
        if verdict is Verdict.FALSE:
            why_fake = compose_why_fake(payload.detailed_explanation, sources)

        logger.debug(f"🧩 Structured verification reply: status={payload.status!r} -> {verdict.value}")
        return NormalizedVerification(
            verdict=verdict,
            confidence=resolve_confidence(payload.confidence),
            explanation=explanation,
            sources=sources,
            summary=payload.summary or extract_summary(raw_text),
            why_fake=why_fake,
            structured=True,
        )

    def _lexical_verification(self, raw_text: str) -> NormalizedVerification:
        verdict, confidence = classify_lexically(raw_text)
        sources = extract_sources(raw_text)
        why_fake = None
        if verdict is Verdict.FALSE:
            why_fake = compose_lexical_why_fake(raw_text, sources)

        return NormalizedVerification(
            verdict=verdict,
            confidence=resolve_confidence(confidence),
            explanation=compose_explanation(raw_text, bias_flag=BiasFlag.UNSURE),
            sources=sources,
            summary=extract_summary(raw_text),
            why_fake=why_fake,
            structured=False,
        )

    def normalize_debate(self, raw_text: str) -> NormalizedDebate:
        """Normalize a pro/con debate reply."""
        raw_text = raw_text or ""
        try:
            payload = decode_payload(raw_text, DebatePayload)
        except (NoStructuredData, MalformedModelOutput) as e:
            logger.warning(f"⚠️ Unstructured debate reply, salvaging summary and sources: {e}")
            return NormalizedDebate(
                claim=UNIDENTIFIED_CLAIM,
                summary=extract_summary(raw_text),
                sources=_source_urls([], raw_text),
                structured=False,
            )

        return NormalizedDebate(
            claim=payload.claim or UNIDENTIFIED_CLAIM,
            summary=payload.summary or NO_SUMMARY,
            pros=payload.pros,
            cons=payload.cons,
            sources=_source_urls(payload.sources, raw_text),
            structured=True,
        )

    def normalize_claim(self, raw_text: str) -> NormalizedClaim:
        """Normalize a trivia-claim reply."""
        raw_text = raw_text or ""
        try:
            payload = decode_payload(raw_text, ClaimPayload)
        except (NoStructuredData, MalformedModelOutput) as e:
            logger.warning(f"⚠️ Unstructured trivia reply, classifying lexically: {e}")
            verdict, _ = classify_lexically(raw_text)
            return NormalizedClaim(
                statement=extract_summary(raw_text),
                answer="TRUE" if verdict is Verdict.VERIFIED else "FALSE",
                explanation=[raw_text.strip()] if raw_text.strip() else [],
                sources=_source_urls([], raw_text),
                structured=False,
            )

        return NormalizedClaim(
            statement=payload.statement or extract_summary(raw_text),
            answer=normalize_answer(payload.answer),
            explanation=payload.explanation,
            sources=_source_urls(payload.sources, raw_text),
            structured=True,
        )
