"""Conversion of domain records into the JSON shapes the web client expects."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..domain.models.claim import Claim
from ..domain.models.debate import DebateAnalysis
from ..domain.models.verification import Source, VerificationResult
from ..domain.services.explanation_composer import format_explanation


def present_source(source: Source) -> Dict[str, Any]:
    """Convert a source to its API representation."""
    data = {
        "title": source.title,
        "url": source.url,
        "credibilityScore": source.credibility_score,
    }
    if source.relevance:
        data["relevance"] = source.relevance
    return data


def present_verification(result: VerificationResult) -> Dict[str, Any]:
    """Convert a verification result to its API representation.

    The explanation is rendered to text here; the structured parts are
    exposed alongside it.
    """
    return {
        "id": result.id,
        "type": result.input_kind,
        "content": result.content,
        "sourceUrl": result.source_url,
        "status": result.verdict.legacy_label,
        "verdict": result.verdict.value,
        "confidenceScore": result.confidence,
        "explanation": format_explanation(result.explanation),
        "explanationDetails": {
            "summary": result.explanation.summary,
            "detailedPoints": list(result.explanation.detailed_points),
            "biased": result.explanation.bias_flag.value,
            "biasNote": result.explanation.bias_note,
            "tips": list(result.explanation.tips),
        },
        "whyFake": result.why_fake,
        "sources": [present_source(source) for source in result.sources],
        "summary": result.summary,
        "timestamp": result.created_at.isoformat(),
        "aiModel": result.model_id,
    }


def present_claim(claim: Claim) -> Dict[str, Any]:
    """Convert a trivia claim to its API representation."""
    return {
        "id": claim.id,
        "round": claim.round,
        "statement": claim.statement,
        "answer": claim.answer,
        "explanation": list(claim.explanation),
        "sources": list(claim.sources),
        "timestamp": claim.created_at.isoformat(),
    }


def present_debate(analysis: DebateAnalysis) -> Dict[str, Any]:
    """Convert a debate analysis to its API representation."""
    return {
        "id": analysis.id,
        "claim": analysis.claim,
        "pros": list(analysis.pros),
        "cons": list(analysis.cons),
        "summary": analysis.summary,
        "sources": list(analysis.sources),
        "timestamp": analysis.created_at.isoformat(),
    }


def format_relative_time(timestamp: datetime, now: Optional[datetime] = None) -> str:
    """Describe how long ago ``timestamp`` was, e.g. ``"5 minutes ago"``."""
    now = now or datetime.now(timezone.utc)
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    seconds = max(0, int((now - timestamp).total_seconds()))

    minutes = seconds // 60
    hours = seconds // 3600
    days = seconds // 86400

    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes} minute{'s' if minutes > 1 else ''} ago"
    if hours < 24:
        return f"{hours} hour{'s' if hours > 1 else ''} ago"
    return f"{days} day{'s' if days > 1 else ''} ago"


def present_activity(result: VerificationResult, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Summarize a verification result as a recent-activity entry."""
    status = result.verdict.legacy_label
    return {
        "status": status.lower(),
        "title": f"{status}: {result.summary or 'Content verification'}",
        "timestamp": format_relative_time(result.created_at, now),
        "type": result.input_kind,
    }
