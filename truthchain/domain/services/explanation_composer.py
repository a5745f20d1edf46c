"""Composition and formatting of user-facing explanations."""

import re
from typing import Optional, Sequence

from ..models.verdict import BiasFlag
from ..models.verification import Explanation, Source

WHY_FAKE_HEADER = "❌ Why This Is Fake:"
BIAS_LABEL = "⚠️ Bias Detected:"
TIPS_LABEL = "💡 Tips:"


_LEADING_WORD = re.compile(r"^\W*([A-Za-z]+)")


def parse_bias_flag(value: Optional[str], default: BiasFlag = BiasFlag.NO) -> BiasFlag:
    """Map a reported bias annotation onto the bias flag.

    The leading word decides, so ``"YES - partisan framing"`` is YES.
    Missing values take ``default``; unrecognized values are UNSURE.
    """
    if not value or not value.strip():
        return default
    match = _LEADING_WORD.match(value)
    try:
        return BiasFlag(match.group(1).upper() if match else "")
    except ValueError:
        return BiasFlag.UNSURE


def compose_explanation(
    summary: Optional[str],
    detailed_points: Sequence[str] = (),
    bias_flag: BiasFlag = BiasFlag.NO,
    tips: Sequence[str] = (),
    bias_note: Optional[str] = None,
) -> Explanation:
    """Assemble a structured explanation from its parts.

    ``bias_note`` keeps the model's own wording when it says more than the flag.
    """
    if bias_note and bias_note.strip().upper() == bias_flag.value:
        bias_note = None
    return Explanation(
        summary=summary or "",
        detailed_points=list(detailed_points),
        bias_flag=bias_flag,
        bias_note=(bias_note or "").strip() or None,
        tips=list(tips),
    )


def format_explanation(explanation: Explanation) -> str:
    """Render an explanation as the single block of text the web client shows.

    Order: summary, detailed points, bias annotation (unless the flag is
    NO), tips. Blocks are separated by a blank line.
    """
    text = explanation.summary
    if explanation.detailed_points:
        text += "\n\n" + "\n".join(explanation.detailed_points)
    if explanation.bias_flag is not BiasFlag.NO:
        text += f"\n\n{BIAS_LABEL} {explanation.bias_note or explanation.bias_flag.value}"
    if explanation.tips:
        text += f"\n\n{TIPS_LABEL}\n" + "\n".join(explanation.tips)
    return text


def compose_why_fake(detailed_points: Sequence[str], sources: Sequence[Source]) -> str:
    """Build the debunk block for a structured FALSE verdict.

    Args:
        detailed_points: Reasons reported by the model
        sources: Citations backing the verdict

    Returns:
        Header, reasons, then an enumerated source list with relevance
    """
    text = f"{WHY_FAKE_HEADER}\n\n"
    if detailed_points:
        text += "\n".join(detailed_points) + "\n"
    if sources:
        text += "\n📚 Sources Supporting This Verdict:\n"
        for index, source in enumerate(sources, 1):
            relevance = f" - {source.relevance}" if source.relevance else ""
            text += f"{index}. {source.title}{relevance}\n   {source.url}\n"
    return text


def compose_lexical_why_fake(raw_text: str, sources: Sequence[Source]) -> str:
    """Build the debunk block when only free text is available."""
    text = f"{WHY_FAKE_HEADER}\n\n{raw_text}"
    if sources:
        text += "\n\n📚 Sources:\n"
        for index, source in enumerate(sources, 1):
            text += f"{index}. {source.title}: {source.url}\n"
    return text
