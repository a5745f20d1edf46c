"""Mapping of model-reported status strings onto the verdict enum."""

from typing import Any

from ..models.verdict import Verdict

# MISLEADING collapses onto FALSE; the web client only distinguishes fake content
STATUS_MAP = {
    "TRUE": Verdict.VERIFIED,
    "FALSE": Verdict.FALSE,
    "MISLEADING": Verdict.FALSE,
    "NEEDS_CONTEXT": Verdict.NEEDS_CONTEXT,
    "NEEDS CONTEXT": Verdict.NEEDS_CONTEXT,
    "UNVERIFIED": Verdict.UNVERIFIED,
}


def map_status(status: Any) -> Verdict:
    """Map a reported status to a verdict.

    Args:
        status: Status value from the model, possibly missing

    Returns:
        The matching verdict, UNVERIFIED for anything unknown
    """
    if not isinstance(status, str):
        return Verdict.UNVERIFIED
    return STATUS_MAP.get(status.strip().upper(), Verdict.UNVERIFIED)
