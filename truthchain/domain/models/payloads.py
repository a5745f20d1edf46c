"""Schemas for the JSON objects the model is asked to return.

The model is not bound by any schema, so every field is optional and
validators coerce wrongly-typed values instead of rejecting the record.
Unknown fields are ignored.
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_text(value: Any) -> Optional[str]:
    """Coerce a scalar to text; containers and null become None."""
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


def _as_text_list(value: Any) -> List[str]:
    """Coerce a list (or a lone string) to a list of non-empty strings."""
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return []
    items = []
    for item in value:
        text = _as_text(item)
        if text:
            items.append(text)
    return items


def _as_url_list(value: Any) -> List[str]:
    """Accept URL strings or ``{"url": ...}`` objects."""
    if not isinstance(value, list):
        return []
    urls = []
    for item in value:
        if isinstance(item, dict):
            item = item.get("url")
        text = _as_text(item)
        if text:
            urls.append(text)
    return urls


class SourcePayload(BaseModel):
    """A source entry as reported by the model."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    url: Optional[str] = None
    relevance: Optional[str] = None

    @field_validator("title", "url", "relevance", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return _as_text(value)


class VerificationPayload(BaseModel):
    """Fact-check verdict as reported by the model."""

    model_config = ConfigDict(extra="ignore")

    status: Optional[str] = None
    confidence: Optional[Union[int, float, str]] = None
    biased: Optional[str] = None
    summary: Optional[str] = None
    detailed_explanation: List[str] = Field(default_factory=list)
    sources: List[SourcePayload] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)

    @field_validator("status", "biased", "summary", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return _as_text(value)

    @field_validator("confidence", mode="before")
    @classmethod
    def _coerce_confidence(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            return None
        return value

    @field_validator("detailed_explanation", "tips", mode="before")
    @classmethod
    def _coerce_list(cls, value: Any) -> List[str]:
        return _as_text_list(value)

    @field_validator("sources", mode="before")
    @classmethod
    def _coerce_sources(cls, value: Any) -> List[dict]:
        if not isinstance(value, list):
            return []
        sources = []
        for item in value:
            if isinstance(item, str):
                item = {"url": item}
            if isinstance(item, dict):
                sources.append(item)
        return sources


class DebatePayload(BaseModel):
    """Pro/con analysis as reported by the model."""

    model_config = ConfigDict(extra="ignore")

    claim: Optional[str] = None
    pros: List[str] = Field(default_factory=list)
    cons: List[str] = Field(default_factory=list)
    summary: Optional[str] = None
    sources: List[str] = Field(default_factory=list)

    @field_validator("claim", "summary", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return _as_text(value)

    @field_validator("pros", "cons", mode="before")
    @classmethod
    def _coerce_list(cls, value: Any) -> List[str]:
        # A bare string is not an argument list
        if not isinstance(value, list):
            return []
        return _as_text_list(value)

    @field_validator("sources", mode="before")
    @classmethod
    def _coerce_sources(cls, value: Any) -> List[str]:
        return _as_url_list(value)


class ClaimPayload(BaseModel):
    """Trivia claim as reported by the model."""

    model_config = ConfigDict(extra="ignore")

    statement: Optional[str] = None
    answer: Optional[str] = None
    explanation: List[str] = Field(default_factory=list)
    sources: List[str] = Field(default_factory=list)

    @field_validator("statement", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return _as_text(value)

    @field_validator("answer", mode="before")
    @classmethod
    def _coerce_answer(cls, value: Any) -> Optional[str]:
        if isinstance(value, bool):
            return "TRUE" if value else "FALSE"
        return _as_text(value)

    @field_validator("explanation", mode="before")
    @classmethod
    def _coerce_list(cls, value: Any) -> List[str]:
        return _as_text_list(value)

    @field_validator("sources", mode="before")
    @classmethod
    def _coerce_sources(cls, value: Any) -> List[str]:
        return _as_url_list(value)
