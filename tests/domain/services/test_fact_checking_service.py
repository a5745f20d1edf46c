"""Tests for fact-checking service."""

import asyncio
import json
import pytest
from unittest.mock import AsyncMock

from truthchain.domain.errors import ModelInvocationFailure, ValidationFailure
from truthchain.domain.models.verdict import Verdict
from truthchain.domain.services.fact_checking_service import FactCheckingService

FALSE_REPLY = json.dumps({
    "status": "FALSE",
    "confidence": "92%",
    "biased": "YES",
    "summary": "The photo is from 2015.",
    "detailed_explanation": ["• Reverse image search dates it to 2015"],
    "sources": [{"title": "AFP Fact Check", "url": "https://factcheck.afp.com/x"}],
    "tips": ["Check the upload date"],
})

DEBATE_REPLY = json.dumps({
    "claim": "Later school start times improve grades",
    "pros": ["More sleep"],
    "cons": ["Longer days for parents"],
    "summary": "Studies lean positive.",
    "sources": ["https://a.example"],
})

CLAIM_REPLY = json.dumps({
    "statement": "Manila is the capital of the Philippines.",
    "answer": "TRUE",
    "explanation": ["• Declared capital in 1976"],
    "sources": ["https://b.example"],
})


async def _slow_reply(request):
    await asyncio.sleep(1)
    return FALSE_REPLY


@pytest.mark.asyncio
async def test_verify(make_service, repository):
    """Test a structured verification end to end."""
    service = make_service(FALSE_REPLY)

    result = await service.verify("  Viral flood photo is from today  ", source_url=" https://fb.com/p ")

    assert result.verdict is Verdict.FALSE
    assert result.confidence == 92
    assert result.content == "Viral flood photo is from today"
    assert result.source_url == "https://fb.com/p"
    assert result.model_id == "scripted-model"
    assert result.why_fake.startswith("❌ Why This Is Fake:")
    assert repository.recent(1) == [result]

    request = service.ai.requests[0]
    assert "Viral flood photo is from today" in request.user_prompt
    assert "Source URL: https://fb.com/p" in request.user_prompt


@pytest.mark.asyncio
async def test_verify_blank_source_url(make_service):
    """Test a whitespace source URL is dropped."""
    result = await make_service("true").verify("claim", source_url="   ")
    assert result.source_url is None


@pytest.mark.asyncio
async def test_verify_unstructured_reply(make_service):
    """Test a prose reply does not fail the request."""
    result = await make_service("I believe this is true.").verify("claim")

    assert result.verdict is Verdict.VERIFIED
    assert result.confidence == 85
    assert len(result.sources) == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("content", ["", "   ", None])
async def test_verify_requires_content(make_service, repository, content):
    """Test validation happens before the model is called."""
    service = make_service(FALSE_REPLY)

    with pytest.raises(ValidationFailure, match="Content text is required"):
        await service.verify(content)

    assert service.ai.requests == []
    assert repository.count() == 0


@pytest.mark.asyncio
async def test_debate_requires_content(make_service):
    """Test debate validation."""
    service = make_service(DEBATE_REPLY)
    with pytest.raises(ValidationFailure, match="Content is required for debate analysis"):
        await service.analyze_debate("")
    assert service.ai.requests == []


@pytest.mark.asyncio
async def test_retry_once_then_succeed(make_service):
    """Test a transient failure is retried."""
    service = make_service(ConnectionError("reset by peer"), FALSE_REPLY)

    result = await service.verify("claim")

    assert result.verdict is Verdict.FALSE
    assert len(service.ai.requests) == 2


@pytest.mark.asyncio
async def test_failure_after_retry(make_service, repository):
    """Test the failure surfaces after two attempts."""
    service = make_service(ConnectionError("reset by peer"))

    with pytest.raises(ModelInvocationFailure) as exc_info:
        await service.verify("claim")

    assert exc_info.value.retryable
    assert exc_info.value.attempts == 2
    assert exc_info.value.kind == "verification"
    assert "ConnectionError" in exc_info.value.reason
    assert isinstance(exc_info.value.__cause__, ConnectionError)
    assert len(service.ai.requests) == 2
    assert repository.count() == 0


@pytest.mark.asyncio
async def test_no_retry_when_disabled(make_service):
    """Test max_retries=0."""
    service = make_service(RuntimeError("boom"), max_retries=0)

    with pytest.raises(ModelInvocationFailure) as exc_info:
        await service.verify("claim")

    assert exc_info.value.attempts == 1
    assert len(service.ai.requests) == 1


def test_retries_are_capped(scripted_provider):
    """Test more than one retry is never configured."""
    service = FactCheckingService(scripted_provider(["x"]), max_retries=5)
    assert service.max_retries == 1
    service = FactCheckingService(scripted_provider(["x"]), max_retries=-3)
    assert service.max_retries == 0


@pytest.mark.asyncio
async def test_timeout(make_service):
    """Test a hanging model call is bounded."""
    service = make_service(FALSE_REPLY, timeout=0.01)
    service.ai.complete = AsyncMock(side_effect=_slow_reply)

    with pytest.raises(ModelInvocationFailure) as exc_info:
        await service.verify("claim")

    assert "timed out" in exc_info.value.reason
    assert service.ai.complete.await_count == 2


@pytest.mark.asyncio
async def test_debate_and_claim_share_failure_policy(make_service):
    """Test every entry point surfaces the same failure."""
    service = make_service(TimeoutError("upstream"))

    with pytest.raises(ModelInvocationFailure):
        await service.analyze_debate("content")
    with pytest.raises(ModelInvocationFailure):
        await service.generate_claim(1)


@pytest.mark.asyncio
async def test_analyze_debate(make_service, repository):
    """Test a debate analysis."""
    service = make_service(DEBATE_REPLY)

    analysis = await service.analyze_debate("Should school start later?")

    assert analysis.id.startswith("DBT-")
    assert analysis.claim == "Later school start times improve grades"
    assert analysis.pros == ["More sleep"]
    assert analysis.sources == ["https://a.example"]
    assert repository.count() == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("round_in,round_out", [(4, 4), (None, 1), (0, 1), (-2, 1)])
async def test_generate_claim(make_service, round_in, round_out):
    """Test trivia generation and round clamping."""
    service = make_service(CLAIM_REPLY)

    claim = await service.generate_claim(round_in)

    assert claim.round == round_out
    assert claim.answer == "TRUE"
    assert claim.statement == "Manila is the capital of the Philippines."
    assert f"round {round_out}" in service.ai.requests[0].user_prompt


@pytest.mark.asyncio
async def test_claim_provider_is_used_for_claims(repository, assembler, scripted_provider):
    """Test the dedicated trivia provider."""
    main = scripted_provider([FALSE_REPLY])
    game = scripted_provider([CLAIM_REPLY])
    service = FactCheckingService(main, repository=repository, claim_provider=game, assembler=assembler)

    await service.generate_claim()
    await service.verify("claim")

    assert len(game.requests) == 1
    assert len(main.requests) == 1
