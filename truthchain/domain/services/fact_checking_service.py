"""Service coordinating prompts, model calls and response normalization."""

import asyncio
import logging
from typing import Optional

from ..errors import ModelInvocationFailure, ValidationFailure
from ..models.claim import Claim
from ..models.debate import DebateAnalysis
from ..models.verdict import AnalysisKind
from ..models.verification import VerificationResult
from ..ports.ai_provider import AIProvider, ModelRequest
from ..ports.result_repository import ResultRepository
from . import prompt_builder
from .response_normalizer import ResponseNormalizer
from .result_assembler import RequestContext, ResultAssembler

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0
MAX_RETRIES = 1


class FactCheckingService:
    """Runs the verification, debate and trivia-claim analyses.

    Every entry point follows the same failure policy: empty input raises
    ``ValidationFailure`` before the model is called, and a model call that
    fails or times out on every attempt raises ``ModelInvocationFailure``.
    Malformed model output never fails a request.
    """

    def __init__(
        self,
        ai_provider: AIProvider,
        repository: Optional[ResultRepository] = None,
        claim_provider: Optional[AIProvider] = None,
        normalizer: Optional[ResponseNormalizer] = None,
        assembler: Optional[ResultAssembler] = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = MAX_RETRIES,
    ):
        """Initialize the service.

        Args:
            ai_provider: Provider used for verification and debate analysis
            repository: Log that verification results are appended to
            claim_provider: Provider used for trivia claims, defaults to ``ai_provider``
            normalizer: Response normalizer
            assembler: Result assembler
            timeout: Per-attempt timeout for model calls, in seconds
            max_retries: Retries after a failed model call (at most one)
        """
        self.ai = ai_provider
        self.claim_ai = claim_provider or ai_provider
        self.repository = repository
        self.normalizer = normalizer or ResponseNormalizer()
        self.assembler = assembler or ResultAssembler()
        self.timeout = timeout
        self.max_retries = max(0, min(max_retries, MAX_RETRIES))
        logger.info("🔧 FactCheckingService initialized")

    async def verify(self, content: str, source_url: Optional[str] = None) -> VerificationResult:
        """Fact check a piece of text.

        Args:
            content: Text to verify
            source_url: Where the text was found

        Returns:
            Verification result, also appended to the repository

        Raises:
            ValidationFailure: If content is empty
            ModelInvocationFailure: If the model could not be reached
        """
        content = self._require_content(content, "Content text is required for verification")
        source_url = (source_url or "").strip() or None
        logger.info(f"🔍 Starting verification for: {content[:100]}...")

        request = prompt_builder.build(AnalysisKind.VERIFICATION, content=content, source_url=source_url)
        raw_text = await self._invoke(self.ai, request, AnalysisKind.VERIFICATION)

        normalized = self.normalizer.normalize_verification(raw_text)
        result = self.assembler.assemble_verification(
            normalized,
            RequestContext(model_id=self.ai.model_id, content=content, source_url=source_url),
        )
        if self.repository is not None:
            self.repository.append(result)

        logger.info(
            f"✅ Verification complete: {result.id} verdict={result.verdict.value} "
            f"confidence={result.confidence} structured={normalized.structured}"
        )
        return result

    async def generate_claim(self, round: int = 1) -> Claim:
        """Generate a statement for the true-or-false game.

        Raises:
            ModelInvocationFailure: If the model could not be reached
        """
        round = max(1, int(round or 1))
        logger.info(f"🎲 Generating trivia claim for round {round}")

        request = prompt_builder.build(AnalysisKind.CLAIM, round=round)
        raw_text = await self._invoke(self.claim_ai, request, AnalysisKind.CLAIM)

        normalized = self.normalizer.normalize_claim(raw_text)
        claim = self.assembler.assemble_claim(
            normalized,
            RequestContext(model_id=self.claim_ai.model_id, round=round),
        )
        logger.info(f"✅ Trivia claim ready: {claim.id} answer={claim.answer} sources={len(claim.sources)}")
        return claim

    async def analyze_debate(self, content: str) -> DebateAnalysis:
        """Produce balanced pro and con arguments for a text.

        Raises:
            ValidationFailure: If content is empty
            ModelInvocationFailure: If the model could not be reached
        """
        content = self._require_content(content, "Content is required for debate analysis")
        logger.info(f"⚖️ Starting debate analysis for: {content[:100]}...")

        request = prompt_builder.build(AnalysisKind.DEBATE, content=content)
        raw_text = await self._invoke(self.ai, request, AnalysisKind.DEBATE)

        normalized = self.normalizer.normalize_debate(raw_text)
        analysis = self.assembler.assemble_debate(
            normalized,
            RequestContext(model_id=self.ai.model_id, content=content),
        )
        logger.info(
            f"✅ Debate analysis ready: {analysis.id} pros={len(analysis.pros)} cons={len(analysis.cons)}"
        )
        return analysis

    @staticmethod
    def _require_content(content: Optional[str], message: str) -> str:
        if not content or not content.strip():
            logger.warning(f"⚠️ Rejected request: {message}")
            raise ValidationFailure(message)
        return content.strip()

    async def _invoke(self, provider: AIProvider, request: ModelRequest, kind: AnalysisKind) -> str:
        """Call the model with a bounded timeout and at most one retry."""
        attempts = 1 + self.max_retries
        reason = "unknown error"
        last_error: Optional[BaseException] = None
        for attempt in range(1, attempts + 1):
            try:
                return await asyncio.wait_for(provider.complete(request), timeout=self.timeout)
            except asyncio.TimeoutError as e:
                last_error = e
                reason = f"timed out after {self.timeout}s"
            except Exception as e:
                last_error = e
                reason = f"{type(e).__name__}: {e}"
            logger.warning(f"⚠️ {kind.value} model call attempt {attempt}/{attempts} failed: {reason}")

        logger.error(f"❌ {kind.value} model call failed after {attempts} attempt(s)")
        raise ModelInvocationFailure(kind.value, attempts, reason) from last_error
