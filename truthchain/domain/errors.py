"""Errors raised by the fact-checking domain."""


class ValidationFailure(ValueError):
    """Required input is missing; raised before the model is called."""


class NoStructuredData(ValueError):
    """Model output holds no brace-delimited span."""


class MalformedModelOutput(ValueError):
    """Model output holds a span that does not decode to the expected schema."""


class ModelInvocationFailure(RuntimeError):
    """The model call failed or timed out on every attempt."""

    retryable = True

    def __init__(self, kind: str, attempts: int, reason: str):
        self.kind = kind
        self.attempts = attempts
        self.reason = reason
        super().__init__(f"Model invocation for {kind} failed after {attempts} attempt(s): {reason}")


class ProviderConfigurationError(ModelInvocationFailure):
    """No model provider could be set up, e.g. the API key is missing."""

    retryable = False
