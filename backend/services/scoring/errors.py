"""Errors raised by the scoring engine and its collaborators."""


class InvalidInputError(ValueError):
    """Candidate text or requirement set violates the engine's input contract."""


class EnrichmentUnavailableError(RuntimeError):
    """A Gemini-only operation was requested but Gemini is not usable."""
