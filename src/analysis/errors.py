"""Error taxonomy for the analysis pipeline."""

from __future__ import annotations


class AnalyzerError(Exception):
    """Base class for every failure surfaced by an analysis request."""


class ValidationError(AnalyzerError):
    """The input URL is missing or malformed."""


class FetchError(AnalyzerError):
    """The target page could not be retrieved."""

    def __init__(
        self,
        message: str,
        *,
        url: str = "",
        status_code: int | None = None,
        reason: str = "",
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.reason = reason


class MissingCredentialError(AnalyzerError):
    """The scoring service credential is not configured."""


class ScoringError(AnalyzerError):
    """The scoring service was unreachable or returned an unusable response."""
