from __future__ import annotations

from dataclasses import dataclass


# ==================================================
# Error Types
# ==================================================


class PgComposeError(Exception):
    """
    Base error type for pgcompose.
    """


class QueryCompositionError(PgComposeError, ValueError):
    """
    Raised when a query is built from inputs that break the composition contract.
    """


@dataclass(slots=True)
class MinifyErrorDetails:
    """
    Structured metadata for minifier failures.
    """

    reason: str
    position: int
    snippet: str


class MinifyError(PgComposeError):
    """
    Raised when query text cannot be minified, e.g. an unterminated quote.
    """

    def __init__(self, details: MinifyErrorDetails) -> None:
        self.details = details
        super().__init__(f"{details.reason} at position {details.position}: {details.snippet!r}")


def minify_error(*, reason: str, text: str, position: int) -> MinifyError:
    """
    Builds a MinifyError with a short excerpt of the text around the failure.
    """
    snippet = text[position:position + 20]
    return MinifyError(MinifyErrorDetails(reason=reason, position=position, snippet=snippet))
