"""Exceptions raised by the analyzer.

Each error carries the HTTP status the API answers with, so routes in
``app.py`` can turn any of them into a JSON error response.
"""
from __future__ import annotations


class TextAnalyzerError(RuntimeError):
    """Base class for analyzer errors."""
    http_status = 500

    def to_response(self) -> dict:
        return {"error": str(self)}


class InvalidInputError(TextAnalyzerError):
    """Empty text, or analysis kinds that are not names of known analyses."""
    http_status = 400


class SourceError(TextAnalyzerError):
    """Input text could not be read from a file or fetched from a URL."""
    http_status = 502


class HistoryError(TextAnalyzerError):
    """The history file could not be written."""


def expect(condition: bool, message: str, exc: type[TextAnalyzerError] = InvalidInputError):
    """Raise *exc*(message) unless *condition* holds."""
    if not condition:
        raise exc(message)
