"""Custom exceptions for the paddock pipeline."""

from __future__ import annotations


class PaddockError(Exception):
    """Base exception for all paddock errors."""


class FeedConnectionError(PaddockError):
    """Raised when the client cannot connect to an upstream service."""


class FeedTimeoutError(PaddockError):
    """Raised when a request to an upstream service times out."""


class FeedAPIError(PaddockError):
    """Raised when an upstream service returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class FeedParseError(PaddockError):
    """Raised when a feed document cannot be parsed at all."""


class StructuralAbsenceError(PaddockError):
    """Raised when a document has none of the expected root elements."""

    def __init__(self, element: str) -> None:
        self.element = element
        super().__init__(f"No {element} elements found in document")
