# owstat/errors.py
"""
Exception types raised while fetching, extracting and encoding profiles.
"""

from typing import Optional, Sequence


class OwstatError(Exception):
    """Base class for every error raised by owstat."""


class FetchError(OwstatError):
    """Raised when the profile document cannot be obtained."""


class ParseError(OwstatError):
    """Raised when a document or a scalar value cannot be parsed."""


class SelectorNotFound(OwstatError):
    """Raised when a required query matches zero nodes."""

    def __init__(self, selector: str, attr: Optional[str] = None):
        self.selector = selector
        self.attr = attr
        if attr:
            message = f"no such element with selector: {selector}, attrname: {attr}"
        else:
            message = f"no such element with selector: {selector}"
        super().__init__(message)


class CorrelationMismatch(OwstatError):
    """Raised when sequences meant to be zipped differ in length."""

    def __init__(self, lengths: Sequence[int], context: str = ""):
        self.lengths = tuple(lengths)
        self.context = context
        message = f"parallel sequences differ in length: {list(self.lengths)}"
        if context:
            message += f" ({context})"
        super().__init__(message)


class EncodeError(OwstatError):
    """Raised when a profile cannot be serialized or rendered."""
