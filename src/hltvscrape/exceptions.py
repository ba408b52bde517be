"""
Error hierarchy for hltvscrape.

Every failure raised by the extraction core is a subclass of ``HltvError``.
Structural failures carry the dotted ``field_label`` of the record field,
section headline or section boundary that could not be resolved.
"""

from __future__ import annotations

from typing import Optional


class HltvError(Exception):
    """Base exception for all hltvscrape errors."""

    pass


class QuerySyntaxError(HltvError):
    """Raised when a structural query cannot be compiled."""

    def __init__(self, selector: str, reason: str) -> None:
        self.selector = selector
        self.reason = reason
        super().__init__(f"CSS parse error: invalid selector {selector!r}: {reason}")


class ParseError(HltvError):
    """Base for failures caused by a page that does not match the expected layout."""

    def __init__(self, field_label: str, message: Optional[str] = None) -> None:
        self.field_label = field_label
        super().__init__(f"HLTV parse error: {message or field_label}")


class StructureMissingError(ParseError):
    """An expected element or attribute was not found."""

    def __init__(self, field_label: str, message: Optional[str] = None) -> None:
        super().__init__(field_label, message or f"Cannot find {field_label}")


class ValueFormatError(ParseError):
    """Text was found but could not be coerced to the required type."""

    def __init__(self, field_label: str, value: str, message: Optional[str] = None) -> None:
        self.value = value
        super().__init__(field_label, message or f"Value {value!r} of {field_label} is not an integer")


class TransportError(HltvError):
    """Raised when a page cannot be fetched."""

    def __init__(self, url: str, status_code: Optional[int] = None, message: Optional[str] = None) -> None:
        self.url = url
        self.status_code = status_code
        detail = message or (f"status {status_code}" if status_code is not None else "request failed")
        super().__init__(f"HTTPS lib error: GET {url}: {detail}")
