from __future__ import annotations

"""Exceptions raised by the chroma package.

Parse failures are not exceptions: they return ``None``. Exceptions are
reserved for I/O problems the caller has to handle.
"""


class ChromaError(Exception):
    """Base class for chroma errors."""


class ImageDecodeError(ChromaError):
    """Raised when an image file cannot be opened or decoded."""

    def __init__(self, source: object, reason: str) -> None:
        super().__init__(f"Cannot decode image {source!s}: {reason}")
        self.source = source
        self.reason = reason


__all__ = ["ChromaError", "ImageDecodeError"]
