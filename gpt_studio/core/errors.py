"""
Error taxonomy. Input errors end a session quietly; UnexpectedResponse is
fatal for the step that raised it and is handled by the entry point.
"""

from __future__ import annotations
from typing import Optional


class StudioError(Exception):
    """Base class for errors raised by gpt_studio."""


class InputError(StudioError):
    """The user's input cannot be used; nothing was sent to the model."""


class NoCodeProvided(InputError):
    def __init__(self) -> None:
        super().__init__("No code provided for analysis.")


class SourceReadError(InputError):
    def __init__(self, filename: str, reason: str) -> None:
        self.filename = filename
        self.reason = reason
        super().__init__(f"Error reading file {filename!r}: {reason}")


class UnexpectedResponse(StudioError):
    """The completion service returned an error or an unusable payload."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class DocumentationWriteError(StudioError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not save documentation to {path!r}: {reason}")
