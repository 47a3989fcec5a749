"""
Error types raised by the study engine and its adapters.
"""

from __future__ import annotations

from typing import Optional


class StudyError(RuntimeError):
    """Base class for recoverable study-engine failures."""


class SetFetchError(StudyError):
    """
    Raised when a flashcard set cannot be loaded.
    """

    def __init__(self, set_id: str, message: Optional[str] = None):
        super().__init__(message or f"Could not load flashcard set {set_id!r}")
        self.set_id = set_id


class SetNotFoundError(SetFetchError):
    """Raised when no set exists for the requested id."""

    def __init__(self, set_id: str):
        super().__init__(set_id, f"Flashcard set {set_id!r} not found")


class SetDeleteError(StudyError):
    """
    Raised when a set could not be deleted. Nothing was removed.
    """

    def __init__(self, set_id: str, message: Optional[str] = None):
        super().__init__(message or f"Could not delete flashcard set {set_id!r}")
        self.set_id = set_id


class SpeechError(StudyError):
    """Raised when speech synthesis fails to render an utterance."""
