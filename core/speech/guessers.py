"""
Statistical language guessers.
"""

from __future__ import annotations

from typing import Optional

from lingua import LanguageDetector, LanguageDetectorBuilder


class LinguaLanguageGuesser:
    """
    Language guesser backed by the lingua detector.

    The detector is built lazily on first use; loading the language models is
    the expensive part.
    """

    def __init__(self, detector: Optional[LanguageDetector] = None):
        self._detector = detector

    @property
    def detector(self) -> LanguageDetector:
        if self._detector is None:
            self._detector = LanguageDetectorBuilder.from_all_languages().build()
        return self._detector

    def guess(self, text: str) -> Optional[str]:
        if not text or not text.strip():
            return None
        language = self.detector.detect_language_of(text)
        if language is None:
            return None
        return language.iso_code_639_3.name.lower()
