"""
Speech dispatch: choose a locale, preempt the channel, speak.
"""

from __future__ import annotations

import logging
from typing import Optional

from core.speech.detection import LanguageGuesser, select_locale
from core.speech.synthesizers import SpeechSynthesizer

logger = logging.getLogger(__name__)


class SpeechDispatcher:
    """
    Speaks arbitrary text on a single channel; the latest request wins.

    Args:
        synthesizer: Backend that owns the speech channel
        guesser: Statistical language guesser used when no heuristic matches
    """

    def __init__(self, synthesizer: SpeechSynthesizer, guesser: Optional[LanguageGuesser] = None):
        self.synthesizer = synthesizer
        self.guesser = guesser

    def speak(self, text: Optional[str]) -> Optional[str]:
        """
        Speak `text`, interrupting anything already playing.

        Empty text is ignored entirely and does not interrupt ongoing speech.

        Returns:
            The locale used, or None if nothing was spoken
        """
        if not text:
            return None

        locale = select_locale(text, self.guesser)
        self.synthesizer.cancel()
        self.synthesizer.speak(text, locale)
        logger.debug("Speaking %r as %s", text, locale)
        return locale

    def cancel(self) -> None:
        self.synthesizer.cancel()
