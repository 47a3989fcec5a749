"""Speech dispatch: locale heuristics, language guessing and synthesis."""

from core.speech.constants import (
    DEFAULT_LOCALE,
    ENGLISH,
    FRENCH,
    GERMAN,
    RUSSIAN,
    LOCALE_BY_ISO_639_3,
)
from core.speech.detection import LanguageGuesser, locale_for_code, select_locale
from core.speech.dispatcher import SpeechDispatcher
from core.speech.synthesizers import GTTSSynthesizer, SpeechSynthesizer, Utterance

__all__ = [
    "DEFAULT_LOCALE",
    "ENGLISH",
    "FRENCH",
    "GERMAN",
    "RUSSIAN",
    "LOCALE_BY_ISO_639_3",
    "LanguageGuesser",
    "locale_for_code",
    "select_locale",
    "SpeechDispatcher",
    "GTTSSynthesizer",
    "SpeechSynthesizer",
    "Utterance",
]
