"""
Locale selection for spoken text.

`select_locale` is pure: given a text and a language guesser it returns the
locale the text should be spoken in. Script and diacritic checks win over
the statistical guess.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Protocol

from core.speech.constants import (
    CYRILLIC_PATTERN,
    DEFAULT_LOCALE,
    FRENCH,
    FRENCH_PATTERN,
    GERMAN,
    GERMAN_PATTERN,
    LOCALE_BY_ISO_639_3,
    RUSSIAN,
)

logger = logging.getLogger(__name__)

_CYRILLIC_RE = re.compile(CYRILLIC_PATTERN, re.IGNORECASE)
_FRENCH_RE = re.compile(FRENCH_PATTERN, re.IGNORECASE)
_GERMAN_RE = re.compile(GERMAN_PATTERN, re.IGNORECASE)


class LanguageGuesser(Protocol):
    """Statistical language identification."""

    def guess(self, text: str) -> Optional[str]:
        """Return an ISO 639-3 code, or None if undetermined."""
        ...


def has_cyrillic(text: str) -> bool:
    return bool(_CYRILLIC_RE.search(text))


def has_french_chars(text: str) -> bool:
    return bool(_FRENCH_RE.search(text))


def has_german_chars(text: str) -> bool:
    return bool(_GERMAN_RE.search(text))


def locale_for_code(code: Optional[str]) -> str:
    """Map an ISO 639-3 code to a speech locale, defaulting to English."""
    if not code:
        return DEFAULT_LOCALE
    return LOCALE_BY_ISO_639_3.get(code.lower(), DEFAULT_LOCALE)


def select_locale(text: Optional[str], guesser: Optional[LanguageGuesser] = None) -> Optional[str]:
    """
    Pick the speech locale for `text`.

    Order:
    1. Cyrillic letters -> Russian
    2. French diacritics -> French
    3. German umlauts / ß -> German
    4. Statistical guess mapped through LOCALE_BY_ISO_639_3, else English

    Returns:
        Locale string, or None for empty text
    """
    if not text:
        return None

    if has_cyrillic(text):
        return RUSSIAN
    if has_french_chars(text):
        return FRENCH
    if has_german_chars(text):
        return GERMAN

    if guesser is None:
        return DEFAULT_LOCALE
    code = guesser.guess(text)
    logger.debug("Guessed language %s for %r", code, text)
    return locale_for_code(code)
