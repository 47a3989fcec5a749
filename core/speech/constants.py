"""
Speech locales and character sets used for voice selection.
"""

# ---- Locales ----

ENGLISH = "en-US"
RUSSIAN = "ru-RU"
FRENCH = "fr-FR"
GERMAN = "de-DE"

DEFAULT_LOCALE = ENGLISH


# ---- Script / Diacritic Heuristics ----
# Checked in this order before falling back to statistical detection.
# "ü" belongs to the German set only.

CYRILLIC_PATTERN = r"[а-яё]"
FRENCH_PATTERN = r"[àâæçéèêëîïôœùûÿ]"
GERMAN_PATTERN = r"[äöüß]"


# ---- Statistical Fallback ----
# ISO 639-3 codes returned by the language guesser

LOCALE_BY_ISO_639_3 = {
    "eng": ENGLISH,
    "rus": RUSSIAN,
    "fra": FRENCH,
    "deu": GERMAN,
}
