"""
Flashcard style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "35px 24px"
CARD_MIN_HEIGHT = "260px"
FRONT_BG_COLOR = "#f0f2f6"
BACK_BG_COLOR = "#e8f4f8"
PROMPT_BG_COLOR = "#ffffff"


# ---- Shared Typography Defaults ----

DEFAULT_MAIN_FONT_SIZE = "2.6em"
DEFAULT_MAIN_COLOR = "#1f1f1f"
DEFAULT_MAIN_WEIGHT = "normal"
DEFAULT_CORNER_FONT_SIZE = "0.9em"
DEFAULT_CORNER_COLOR = "#666"
DEFAULT_CORNER_STYLE = "italic"


# ---- Slide Animation ----
# Horizontal offset of the card while leaving/arriving, keyed by slide direction

SLIDE_OFFSETS = {
    "none": "0",
    "next": "-40px",
    "prev": "40px",
}
SLIDE_OPACITY = {
    "none": "1",
    "next": "0.2",
    "prev": "0.2",
}


@dataclass(frozen=True)
class FlashcardStyle:
    """
    Visual style preset for flashcards.
    """
    main_font_size: str = DEFAULT_MAIN_FONT_SIZE
    main_color: str = DEFAULT_MAIN_COLOR
    main_weight: str = DEFAULT_MAIN_WEIGHT
    corner_font_size: str = DEFAULT_CORNER_FONT_SIZE
    corner_color: str = DEFAULT_CORNER_COLOR
    corner_style: str = DEFAULT_CORNER_STYLE
    wrap_text: bool = True
    bg_color: str = FRONT_BG_COLOR


DEFAULT_FLASHCARD_STYLE = FlashcardStyle()


# ---- Mode Presets ----

CARD_FRONT_STYLE = FlashcardStyle(
    bg_color=FRONT_BG_COLOR,
)

CARD_BACK_STYLE = FlashcardStyle(
    main_font_size="2.2em",
    bg_color=BACK_BG_COLOR,
)

QUIZ_PROMPT_STYLE = FlashcardStyle(
    main_font_size="1.8em",
    bg_color=PROMPT_BG_COLOR,
)

RECALL_PROMPT_STYLE = FlashcardStyle(
    main_font_size="1.6em",
    bg_color=PROMPT_BG_COLOR,
)
