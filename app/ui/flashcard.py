"""
Flashcard UI Component

Renders a single card face with optional corner label and slide offset.
"""

from __future__ import annotations

import html

import streamlit as st
from app.ui.flashcard_style import (
    CARD_MIN_HEIGHT,
    CARD_PADDING,
    DEFAULT_FLASHCARD_STYLE,
    SLIDE_OFFSETS,
    SLIDE_OPACITY,
    FlashcardStyle,
)


def render_flashcard(
    main_text: str,
    corner_text: str = "",
    slide: str = "none",
    style: FlashcardStyle | None = None,
) -> None:
    """
    Render a card face.

    Args:
        main_text: Primary text (center, large)
        corner_text: Optional text in top-right corner (e.g. "Term")
        slide: Slide direction of the running animation ("none", "next", "prev")
        style: Optional style preset
    """
    resolved_style = style or DEFAULT_FLASHCARD_STYLE
    offset = SLIDE_OFFSETS.get(slide, "0")
    opacity = SLIDE_OPACITY.get(slide, "1")
    white_space = "normal" if resolved_style.wrap_text else "nowrap"

    corner_html = ""
    if corner_text:
        corner_html = (
            f'<div style="position: absolute; top: 15px; right: 20px; '
            f'font-size: {resolved_style.corner_font_size}; color: {resolved_style.corner_color}; '
            f'font-style: {resolved_style.corner_style};">{html.escape(corner_text)}</div>'
        )

    main_html = (
        f'<h1 style="font-size: {resolved_style.main_font_size}; color: {resolved_style.main_color}; '
        f'font-weight: {resolved_style.main_weight}; margin: 0; white-space: {white_space}; '
        'text-align: center; line-height: 1.4; max-width: 100%; '
        'overflow-wrap: anywhere; word-break: break-word;">'
        f"{html.escape(main_text)}</h1>"
    )

    card_html = (
        f'<div style="background-color: {resolved_style.bg_color}; padding: {CARD_PADDING}; '
        'border-radius: 15px; text-align: center; box-shadow: 0 4px 6px '
        f'rgba(0, 0, 0, 0.1); min-height: {CARD_MIN_HEIGHT}; display: flex; '
        'flex-direction: column; align-items: center; justify-content: center; '
        f'position: relative; transform: translateX({offset}); opacity: {opacity}; '
        f'transition: transform 0.15s, opacity 0.15s;">{corner_html}{main_html}</div>'
    )

    st.markdown(card_html, unsafe_allow_html=True)
