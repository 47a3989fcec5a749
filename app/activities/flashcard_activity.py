"""
Flashcard Activity

Study mode: flip through cards, term on one side, definition on the other.
"""

import streamlit as st

from app.activities.base import AbstractActivity
from app.session_controller import confirm_delete
from app.ui.flashcard import render_flashcard
from app.ui.flashcard_style import CARD_BACK_STYLE, CARD_FRONT_STYLE
from core.schemas import CardField
from core.study import CardNavigator, Key


FIELD_LABELS = {
    CardField.TERM: "Term",
    CardField.DEFINITION: "Definition",
}


class FlashcardActivity(AbstractActivity):
    """
    Flashcard activity - navigate and flip cards.

    Buttons are routed through the navigator's key bindings so clicking and
    the arrow/space keys behave identically.
    """

    @property
    def navigator(self) -> CardNavigator:
        return self.component

    def render(self) -> None:
        navigator = self.navigator

        render_flashcard(
            main_text=navigator.visible_text,
            corner_text=FIELD_LABELS[navigator.visible_field],
            slide=navigator.slide_direction.value,
            style=CARD_BACK_STYLE if navigator.flipped else CARD_FRONT_STYLE,
        )
        st.markdown("<br>", unsafe_allow_html=True)

        col_prev, col_flip, col_next = st.columns(3)
        with col_prev:
            if st.button("⬅️ Previous", use_container_width=True, disabled=navigator.animating):
                self.press(Key.ARROW_LEFT.value)
        with col_flip:
            if st.button("🔄 Flip", use_container_width=True, type="primary", disabled=navigator.animating):
                self.press(Key.SPACE.value)
        with col_next:
            if st.button("Next ➡️", use_container_width=True, disabled=navigator.animating):
                self.press(Key.ARROW_RIGHT.value)

        self._render_options()
        self._render_delete()

    def _render_options(self) -> None:
        navigator = self.navigator
        prefs = navigator.preferences

        col_speak, col_side = st.columns(2)
        with col_speak:
            if st.button("🔊 Listen", use_container_width=True):
                navigator.speak_current()
                st.rerun()
        with col_side:
            front = FIELD_LABELS[navigator.front_field]
            if st.button(f"↔️ Front: {front}", use_container_width=True):
                navigator.toggle_side()
                st.rerun()

        col_term_voice, col_def_voice = st.columns(2)
        with col_term_voice:
            term_voice = st.toggle("Speak terms", value=prefs.term_voice)
            if term_voice != prefs.term_voice:
                navigator.toggle_voice(CardField.TERM)
        with col_def_voice:
            def_voice = st.toggle("Speak definitions", value=prefs.definition_voice)
            if def_voice != prefs.definition_voice:
                navigator.toggle_voice(CardField.DEFINITION)

    def _render_delete(self) -> None:
        navigator = self.navigator
        st.divider()

        if not navigator.delete_pending:
            if st.button("🗑️ Delete set", type="secondary"):
                navigator.request_delete()
                st.rerun()
            return

        st.warning(f'Do you really want to delete the flashcard set "{self.session.name}"?')
        if st.session_state.delete_error:
            st.error(st.session_state.delete_error)
        col_yes, col_no = st.columns(2)
        with col_yes:
            if st.button("Yes, delete", type="primary", use_container_width=True):
                confirm_delete()
                st.rerun()
        with col_no:
            if st.button("No", use_container_width=True):
                navigator.cancel_delete()
                st.session_state.delete_error = None
                st.rerun()
