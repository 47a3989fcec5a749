"""
Recall Activity

Study mode: read the definition, write the term.
"""

import streamlit as st

from app.activities.base import AbstractActivity
from app.ui.flashcard import render_flashcard
from app.ui.flashcard_style import RECALL_PROMPT_STYLE
from app.ui.key_bridge import render_input_focus
from app.ui.session_stats import render_answer_feedback
from core.study import Key, RecallSession
from core.study.recall import ANSWER_INPUT


class RecallActivity(AbstractActivity):
    """
    Write-the-term activity with letter hints.
    """

    @property
    def recall(self) -> RecallSession:
        return self.component

    def render(self) -> None:
        recall = self.recall

        render_flashcard(main_text=recall.prompt, style=RECALL_PROMPT_STYLE)
        st.markdown("<br>", unsafe_allow_html=True)

        answer_key = f"recall_answer_{recall.index}"

        # Enter inside the form submits it; the widget key changes per card so
        # the field starts empty on every new card. Focus requests are replayed
        # in the browser with the caret after the text.
        with st.form(key=f"recall_form_{recall.index}", clear_on_submit=False, border=False):
            answer = st.text_input(
                "Your answer",
                value=recall.typed_answer,
                key=answer_key,
                disabled=not recall.accepting_answers,
            )
            col_check, col_hint = st.columns(2)
            with col_check:
                check = st.form_submit_button("Check", type="primary", use_container_width=True)
            with col_hint:
                hint = st.form_submit_button("Hint", use_container_width=True)

        if recall.input.focused:
            render_input_focus(answer_key, recall.input.focus_requests)

        if check:
            recall.type_answer(answer)
            self.press(Key.ENTER.value, target=ANSWER_INPUT)
        if hint:
            recall.type_answer(answer)
            recall.reveal_hint()
            st.rerun()

        if recall.hint_length > 0:
            st.markdown(f"**:green[{recall.hint}]**")

        render_answer_feedback(recall.last_result.value)

        if st.button("🔊 Listen", use_container_width=True):
            recall.speak_prompt()
            st.rerun()
