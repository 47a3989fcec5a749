"""
Quiz Activity

Study mode: pick the matching answer out of up to four options.
"""

import streamlit as st

from app.activities.base import AbstractActivity
from app.ui.flashcard import render_flashcard
from app.ui.flashcard_style import QUIZ_PROMPT_STYLE
from app.ui.session_stats import render_answer_feedback
from core.study import QuizDirection, QuizPhase, QuizSession


DIRECTION_LABELS = {
    QuizDirection.TERM_TO_DEFINITION: "Term → Definition",
    QuizDirection.DEFINITION_TO_TERM: "Definition → Term",
}


class QuizActivity(AbstractActivity):
    """
    Multiple-choice activity.
    """

    @property
    def quiz(self) -> QuizSession:
        return self.component

    def render(self) -> None:
        if self.quiz.phase == QuizPhase.SELECTING_DIRECTION:
            self._render_direction_choice()
            return
        self._render_question()

    def _render_direction_choice(self) -> None:
        st.markdown("### Choose a quiz mode")
        for direction, label in DIRECTION_LABELS.items():
            if st.button(label, use_container_width=True, key=f"quiz_{direction.value}"):
                self.quiz.choose_direction(direction)
                st.rerun()

    def _render_question(self) -> None:
        quiz = self.quiz

        render_flashcard(main_text=quiz.prompt, style=QUIZ_PROMPT_STYLE)
        st.markdown("<br>", unsafe_allow_html=True)

        disabled = not quiz.accepting_answers
        columns = st.columns(2)
        for i, option in enumerate(quiz.options):
            with columns[i % 2]:
                if st.button(option, use_container_width=True, disabled=disabled, key=f"quiz_option_{quiz.index}_{i}"):
                    quiz.submit(option)
                    st.rerun()

        render_answer_feedback(quiz.last_result.value)

        col_speak, col_mode = st.columns(2)
        with col_speak:
            if st.button("🔊 Listen", use_container_width=True):
                quiz.speak_prompt()
                st.rerun()
        with col_mode:
            if st.button("Change quiz mode", use_container_width=True):
                quiz.reset_direction()
                st.rerun()
