"""UI Components for the Flashcard Trainer"""

from app.ui.flashcard import render_flashcard
from app.ui.key_bridge import render_input_focus, render_key_relay
from app.ui.session_stats import (
    render_session_stats,
    render_answer_feedback,
    render_session_complete,
)
from app.ui.speech_player import render_speech_player
from app.ui.timer_pump import render_timer_pump

__all__ = [
    "render_flashcard",
    "render_key_relay",
    "render_input_focus",
    "render_session_stats",
    "render_answer_feedback",
    "render_session_complete",
    "render_speech_player",
    "render_timer_pump",
]
