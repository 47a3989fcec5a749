"""
Study engine timing and sizing constants.
"""

from enum import Enum


# ---- Card Navigator ----

SLIDE_OUT_SECONDS = 0.15  # Current card slides away before the index changes
SLIDE_IN_SECONDS = 0.15   # New card slides in before input is accepted again


# ---- Quiz / Recall ----

FEEDBACK_SECONDS = 1.0    # How long "correct"/"incorrect" stays on screen
MAX_QUIZ_OPTIONS = 4
MAX_DISTRACTORS = MAX_QUIZ_OPTIONS - 1


class AnswerResult(str, Enum):
    """Outcome of the most recent answer, shown as a transient message."""
    NONE = "none"
    CORRECT = "correct"
    INCORRECT = "incorrect"
