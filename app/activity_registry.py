"""
Activity registry for Streamlit session handling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.activities import AbstractActivity, FlashcardActivity, QuizActivity, RecallActivity
from core.study import StudyMode, StudySession


@dataclass(frozen=True)
class ActivitySpec:
    """
    Activity configuration and renderer factory.
    """
    mode: StudyMode
    label: str
    description: str
    activity_factory: Callable[[StudySession], AbstractActivity]


ACTIVITY_SPECS: dict[StudyMode, ActivitySpec] = {
    StudyMode.FLASHCARDS: ActivitySpec(
        mode=StudyMode.FLASHCARDS,
        label="Flashcards",
        description="Flip through the cards",
        activity_factory=FlashcardActivity,
    ),
    StudyMode.QUIZ: ActivitySpec(
        mode=StudyMode.QUIZ,
        label="Multiple Choice",
        description="Pick the matching answer",
        activity_factory=QuizActivity,
    ),
    StudyMode.RECALL: ActivitySpec(
        mode=StudyMode.RECALL,
        label="Written",
        description="Write the term for each definition",
        activity_factory=RecallActivity,
    ),
}


def get_activity_spec(mode: StudyMode) -> ActivitySpec:
    return ACTIVITY_SPECS[StudyMode(mode)]
