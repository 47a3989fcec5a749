"""Study Activities for the Flashcard Trainer"""

from app.activities.base import AbstractActivity
from app.activities.flashcard_activity import FlashcardActivity
from app.activities.quiz_activity import QuizActivity
from app.activities.recall_activity import RecallActivity

__all__ = [
    "AbstractActivity",
    "FlashcardActivity",
    "QuizActivity",
    "RecallActivity",
]
