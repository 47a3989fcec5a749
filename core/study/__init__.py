"""Study session engine: deck, navigation, quiz and recall modes."""

from core.study.base import AbstractStudyMode, StudyMode
from core.study.constants import AnswerResult
from core.study.deck import Deck
from core.study.keyboard import Key, KeyEvent, KeyboardSurface
from core.study.navigator import CardNavigator, SlideDirection
from core.study.quiz import QuizDirection, QuizPhase, QuizSession, build_options
from core.study.recall import RecallSession, answers_match
from core.study.scheduler import Scheduler, TaskHandle, TimerScope
from core.study.session import SessionStatus, SetRepository, StudySession

__all__ = [
    "AbstractStudyMode",
    "StudyMode",
    "AnswerResult",
    "Deck",
    "Key",
    "KeyEvent",
    "KeyboardSurface",
    "CardNavigator",
    "SlideDirection",
    "QuizDirection",
    "QuizPhase",
    "QuizSession",
    "build_options",
    "RecallSession",
    "answers_match",
    "Scheduler",
    "TaskHandle",
    "TimerScope",
    "SessionStatus",
    "SetRepository",
    "StudySession",
]
