"""
Abstract Study Mode

Defines the lifecycle shared by the flashcard, quiz and recall modes.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from core.speech import SpeechDispatcher
from core.study.deck import Deck
from core.study.keyboard import KeyBinding, KeyboardScope, KeyboardSurface
from core.study.scheduler import Scheduler, TimerScope

logger = logging.getLogger(__name__)


class StudyMode(str, Enum):
    """Study experiences a session can drive."""
    FLASHCARDS = "flashcards"
    QUIZ = "quiz"
    RECALL = "recall"


class AbstractStudyMode(ABC):
    """
    Base class for study mode components.

    A component owns its transient state, a timer scope and a keyboard scope.
    `enter()` attaches the key bindings; `exit()` detaches them and closes the
    timer scope so no pending callback runs afterwards.

    Subclasses should implement:
    - key_bindings()
    - mode
    """

    mode: StudyMode

    def __init__(
        self,
        deck: Deck,
        scheduler: Scheduler,
        speech: Optional[SpeechDispatcher] = None,
    ):
        self.deck = deck
        self.speech = speech
        self.timers = TimerScope(scheduler, name=self.mode.value)
        self.keys = KeyboardScope(self.key_bindings())
        self.active = False

    @abstractmethod
    def key_bindings(self) -> dict[str, KeyBinding]:
        """Return the key bindings active while this mode is entered."""

    def enter(self, surface: Optional[KeyboardSurface] = None) -> None:
        if surface is not None:
            self.keys.attach(surface)
        self.active = True
        logger.info("Entered %s mode for set %s", self.mode.value, self.deck.set_id)

    def exit(self) -> None:
        self.keys.detach()
        self.timers.close()
        self.active = False
        logger.info("Exited %s mode for set %s", self.mode.value, self.deck.set_id)

    def speak(self, text: Optional[str]) -> Optional[str]:
        """Speak through the shared dispatcher, if one is configured."""
        if self.speech is None:
            return None
        return self.speech.speak(text)

    @property
    def total(self) -> int:
        return len(self.deck)
