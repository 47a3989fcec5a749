"""
Study session: loads one set and owns the active study mode.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Optional, Protocol, Union

from core.errors import SetFetchError
from core.preferences import KeyValueStore, SetPreferences
from core.schemas import FlashcardSet
from core.speech import SpeechDispatcher
from core.study.base import AbstractStudyMode, StudyMode
from core.study.deck import Deck
from core.study.keyboard import KeyboardSurface
from core.study.navigator import CardNavigator
from core.study.quiz import QuizSession
from core.study.recall import RecallSession
from core.study.scheduler import Scheduler

logger = logging.getLogger(__name__)

ModeComponent = Union[CardNavigator, QuizSession, RecallSession]


class SetRepository(Protocol):
    """The set store operations the study engine relies on."""

    def fetch_set_by_id(self, set_id: str) -> FlashcardSet:
        ...

    def delete_set(self, set_id: str) -> None:
        ...


class SessionStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    EMPTY = "empty"
    FAILED = "failed"
    DELETED = "deleted"


class StudySession:
    """
    One user studying one set.

    The session loads the deck once, then runs at most one mode component at a
    time. Switching or leaving a mode tears the previous one down (timers
    cancelled, key bindings detached).

    Args:
        set_id: Id of the set to study
        repository: Fetch/delete collaborator
        store: Durable key-value store for per-set flags
        scheduler: Shared scheduler for every mode's delayed callbacks
        speech: Optional speech dispatcher
        keyboard: Optional key listener surface
        rng: Random source for quiz shuffling
    """

    def __init__(
        self,
        set_id: str,
        repository: SetRepository,
        store: KeyValueStore,
        scheduler: Optional[Scheduler] = None,
        speech: Optional[SpeechDispatcher] = None,
        keyboard: Optional[KeyboardSurface] = None,
        rng: Optional[random.Random] = None,
    ):
        self.set_id = set_id
        self.repository = repository
        self.preferences = SetPreferences(store, set_id)
        self.scheduler = scheduler or Scheduler()
        self.speech = speech
        self.keyboard = keyboard or KeyboardSurface()
        self.rng = rng

        self.status = SessionStatus.LOADING
        self.error: Optional[str] = None
        self.deck: Optional[Deck] = None
        self.active: Optional[ModeComponent] = None

    # ---- Loading ----

    def load(self) -> SessionStatus:
        """
        Fetch the set. A failure is recorded on the session, not raised.
        """
        try:
            flashcard_set = self.repository.fetch_set_by_id(self.set_id)
        except SetFetchError as exc:
            self.status = SessionStatus.FAILED
            self.error = str(exc)
            logger.warning("Study session for %s halted: %s", self.set_id, exc)
            return self.status

        self.deck = Deck.from_set(flashcard_set)
        self.error = None
        self.status = SessionStatus.EMPTY if self.deck.is_empty else SessionStatus.READY
        return self.status

    @property
    def name(self) -> str:
        return self.deck.name if self.deck else ""

    # ---- Modes ----

    @property
    def mode(self) -> Optional[StudyMode]:
        return self.active.mode if self.active else None

    def enter_mode(self, mode: StudyMode) -> Optional[ModeComponent]:
        """
        Start a study mode, leaving any current one first.

        Returns:
            The new mode component, or None if the deck is not ready
        """
        if self.status != SessionStatus.READY:
            return None

        self.exit_mode()
        component = self._build_mode(StudyMode(mode))
        component.enter(self.keyboard)
        self.active = component
        return component

    def exit_mode(self) -> None:
        if self.active is not None:
            self.active.exit()
            self.active = None

    def _build_mode(self, mode: StudyMode) -> AbstractStudyMode:
        if mode == StudyMode.FLASHCARDS:
            return CardNavigator(
                self.deck,
                self.scheduler,
                self.preferences,
                speech=self.speech,
                delete_set=self.repository.delete_set,
                on_exit=self._on_set_deleted,
            )
        if mode == StudyMode.QUIZ:
            return QuizSession(self.deck, self.scheduler, speech=self.speech, rng=self.rng)
        if mode == StudyMode.RECALL:
            return RecallSession(self.deck, self.scheduler, speech=self.speech)
        raise ValueError(f"Unknown study mode: {mode}")

    def _on_set_deleted(self) -> None:
        self.exit_mode()
        self.status = SessionStatus.DELETED
        logger.info("Set %s deleted; session closed", self.set_id)

    # ---- Event pump ----

    def tick(self) -> int:
        """Run any due delayed callbacks. Returns how many fired."""
        return self.scheduler.run_due()

    def close(self) -> None:
        self.exit_mode()
        if self.speech is not None:
            self.speech.cancel()
