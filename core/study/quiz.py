"""
Quiz Generator & Scorer - multiple choice over the deck.

States:
    selecting_direction --choose_direction()--> answering
    answering --correct--> (FEEDBACK_SECONDS) --> answering (next card) | completed
    answering --incorrect--> (FEEDBACK_SECONDS) --> answering (same card, same options)
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Optional

from core.schemas import Card, CardField
from core.speech import SpeechDispatcher
from core.study.base import AbstractStudyMode, StudyMode
from core.study.constants import FEEDBACK_SECONDS, MAX_DISTRACTORS, AnswerResult
from core.study.deck import Deck
from core.study.keyboard import KeyBinding
from core.study.scheduler import Scheduler, TaskHandle

logger = logging.getLogger(__name__)


class QuizDirection(str, Enum):
    TERM_TO_DEFINITION = "term_to_definition"
    DEFINITION_TO_TERM = "definition_to_term"

    @property
    def answer_field(self) -> CardField:
        if self == QuizDirection.DEFINITION_TO_TERM:
            return CardField.TERM
        return CardField.DEFINITION

    @property
    def prompt_field(self) -> CardField:
        if self == QuizDirection.DEFINITION_TO_TERM:
            return CardField.DEFINITION
        return CardField.TERM


class QuizPhase(str, Enum):
    SELECTING_DIRECTION = "selecting_direction"
    ANSWERING = "answering"
    COMPLETED = "completed"


def build_options(
    deck: Deck,
    index: int,
    direction: QuizDirection,
    rng: Optional[random.Random] = None,
) -> list[str]:
    """
    Build the shuffled answer options for the card at `index`.

    Distractors are the distinct values of the answer field that differ from
    the correct answer; at most MAX_DISTRACTORS are used. A small deck yields
    fewer options rather than repeats, and the correct answer appears once.
    """
    rng = rng or random.Random()
    field = direction.answer_field
    correct = deck[index].value(field)

    candidates = list(dict.fromkeys(
        card.value(field) for card in deck if card.value(field) != correct
    ))
    rng.shuffle(candidates)

    options = candidates[:MAX_DISTRACTORS] + [correct]
    rng.shuffle(options)
    return options


class QuizSession(AbstractStudyMode):
    """
    Multiple-choice quiz over every card of the deck, in order.

    Args:
        deck: Cards to quiz
        scheduler: Drives the transient feedback messages
        speech: Optional dispatcher for speaking prompts
        rng: Random source for option shuffling
    """

    mode = StudyMode.QUIZ

    def __init__(
        self,
        deck: Deck,
        scheduler: Scheduler,
        speech: Optional[SpeechDispatcher] = None,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(deck, scheduler, speech)
        self.rng = rng or random.Random()
        self._reset()

    def _reset(self) -> None:
        self.phase = QuizPhase.SELECTING_DIRECTION
        self.direction: Optional[QuizDirection] = None
        self.index = 0
        self.options: list[str] = []
        self.error_count = 0
        self.last_result = AnswerResult.NONE
        self._advance_pending = False
        self._message_timer: Optional[TaskHandle] = None

    def key_bindings(self) -> dict[str, KeyBinding]:
        return {}

    # ---- State ----

    @property
    def completed(self) -> bool:
        return self.phase == QuizPhase.COMPLETED

    @property
    def current_card(self) -> Optional[Card]:
        if self.direction is None or self.deck.is_empty:
            return None
        return self.deck[self.index]

    @property
    def prompt(self) -> str:
        card = self.current_card
        if card is None:
            return ""
        return card.value(self.direction.prompt_field)

    @property
    def correct_answer(self) -> str:
        card = self.current_card
        if card is None:
            return ""
        return card.value(self.direction.answer_field)

    @property
    def position(self) -> int:
        return self.index + 1 if self.current_card else 0

    @property
    def accepting_answers(self) -> bool:
        return self.phase == QuizPhase.ANSWERING and not self._advance_pending

    # ---- Transitions ----

    def choose_direction(self, direction: QuizDirection) -> bool:
        """Start the quiz in the given direction."""
        if self.phase != QuizPhase.SELECTING_DIRECTION or self.deck.is_empty:
            return False
        self.direction = QuizDirection(direction)
        self.phase = QuizPhase.ANSWERING
        self.index = 0
        self._generate_options()
        logger.info("Quiz on set %s started (%s)", self.deck.set_id, self.direction.value)
        return True

    def reset_direction(self) -> None:
        """Abandon the quiz and go back to direction selection."""
        self.timers.cancel_all()
        self._reset()

    def submit(self, answer: str) -> Optional[bool]:
        """
        Evaluate a chosen option by exact string equality.

        Returns:
            True/False for correct/incorrect, None if input is not accepted now
        """
        if not self.accepting_answers:
            return None

        if answer == self.correct_answer:
            self.last_result = AnswerResult.CORRECT
            self._advance_pending = True
            self._schedule_message_clear(self._advance)
            return True

        self.error_count += 1
        self.last_result = AnswerResult.INCORRECT
        self._schedule_message_clear(None)
        return False

    def _schedule_message_clear(self, then) -> None:
        if self._message_timer is not None:
            self._message_timer.cancel()

        def clear() -> None:
            self.last_result = AnswerResult.NONE
            self._message_timer = None
            if then is not None:
                then()

        self._message_timer = self.timers.call_later(FEEDBACK_SECONDS, clear)

    def _advance(self) -> None:
        self._advance_pending = False
        if self.index + 1 < len(self.deck):
            self.index += 1
            self._generate_options()
        else:
            self.phase = QuizPhase.COMPLETED
            logger.info("Quiz on set %s completed with %d errors", self.deck.set_id, self.error_count)

    def _generate_options(self) -> None:
        self.options = build_options(self.deck, self.index, self.direction, self.rng)

    def speak_prompt(self) -> Optional[str]:
        return self.speak(self.prompt)
