"""
Recall Validator - write-the-term practice.

The definition is shown; the user types the term. Comparison trims the
submission and ignores case; nothing else is normalized.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from core.schemas import Card
from core.speech import SpeechDispatcher
from core.study.base import AbstractStudyMode, StudyMode
from core.study.constants import FEEDBACK_SECONDS, AnswerResult
from core.study.deck import Deck
from core.study.keyboard import Key, KeyBinding
from core.study.scheduler import Scheduler, TaskHandle

logger = logging.getLogger(__name__)

ANSWER_INPUT = "answer"


def answers_match(submitted: str, expected: str) -> bool:
    """Trim the submission, lower-case both sides, compare."""
    return (submitted or "").strip().lower() == (expected or "").lower()


@dataclass
class AnswerInput:
    """
    The answer text field: its value, focus and caret position.

    `focus_requests` counts calls to `focus()`; the page replays each new
    request in the browser.
    """
    value: str = ""
    focused: bool = False
    caret: int = 0
    focus_requests: int = 0

    def set_value(self, text: str) -> None:
        self.value = text
        self.caret = len(text)

    def clear(self) -> None:
        self.value = ""
        self.caret = 0

    def focus(self) -> None:
        """Focus the field with the caret after the existing text."""
        self.focused = True
        self.caret = len(self.value)
        self.focus_requests += 1

    def blur(self) -> None:
        self.focused = False


class RecallSession(AbstractStudyMode):
    """
    Free-text recall of each term, in deck order.

    Args:
        deck: Cards to practise
        scheduler: Drives the transient feedback messages
        speech: Optional dispatcher for speaking the definition
    """

    mode = StudyMode.RECALL

    def __init__(
        self,
        deck: Deck,
        scheduler: Scheduler,
        speech: Optional[SpeechDispatcher] = None,
    ):
        super().__init__(deck, scheduler, speech)
        self.index = 0
        self.input = AnswerInput()
        self.hint_length = 0
        self.error_count = 0
        self.last_result = AnswerResult.NONE
        self.completed = False
        self._advance_pending = False
        self._message_timer: Optional[TaskHandle] = None

    def key_bindings(self) -> dict[str, KeyBinding]:
        return {
            Key.ENTER.value: KeyBinding(self.submit, prevent_default=False, target=ANSWER_INPUT),
        }

    def enter(self, surface=None) -> None:
        super().enter(surface)
        self.input.focus()

    # ---- State ----

    @property
    def current_card(self) -> Optional[Card]:
        if self.deck.is_empty:
            return None
        return self.deck[self.index]

    @property
    def current_term(self) -> str:
        card = self.current_card
        return card.term if card else ""

    @property
    def prompt(self) -> str:
        card = self.current_card
        return card.definition if card else ""

    @property
    def typed_answer(self) -> str:
        return self.input.value

    @property
    def hint(self) -> str:
        return self.current_term[:self.hint_length]

    @property
    def position(self) -> int:
        return self.index + 1 if self.current_card else 0

    @property
    def accepting_answers(self) -> bool:
        return (
            self.current_card is not None
            and not self.completed
            and not self._advance_pending
        )

    # ---- Actions ----

    def type_answer(self, text: str) -> None:
        if self.completed:
            return
        self.input.set_value(text)

    def submit(self) -> Optional[bool]:
        """
        Check the typed answer against the current term.

        Returns:
            True/False for correct/incorrect, None if input is not accepted now
        """
        if not self.accepting_answers:
            return None

        if answers_match(self.input.value, self.current_term):
            self.last_result = AnswerResult.CORRECT
            self._advance_pending = True
            self._schedule_message_clear(self._advance)
            result = True
        else:
            self.error_count += 1
            self.last_result = AnswerResult.INCORRECT
            self._schedule_message_clear(None)
            result = False

        self.input.focus()
        return result

    def reveal_hint(self) -> str:
        """Reveal one more leading letter of the term."""
        if self.completed:
            return self.hint
        if self.hint_length < len(self.current_term):
            self.hint_length += 1
        self.input.focus()
        return self.hint

    def speak_prompt(self) -> Optional[str]:
        return self.speak(self.prompt)

    # ---- Transitions ----

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
            self._set_index(self.index + 1)
        else:
            self.completed = True
            logger.info("Recall on set %s completed with %d errors", self.deck.set_id, self.error_count)

    def _set_index(self, index: int) -> None:
        self.index = index
        self.input.clear()
        self.hint_length = 0
        self.input.focus()
