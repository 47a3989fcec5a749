"""
Card Navigator - flashcard flip and navigation.

Navigation is a two-phase slide so the card never shows a flipped or stale
face mid-transition:

    idle --next()--> leaving(next) --SLIDE_OUT--> arriving(prev) --SLIDE_IN--> idle
    idle --prev()--> leaving(prev) --SLIDE_OUT--> arriving(next) --SLIDE_IN--> idle

The index changes between the two phases. Requests made while a slide is in
progress are rejected, not queued.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from core.errors import SetDeleteError
from core.preferences import DEF_VOICE_FLAG, SIDE_FLAG, TERM_VOICE_FLAG, SetPreferences
from core.schemas import Card, CardField
from core.speech import SpeechDispatcher
from core.study.base import AbstractStudyMode, StudyMode
from core.study.constants import SLIDE_IN_SECONDS, SLIDE_OUT_SECONDS
from core.study.deck import Deck
from core.study.keyboard import Key, KeyBinding
from core.study.scheduler import Scheduler

logger = logging.getLogger(__name__)


class SlideDirection(str, Enum):
    NONE = "none"
    NEXT = "next"
    PREV = "prev"


class CardNavigator(AbstractStudyMode):
    """
    Circular cursor over the deck with flip state and slide animation.

    Args:
        deck: Cards to navigate
        scheduler: Drives the slide phases
        preferences: Per-set flags (front side, auto-speak)
        speech: Optional dispatcher for speaking card faces
        delete_set: Collaborator that deletes the whole set by id
        on_exit: Called after a successful delete to leave the mode
    """

    mode = StudyMode.FLASHCARDS

    def __init__(
        self,
        deck: Deck,
        scheduler: Scheduler,
        preferences: SetPreferences,
        speech: Optional[SpeechDispatcher] = None,
        delete_set: Optional[Callable[[str], None]] = None,
        on_exit: Optional[Callable[[], None]] = None,
    ):
        super().__init__(deck, scheduler, speech)
        self.preferences = preferences
        self._delete_set = delete_set
        self._on_exit = on_exit

        self.index = 0
        self.flipped = False
        self.animating = False
        self.slide_direction = SlideDirection.NONE
        self.term_is_front = preferences.term_is_front
        self.delete_pending = False

    def key_bindings(self) -> dict[str, KeyBinding]:
        return {
            Key.ARROW_RIGHT.value: KeyBinding(self.next),
            Key.ARROW_LEFT.value: KeyBinding(self.prev),
            Key.SPACE.value: KeyBinding(self.toggle_flip),
            Key.ARROW_UP.value: KeyBinding(self.toggle_flip),
        }

    def enter(self, surface=None) -> None:
        super().enter(surface)
        self._announce_face()

    # ---- Faces ----

    @property
    def current_card(self) -> Optional[Card]:
        if self.deck.is_empty:
            return None
        return self.deck[self.index]

    @property
    def front_field(self) -> CardField:
        return CardField.TERM if self.term_is_front else CardField.DEFINITION

    @property
    def back_field(self) -> CardField:
        return CardField.DEFINITION if self.term_is_front else CardField.TERM

    @property
    def visible_field(self) -> CardField:
        return self.back_field if self.flipped else self.front_field

    @property
    def front_text(self) -> str:
        card = self.current_card
        return card.value(self.front_field) if card else ""

    @property
    def back_text(self) -> str:
        card = self.current_card
        return card.value(self.back_field) if card else ""

    @property
    def visible_text(self) -> str:
        return self.back_text if self.flipped else self.front_text

    @property
    def position(self) -> int:
        return self.index + 1 if not self.deck.is_empty else 0

    # ---- Navigation ----

    def next(self) -> bool:
        """Slide to the following card. Returns False if rejected."""
        return self._start_slide(step=1, leaving=SlideDirection.NEXT, arriving=SlideDirection.PREV)

    def prev(self) -> bool:
        """Slide to the preceding card. Returns False if rejected."""
        return self._start_slide(step=-1, leaving=SlideDirection.PREV, arriving=SlideDirection.NEXT)

    def _start_slide(self, step: int, leaving: SlideDirection, arriving: SlideDirection) -> bool:
        if self.deck.is_empty or self.animating:
            return False

        self.flipped = False
        self.animating = True
        self.slide_direction = leaving
        self.timers.call_later(SLIDE_OUT_SECONDS, lambda: self._arrive(step, arriving))
        return True

    def _arrive(self, step: int, arriving: SlideDirection) -> None:
        self.index = self.deck.wrap(self.index + step)
        self.slide_direction = arriving
        self.timers.call_later(SLIDE_IN_SECONDS, self._settle)

    def _settle(self) -> None:
        self.animating = False
        self.slide_direction = SlideDirection.NONE
        self._announce_face()

    def toggle_flip(self) -> bool:
        """Turn the card over. Ignored while sliding."""
        if self.animating or self.deck.is_empty:
            return False
        self.flipped = not self.flipped
        self._announce_face()
        return True

    def toggle_side(self) -> bool:
        """
        Swap which field is shown on the front and persist the choice.

        Returns:
            True if the term is now the front face
        """
        self.term_is_front = not self.term_is_front
        self.preferences.set_flag(SIDE_FLAG, self.term_is_front)
        return self.term_is_front

    # ---- Speech ----

    def toggle_voice(self, field: CardField) -> bool:
        """Flip the auto-speak flag for the term or definition face."""
        flag = TERM_VOICE_FLAG if field == CardField.TERM else DEF_VOICE_FLAG
        return self.preferences.toggle_flag(flag)

    def speak_current(self) -> Optional[str]:
        """Speak the face that is currently visible."""
        return self.speak(self.visible_text)

    def _announce_face(self) -> None:
        if not self.active or self.current_card is None:
            return
        field = self.visible_field
        enabled = (
            self.preferences.term_voice
            if field == CardField.TERM
            else self.preferences.definition_voice
        )
        if enabled:
            self.speak(self.visible_text)

    # ---- Deletion ----

    def request_delete(self) -> None:
        self.delete_pending = True

    def cancel_delete(self) -> None:
        self.delete_pending = False

    def confirm_delete(self) -> None:
        """
        Delete the whole set, then leave the mode.

        Raises:
            SetDeleteError: The set was not deleted; navigator state is unchanged
        """
        if not self.delete_pending:
            return
        if self._delete_set is None:
            raise SetDeleteError(self.deck.set_id, "Deleting sets is not available")

        try:
            self._delete_set(self.deck.set_id)
        except SetDeleteError:
            logger.warning("Delete of set %s failed; keeping navigator state", self.deck.set_id)
            raise

        self.delete_pending = False
        if self._on_exit is not None:
            self._on_exit()
