"""
Key-value store interface and per-set flag helpers.

The study session never touches storage globals; it is handed a store and
reads/writes flags through `SetPreferences`.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from core.preferences.constants import (
    DEF_VOICE_FLAG,
    FALSE_VALUE,
    SIDE_FLAG,
    TERM_VOICE_FLAG,
    TRUE_VALUE,
)

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Minimal durable string store."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryPreferenceStore:
    """
    Store that lives only as long as the process.
    """

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._values


def preference_key(flag_name: str, set_id: str) -> str:
    """Build the storage key for a flag of one set."""
    return f"{flag_name}_{set_id}"


class SetPreferences:
    """
    Boolean flags for one flashcard set.

    Flags are stored as "true"/"false" strings; a missing key reads as False.
    """

    def __init__(self, store: KeyValueStore, set_id: str):
        self.store = store
        self.set_id = set_id

    def get_flag(self, flag_name: str) -> bool:
        return self.store.get(preference_key(flag_name, self.set_id)) == TRUE_VALUE

    def set_flag(self, flag_name: str, value: bool) -> None:
        self.store.set(
            preference_key(flag_name, self.set_id),
            TRUE_VALUE if value else FALSE_VALUE,
        )
        logger.debug("Set %s=%s for set %s", flag_name, value, self.set_id)

    def toggle_flag(self, flag_name: str) -> bool:
        """Invert a flag, persist it and return the new value."""
        value = not self.get_flag(flag_name)
        self.set_flag(flag_name, value)
        return value

    @property
    def term_is_front(self) -> bool:
        return self.get_flag(SIDE_FLAG)

    @property
    def term_voice(self) -> bool:
        return self.get_flag(TERM_VOICE_FLAG)

    @property
    def definition_voice(self) -> bool:
        return self.get_flag(DEF_VOICE_FLAG)
