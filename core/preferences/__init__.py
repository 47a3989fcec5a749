"""
Preferences - durable per-set flags

Quick start:
    from core import preferences

    store = preferences.SqlPreferenceStore()
    prefs = preferences.SetPreferences(store, set_id)
    prefs.toggle_flag(preferences.SIDE_FLAG)
"""

from core.preferences.constants import (
    SIDE_FLAG,
    TERM_VOICE_FLAG,
    DEF_VOICE_FLAG,
    RETENTION_DAYS,
)
from core.preferences.store import (
    KeyValueStore,
    InMemoryPreferenceStore,
    SetPreferences,
    preference_key,
)
from core.preferences.database import (
    SqlPreferenceStore,
    init_db,
    get_engine,
    is_test_mode,
)

__all__ = [
    "SIDE_FLAG",
    "TERM_VOICE_FLAG",
    "DEF_VOICE_FLAG",
    "RETENTION_DAYS",
    "KeyValueStore",
    "InMemoryPreferenceStore",
    "SetPreferences",
    "preference_key",
    "SqlPreferenceStore",
    "init_db",
    "get_engine",
    "is_test_mode",
]
