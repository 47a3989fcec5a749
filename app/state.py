"""
Streamlit session state and shared resource helpers.
"""

from __future__ import annotations

import streamlit as st

from core import preferences
from core.set_repo import MongoSetRepository
from core.speech import GTTSSynthesizer, SpeechDispatcher
from core.speech.guessers import LinguaLanguageGuesser
from core.study import KeyboardSurface, Scheduler


@st.cache_resource
def get_preference_store() -> preferences.SqlPreferenceStore:
    """
    Durable preference store (initialised once per server process).
    """
    return preferences.SqlPreferenceStore(preferences.init_db())


@st.cache_resource
def get_set_repository() -> MongoSetRepository:
    return MongoSetRepository()


@st.cache_resource
def get_language_guesser() -> LinguaLanguageGuesser:
    return LinguaLanguageGuesser()


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "set_id" not in st.session_state:
        st.session_state.set_id = st.query_params.get("set", "")
    if "study_session" not in st.session_state:
        st.session_state.study_session = None
    if "scheduler" not in st.session_state:
        st.session_state.scheduler = Scheduler()
    if "keyboard" not in st.session_state:
        st.session_state.keyboard = KeyboardSurface()
    if "synthesizer" not in st.session_state:
        st.session_state.synthesizer = GTTSSynthesizer()
    if "speech" not in st.session_state:
        st.session_state.speech = SpeechDispatcher(
            st.session_state.synthesizer,
            get_language_guesser(),
        )
    if "last_played_utterance" not in st.session_state:
        st.session_state.last_played_utterance = 0
    if "delete_error" not in st.session_state:
        st.session_state.delete_error = None
