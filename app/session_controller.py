"""
Session lifecycle helpers for Streamlit app.
"""

from __future__ import annotations

import logging

import streamlit as st

from app.state import get_preference_store, get_set_repository
from core.errors import SetDeleteError
from core.study import SessionStatus, StudyMode, StudySession

logger = logging.getLogger(__name__)


def get_session() -> StudySession | None:
    return st.session_state.study_session


def start_study_session(set_id: str) -> StudySession:
    """
    Load a set and make it the current study session.
    """
    end_session()

    session = StudySession(
        set_id,
        repository=get_set_repository(),
        store=get_preference_store(),
        scheduler=st.session_state.scheduler,
        speech=st.session_state.speech,
        keyboard=st.session_state.keyboard,
    )
    with st.spinner("Loading flashcard set..."):
        session.load()

    st.session_state.set_id = set_id
    st.session_state.study_session = session
    st.session_state.delete_error = None
    st.query_params["set"] = set_id
    logger.info("Study session for set %s: %s", set_id, session.status.value)
    return session


def enter_mode(mode: StudyMode) -> None:
    session = get_session()
    if session is None:
        return
    session.enter_mode(mode)
    st.session_state.delete_error = None


def exit_mode() -> None:
    """
    Leave the current mode and return to the set's detail view.
    """
    session = get_session()
    if session is not None:
        session.exit_mode()


def confirm_delete() -> None:
    """
    Delete the set from the flashcards view; failures stay on screen.
    """
    session = get_session()
    if session is None or session.active is None:
        return
    try:
        session.active.confirm_delete()
    except SetDeleteError as exc:
        st.session_state.delete_error = str(exc)
        return
    st.session_state.delete_error = None
    if session.status == SessionStatus.DELETED:
        # Kept so the page can confirm the delete
        session.close()
        st.session_state.scheduler.cancel_all()


def end_session() -> None:
    """
    End the current session.
    """
    session = get_session()
    if session is not None:
        session.close()
    st.session_state.study_session = None
    st.session_state.scheduler.cancel_all()
