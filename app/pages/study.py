"""
Study page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.activity_registry import ACTIVITY_SPECS, get_activity_spec
from app.session_controller import enter_mode, exit_mode, get_session, start_study_session
from app.ui import (
    render_session_complete,
    render_session_stats,
    render_speech_player,
    render_timer_pump,
)
from core import preferences
from core.study import SessionStatus, StudySession


def render_study_page() -> None:
    """
    Render the study flow (set picker, set overview or active mode).
    """
    session = get_session()

    if session is None or session.status == SessionStatus.DELETED:
        _render_set_picker(deleted=session is not None)
    elif session.status == SessionStatus.FAILED:
        _render_set_picker()
        st.error(session.error or "Flashcard set not found")
    elif session.status == SessionStatus.EMPTY:
        st.title(session.name)
        st.info("This set has no cards yet.")
    elif session.active is None:
        _render_set_overview(session)
    else:
        _render_active_mode(session)

    render_speech_player(st.session_state.synthesizer)
    render_timer_pump(st.session_state.scheduler)

    if preferences.is_test_mode():
        st.caption("TEST MODE - Using test preferences database")


def _render_set_picker(deleted: bool = False) -> None:
    st.title("🗂️ Flashcard Trainer")
    if deleted:
        st.success("Flashcard set deleted.")

    set_id = st.text_input("Flashcard set id", value=st.session_state.set_id)
    if st.button("Open set", type="primary", disabled=not set_id):
        start_study_session(set_id.strip())
        st.rerun()


def _render_set_overview(session: StudySession) -> None:
    st.title(session.name)
    st.caption(f"{len(session.deck)} cards")
    st.markdown("Choose how you'd like to study:")

    columns = st.columns(len(ACTIVITY_SPECS))
    for column, spec in zip(columns, ACTIVITY_SPECS.values()):
        with column:
            if st.button(spec.label, type="primary", use_container_width=True, help=spec.description):
                enter_mode(spec.mode)
                st.rerun()


def _render_active_mode(session: StudySession) -> None:
    component = session.active
    spec = get_activity_spec(component.mode)

    st.markdown(f"#### {session.name} · {spec.label}")

    errors = getattr(component, "error_count", None)
    if render_session_stats(component.position, component.total, errors):
        exit_mode()
        st.rerun()

    if getattr(component, "completed", False):
        if render_session_complete(session.name, component.error_count):
            exit_mode()
            st.rerun()
        return

    activity = spec.activity_factory(session)
    activity.relay_keys()
    activity.render()
