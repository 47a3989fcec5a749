"""
Timer Pump

Streamlit only reruns on user input, so pending slide/feedback callbacks are
driven by a fragment that polls the scheduler while anything is pending.
"""

from __future__ import annotations

import streamlit as st

from core.study import Scheduler

PUMP_INTERVAL_SECONDS = 0.1


@st.fragment(run_every=PUMP_INTERVAL_SECONDS)
def _pump(scheduler: Scheduler) -> None:
    if scheduler.run_due():
        st.rerun()


def render_timer_pump(scheduler: Scheduler) -> None:
    """Keep polling until every scheduled callback has fired or been cancelled."""
    if scheduler.has_pending:
        _pump(scheduler)
