"""
Flashcard Trainer - Main App

Streamlit UI shell for the study session engine.
"""

import logging
import os

import streamlit as st

from app.pages.study import render_study_page
from app.state import ensure_session_state, get_preference_store


# ---- Logging ----

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


# ---- Page Setup ----

st.set_page_config(
    page_title="Flashcard Trainer",
    page_icon="🗂️",
    layout="centered"
)


# ---- Database Initialization ----

get_preference_store()


# ---- Session State Initialization ----

ensure_session_state()


# ---- Main App ----

def main():
    """Main app entry point."""
    render_study_page()


if __name__ == "__main__":
    main()
