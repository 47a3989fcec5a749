"""
Abstract Base Activity

Defines the interface for rendering a study mode (flashcards, quiz, write).
"""

from abc import ABC, abstractmethod

import streamlit as st

from app.ui.key_bridge import render_key_relay
from core.study import AbstractStudyMode, StudySession


class AbstractActivity(ABC):
    """
    Abstract base class for study activities.

    Subclasses should implement:
    - render()
    """

    def __init__(self, session: StudySession):
        """
        Initialize activity.

        Args:
            session: Study session whose active mode this activity renders
        """
        self.session = session

    @property
    def component(self) -> AbstractStudyMode:
        return self.session.active

    def press(self, key: str, target: str | None = None) -> None:
        """Route a control through the keyboard bindings of the mode, then rerun."""
        self.session.keyboard.press(key, target=target)
        st.rerun()

    def relay_keys(self) -> None:
        """Forward browser key presses for the mode's page-level shortcuts."""
        pressed = render_key_relay(self.component.keys.page_keys())
        if pressed is not None:
            self.press(pressed)

    @abstractmethod
    def render(self) -> None:
        """Render the active mode."""
        pass
