"""
Speech Player UI

Plays the current utterance of the speech channel.
"""

from __future__ import annotations

import streamlit as st

from core.speech import GTTSSynthesizer


def render_speech_player(synthesizer: GTTSSynthesizer) -> None:
    """
    Render the current utterance until it is replaced or cancelled.

    Only the first render of an utterance autoplays; later reruns keep the same
    audio element on the page so playback is not cut off.
    """
    if synthesizer.last_error:
        st.caption(f"🔇 {synthesizer.last_error}")

    utterance = synthesizer.current
    if utterance is None:
        return

    first_render = utterance.seq != st.session_state.last_played_utterance
    st.audio(utterance.audio, format=utterance.audio_format, autoplay=first_render)
    st.session_state.last_played_utterance = utterance.seq
