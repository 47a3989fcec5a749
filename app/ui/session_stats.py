"""
Session Progress UI

Renders progress metrics, the exit control and the completion dialog.
"""

import streamlit as st


def render_session_stats(position: int, total: int, errors: int | None = None) -> bool:
    """
    Render mode progress and exit button.

    Returns:
        True if the exit button was clicked, False otherwise
    """
    col1, col2, col3 = st.columns([3, 3, 1])

    with col1:
        st.metric("Card", f"{position}/{total}")

    with col2:
        if errors is not None:
            st.metric("Errors", errors)

    with col3:
        st.markdown("<br>", unsafe_allow_html=True)  # Align with metrics
        if st.button("❌", help="Back to set", use_container_width=True):
            return True

    st.divider()
    return False


def render_answer_feedback(last_result: str) -> None:
    """Show the transient correct/incorrect message."""
    if last_result == "correct":
        st.success("Correct!")
    elif last_result == "incorrect":
        st.error("Incorrect, try again.")


def render_session_complete(set_name: str, errors: int) -> bool:
    """
    Render the completion message.

    Returns:
        True if the user chose to return to the set
    """
    st.success("🎉 Test complete!")
    st.info(f"Errors: {errors}")
    st.markdown(f'Return to the flashcard set "{set_name}".')
    return st.button("Return", type="primary", use_container_width=True)
