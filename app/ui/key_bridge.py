"""
Key Bridge

Streamlit has no keyboard events, so page-level shortcuts are relayed from the
browser: a script on the parent page listens for keydown, prevents the default
action of bound keys and clicks a hidden relay button per key. The click comes
back to Python as an ordinary button press.

The same mechanism replays focus requests for text inputs.
"""

from __future__ import annotations

import json

import streamlit as st
import streamlit.components.v1 as components

RELAY_PREFIX = "key_relay_"

RELAY_CSS = f"""
<style>
[class*="st-key-{RELAY_PREFIX}"] {{ display: none; }}
</style>
"""

KEY_LISTENER_SCRIPT = """
<script>
(function() {
  const win = window.parent;
  const doc = win.document;
  win.__flashcardKeyRelay = %s;
  if (win.__flashcardKeyListener) return;

  win.__flashcardKeyListener = function(event) {
    const target = event.target || {};
    const tag = target.tagName || "";
    if (tag === "INPUT" || tag === "TEXTAREA" || target.isContentEditable) return;

    const relay = (win.__flashcardKeyRelay || {})[event.key];
    if (!relay) return;
    const button = doc.querySelector(".st-key-" + relay + " button");
    if (!button) return;

    event.preventDefault();
    if (!event.repeat) button.click();
  };
  doc.addEventListener("keydown", win.__flashcardKeyListener);
})();
</script>
"""

FOCUS_SCRIPT = """
<script>
// focus request %(request)d
(function() {
  function go() {
    const input = window.parent.document.querySelector(".st-key-%(widget_key)s input");
    if (!input || input.disabled) return;
    input.focus();
    const end = input.value.length;
    input.setSelectionRange(end, end);
  }
  setTimeout(go, 60);
})();
</script>
"""


def relay_widget_key(key: str) -> str:
    """Widget key of the hidden relay button for a KeyboardEvent.key value."""
    name = "space" if key == " " else key.lower()
    return f"{RELAY_PREFIX}{name}"


def build_key_listener(keys: list[str]) -> str:
    """Script that relays `keys` to their hidden buttons."""
    relay = {key: relay_widget_key(key) for key in keys}
    return KEY_LISTENER_SCRIPT % json.dumps(relay)


def build_focus_script(widget_key: str, request: int) -> str:
    """Script that focuses a text input and puts the caret after its text."""
    return FOCUS_SCRIPT % {"widget_key": widget_key, "request": request}


def render_key_relay(keys: list[str]) -> str | None:
    """
    Render the hidden relay buttons and the listener for `keys`.

    Rendered with an empty list, the listener stops intercepting keys.

    Returns:
        The key whose relay button was pressed on this run, if any
    """
    pressed = None
    st.markdown(RELAY_CSS, unsafe_allow_html=True)
    for key in keys:
        if st.button(relay_widget_key(key), key=relay_widget_key(key)):
            pressed = key
    components.html(build_key_listener(keys), height=0)
    return pressed


def render_input_focus(widget_key: str, request: int) -> None:
    """
    Focus the text input with widget key `widget_key`.

    The script only runs again when `request` changes.
    """
    components.html(build_focus_script(widget_key, request), height=0)
