import json
from types import SimpleNamespace

from conftest import StubRepository
from app import session_controller
from app.ui import speech_player
from app.ui.key_bridge import build_focus_script, build_key_listener, relay_widget_key
from core.errors import SetDeleteError
from core.speech import GTTSSynthesizer, Utterance
from core.study import SessionStatus, StudyMode, StudySession


class FakeStreamlit:
    """Records the Streamlit calls the shell helpers make."""

    def __init__(self, **state):
        self.session_state = SimpleNamespace(**state)
        self.calls = []

    def audio(self, data, format=None, autoplay=False):
        self.calls.append(("audio", data, autoplay))

    def caption(self, text):
        self.calls.append(("caption", text))


def test_relay_widget_keys():
    assert relay_widget_key(" ") == "key_relay_space"
    assert relay_widget_key("ArrowRight") == "key_relay_arrowright"


def test_key_listener_maps_keys_and_prevents_default():
    script = build_key_listener([" ", "ArrowLeft"])
    mapping = json.dumps({" ": "key_relay_space", "ArrowLeft": "key_relay_arrowleft"})
    assert mapping in script
    assert "preventDefault()" in script
    assert "keydown" in script


def test_empty_key_listener_relays_nothing():
    assert "win.__flashcardKeyRelay = {};" in build_key_listener([])


def test_focus_script_targets_widget_and_moves_caret():
    script = build_focus_script("recall_answer_2", 5)
    assert ".st-key-recall_answer_2 input" in script
    assert "setSelectionRange(end, end)" in script
    assert build_focus_script("recall_answer_2", 6) != script


def make_session(animal_set, store, scheduler, keyboard, repository=None):
    session = StudySession(
        "set-1", repository or StubRepository([animal_set]), store,
        scheduler=scheduler, keyboard=keyboard,
    )
    session.load()
    session.enter_mode(StudyMode.FLASHCARDS).request_delete()
    return session


def test_deleted_session_is_kept_for_confirmation(monkeypatch, animal_set, store, scheduler, keyboard):
    session = make_session(animal_set, store, scheduler, keyboard)
    fake = FakeStreamlit(study_session=session, delete_error=None, scheduler=scheduler)
    monkeypatch.setattr(session_controller, "st", fake)

    session_controller.confirm_delete()

    assert fake.session_state.study_session is session
    assert session.status == SessionStatus.DELETED
    assert keyboard.listener_count == 0


def test_failed_delete_is_shown(monkeypatch, animal_set, store, scheduler, keyboard):
    repository = StubRepository([animal_set])
    repository.delete_error = SetDeleteError("set-1", "database down")
    session = make_session(animal_set, store, scheduler, keyboard, repository)
    fake = FakeStreamlit(study_session=session, delete_error=None, scheduler=scheduler)
    monkeypatch.setattr(session_controller, "st", fake)

    session_controller.confirm_delete()

    assert fake.session_state.delete_error == "database down"
    assert session.status == SessionStatus.READY
    assert session.active.delete_pending


def test_utterance_stays_rendered_but_autoplays_once(monkeypatch):
    synthesizer = GTTSSynthesizer()
    synthesizer.current = Utterance(seq=1, text="hello", locale="en-US", audio=b"mp3")
    fake = FakeStreamlit(last_played_utterance=0)
    monkeypatch.setattr(speech_player, "st", fake)

    speech_player.render_speech_player(synthesizer)
    speech_player.render_speech_player(synthesizer)
    assert fake.calls == [("audio", b"mp3", True), ("audio", b"mp3", False)]

    synthesizer.current = Utterance(seq=2, text="bye", locale="en-US", audio=b"mp3-2")
    speech_player.render_speech_player(synthesizer)
    assert fake.calls[-1] == ("audio", b"mp3-2", True)

    synthesizer.cancel()
    speech_player.render_speech_player(synthesizer)
    assert len(fake.calls) == 3
