import pytest

from conftest import StubRepository, run_for
from core.errors import SetDeleteError, SetFetchError
from core.schemas import FlashcardSet
from core.study import (
    CardNavigator,
    QuizDirection,
    QuizSession,
    RecallSession,
    SessionStatus,
    StudyMode,
    StudySession,
)


@pytest.fixture
def repository(animal_set):
    return StubRepository([animal_set, FlashcardSet(id="empty", name="Nothing")])


@pytest.fixture
def make_session(repository, store, scheduler, speech, keyboard, rng):
    def _make(set_id="set-1"):
        session = StudySession(
            set_id, repository, store,
            scheduler=scheduler, speech=speech, keyboard=keyboard, rng=rng,
        )
        session.load()
        return session
    return _make


def test_load_ready(make_session):
    session = make_session()
    assert session.status == SessionStatus.READY
    assert session.name == "Animals"
    assert len(session.deck) == 3


def test_load_missing_set_fails(make_session):
    session = make_session("nope")
    assert session.status == SessionStatus.FAILED
    assert "not found" in session.error
    assert session.enter_mode(StudyMode.QUIZ) is None


def test_load_database_failure(make_session, repository):
    repository.fetch_error = SetFetchError("set-1", "database down")
    session = make_session()
    assert session.status == SessionStatus.FAILED
    assert session.error == "database down"


def test_empty_deck_is_not_an_error(make_session):
    session = make_session("empty")
    assert session.status == SessionStatus.EMPTY
    assert session.error is None
    assert session.enter_mode(StudyMode.FLASHCARDS) is None


@pytest.mark.parametrize("mode,component_type", [
    (StudyMode.FLASHCARDS, CardNavigator),
    (StudyMode.QUIZ, QuizSession),
    (StudyMode.RECALL, RecallSession),
])
def test_enter_mode_builds_component(make_session, mode, component_type):
    session = make_session()
    component = session.enter_mode(mode)
    assert isinstance(component, component_type)
    assert session.mode == mode
    assert component.active


def test_switching_modes_tears_down_previous(make_session, keyboard, clock, scheduler):
    session = make_session()
    quiz = session.enter_mode(StudyMode.QUIZ)
    quiz.choose_direction(QuizDirection.TERM_TO_DEFINITION)
    quiz.submit("кот")

    session.enter_mode(StudyMode.FLASHCARDS)
    assert not quiz.active
    assert keyboard.listener_count == 1

    run_for(clock, scheduler, 1.1)
    assert quiz.index == 0


def test_keyboard_reaches_only_active_mode(make_session, keyboard, clock, scheduler):
    session = make_session()
    navigator = session.enter_mode(StudyMode.FLASHCARDS)
    session.enter_mode(StudyMode.RECALL)

    keyboard.press("ArrowRight")
    run_for(clock, scheduler, 0.5)
    assert navigator.index == 0


def test_tick_runs_due_callbacks(make_session, clock):
    session = make_session()
    navigator = session.enter_mode(StudyMode.FLASHCARDS)
    navigator.next()

    clock.advance(0.2)
    assert session.tick() == 1
    assert navigator.index == 1


def test_delete_from_flashcards_closes_session(make_session, repository):
    session = make_session()
    navigator = session.enter_mode(StudyMode.FLASHCARDS)
    navigator.request_delete()
    navigator.confirm_delete()

    assert repository.deleted == ["set-1"]
    assert session.status == SessionStatus.DELETED
    assert session.active is None


def test_failed_delete_keeps_session(make_session, repository):
    repository.delete_error = SetDeleteError("set-1")
    session = make_session()
    navigator = session.enter_mode(StudyMode.FLASHCARDS)
    navigator.request_delete()

    with pytest.raises(SetDeleteError):
        navigator.confirm_delete()
    assert session.status == SessionStatus.READY
    assert session.active is navigator


def test_close_exits_mode_and_cancels_speech(make_session, synthesizer, keyboard):
    session = make_session()
    session.enter_mode(StudyMode.RECALL)
    session.close()

    assert session.active is None
    assert keyboard.listener_count == 0
    assert synthesizer.calls[-1] == ("cancel",)


def test_preferences_survive_sessions(make_session):
    first = make_session()
    first.enter_mode(StudyMode.FLASHCARDS).toggle_side()
    first.close()

    second = make_session()
    navigator = second.enter_mode(StudyMode.FLASHCARDS)
    assert navigator.term_is_front
    assert navigator.front_text == "cat"
