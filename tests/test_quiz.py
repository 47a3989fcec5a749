import random

import pytest

from conftest import make_deck, run_for
from core.study import AnswerResult, QuizDirection, QuizPhase, QuizSession, build_options


def start_quiz(deck, scheduler, direction=QuizDirection.TERM_TO_DEFINITION, **kwargs):
    quiz = QuizSession(deck, scheduler, **kwargs)
    quiz.enter()
    quiz.choose_direction(direction)
    return quiz


@pytest.mark.parametrize("seed", range(5))
def test_options_contain_correct_answer_once(deck, seed):
    rng = random.Random(seed)
    for index in range(len(deck)):
        for direction in QuizDirection:
            options = build_options(deck, index, direction, rng)
            correct = deck[index].value(direction.answer_field)
            assert options.count(correct) == 1
            assert len(options) == len(set(options))


def test_option_count_is_capped_at_four(rng):
    deck = make_deck(*[(f"t{i}", f"d{i}") for i in range(10)])
    assert len(build_options(deck, 3, QuizDirection.TERM_TO_DEFINITION, rng)) == 4


def test_option_count_shrinks_with_duplicate_answers(rng):
    deck = make_deck(("a", "same"), ("b", "same"), ("c", "other"), ("d", "same"))
    options = build_options(deck, 0, QuizDirection.TERM_TO_DEFINITION, rng)
    assert sorted(options) == ["other", "same"]


def test_single_card_quiz_completes_without_errors(clock, scheduler, rng):
    deck = make_deck(("cat", "кот"))
    quiz = start_quiz(deck, scheduler, rng=rng)

    assert quiz.options == ["кот"]
    assert quiz.prompt == "cat"
    assert quiz.submit("кот") is True
    assert quiz.last_result == AnswerResult.CORRECT
    assert not quiz.completed

    run_for(clock, scheduler, 1.1)
    assert quiz.completed
    assert quiz.error_count == 0
    assert quiz.last_result == AnswerResult.NONE


def test_wrong_answer_keeps_card_and_options(clock, scheduler, deck, rng):
    quiz = start_quiz(deck, scheduler, rng=rng)
    options = list(quiz.options)

    assert quiz.submit("собака") is False
    assert quiz.error_count == 1
    assert quiz.last_result == AnswerResult.INCORRECT

    run_for(clock, scheduler, 1.1)
    assert quiz.last_result == AnswerResult.NONE
    assert quiz.index == 0
    assert quiz.options == options


def test_retry_during_incorrect_message_restarts_timer(clock, scheduler, deck, rng):
    quiz = start_quiz(deck, scheduler, rng=rng)
    quiz.submit("собака")
    clock.advance(0.6)
    scheduler.run_due()

    quiz.submit("птица")
    assert quiz.error_count == 2
    clock.advance(0.6)
    scheduler.run_due()
    assert quiz.last_result == AnswerResult.INCORRECT

    run_for(clock, scheduler, 0.5)
    assert quiz.last_result == AnswerResult.NONE


def test_input_ignored_while_advance_pending(clock, scheduler, deck, rng):
    quiz = start_quiz(deck, scheduler, rng=rng)
    assert quiz.submit("кот") is True
    assert quiz.submit("кот") is None
    assert quiz.submit("wrong") is None
    assert quiz.error_count == 0

    run_for(clock, scheduler, 1.1)
    assert quiz.index == 1
    assert quiz.prompt == "dog"
    assert "собака" in quiz.options


def test_definition_to_term_direction(clock, scheduler, deck, rng):
    quiz = start_quiz(deck, scheduler, QuizDirection.DEFINITION_TO_TERM, rng=rng)
    assert quiz.prompt == "кот"
    assert quiz.correct_answer == "cat"
    assert quiz.submit("cat") is True


def test_full_run_counts_errors(clock, scheduler, deck, rng):
    quiz = start_quiz(deck, scheduler, rng=rng)
    for card in deck:
        quiz.submit("nope")
        quiz.submit(card.definition)
        run_for(clock, scheduler, 1.1)

    assert quiz.phase == QuizPhase.COMPLETED
    assert quiz.error_count == 3
    assert quiz.submit("кот") is None


def test_submit_before_direction_is_ignored(scheduler, deck):
    quiz = QuizSession(deck, scheduler)
    assert quiz.submit("кот") is None
    assert quiz.position == 0


def test_reset_direction_clears_progress(clock, scheduler, deck, rng):
    quiz = start_quiz(deck, scheduler, rng=rng)
    quiz.submit("кот")
    quiz.reset_direction()

    run_for(clock, scheduler, 1.1)
    assert quiz.phase == QuizPhase.SELECTING_DIRECTION
    assert quiz.index == 0
    assert quiz.options == []


def test_exit_blocks_pending_advance(clock, scheduler, deck, rng):
    quiz = start_quiz(deck, scheduler, rng=rng)
    quiz.submit("кот")
    quiz.exit()

    run_for(clock, scheduler, 1.1)
    assert quiz.index == 0
    assert quiz.last_result == AnswerResult.CORRECT


def test_speak_prompt(scheduler, deck, speech, synthesizer, guesser, rng):
    guesser.default = "eng"
    quiz = start_quiz(deck, scheduler, speech=speech, rng=rng)
    assert quiz.speak_prompt() == "en-US"
    assert synthesizer.calls == [("cancel",), ("speak", "cat", "en-US")]
