import pytest

from core.domain import (
    Abort, Answering, Character, Direction, Erase, Finished, Judgment,
    NavigateNext, NavigatePrevious, SelectingVerb, Submit, Terminal,
)
from core.errors import ConfigError, DatasetError, InvariantError
from core.selector import QuestionSelector
from core.session import Session
from models import Verb

from conftest import DictLoader, ScriptedSource, record


def make_session(answers=("bin",), total=1, indices=(0,), **kwargs):
    loader = DictLoader({Verb.GEHEN: [record(a) for a in answers]})
    selector = QuestionSelector(ScriptedSource(indices))
    return Session(total, loader, verb=Verb.GEHEN, selector=selector, **kwargs)


def type_text(session, text):
    for char in text:
        session.apply(Character(char))


def answer(session, text):
    type_text(session, text)
    session.apply(Submit())


def tally_holds(session):
    judged = session.judgment in (Judgment.CORRECT, Judgment.INCORRECT)
    return session.correct_count + session.incorrect_count == session.question_index + judged


# --- construction ---

@pytest.mark.parametrize("total", [0, 100, 255, -1])
def test_question_count_out_of_range(total):
    with pytest.raises(ConfigError):
        make_session(total=total)


@pytest.mark.parametrize("total", [1, 99])
def test_question_count_bounds_accepted(total):
    assert make_session(total=total).total_questions == total


def test_preselected_verb_starts_on_first_question():
    session = make_session(answers=("a", "b", "c"), indices=(2,))
    assert session.verb is Verb.GEHEN
    assert session.state == Answering(Judgment.UNJUDGED)
    assert session.current_record_index == 2
    assert session.question_index == 0
    assert session.terminal is None


def test_preselected_verb_with_empty_dataset_fails():
    loader = DictLoader({Verb.GEHEN: []})
    with pytest.raises(DatasetError):
        Session(3, loader, verb=Verb.GEHEN)


def test_loader_errors_propagate():
    def loader(verb):
        raise DatasetError("gehen.csv not found")

    with pytest.raises(DatasetError):
        Session(3, loader, verb=Verb.GEHEN)


# --- typing and judging ---

def test_scenario_single_correct_question():
    session = make_session()
    answer(session, "bin")
    assert session.judgment is Judgment.CORRECT
    session.apply(Submit())
    assert session.correct_count == 1
    assert session.terminal is Terminal.COMPLETED


def test_scenario_empty_submit_changes_nothing():
    session = make_session()
    session.apply(Submit())
    assert session.judgment is Judgment.UNJUDGED
    assert session.correct_count == 0
    assert session.incorrect_count == 0
    assert session.question_index == 0


def test_submit_after_erasing_everything_is_still_a_noop():
    session = make_session()
    type_text(session, "b")
    session.apply(Erase())
    session.apply(Submit())
    assert session.judgment is Judgment.UNJUDGED
    assert session.incorrect_count == 0


def test_comparison_lowercases_input():
    session = make_session(answers=("gehe",))
    answer(session, "GEHE")
    assert session.judgment is Judgment.CORRECT


@pytest.mark.parametrize("typed", [" gehe", "gehe ", "gehé", "geh"])
def test_comparison_is_exact_otherwise(typed):
    session = make_session(answers=("gehe",))
    answer(session, typed)
    assert session.judgment is Judgment.INCORRECT
    assert session.incorrect_count == 1


def test_check_answer_returns_judgment():
    session = make_session(answers=("gehe",))
    assert session.check_answer() is None
    type_text(session, "gehe")
    assert session.check_answer() is Judgment.CORRECT


def test_erase_on_empty_buffer_is_noop():
    session = make_session()
    session.apply(Erase())
    assert session.response_buffer == ""
    type_text(session, "bi")
    session.apply(Erase())
    assert session.response_buffer == "b"


def test_typing_is_ignored_once_judged():
    session = make_session(answers=("bin",), total=2)
    answer(session, "bin")
    type_text(session, "xyz")
    session.apply(Erase())
    assert session.response_buffer == "bin"
    assert session.judgment is Judgment.CORRECT


def test_navigation_is_ignored_while_answering():
    session = make_session(total=2)
    session.apply(NavigateNext())
    session.apply(NavigatePrevious())
    assert session.state == Answering()


def test_judging_twice_is_an_invariant_error():
    session = make_session(total=2)
    answer(session, "bin")
    with pytest.raises(InvariantError):
        session.check_answer()


def test_advancing_unjudged_question_is_an_invariant_error():
    session = make_session(total=2)
    with pytest.raises(InvariantError):
        session.advance()


# --- advancing ---

def test_advance_clears_buffer_and_rerolls():
    session = make_session(answers=("a", "b", "c"), total=3, indices=(0, 2, 1))
    answer(session, "a")
    session.apply(Submit())
    assert session.response_buffer == ""
    assert session.judgment is Judgment.UNJUDGED
    assert session.question_index == 1
    assert session.current_record_index == 2


def test_repeats_are_allowed():
    session = make_session(answers=("a", "b"), total=3, indices=(1,))
    for _ in range(2):
        answer(session, "b")
        session.apply(Submit())
        assert session.current_record_index == 1
    assert session.correct_count == 2


def test_completion_does_not_roll_again():
    source = ScriptedSource([0, 1, 2])
    loader = DictLoader({Verb.GEHEN: [record("a"), record("b"), record("c")]})
    session = Session(2, loader, verb=Verb.GEHEN, selector=QuestionSelector(source))
    answer(session, "a")
    session.apply(Submit())
    answer(session, "x")
    last_index = session.current_record_index
    session.apply(Submit())
    assert session.terminal is Terminal.COMPLETED
    assert session.current_record_index == last_index
    assert len(source.calls) == 2


def test_tally_and_monotonic_index_over_a_session():
    session = make_session(answers=("a", "b"), total=5, indices=(0, 1))
    last_index = 0
    for typed in ["a", "wrong", "", "b", "A", "nope"]:
        type_text(session, typed)
        for _ in range(2):
            session.apply(Submit())
            if session.terminal is not None:
                break
            assert tally_holds(session)
            assert session.question_index >= last_index
            last_index = session.question_index
    assert session.terminal is Terminal.COMPLETED
    assert session.correct_count + session.incorrect_count == session.question_index == 5


# --- abort ---

def test_abort_while_answering_quits():
    session = make_session(total=3)
    type_text(session, "bi")
    session.apply(Abort())
    assert session.terminal is Terminal.QUIT
    assert session.done


def test_quit_accepts_nothing_else():
    session = make_session(total=3)
    session.apply(Abort())
    for event in [Submit(), Character("a"), Erase(), NavigateNext(), Abort()]:
        session.apply(event)
    assert session.state == Finished(Terminal.QUIT)
    assert session.question_index == 0


# --- completion ---

def test_restart_resets_tally_and_rerolls():
    session = make_session(answers=("a", "b"), total=1, indices=(0, 1))
    answer(session, "a")
    session.apply(Submit())
    session.apply(Submit())
    assert session.terminal is None
    assert session.question_index == 0
    assert session.correct_count == 0
    assert session.incorrect_count == 0
    assert session.judgment is Judgment.UNJUDGED
    assert session.current_record_index == 1
    assert session.loader.loaded == [Verb.GEHEN]


def test_exit_after_completion_returns_correct_count():
    session = make_session(total=1)
    answer(session, "bin")
    session.apply(Submit())
    assert not session.done
    session.apply(Abort())
    assert session.done
    assert session.result == 1
    assert session.terminal is Terminal.COMPLETED


def test_completed_ignores_typing_without_candidates():
    session = make_session(total=1)
    answer(session, "bin")
    session.apply(Submit())
    session.apply(Character("x"))
    session.apply(Erase())
    assert session.terminal is Terminal.COMPLETED


def test_restart_outside_completion_is_an_invariant_error():
    session = make_session(total=2)
    with pytest.raises(InvariantError):
        session.restart()
    with pytest.raises(InvariantError):
        session.exit()


# --- verb selection ---

def selecting_session(candidates=(Verb.GEHEN, Verb.HABEN), datasets=None, total=1):
    datasets = datasets or {
        Verb.GEHEN: [record("gehe")],
        Verb.HABEN: [record("habe", verb=Verb.HABEN, prompt="I have")],
    }
    return Session(
        total, DictLoader(datasets), candidates=candidates,
        selector=QuestionSelector(ScriptedSource([0])),
    )


def test_starts_in_selection_without_verb():
    session = selecting_session()
    assert session.state == SelectingVerb((Verb.GEHEN, Verb.HABEN), 0)
    assert session.verb is None
    assert session.loader.loaded == []


def test_navigate_previous_wraps():
    session = selecting_session()
    session.apply(NavigatePrevious())
    assert session.state.highlighted == 1


def test_navigate_next_wraps():
    session = selecting_session()
    session.apply(NavigateNext())
    session.apply(NavigateNext())
    assert session.state.highlighted == 0


def test_single_candidate_stays_put():
    session = selecting_session(candidates=(Verb.GEHEN,))
    session.move_highlight(Direction.NEXT)
    session.move_highlight(Direction.PREVIOUS)
    assert session.state.highlighted == 0


def test_empty_candidates():
    session = selecting_session(candidates=())
    session.apply(NavigateNext())
    assert session.state.highlighted == 0
    with pytest.raises(InvariantError):
        session.apply(Submit())


def test_typing_is_ignored_while_selecting():
    session = selecting_session()
    session.apply(Character("x"))
    session.apply(Erase())
    assert session.state == SelectingVerb((Verb.GEHEN, Verb.HABEN), 0)
    assert session.response_buffer == ""


def test_confirm_loads_highlighted_verb():
    session = selecting_session()
    session.apply(NavigateNext())
    session.apply(Submit())
    assert session.verb is Verb.HABEN
    assert session.loader.loaded == [Verb.HABEN]
    assert session.state == Answering()
    assert session.current_record.answer_text == "habe"


def test_confirm_with_empty_dataset_is_fatal():
    session = selecting_session(datasets={Verb.GEHEN: [], Verb.HABEN: []})
    with pytest.raises(DatasetError):
        session.apply(Submit())


def test_cancel_quits():
    session = selecting_session()
    session.apply(Abort())
    assert session.terminal is Terminal.QUIT
    assert session.done


def test_move_highlight_outside_selection_is_an_invariant_error():
    session = make_session()
    with pytest.raises(InvariantError):
        session.move_highlight(Direction.NEXT)


def test_reselect_after_completion():
    session = selecting_session()
    session.apply(NavigateNext())
    session.apply(Submit())
    answer(session, "habe")
    session.apply(Submit())
    assert session.terminal is Terminal.COMPLETED

    session.apply(Character("n"))
    assert session.state == SelectingVerb((Verb.GEHEN, Verb.HABEN), 1)
    assert session.verb is None
    assert session.records == []
    assert session.correct_count == 0
    assert session.question_index == 0

    session.apply(NavigatePrevious())
    session.apply(Submit())
    assert session.verb is Verb.GEHEN
    assert session.loader.loaded == [Verb.HABEN, Verb.GEHEN]


def test_preselected_verb_can_reselect_when_candidates_given():
    session = make_session(total=1, candidates=(Verb.HABEN, Verb.GEHEN))
    answer(session, "bin")
    session.apply(Submit())
    session.apply(Character("x"))
    assert session.state == SelectingVerb((Verb.HABEN, Verb.GEHEN), 1)
