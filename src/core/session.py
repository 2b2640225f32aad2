"""
The quiz session: one mutable object driven one input event at a time.

Screens are a closed set (`SelectingVerb`, `Answering`, `Finished`) and
`Session.apply` dispatches on (screen, event). Pairs not listed in the
handlers below are ignored.
"""

import logging
from dataclasses import replace
from typing import Callable, Iterable, List, Optional, Sequence

from core.config import check_question_count
from core.domain import (
    Abort, Answering, Character, Direction, Erase, Finished, InputEvent, Judgment,
    NavigateNext, NavigatePrevious, ScreenState, SelectingVerb, Submit, Terminal,
)
from core.errors import DatasetError, InvariantError
from core.selector import QuestionSelector
from models import ConjugationRecord, Verb

logger = logging.getLogger("konjugation")

Loader = Callable[[Verb], Sequence[ConjugationRecord]]


class Session:
    """
    State of one quiz run.

    With `verb` given the dataset is loaded immediately and the first question
    is rolled; otherwise the session opens on the verb table built from
    `candidates`. When candidates are available the score screen also offers
    picking a different verb.

    Raises:
        ConfigError: `total_questions` outside 1..99.
        DatasetError: the pre-selected verb's dataset fails to load or is empty.
    """

    def __init__(
        self,
        total_questions: int,
        loader: Loader,
        *,
        verb: Optional[Verb] = None,
        candidates: Iterable[Verb] = (),
        selector: Optional[QuestionSelector] = None,
    ) -> None:
        self.total_questions = check_question_count(total_questions)
        self.loader = loader
        self.selector = selector or QuestionSelector()
        self.candidates = tuple(candidates)

        self.question_index = 0
        self.correct_count = 0
        self.incorrect_count = 0

        self.verb: Optional[Verb] = None
        self.records: List[ConjugationRecord] = []
        self.current_record_index: Optional[int] = None
        self.response_buffer = ""

        self._exited = False
        self.state: ScreenState = SelectingVerb(self.candidates)
        if verb is not None:
            self._start(verb)

    # --- reads ---

    @property
    def judgment(self) -> Optional[Judgment]:
        return self.state.judgment if isinstance(self.state, Answering) else None

    @property
    def terminal(self) -> Optional[Terminal]:
        return self.state.terminal if isinstance(self.state, Finished) else None

    @property
    def done(self) -> bool:
        """True once the driver loop should stop."""
        return self.terminal is Terminal.QUIT or self._exited

    @property
    def can_reselect(self) -> bool:
        return bool(self.candidates)

    @property
    def current_record(self) -> ConjugationRecord:
        if self.current_record_index is None or not self.records:
            raise InvariantError("no question is loaded")
        return self.records[self.current_record_index]

    # --- transition function ---

    def apply(self, event: InputEvent) -> None:
        state = self.state
        if isinstance(state, SelectingVerb):
            self._apply_selecting(event)
        elif isinstance(state, Answering):
            self._apply_answering(state, event)
        elif isinstance(state, Finished):
            self._apply_finished(state, event)
        else:
            raise InvariantError(f"unknown screen {state!r}")

    def _apply_selecting(self, event: InputEvent) -> None:
        if isinstance(event, NavigatePrevious):
            self.move_highlight(Direction.PREVIOUS)
        elif isinstance(event, NavigateNext):
            self.move_highlight(Direction.NEXT)
        elif isinstance(event, Submit):
            self.confirm_selection()
        elif isinstance(event, Abort):
            self.cancel()

    def _apply_answering(self, state: Answering, event: InputEvent) -> None:
        if isinstance(event, Abort):
            self.abort()
        elif isinstance(event, Submit):
            if state.judgment is Judgment.UNJUDGED:
                self.check_answer()
            else:
                self.advance()
        elif state.judgment is not Judgment.UNJUDGED:
            return
        elif isinstance(event, Character):
            self.type_character(event.char)
        elif isinstance(event, Erase):
            self.erase()

    def _apply_finished(self, state: Finished, event: InputEvent) -> None:
        if state.terminal is not Terminal.COMPLETED:
            return
        if isinstance(event, Submit):
            self.restart()
        elif isinstance(event, Abort):
            self.exit()
        elif isinstance(event, Character) and self.can_reselect:
            self.reselect()

    # --- verb selection ---

    def _selecting(self) -> SelectingVerb:
        if not isinstance(self.state, SelectingVerb):
            raise InvariantError(f"not selecting a verb: {self.state!r}")
        return self.state

    def move_highlight(self, direction: Direction) -> None:
        state = self._selecting()
        if not state.candidates:
            return
        highlighted = (state.highlighted + direction.value) % len(state.candidates)
        self.state = replace(state, highlighted=highlighted)

    def confirm_selection(self) -> None:
        state = self._selecting()
        if not 0 <= state.highlighted < len(state.candidates):
            raise InvariantError(
                f"highlighted index {state.highlighted} outside {len(state.candidates)} candidates"
            )
        self._start(state.candidates[state.highlighted])

    def cancel(self) -> None:
        self._selecting()
        self.abort()

    def _start(self, verb: Verb) -> None:
        records = list(self.loader(verb))
        if not records:
            raise DatasetError(f"no conjugations to ask for {verb.token}")
        logger.info(f"Starting {self.total_questions} questions on {verb.token} ({len(records)} records)")
        self.verb = verb
        self.records = records
        self.response_buffer = ""
        self.state = Answering()
        self.current_record_index = self.selector.pick(self.records)

    # --- answering ---

    def _answering(self) -> Answering:
        if not isinstance(self.state, Answering):
            raise InvariantError(f"no question on screen: {self.state!r}")
        return self.state

    def type_character(self, char: str) -> None:
        if self._answering().judgment is Judgment.UNJUDGED:
            self.response_buffer += char

    def erase(self) -> None:
        if self._answering().judgment is Judgment.UNJUDGED:
            self.response_buffer = self.response_buffer[:-1]

    def check_answer(self) -> Optional[Judgment]:
        """
        Judge the response buffer against the current record.

        Only the learner's input is lowercased; whitespace and diacritics are
        compared as typed. An empty buffer is not judged and returns None.
        """
        state = self._answering()
        if state.judgment is not Judgment.UNJUDGED:
            raise InvariantError("question already judged")
        if not self.response_buffer:
            return None

        record = self.current_record
        if self.response_buffer.lower() == record.answer_text:
            self.correct_count += 1
            judgment = Judgment.CORRECT
        else:
            self.incorrect_count += 1
            judgment = Judgment.INCORRECT
        self.state = Answering(judgment)
        logger.info(
            f"Q{self.question_index + 1}/{self.total_questions} {record.tense.token}/{record.person.token}: "
            f"{self.response_buffer!r} -> {judgment.value}"
        )
        return judgment

    def advance(self) -> None:
        state = self._answering()
        if state.judgment is Judgment.UNJUDGED:
            raise InvariantError("cannot advance past an unjudged question")

        self.response_buffer = ""
        self.question_index += 1
        if self.correct_count + self.incorrect_count != self.question_index:
            raise InvariantError(
                f"tally {self.correct_count}+{self.incorrect_count} does not match question {self.question_index}"
            )

        if self.question_index >= self.total_questions:
            self.state = Finished(Terminal.COMPLETED)
            logger.info(f"Completed: {self.correct_count}/{self.total_questions} correct")
            return
        self.state = Answering()
        self.current_record_index = self.selector.pick(self.records)

    def abort(self) -> None:
        if isinstance(self.state, Finished):
            return
        self.state = Finished(Terminal.QUIT)
        logger.info(f"Quit at question {self.question_index + 1}/{self.total_questions}")

    # --- score screen ---

    def _completed(self) -> None:
        if self.terminal is not Terminal.COMPLETED:
            raise InvariantError(f"session not completed: {self.state!r}")

    def _reset_tally(self) -> None:
        self.question_index = 0
        self.correct_count = 0
        self.incorrect_count = 0
        self.response_buffer = ""

    def restart(self) -> None:
        """Ask the same verb again without reloading its dataset."""
        self._completed()
        self._reset_tally()
        self.state = Answering()
        self.current_record_index = self.selector.pick(self.records)
        logger.info(f"Restarting {self.verb.token}")

    def reselect(self) -> None:
        """Drop the current dataset and go back to the verb table."""
        self._completed()
        if not self.can_reselect:
            raise InvariantError("no verbs to choose from")
        highlighted = self.candidates.index(self.verb) if self.verb in self.candidates else 0
        self._reset_tally()
        self.verb = None
        self.records = []
        self.current_record_index = None
        self.state = SelectingVerb(self.candidates, highlighted)
        logger.info("Back to verb selection")

    def exit(self) -> None:
        self._completed()
        self._exited = True

    @property
    def result(self) -> int:
        return self.correct_count
