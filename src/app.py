"""
Konjugation: German verb conjugation drill for the terminal.
"""

import logging
import sys
from typing import Optional, Sequence

from textual.app import App

from core.config import QuizOptions, parse_options
from core.dataset import DatasetLoader, list_verbs
from core.domain import Terminal
from core.errors import ConfigError, DatasetError
from core.log import setup_logging
from core.session import Session
from screens import QuizScreen

logger = logging.getLogger("konjugation")


class ConjugationApp(App[int]):
    TITLE = "Konjugation"

    def __init__(self, session: Session):
        """Initialize the app around an already configured session."""
        super().__init__()
        self.session = session
        self.fatal_error: Optional[Exception] = None

    def get_default_screen(self) -> QuizScreen:
        return QuizScreen(self.session)

    def on_quiz_screen_finished(self, message: QuizScreen.Finished) -> None:
        """
        Stop the app. The correct count becomes the app's return value; a
        dataset error is kept for `main` to report once the terminal is restored.
        """
        self.fatal_error = message.error
        self.exit(message.result)


def build_session(options: QuizOptions) -> Session:
    """
    Create the session for the parsed options.

    Raises:
        DatasetError: no verbs to choose from, or the chosen verb fails to load.
    """
    candidates = list_verbs(options.verbs_dir)
    if options.verb is None and not candidates:
        raise DatasetError(f"no verb datasets found in {options.verbs_dir}")

    loader = DatasetLoader(options.verbs_dir, tense=options.tense, person=options.person)
    return Session(
        options.total_questions,
        loader,
        verb=options.verb,
        candidates=candidates,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        options = parse_options(argv)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    setup_logging()
    logger.info(f"Starting with {options}")

    try:
        session = build_session(options)
    except DatasetError as e:
        logger.error(f"Dataset error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    app = ConjugationApp(session)
    result = app.run()

    if app.fatal_error is not None:
        print(f"Error: {app.fatal_error}", file=sys.stderr)
        return 1
    if session.terminal is Terminal.COMPLETED:
        print(f"You got {result} correct out of {session.total_questions}!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
