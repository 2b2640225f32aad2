"""
The screen that drives a quiz session from key presses.
"""
import logging
from typing import Optional

from textual import events
from textual.app import ComposeResult
from textual.message import Message
from textual.screen import Screen

from core.domain import SelectingVerb
from core.errors import DatasetError
from core.session import Session
from screens.keys import key_to_event
from widgets import QuizPanel, VerbTable

logger = logging.getLogger("konjugation")


class QuizScreen(Screen):
    """Renders the session, then applies one input event per key press."""
    CSS = """
#verb_table, #quiz_panel {
    width: 1fr;
    height: 1fr;
    border: thick $secondary;
    border-title-align: center;
    border-subtitle-align: center;
    padding: 1 2;
}
#quiz_panel {
    content-align: center top;
    text-align: center;
}
    """

    class Finished(Message, bubble=True):
        """Posted when the session wants the app to stop."""
        def __init__(self, result: int, error: Optional[Exception] = None) -> None:
            super().__init__()
            self.result = result
            self.error = error

    def __init__(self, session: Session) -> None:
        super().__init__()
        self.session = session

    def compose(self) -> ComposeResult:
        yield VerbTable(id="verb_table")
        yield QuizPanel(id="quiz_panel")

    def on_mount(self) -> None:
        self.refresh_view()

    def refresh_view(self) -> None:
        table = self.query_one("#verb_table", VerbTable)
        panel = self.query_one("#quiz_panel", QuizPanel)
        state = self.session.state

        if isinstance(state, SelectingVerb):
            table.display, panel.display = True, False
            table.show_selection(state)
        else:
            table.display, panel.display = False, True
            panel.show_session(self.session)

    async def on_key(self, event: events.Key) -> None:
        selecting = isinstance(self.session.state, SelectingVerb)
        character = event.character if event.is_printable else None
        input_event = key_to_event(event.key, character, selecting=selecting)
        event.stop()
        if input_event is None:
            return

        try:
            self.session.apply(input_event)
        except DatasetError as e:
            logger.error(f"Dataset error: {e}")
            self.post_message(self.Finished(self.session.result, error=e))
            return

        if self.session.done:
            self.post_message(self.Finished(self.session.result))
            return
        self.refresh_view()
