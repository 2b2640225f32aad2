"""
Question, feedback and score views.
"""
from rich.markup import escape
from textual.widgets import Static

from core.domain import Finished, Judgment
from core.session import Session

CONTINUE_HINT = " Continue [b blue]<Enter>[/] "


class QuizPanel(Static):
    """
    Draws whichever of the question, correct, incorrect or score views the
    session is on. Reads the session only.
    """

    def show_session(self, session: Session) -> None:
        if isinstance(session.state, Finished):
            self._show_score(session)
            return

        record = session.current_record
        self.border_title = (
            f"[b] {record.verb.label} | {record.tense.label} | {record.person.label} | "
            f"Q{session.question_index + 1}/{session.total_questions} [/b]"
        )
        lines = [
            "",
            "",
            f"English: [blue]{escape(record.prompt_text)}[/blue]",
        ]
        response = escape(session.response_buffer)

        if session.judgment is Judgment.UNJUDGED:
            self.border_subtitle = " Input Answer [b blue]<Chars>[/] Submit [b blue]<Enter>[/] "
            lines.append(f"Your input: [yellow]{response}[/yellow]")
        elif session.judgment is Judgment.CORRECT:
            self.border_subtitle = CONTINUE_HINT
            lines.append(f"Your input: [green]{response}[/green]")
        else:
            self.border_subtitle = CONTINUE_HINT
            lines.append(f"Your input: [red]{response}[/red]")
            lines.append(f"Correct German: [green]{escape(record.answer_text)}[/green]")
        self.update("\n".join(lines))

    def _show_score(self, session: Session) -> None:
        self.border_title = "[b] Lesson Completed [/b]"
        hints = " Exit [b blue]<Esc>[/] Attempt Again [b blue]<Enter>[/] "
        if session.can_reselect:
            hints += "Select New Verb [b blue]<Any letter>[/] "
        self.border_subtitle = hints
        self.update(
            f"\n\nYou got {session.correct_count} correct out of {session.total_questions}!"
        )
