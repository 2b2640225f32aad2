from textual.widgets import Static

from core.domain import SelectingVerb


class VerbTable(Static):
    """Verb list with the highlighted row marked `>>`."""

    def show_selection(self, state: SelectingVerb) -> None:
        self.border_title = "[b] Select a Verb [/b]"
        self.border_subtitle = " Prev [b blue]<Up>[/] Next [b blue]<Down>[/] Choose [b blue]<Enter>[/] Quit [b blue]<Esc>[/] "

        lines = ["[b]Verbs[/b]"]
        if not state.candidates:
            lines.append("[dim]No verbs found.[/dim]")
        for i, verb in enumerate(state.candidates):
            if i == state.highlighted:
                lines.append(f"[reverse]>> {verb.label}[/reverse]")
            else:
                lines.append(f"   {verb.label}")
        self.update("\n".join(lines))
