"""Workspace tab: copy from A into the vault, paste into B through the checker."""

from __future__ import annotations

from textual import on
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Button, Static, TextArea

from adapters.verdict_formatting import LEVEL_STYLES, format_verdict

from ..constants import EMPTY_VAULT_MESSAGE

SAMPLE_TEXT = (
    "Q3 revenue grew by 14.2 million, driven by the Falcon project launch "
    "across every region. Keep this figure internal until the earnings call."
)


class WorkspaceTab(Container):
    """Two text areas and a verdict panel."""

    def compose(self):
        with Vertical(id="workspace-panel"):
            with Horizontal(id="workspace-body"):
                with Vertical(classes="workspace-column"):
                    yield Static("Workspace A (sensitive)", classes="workspace-title")
                    yield TextArea(SAMPLE_TEXT, id="workspace-a")
                    yield Button("Copy", id="copy-btn", variant="primary")
                with Vertical(classes="workspace-column"):
                    yield Static("Workspace B (outside)", classes="workspace-title")
                    yield TextArea(id="workspace-b")
                    yield Button("Paste", id="paste-btn", variant="warning")
            yield Static("", id="workspace-status")
            yield Static("Copy something from Workspace A, then paste it into Workspace B.", id="verdict")

    @on(Button.Pressed, "#copy-btn")
    def _on_copy(self, event: Button.Pressed) -> None:
        event.stop()
        source = self.query_one("#workspace-a", TextArea)
        text = source.selected_text or source.text
        if not text.strip():
            self._set_status("Nothing to copy")
            return

        self.app.panel_state.clipboard = text
        if self.app.engine.add(text):
            self._set_status("Copied and captured into the vault")
        else:
            self._set_status("Copied; too short or only noise words, not captured")
        self.app.refresh_status()

    @on(Button.Pressed, "#paste-btn")
    def _on_paste(self, event: Button.Pressed) -> None:
        event.stop()
        text = self.app.panel_state.clipboard
        if not text:
            self._set_status("Clipboard is empty")
            return

        if not self.app.engine.count():
            self.app.panel_state.verdict = None
            self._show_markup(f"[{LEVEL_STYLES['green']}]ALLOWED - {EMPTY_VAULT_MESSAGE}[/]")
            self._append(text)
            return

        verdict = self.app.engine.check(text)
        self.app.panel_state.verdict = verdict
        self._show_markup(format_verdict(verdict, self.app.engine.config(), mode="markup"))
        if verdict.blocked:
            self._set_status("Paste denied")
        else:
            self._append(text)
        self.app.refresh_status()

    def _append(self, text: str) -> None:
        target = self.query_one("#workspace-b", TextArea)
        target.insert(text, target.document.end)
        self._set_status("Pasted into Workspace B")

    def _show_markup(self, markup: str) -> None:
        self.query_one("#verdict", Static).update(markup)

    def _set_status(self, message: str) -> None:
        self.query_one("#workspace-status", Static).update(message)
