"""Modal dialogs for the workspace panel."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class ClearVaultScreen(ModalScreen[bool]):
    """Confirm discarding every capture in the vault."""

    def __init__(self, record_count: int) -> None:
        super().__init__()
        self._record_count = record_count

    def compose(self) -> ComposeResult:
        yield Container(
            Static("Clear vault?", classes="modal-title"),
            Static(f"{self._record_count} captures will be forgotten.", classes="modal-body"),
            Horizontal(
                Button("Clear", id="clear-confirm", variant="error"),
                Button("Cancel", id="clear-cancel"),
                classes="modal-actions",
            ),
            classes="modal-dialog",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "clear-confirm")


class ResetConfirmScreen(ModalScreen[bool]):
    """Confirm reloading config.json and stopwords.json."""

    def compose(self) -> ComposeResult:
        yield Container(
            Static("Reset settings?", classes="modal-title"),
            Static(
                "Thresholds and noise words are re-read from disk. Unapplied edits are lost.",
                classes="modal-body",
            ),
            Horizontal(
                Button("Reset", id="reset-confirm", variant="warning"),
                Button("Cancel", id="reset-cancel"),
                classes="modal-actions",
            ),
            classes="modal-dialog",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "reset-confirm")
