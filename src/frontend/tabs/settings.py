"""Settings tab implementation."""

from __future__ import annotations

from typing import Any

from textual import on
from textual.containers import Horizontal, ScrollableContainer, Vertical
from textual.widgets import Button, Input, Static

from adapters.config_transport import transport_from_config, transport_key
from core.config import ConfigField

from ..validators import parse_field_value


class SettingsTab(ScrollableContainer):
    """Edits engine thresholds in config.json units and applies them live."""

    FIELD_LABELS = [
        (ConfigField.VAULT_TTL_MS, "Captures expire after this many minutes"),
        (ConfigField.FUZZY_THRESHOLD, "Block at or above this SimHash agreement (0-1)"),
        (ConfigField.FRAGMENT_THRESHOLD, "Block at or above this shingle overlap (0-1)"),
        (ConfigField.SHINGLE_LENGTH, "Words per shingle"),
        (ConfigField.HASH_BITS, "Fingerprint width in bits"),
        (ConfigField.MIN_CHARS, "Shorter pastes are ignored"),
        (ConfigField.MIN_WORDS, "Pastes with fewer words are ignored"),
        (ConfigField.MIN_ENTROPY_BITS, "Below this, stricter thresholds apply"),
    ]

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._loading_form = False

    def compose(self):
        with Vertical(id="settings-panel"):
            for field, description in self.FIELD_LABELS:
                key = transport_key(field)
                yield Static(f"{key}  [dim]{description}[/]", classes="form-label")
                yield Input(id=self._input_id(field))
                yield Static("", id=self._error_id(field), classes="settings-error")
            yield Static("Applying clears the vault.", classes="subtle")
            yield Horizontal(
                Button("Apply", id="settings-apply", variant="success"),
                Button("Reset", id="settings-reset"),
                id="settings-actions",
            )

    def on_mount(self) -> None:
        self.reload_from_engine()

    def reload_from_engine(self) -> None:
        """Fill the inputs from the engine's current config."""

        self._loading_form = True
        rendered = transport_from_config(self.app.engine.config())
        for field, _ in self.FIELD_LABELS:
            value = rendered[transport_key(field)]
            self.query_one(f"#{self._input_id(field)}", Input).value = _display(value)
            self._set_error(field, "")
        self._loading_form = False

    @on(Button.Pressed, "#settings-apply")
    def _on_apply(self, event: Button.Pressed) -> None:
        event.stop()
        self.apply_changes()

    @on(Button.Pressed, "#settings-reset")
    def _on_reset(self, event: Button.Pressed) -> None:
        event.stop()
        self.app.action_reset_config()

    @on(Input.Changed)
    def _on_input_changed(self, event: Input.Changed) -> None:
        if self._loading_form or event.input.id is None:
            return
        for field, _ in self.FIELD_LABELS:
            if event.input.id == self._input_id(field):
                self._set_error(field, parse_field_value(field, event.value).error or "")
                return

    def apply_changes(self) -> int:
        """Configure every valid input, clear the vault, return the error count."""

        errors = 0
        engine = self.app.engine
        for field, _ in self.FIELD_LABELS:
            raw = self.query_one(f"#{self._input_id(field)}", Input).value
            parsed = parse_field_value(field, raw)
            if parsed.error or parsed.value is None:
                self._set_error(field, parsed.error or "invalid value")
                errors += 1
                continue
            self._set_error(field, "")
            engine.configure(field, parsed.value)
        engine.clear()
        self.app.refresh_status()
        return errors

    def _set_error(self, field: ConfigField, message: str) -> None:
        self.query_one(f"#{self._error_id(field)}", Static).update(message)

    @staticmethod
    def _input_id(field: ConfigField) -> str:
        return f"setting-{field.value.replace('_', '-')}"

    @classmethod
    def _error_id(cls, field: ConfigField) -> str:
        return f"{cls._input_id(field)}-error"


def _display(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
