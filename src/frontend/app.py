"""Main Textual app for the clipguard workspace panel."""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Center, Container, Horizontal, Vertical
from textual.widgets import Button, ContentSwitcher, Footer, Static, Tab, Tabs

import settings
from core.processor import GuardEngine

from .constants import ACCENT
from .modals import ClearVaultScreen, ResetConfirmScreen
from .state import PanelState
from .tabs.guide import GuideTab
from .tabs.settings import SettingsTab
from .tabs.workspace import WorkspaceTab


class GuardPanelApp(App):
    """Copy/paste workspace driving one engine handle."""

    def __init__(self, engine: GuardEngine, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.engine = engine
        self.panel_state = PanelState()

    BINDINGS = [
        ("ctrl+l", "clear_vault", "Clear vault"),
        ("ctrl+r", "reset_config", "Reset"),
        ("q", "quit", "Quit"),
    ]

    CSS_PATH = "app.tcss"

    def compose(self) -> ComposeResult:
        with Container(id="header"):
            with Horizontal(id="header-row"):
                with Vertical(id="header-left"):
                    yield Static(self._title_text(), id="title")
                    yield Static("clipboard leak guard", classes="subtle")
                with Vertical(id="header-right"):
                    yield Static("", id="vault-count", classes="subtle")
                    yield Static("", id="header-status")
                    yield Horizontal(
                        Button("Clear vault", id="clear-btn"),
                        Button("Reset", id="reset-btn"),
                        id="header-actions",
                    )

        with Container(id="tabs-bar"):
            with Center(id="tabs-center"):
                yield Tabs(
                    Tab("Workspace", id="workspace"),
                    Tab("Settings", id="settings"),
                    Tab("Guide", id="guide"),
                    id="tabs",
                )

        with ContentSwitcher(id="content"):
            yield WorkspaceTab(id="workspace")
            yield SettingsTab(id="settings")
            yield GuideTab(id="guide")
        yield Footer()

    def on_mount(self) -> None:
        self._set_active_tab("workspace")
        self.refresh_status()

    def on_tabs_tab_activated(self, event: Tabs.TabActivated) -> None:
        tab_id = event.tab.id or ""
        if not tab_id:
            label = event.tab.label
            if hasattr(label, "plain"):
                label = label.plain
            tab_id = str(label).strip().lower()
        self._set_active_tab(tab_id)

    def _set_active_tab(self, tab_id: str) -> None:
        switcher = self.query_one("#content", ContentSwitcher)
        switcher.current = tab_id

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "clear-btn":
            self.action_clear_vault()
        elif event.button.id == "reset-btn":
            self.action_reset_config()

    def action_clear_vault(self) -> None:
        self.push_screen(ClearVaultScreen(self.engine.count()), self._handle_clear_choice)

    def action_reset_config(self) -> None:
        self.push_screen(ResetConfirmScreen(), self._handle_reset_choice)

    def _handle_clear_choice(self, confirmed: bool | None) -> None:
        if not confirmed:
            return
        self.engine.clear()
        self.refresh_status()

    def _handle_reset_choice(self, confirmed: bool | None) -> None:
        if not confirmed:
            return
        self.reset_engine()

    def reset_engine(self) -> None:
        """Re-read config.json and stopwords.json into the engine."""

        try:
            overrides, noise_words = settings.load_engine_settings()
            self.engine.init(overrides, noise_words)
        except FileNotFoundError:
            self.panel_state.error = "config.json missing"
        except ValueError as exc:
            self.panel_state.error = f"config error: {exc}"
        else:
            self.panel_state.error = None
            self.query_one(SettingsTab).reload_from_engine()
        self.refresh_status()

    def refresh_status(self) -> None:
        count = self.query_one("#vault-count", Static)
        status = self.query_one("#header-status", Static)

        count.update(f"vault: {self.engine.count()} captures")
        status.remove_class("status-loaded", "status-error")
        if self.panel_state.error:
            status.update(self.panel_state.error)
            status.add_class("status-error")
        else:
            status.update("config: loaded")
            status.add_class("status-loaded")

    @staticmethod
    def _title_text() -> Text:
        return Text.assemble(
            ("CLIP", ACCENT),
            ("GUARD > Workspace", "bold"),
        )
