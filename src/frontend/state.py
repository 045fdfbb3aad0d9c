"""State container for the clipboard and the last verdict shown."""

from __future__ import annotations

from dataclasses import dataclass

from core.models import CheckVerdict


@dataclass
class PanelState:
    clipboard: str | None = None
    verdict: CheckVerdict | None = None
    error: str | None = None
