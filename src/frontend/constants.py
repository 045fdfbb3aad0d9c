"""Shared constants for the Textual UI."""

from __future__ import annotations

ACCENT = "#30a46c"

EMPTY_VAULT_MESSAGE = "Vault is empty - copy from Workspace A first"
