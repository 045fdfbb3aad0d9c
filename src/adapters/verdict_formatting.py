"""Shared verdict formatting helpers.

Keeping formatting here prevents drift between the CLI and the Textual
panel and keeps verdicts consistent regardless of where they are shown.
"""

from __future__ import annotations

from rich.markup import escape

from core.config import ESCALATED_FRAGMENT_THRESHOLD, ESCALATED_FUZZY_THRESHOLD, GuardConfig
from core.models import CheckVerdict

# Fraction of a threshold at which a score is shown as a warning.
WARNING_RATIO = 0.6

LEVEL_STYLES = {
    "red": "bold #e5484d",
    "yellow": "bold #f5a524",
    "green": "bold #30a46c",
}


def score_level(value: float, threshold: float) -> str:
    """Return "red", "yellow", or "green" for a score against its threshold."""

    if value >= threshold:
        return "red"
    if value >= threshold * WARNING_RATIO:
        return "yellow"
    return "green"


def decision_line(verdict: CheckVerdict) -> str:
    if verdict.blocked:
        return "BLOCKED - This looks like captured content. Paste denied."
    if verdict.skip_reason is not None:
        return f"ALLOWED - {verdict.explanation}"
    return "ALLOWED - Content does not match vault."


def applied_thresholds(verdict: CheckVerdict, config: GuardConfig) -> tuple[float, float]:
    """Return the (fuzzy, fragment) thresholds the verdict was decided with."""

    if verdict.escalated:
        return ESCALATED_FUZZY_THRESHOLD, ESCALATED_FRAGMENT_THRESHOLD
    return config.fuzzy_threshold, config.fragment_threshold


def _percent(value: float) -> str:
    return f"{value * 100:.1f}%"


def _entropy_label(verdict: CheckVerdict) -> str:
    if not verdict.entropy_bits:
        return "--"
    label = f"{verdict.entropy_bits:.2f} bits"
    if verdict.escalated:
        label += " (low, thresholds escalated)"
    return label


def _format_text(verdict: CheckVerdict, config: GuardConfig) -> str:
    """Plain text body used by the CLI."""

    fuzzy_threshold, fragment_threshold = applied_thresholds(verdict, config)
    lines = [
        decision_line(verdict),
        f"Fuzzy:    {_percent(verdict.fuzzy_score)} (threshold {_percent(fuzzy_threshold)})",
        f"Fragment: {_percent(verdict.fragment_score)} (threshold {_percent(fragment_threshold)})",
        f"Entropy:  {_entropy_label(verdict)}",
        f"Why:      {verdict.explanation}",
    ]
    return "\n".join(lines)


def _format_markup(verdict: CheckVerdict, config: GuardConfig) -> str:
    """Rich console markup used by the Textual verdict panel."""

    fuzzy_threshold, fragment_threshold = applied_thresholds(verdict, config)
    decision_style = LEVEL_STYLES["red"] if verdict.blocked else LEVEL_STYLES["green"]
    fuzzy_style = LEVEL_STYLES[score_level(verdict.fuzzy_score, fuzzy_threshold)]
    fragment_style = LEVEL_STYLES[score_level(verdict.fragment_score, fragment_threshold)]

    parts = [
        f"[{decision_style}]{escape(decision_line(verdict))}[/]",
        "",
        f"[b]Fuzzy:[/]    [{fuzzy_style}]{_percent(verdict.fuzzy_score)}[/]",
        f"[b]Fragment:[/] [{fragment_style}]{_percent(verdict.fragment_score)}[/]",
        f"[b]Entropy:[/]  {escape(_entropy_label(verdict))}",
        "",
        "[b]Why:[/]",
        escape(verdict.explanation),
    ]
    return "\n".join(parts)


def format_verdict(verdict: CheckVerdict, config: GuardConfig, mode: str) -> str:
    """Return the verdict formatted for the requested mode."""

    if mode == "text":
        return _format_text(verdict, config)
    if mode == "markup":
        return _format_markup(verdict, config)
    raise ValueError(f"Unsupported verdict format: {mode}")
