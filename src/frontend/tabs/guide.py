"""Guide tab with a short description of each gate."""

from __future__ import annotations

from textual.containers import ScrollableContainer
from textual.widgets import Static

GUIDE_TEXT = """\
[b]How a paste is checked[/]

Copying from Workspace A stores a fingerprint of the text in the vault.
Captures expire after the vault TTL.

Pasting into Workspace B runs four gates in order:

[b]1. Length[/]  Text shorter than minChars or minWords is allowed untouched.
[b]2. Noise[/]   Common words are removed. If fewer than 10 characters remain
           there is nothing to match and the paste is allowed.
[b]3. Entropy[/] Very repetitive text (entropy below minEntropy) is compared
           with stricter thresholds: 90% fuzzy and 70% fragment.
[b]4. Match[/]   The paste is compared with every live capture. It is blocked
           when the best fuzzy (SimHash) score or the best fragment
           (shingle overlap) score reaches its threshold.

[b]Scores[/]
Fuzzy is the share of fingerprint bits that agree.
Fragment is the share of the smaller text's word runs found in the other.
Colours: red at or above the threshold, yellow above 60% of it.

[b]Keys[/]  ctrl+l clear the vault, ctrl+r reload settings from disk, q quit.
"""


class GuideTab(ScrollableContainer):
    def compose(self):
        yield Static(GUIDE_TEXT, id="guide-text")
