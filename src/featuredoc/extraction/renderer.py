#!/usr/bin/env python3
"""
FEATUREDOC RENDERER - Markdown Fragment
---------------------------------------
Author: FeatureDoc Team
Date: 2026-10-18
"""

import io
from typing import Iterable, Optional, Set

from featuredoc.core.errors import ConfigError
from featuredoc.core.models import Entry

DEFAULT_MARKER = " *(enabled by default)*"
LABEL_PLACEHOLDER = "{feature}"


class MarkdownRenderer:
    """
    The Reconstructor: turns Entries back into a Markdown list.
    Output order is exactly the order of the Entries given.
    """

    def __init__(self, feature_label: Optional[str] = None, default_marker: str = DEFAULT_MARKER):
        if feature_label is not None and LABEL_PLACEHOLDER not in feature_label:
            raise ConfigError(f"feature_label must contain {LABEL_PLACEHOLDER}: {feature_label!r}")
        self.feature_label = feature_label
        self.default_marker = default_marker

    def label(self, name: str) -> str:
        if self.feature_label is None:
            return f"**`{name}`**"
        return self.feature_label.replace(LABEL_PLACEHOLDER, name)

    def render_entry(self, entry: Entry, default_set: Set[str]) -> str:
        marker = self.default_marker if entry.name in default_set else ""
        if entry.comment.strip():
            return f"{entry.grouping}* {self.label(entry.name)}{marker} — {entry.comment}\n"
        return f"{entry.grouping}* {self.label(entry.name)}{marker}\n\n"

    def render(self, entries: Iterable[Entry], default_set: Set[str], trailing_grouping: str = "") -> str:
        stream = io.StringIO()
        for entry in entries:
            stream.write(self.render_entry(entry, default_set))
        stream.write(trailing_grouping)
        return stream.getvalue()
