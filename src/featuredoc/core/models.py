#!/usr/bin/env python3
"""
FEATUREDOC CORE MODELS
----------------------
Defines the fundamental data structures used across the FeatureDoc engine.
These models represent the lowest level of manifest abstraction.

Author: FeatureDoc Team
Date: 2026-10-18
"""

from dataclasses import dataclass
from enum import Enum


class LineKind(Enum):
    """Classification assigned to every retained manifest line."""
    GROUPING = "grouping"      # '#!' doc comment, printed in place
    ATTACHED = "attached"      # '##' doc comment, documents the next entry
    TABLE = "table"            # '[path]' header
    ASSIGNMENT = "assignment"  # 'key = value'
    OTHER = "other"


@dataclass
class Shard:
    """
    The atomic unit of a manifest.

    A Shard represents a single trimmed line that survived the Lexer's
    noise filter, together with its classification.
    """
    line_no: int            # The original line number in the manifest
    kind: LineKind          # What the Lexer decided this line is
    text: str               # The trimmed line
    content: str = ""       # Doc text after the marker (comment lines only)


@dataclass(frozen=True)
class Entry:
    """
    A documented feature or optional dependency.

    Entries are created by the Structurer in source order and never
    mutated afterwards.
    """
    name: str               # Feature or dependency name
    grouping: str           # '#!' text that was pending when the entry was found
    comment: str            # '##' text attached to the entry
    line_no: int = 0        # Line that declared the entry
