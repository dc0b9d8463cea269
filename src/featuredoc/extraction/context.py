#!/usr/bin/env python3
"""
FEATUREDOC EXTRACTION CONTEXT
-----------------------------
State records for a single extraction pass. ParseState is threaded through
the Structurer loop; ExtractionContext is what the pipeline hands back.

The pending doc comment is an explicit variant:
    NoComment                    nothing pending
    GroupingComment(text)        only '#!' lines seen since the last entry
    AttachedComment(grouping, text)
                                 '##' lines seen (maybe after some '#!')
Adding '#!' text to an AttachedComment is the only illegal transition.

Author: FeatureDoc Team
Date: 2026-10-18
"""

from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple, Union

from featuredoc.core.errors import AssociationError
from featuredoc.core.models import Entry, Shard


@dataclass(frozen=True)
class NoComment:
    pass


@dataclass(frozen=True)
class GroupingComment:
    text: str


@dataclass(frozen=True)
class AttachedComment:
    grouping: str
    text: str


PendingComment = Union[NoComment, GroupingComment, AttachedComment]


@dataclass
class ParseState:
    """
    Maintains the mutable state of one Structurer pass.
    A new instance is created for every manifest.
    """
    current_table: str = ""
    pending: PendingComment = field(default_factory=NoComment)
    default_set: Set[str] = field(default_factory=set)
    entries: List[Entry] = field(default_factory=list)

    def add_grouping(self, content: str):
        pending = self.pending
        if isinstance(pending, AttachedComment):
            raise AssociationError("Cannot mix ## and #! comments between features.")
        previous = pending.text if isinstance(pending, GroupingComment) else ""
        self.pending = GroupingComment(previous + content + "\n")

    def add_attached(self, content: str):
        pending = self.pending
        if isinstance(pending, AttachedComment):
            self.pending = AttachedComment(pending.grouping, pending.text + content + "\n")
        elif isinstance(pending, GroupingComment):
            self.pending = AttachedComment(pending.text, content + "\n")
        else:
            self.pending = AttachedComment("", content + "\n")

    @property
    def has_attached(self) -> bool:
        return isinstance(self.pending, AttachedComment)

    @property
    def attached_text(self) -> str:
        return self.pending.text if isinstance(self.pending, AttachedComment) else ""

    @property
    def grouping_text(self) -> str:
        pending = self.pending
        if isinstance(pending, AttachedComment):
            return pending.grouping
        if isinstance(pending, GroupingComment):
            return pending.text
        return ""

    def take(self) -> Tuple[str, str]:
        """Moves the pending (grouping, attached) text out and resets it."""
        grouping, attached = self.grouping_text, self.attached_text
        self.pending = NoComment()
        return grouping, attached

    def flush_entry(self, name: str, line_no: int) -> Entry:
        grouping, attached = self.take()
        entry = Entry(name=name, grouping=grouping, comment=attached, line_no=line_no)
        self.entries.append(entry)
        return entry


@dataclass
class ExtractionContext:
    """
    The complete record of one manifest extraction.

    Initialized by the ExtractionPipeline and enriched by the Lexer,
    Structurer and Renderer sequentially.
    """
    raw_text: str                                       # The manifest text as given
    shards: List[Shard] = field(default_factory=list)   # Retained, classified lines
    entries: List[Entry] = field(default_factory=list)  # Documented entries in source order
    default_set: Set[str] = field(default_factory=set)  # Names listed in features.default
    trailing_grouping: str = ""                         # '#!' text after the last entry
    markdown: Optional[str] = None                      # Rendered fragment
