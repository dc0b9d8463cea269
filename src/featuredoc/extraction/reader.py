#!/usr/bin/env python3
"""
FEATUREDOC READER - Balanced Value Reader (Phase 1.2)
-----------------------------------------------------
Collects the value of a 'key = value' line, pulling continuation lines
until every '{' and '[' opened outside a string has been closed.

Known limitation: the trailing '# comment' is cut from each line with a
quote state that starts fresh on that line, so a '#' inside a string that
began on an earlier line is cut as well.

Author: FeatureDoc Team
Date: 2026-10-18
"""

from typing import Iterator

from featuredoc.core.errors import UnbalancedValueError

QUOTES = ('"', "'")
OPENERS = ('{', '[')
CLOSERS = ('}', ']')


class BalancedValueReader:
    """
    Joins a multi-line value into a single string.
    Maintains quote state across the lines of one value.
    """

    def __init__(self):
        self.in_quote = False
        self.level = 0

    def _find_comment_split(self, text: str) -> int:
        """Protects quotes and # symbols inside values."""
        in_quote = escaped = False
        for i, char in enumerate(text):
            if escaped:
                escaped = False
                continue
            if in_quote:
                if char == '\\':
                    escaped = True
                elif char in QUOTES:
                    in_quote = False
            elif char in QUOTES:
                in_quote = True
            elif char == '#':
                return i
        return -1

    def _track_nesting(self, text: str):
        """Updates quote and bracket state for one comment-free line."""
        escaped = False
        for char in text:
            if escaped:
                escaped = False
            elif self.in_quote:
                if char == '\\':
                    escaped = True
                elif char in QUOTES:
                    self.in_quote = False
            elif char in QUOTES:
                self.in_quote = True
            elif char in OPENERS:
                self.level += 1
            elif char in CLOSERS:
                if self.level == 0:
                    raise UnbalancedValueError("unbalanced source")
                self.level -= 1

    def read(self, first_line: str, lines: Iterator[str]) -> str:
        """
        Returns the full value text starting with first_line.
        Consumes from `lines` only while brackets remain open.
        """
        self.in_quote = False
        self.level = 0
        line = first_line
        parts = []

        while True:
            split_idx = self._find_comment_split(line)
            if split_idx != -1:
                line = line[:split_idx]

            self._track_nesting(line)
            parts.append(line)

            if self.level == 0:
                return "".join(parts)

            line = next(lines, None)
            if line is None:
                raise UnbalancedValueError("unbalanced source")
