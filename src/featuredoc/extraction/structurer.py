#!/usr/bin/env python3
"""
FEATUREDOC STRUCTURER - Phase 1.3 (The Architect)
-------------------------------------------------
Walks the classified Shards once and ties every '##' comment block to the
feature or optional dependency that follows it.

Recognized entry points:
    [features]              key = [...]          documented feature
    [*dependencies]         key = { optional = true, ... }
    [*dependencies.name]    header after a '##' block, table-style dependency

Author: FeatureDoc Team
Date: 2026-10-18
"""

import logging
from typing import Iterator, List

from featuredoc.core.errors import AssociationError, EmptyResultError, StructuralError, UnbalancedValueError
from featuredoc.core.models import LineKind, Shard
from featuredoc.extraction.context import ParseState
from featuredoc.extraction.lexer import ManifestLexer
from featuredoc.extraction.reader import BalancedValueReader

logger = logging.getLogger("featuredoc.structurer")

FEATURES_TABLE = "features"
DEPENDENCY_SUFFIX = "dependencies"
DEFAULT_KEY = "default"


class FeatureStructurer:
    def __init__(self):
        self.lexer = ManifestLexer()
        self.reader = BalancedValueReader()

    def _parse_table_path(self, line: str) -> str:
        """'[target.x.dependencies] # c' -> 'target.x.dependencies'"""
        path, sep, _ = line[1:].partition(']')
        if not sep:
            raise StructuralError(f"Parse error while parsing line: {line}")
        return path.strip()

    def _dependency_from_path(self, path: str, line: str) -> str:
        """Last segment of a '<...>dependencies.<name>' table path."""
        table, dot, dep = path.rpartition('.')
        if not dot or not table.strip().endswith(DEPENDENCY_SUFFIX):
            raise AssociationError(f"Not a feature: `{line}`")
        return dep.strip()

    def _parse_default_list(self, key: str, value: str) -> List[str]:
        """'["a", \'b\', c,]' -> ['a', 'b', 'c']"""
        clean = value.strip()
        if not (clean.startswith('[') and clean.endswith(']')):
            raise StructuralError(f"Parse error while parsing dependency {key}")
        names = [item.strip().strip('"\'').strip() for item in clean[1:-1].split(',')]
        return [name for name in names if name]

    def _is_optional(self, value: str) -> bool:
        """True when the value holds 'optional = true'."""
        _, found, tail = value.partition("optional")
        if not found:
            return False
        tail = tail.strip()
        return tail.startswith('=') and tail[1:].strip().startswith("true")

    def _handle_table(self, shard: Shard, state: ParseState):
        state.current_table = self._parse_table_path(shard.text)
        if state.has_attached:
            name = self._dependency_from_path(state.current_table, shard.text)
            state.flush_entry(name, shard.line_no)
            logger.debug(f"L{shard.line_no}: documented table dependency '{name}'")

    def _handle_assignment(self, shard: Shard, state: ParseState, remaining: Iterator[Shard]):
        key, rest = self.lexer.split_assignment(shard.text)
        try:
            value = self.reader.read(rest, (s.text for s in remaining))
        except UnbalancedValueError as e:
            raise UnbalancedValueError(f"Parse error while parsing dependency {key}: {e}") from e

        table = state.current_table
        if table == FEATURES_TABLE and key == DEFAULT_KEY:
            state.default_set.update(self._parse_default_list(key, value))

        if not state.has_attached:
            return

        if table.endswith(DEPENDENCY_SUFFIX):
            if not self._is_optional(value):
                raise AssociationError(f"Dependency {key} is not an optional dependency")
        elif table != FEATURES_TABLE:
            raise AssociationError(
                f"Comment cannot be associated with a feature: {state.attached_text.rstrip()}"
            )

        state.flush_entry(key, shard.line_no)
        logger.debug(f"L{shard.line_no}: documented entry '{key}' in [{table}]")

    def structure(self, shards: List[Shard]) -> ParseState:
        """
        Single pass over the Shards. Raises on the first problem found.
        """
        state = ParseState()
        remaining = iter(shards)

        for shard in remaining:
            if shard.kind is LineKind.GROUPING:
                state.add_grouping(shard.content)
            elif shard.kind is LineKind.ATTACHED:
                state.add_attached(shard.content)
            elif shard.kind is LineKind.TABLE:
                self._handle_table(shard, state)
            elif shard.kind is LineKind.ASSIGNMENT:
                self._handle_assignment(shard, state, remaining)

        if state.has_attached:
            raise AssociationError("Found comment not associated with a feature")
        if not state.entries:
            raise EmptyResultError("Could not find documented features in Cargo.toml")

        return state
