#!/usr/bin/env python3
"""
FEATUREDOC LEXER - Line Classifier (Phase 1.1)
----------------------------------------------
Trims manifest lines, drops the noise (blank lines and ordinary comments)
and classifies what is left into Shard models.

Doc comments come in two flavours:
    '#! text'  grouping comment, printed where it occurs
    '## text'  attached comment, documents the entry that follows
The marker must be followed by a space or by nothing at all. '###' or
'#!-----' are decorative and are treated as noise.

Author: FeatureDoc Team
Date: 2026-10-18
"""

from typing import List, Optional, Tuple

from featuredoc.core.models import LineKind, Shard

GROUPING_MARKER = "#!"
ATTACHED_MARKER = "##"


class ManifestLexer:
    """
    Orchestrates the transition from raw manifest text to classified Shards.
    Stateless between calls: every shard() call starts from scratch.
    """

    def _clean_artifacts(self, text: str) -> str:
        """
        Removes invisible UTF-8 BOM markers and standardized line endings.
        """
        text = text.lstrip('\ufeff')
        return text.replace('\r\n', '\n')

    def _is_noise(self, line: str) -> bool:
        """Blank lines and comments that are not doc comments."""
        if not line:
            return True
        return line.startswith('#') and not line.startswith((GROUPING_MARKER, ATTACHED_MARKER))

    def _doc_content(self, line: str, marker: str) -> Optional[str]:
        """
        Returns the text after a doc marker, or None when the marker is
        glued to something else ('###', '#!x').
        """
        rest = line[len(marker):]
        if rest and not rest.startswith(' '):
            return None
        return rest

    def classify_line(self, line_no: int, line: str) -> Optional[Shard]:
        """
        Classifies a single trimmed line. Returns None for noise.
        """
        if self._is_noise(line):
            return None

        for marker, kind in ((GROUPING_MARKER, LineKind.GROUPING), (ATTACHED_MARKER, LineKind.ATTACHED)):
            if line.startswith(marker):
                content = self._doc_content(line, marker)
                if content is None:
                    return None
                return Shard(line_no=line_no, kind=kind, text=line, content=content)

        if line.startswith('['):
            return Shard(line_no=line_no, kind=LineKind.TABLE, text=line)
        if '=' in line:
            return Shard(line_no=line_no, kind=LineKind.ASSIGNMENT, text=line)
        return Shard(line_no=line_no, kind=LineKind.OTHER, text=line)

    def split_assignment(self, line: str) -> Tuple[str, str]:
        """
        Splits 'key = value' at the first '='.
        Example: '"serde" = { optional = true }' -> ('serde', ' { optional = true }')
        """
        key_part, _, value_part = line.partition('=')
        return key_part.strip().strip('"'), value_part

    def shard(self, raw_toml: str) -> List[Shard]:
        """
        Decomposes raw manifest text into a List of Shard models.
        This is the primary interface for the ExtractionPipeline.
        """
        clean_toml = self._clean_artifacts(raw_toml)
        shards = []

        for i, original_line in enumerate(clean_toml.splitlines()):
            shard = self.classify_line(i + 1, original_line.strip())
            if shard is not None:
                shards.append(shard)

        return shards
