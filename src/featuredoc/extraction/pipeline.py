#!/usr/bin/env python3
"""
FEATUREDOC EXTRACTION PIPELINE - The Chief Editor
-------------------------------------------------
Central coordinator for one extraction. Raw manifest text is processed in a
strict, side-effect free sequence so that the same text always yields the
same Markdown:

    Lexer (classify) -> Structurer (associate) -> Renderer (Markdown)

Author: FeatureDoc Team
Date: 2026-10-18
"""

from typing import Optional

from featuredoc.extraction.context import ExtractionContext
from featuredoc.extraction.lexer import ManifestLexer
from featuredoc.extraction.renderer import DEFAULT_MARKER, MarkdownRenderer
from featuredoc.extraction.structurer import FeatureStructurer


class ExtractionPipeline:
    """
    The Orchestrator: Ensures that line classification, comment association
    and rendering happen in a strictly defined order.
    """

    def __init__(self, feature_label: Optional[str] = None, default_marker: str = DEFAULT_MARKER):
        """
        Args:
            feature_label: Optional label template, '{feature}' is replaced by the name.
            default_marker: Text appended to entries enabled by default.
        """
        self.lexer = ManifestLexer()
        self.structurer = FeatureStructurer()
        self.renderer = MarkdownRenderer(feature_label, default_marker)

    def run(self, input_text: str) -> ExtractionContext:
        # --- PHASE 1: CLASSIFICATION ---
        shards = self.lexer.shard(input_text)

        # --- PHASE 2: ASSOCIATION ---
        # Raises a FeatureDocError on the first malformed association.
        state = self.structurer.structure(shards)

        context = ExtractionContext(
            raw_text=input_text,
            shards=shards,
            entries=list(state.entries),
            default_set=set(state.default_set),
            trailing_grouping=state.grouping_text
        )

        # --- PHASE 3: RENDERING ---
        context.markdown = self.renderer.render(
            context.entries, context.default_set, context.trailing_grouping
        )
        return context


def process_toml(text: str, feature_label: Optional[str] = None) -> str:
    """Manifest text in, Markdown fragment out."""
    return ExtractionPipeline(feature_label).run(text).markdown
