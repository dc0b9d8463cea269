#!/usr/bin/env python3
"""
FEATUREDOC ENGINE - The High Orchestrator
-----------------------------------------
FeatureDocEngine owns everything around the pure extraction pipeline:
finding the manifest of a project, choosing between Cargo.toml and the
comment-preserving Cargo.toml.orig of packaged sources, and splicing the
rendered fragment into an existing Markdown document with atomic writes.

Author: FeatureDoc Team
Date: 2026-10-18
"""

import os
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from featuredoc.core.config import CONFIG_FILE_NAME, FeatureDocConfig, load_config
from featuredoc.core.errors import InjectionError, ManifestNotFoundError
from featuredoc.extraction.context import ExtractionContext
from featuredoc.extraction.pipeline import ExtractionPipeline

# Setup standardized logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("featuredoc.engine")

ORIG_SUFFIX = ".orig"


def _has_doc_comments(text: str, anchored: bool) -> bool:
    if anchored:
        return "\n##" in text or "\n#!" in text
    return "##" in text or "#!" in text


class FeatureDocEngine:
    """
    Principal Orchestrator for manifest documentation.
    Maintains project state and coordinates the extraction pipeline.
    """

    def __init__(self, project_path: str, config: Optional[FeatureDocConfig] = None):
        self.project = Path(project_path).resolve()
        if config is None:
            config = load_config(self.project / CONFIG_FILE_NAME)
        self.config = config
        self.pipeline = ExtractionPipeline(config.feature_label, config.default_marker)

    @property
    def manifest_path(self) -> Path:
        return self.project / self.config.manifest_name

    def locate_manifest(self) -> Tuple[Path, str]:
        """
        Reads the project manifest. Published packages ship a normalized
        manifest without comments; the original then lives in '<name>.orig'.
        """
        path = self.manifest_path
        try:
            text = path.read_text(encoding='utf-8-sig')
        except OSError as e:
            raise ManifestNotFoundError(f"Can't open {self.config.manifest_name}: {e}") from e

        if not _has_doc_comments(text, anchored=True):
            orig_path = path.with_name(path.name + ORIG_SUFFIX)
            try:
                orig_text = orig_path.read_text(encoding='utf-8-sig')
            except OSError:
                orig_text = None
            if orig_text is not None and _has_doc_comments(orig_text, anchored=False):
                logger.info(f"Using {orig_path.name}: {path.name} carries no doc comments")
                return orig_path, orig_text

        return path, text

    def extract(self) -> ExtractionContext:
        """Runs the pipeline on the project manifest."""
        path, text = self.locate_manifest()
        context = self.pipeline.run(text)
        logger.info(f"Documented {len(context.entries)} entries from {path.name}")
        return context

    def splice(self, document: str, fragment: str) -> str:
        """
        Replaces everything between the start and end markers of `document`
        with `fragment`. Marker lines themselves are kept.
        """
        start, end = self.config.start_marker, self.config.end_marker
        start_idx = document.find(start)
        if start_idx == -1:
            raise InjectionError(f"Start marker {start!r} not found")
        body_idx = start_idx + len(start)
        end_idx = document.find(end, body_idx)
        if end_idx == -1:
            raise InjectionError(f"End marker {end!r} not found after start marker")

        return document[:body_idx] + "\n" + fragment + document[end_idx:]

    def write_fragment(self, output_path: Path, dry_run: bool = False) -> Dict[str, Any]:
        """Writes the bare fragment to a file."""
        context = self.extract()
        old_content = output_path.read_text(encoding='utf-8') if output_path.exists() else ""
        return self._persist(output_path, old_content, context.markdown, context, dry_run)

    def inject(self, target_path: Path, dry_run: bool = False) -> Dict[str, Any]:
        """Splices the fragment into an existing document."""
        try:
            old_content = target_path.read_text(encoding='utf-8')
        except OSError as e:
            raise InjectionError(f"Can't open {target_path}: {e}") from e

        context = self.extract()
        new_content = self.splice(old_content, context.markdown)
        return self._persist(target_path, old_content, new_content, context, dry_run)

    def _persist(self, target: Path, old_content: str, new_content: str,
                 context: ExtractionContext, dry_run: bool) -> Dict[str, Any]:
        is_modified = old_content != new_content
        result = {
            "file_path": str(target),
            "entries": len(context.entries),
            "status": self._derive_status(is_modified, dry_run),
            "written": False,
            "old_content": old_content,
            "new_content": new_content,
        }
        if is_modified and not dry_run:
            self._atomic_write(target, new_content)
            result["written"] = True
            logger.info(f"Wrote {target}")
        return result

    def _derive_status(self, modified: bool, dry: bool) -> str:
        if not modified: return "UNCHANGED"
        if dry: return "PREVIEW"
        return "UPDATED"

    def _atomic_write(self, target_path: Path, content: str):
        if not os.access(target_path.parent, os.W_OK):
            raise PermissionError(f"No write access to {target_path.parent}")
        temp_file = target_path.with_name(target_path.name + '.featuredoc.tmp')
        try:
            temp_file.write_text(content, encoding='utf-8')
            os.replace(temp_file, target_path)
        except OSError:
            if temp_file.exists(): temp_file.unlink()
            raise
