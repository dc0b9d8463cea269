#!/usr/bin/env python3
"""
FEATUREDOC CLI
--------------
Primary interface: renders the documented features of a crate manifest,
checks a manifest for doc-comment mistakes, and keeps a Markdown document
in sync by rewriting the region between its featuredoc markers.

Author: FeatureDoc Team
Date: 2026-10-18
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from featuredoc.cli.formatter import FeatureFormatter
from featuredoc.core.config import CONFIG_FILE_NAME, load_config
from featuredoc.core.engine import FeatureDocEngine
from featuredoc.core.errors import FeatureDocError

VERSION = "0.2.0"

# Global console for consistent styling across the application
console = Console()


class FeatureDocCLI:
    """
    CLI wrapper that translates user commands into Engine actions.
    """

    def __init__(self):
        """Initializes the CLI and sets up the argument parser."""
        self.parser = argparse.ArgumentParser(
            prog="featuredoc",
            description="FeatureDoc - Document your crate's feature flags from Cargo.toml comments",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="Comments starting with '## ' document the next feature, '#! ' ones are printed in place."
        )
        self.formatter = FeatureFormatter()
        self._setup_args()

    def _setup_args(self):
        """Configures the command-line flags and subcommands."""
        self.parser.add_argument("-v", "--version", action="version", version=f"featuredoc v{VERSION}")
        self.parser.add_argument("--config", help=f"YAML config file (default: <path>/{CONFIG_FILE_NAME})")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        # 'render' subcommand - prints or writes the fragment
        render_parser = subparsers.add_parser("render", help="📝 Print the Markdown feature list")
        render_parser.add_argument("path", nargs="?", default=".", help="Crate directory (default: .)")
        render_parser.add_argument("--feature-label", help="Label template, e.g. '**`{feature}`**'")
        render_parser.add_argument("-o", "--output", help="Write the fragment to this file")
        render_parser.add_argument("--preview", action="store_true", help="Show the rendered Markdown")

        # 'check' subcommand - read-only validation
        check_parser = subparsers.add_parser("check", help="🔍 Validate feature doc comments")
        check_parser.add_argument("path", nargs="?", default=".", help="Crate directory (default: .)")

        # 'inject' subcommand - splice into a document
        inject_parser = subparsers.add_parser("inject", help="💉 Update the marked region of a Markdown file")
        inject_parser.add_argument("path", nargs="?", default=".", help="Crate directory (default: .)")
        inject_parser.add_argument("--target", required=True, help="Markdown file containing the markers")
        inject_parser.add_argument("--feature-label", help="Label template, e.g. '**`{feature}`**'")
        inject_parser.add_argument("--dry-run", action="store_true", help="Preview results without writing")
        inject_parser.add_argument("--diff", action="store_true", help="Display a unified diff")

    def _build_engine(self, args: argparse.Namespace) -> FeatureDocEngine:
        project = Path(args.path).resolve()
        config_path = Path(args.config) if args.config else project / CONFIG_FILE_NAME
        config = load_config(config_path, required=bool(args.config))
        config = config.override(feature_label=getattr(args, "feature_label", None))
        return FeatureDocEngine(str(project), config)

    def _cmd_render(self, args: argparse.Namespace) -> int:
        engine = self._build_engine(args)
        if args.output:
            report = engine.write_fragment(Path(args.output))
            console.print(f"[green]{report['status']}[/green] {escape(report['file_path'])} "
                          f"({report['entries']} entries)")
            markdown = report["new_content"]
        else:
            markdown = engine.extract().markdown
            if not args.preview:
                sys.stdout.write(markdown)

        if args.preview:
            self.formatter.show_preview(markdown, engine.config.manifest_name)
        return 0

    def _cmd_check(self, args: argparse.Namespace) -> int:
        engine = self._build_engine(args)
        context = engine.extract()
        self.formatter.print_entry_table(context.entries, context.default_set)
        console.print(f"[bold green]OK:[/bold green] {len(context.entries)} documented entries")
        return 0

    def _cmd_inject(self, args: argparse.Namespace) -> int:
        engine = self._build_engine(args)
        target = Path(args.target)
        report = engine.inject(target, dry_run=args.dry_run)

        if args.diff:
            self.formatter.display_diff(report["old_content"], report["new_content"], str(target))
        console.print(f"[bold]{report['status']}[/bold] {escape(report['file_path'])}")
        return 0

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point. Returns the process exit code."""
        args = self.parser.parse_args(argv)
        handlers = {
            "render": self._cmd_render,
            "check": self._cmd_check,
            "inject": self._cmd_inject,
        }
        handler = handlers.get(args.command)
        if handler is None:
            self.parser.print_help()
            return 0

        try:
            return handler(args)
        except FeatureDocError as e:
            console.print(Panel(escape(str(e)), title="[bold red]featuredoc error[/bold red]",
                                border_style="red", expand=False))
            return 1


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(FeatureDocCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
