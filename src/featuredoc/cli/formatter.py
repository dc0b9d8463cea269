# src/featuredoc/cli/formatter.py
import difflib
from typing import Iterable, Set

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from featuredoc.core.models import Entry

# Initialize the Rich console for high-quality terminal output
console = Console()


class FeatureFormatter:
    """
    FeatureFormatter: The visual heart of the CLI.
    Responsible for rendering Diffs, Previews, and Entry Reports.
    """

    def display_diff(self, original_text: str, updated_text: str, file_name: str):
        """
        Calculates and renders a colorized diff between the current document
        and the version with the refreshed feature list.
        """
        diff_list = list(difflib.unified_diff(
            original_text.splitlines(),
            updated_text.splitlines(),
            fromfile=f"Original: {file_name}",
            tofile="Updated Version",
            lineterm=""
        ))

        if not diff_list:
            console.print(f"[dim]ℹ No changes needed for {file_name}.[/dim]")
            return

        syntax = Syntax("\n".join(diff_list), "diff", theme="monokai", line_numbers=True)
        console.print(Panel(syntax, title=f"Proposed Update: {file_name}", border_style="green"))

    def show_preview(self, markdown: str, title: str):
        """Renders the fragment the way a Markdown viewer would."""
        console.print(Panel(Markdown(markdown), title=title, border_style="cyan"))

    def print_entry_table(self, entries: Iterable[Entry], default_set: Set[str]):
        """
        Builds the summary table shown by 'featuredoc check'.
        """
        table = Table(title="Documented Entries", show_header=True, header_style="bold magenta")
        table.add_column("Line", justify="right", style="dim")
        table.add_column("Name", style="cyan")
        table.add_column("Default", justify="center")
        table.add_column("Documentation")

        for entry in entries:
            table.add_row(
                str(entry.line_no),
                escape(entry.name),
                "✅" if entry.name in default_set else "",
                escape(entry.comment.strip())
            )

        console.print(table)
