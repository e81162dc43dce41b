# src/yamlcomments/cli/formatter.py
import json
from typing import List

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from yamlcomments.core.models import CommentRecord

# Shared Rich console for table output
console = Console()


class CommentFormatter:
    """
    CommentFormatter: turns extracted CommentRecords into CLI output.
    Plain formats are returned as strings so they reach stdout byte-for-byte;
    the table format is rendered through Rich.
    """

    def render_annotations(self, comments: List[CommentRecord]) -> str:
        """
        One JavaScript-style annotation per comment, separated by blank lines:
        // original comment from line 3 (before age): "Age of the person"
        """
        return "\n\n".join(
            f"// original comment from line {c.line} (before {c.path}): "
            f"{json.dumps(c.text, ensure_ascii=False)}"
            for c in comments
        )

    def render_json(self, comments: List[CommentRecord]) -> str:
        """A JSON array of {line, path, text} objects."""
        return json.dumps([c.to_dict() for c in comments], indent=2, ensure_ascii=False)

    def print_table(self, comments: List[CommentRecord], file_name: str):
        """Summary table of every comment and its target path."""
        if not comments:
            console.print(f"[dim]ℹ No comments found in {escape(file_name)}.[/dim]")
            return

        table = Table(title=f"Comments in {escape(file_name)}", show_header=True, header_style="bold magenta")
        table.add_column("Line", justify="right", style="dim")
        table.add_column("Path", style="cyan")
        table.add_column("Comment")

        for c in comments:
            # Paths and comment text are user content, never Rich markup
            table.add_row(str(c.line), Text(c.path), Text(c.text))

        console.print(table)
