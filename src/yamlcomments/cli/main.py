#!/usr/bin/env python3
"""
YAMLCOMMENTS CLI
----------------
Reads a YAML file, extracts its comments and prints each one with the
node path it annotates.

    extract-yaml-comments .github/workflows/build.yml
    // original comment from line 3 (before jobs): "Build matrix"
"""

import sys
import logging
import argparse
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from ruamel.yaml import YAMLError

from yamlcomments.cli.formatter import CommentFormatter
from yamlcomments.core.config import DEFAULT_DOCUMENT_LABEL, ExtractorConfig
from yamlcomments.core.engine import CommentExtractor

VERSION = "0.1.0"
USAGE = "Usage: extract-yaml-comments [file]"

# Diagnostics only; stdout carries the extracted comments
err_console = Console(stderr=True)


class ExtractCommentsCLI:
    """
    CLI wrapper that translates arguments into a CommentExtractor run.
    """

    def __init__(self):
        """Initializes the CLI and sets up the argument parser."""
        self.parser = argparse.ArgumentParser(
            prog="extract-yaml-comments",
            description="Extract comments from a YAML file and attach them to the nearest node path.",
        )
        self.formatter = CommentFormatter()
        self._setup_args()

    def _setup_args(self):
        """Configures the command-line flags."""
        self.parser.add_argument("path", nargs="?", help="Path to a YAML file")
        self.parser.add_argument("--version", action="version", version=f"extract-yaml-comments v{VERSION}")
        self.parser.add_argument("--format", choices=["annotations", "json", "table"], default="annotations",
                                 help="Output format (default: annotations)")
        self.parser.add_argument("--full-line-only", action="store_true",
                                 help="Ignore comments that follow content on the same line")
        self.parser.add_argument("--document-label", default=DEFAULT_DOCUMENT_LABEL,
                                 help=f"Path used for document-level comments (default: {DEFAULT_DOCUMENT_LABEL})")
        self.parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    def _configure_logging(self, verbose: bool):
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(name)s: %(message)s",
            handlers=[RichHandler(console=err_console, show_time=False)],
        )

    def _error(self, message: str) -> int:
        err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)
        return 1

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point. Returns the process exit status."""
        args = self.parser.parse_args(argv)
        self._configure_logging(args.verbose)

        if not args.path:
            self._error("filename argument is required")
            err_console.print(USAGE, soft_wrap=True, markup=False, highlight=False)
            return 1

        config = ExtractorConfig(
            document_label=args.document_label,
            include_trailing=not args.full_line_only,
        )
        extractor = CommentExtractor(config)

        try:
            result = extractor.extract_file(args.path)
        except (OSError, UnicodeDecodeError) as e:
            return self._error(f"cannot read '{args.path}': {e}")
        except YAMLError as e:
            return self._error(f"cannot parse '{args.path}': {e}")

        if args.format == "table":
            self.formatter.print_table(result.comments, args.path)
        elif args.format == "json":
            print(self.formatter.render_json(result.comments))
        else:
            print(self.formatter.render_annotations(result.comments))
        return 0


def main(argv: Optional[List[str]] = None):
    """Application entry point with interrupt handling."""
    try:
        code = ExtractCommentsCLI().run(argv)
    except KeyboardInterrupt:
        err_console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
