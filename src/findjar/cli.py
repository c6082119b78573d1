#!/usr/bin/env python3
"""
findjar CLI: command line interface for searching files and file content,
including files inside jar/zip archives.
Parses and validates arguments into SearchOptions, then runs the same SearchCommand
that library callers use, printing results through ConsoleOutputHandler.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from findjar import __version__
from findjar.aliases import (
    HASH_ALIASES, HASH_CHOICES, HASH_HELP_TEXT,
    FLAGS_HELP_TEXT, USAGE_TEXT, EPILOG_TEXT, EXAMPLES_TEXT
)
from findjar.commands import SearchCommand
from findjar.core.file_types import FileTypeRegistry, default_registry
from findjar.core.models import SearchOptions
from findjar.services.console_output import ConsoleOutputHandler


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on invalid arguments."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"❌ Error: {message}\n")


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self, registry: Optional[FileTypeRegistry] = None):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.registry = registry or default_registry()

    def build_parser(self) -> ArgumentParser:
        parser = ArgumentParser(
            prog="findjar",
            description=USAGE_TEXT,
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "search_root",
            nargs="?",
            default=None,
            help="Directory to search"
        )

        # Matching options
        parser.add_argument(
            "--path", "-p",
            default=None,
            type=str,
            metavar="<regex>",
            help="A pattern to match against the relative path (including file name)\n"
                 "starting from search-root"
        )
        parser.add_argument(
            "--apath", "-a",
            default=None,
            type=str,
            metavar="<regex>",
            help="A pattern to match against the absolute path (including file name)"
        )
        parser.add_argument(
            "--name", "-n",
            default=None,
            type=str,
            metavar="<regex>",
            help="A pattern to match against file names"
        )
        parser.add_argument(
            "--grep", "-g",
            default=None,
            type=str,
            metavar="<regex>",
            help="A pattern to match against file content lines"
        )
        parser.add_argument(
            "--types", "-t",
            default=None,
            type=str,
            metavar=f"<{self.registry.selectors()}>",
            help="Restrict the files searched to only the type(s) specified.\n"
                 f"Available file types: {self.registry.descriptions()}.\n"
                 "Default: all types searched by default"
        )
        parser.add_argument(
            "--context", "-x",
            default=0,
            type=int,
            metavar="<#>",
            help="If -g is given, show <#> lines of context around the match. Default: 0"
        )
        parser.add_argument(
            "--flags", "-f",
            default=None,
            type=str,
            metavar="<flags>",
            help=FLAGS_HELP_TEXT
        )

        # Actions
        parser.add_argument(
            "--cat", "-c",
            action="store_true",
            help="For matching files, print the entire file contents"
        )
        parser.add_argument(
            "--out-file", "-o",
            default=None,
            type=str,
            metavar="<path>",
            dest="out_file",
            help="When using -c, append the contents of the located file(s) to this file"
        )
        parser.add_argument(
            "--hash", "-s",
            action="append",
            default=[],
            choices=HASH_CHOICES,
            dest="hashes",
            metavar="<algo>",
            help=HASH_HELP_TEXT
        )

        # Output options
        parser.add_argument(
            "--monochrome", "-m",
            action="store_true",
            help="Turn off ANSI coloring of output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and scan statistics"
        )
        parser.add_argument(
            "--examples",
            action="store_true",
            help="Print usage examples"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )
        return parser

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        return self.build_parser().parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.path and args.apath:
            self.error_exit("can not use path (-p) and apath (-a) together")

        if args.search_root is None:
            self.error_exit("no search root provided")

        root_path = Path(args.search_root)
        if not root_path.is_dir():
            self.error_exit(f"invalid non-directory search root: {args.search_root}")

        if args.context < 0:
            self.error_exit("Context line count cannot be negative")

        if args.out_file:
            self.validate_out_file(Path(args.out_file))
            if not args.cat:
                self.warning("--out-file has no effect without --cat")

    def validate_out_file(self, out_file: Path) -> None:
        """Dumps are appended during the scan, so the target must be writable up front."""
        if out_file.is_dir():
            self.error_exit(f"out-file is a directory: {out_file}")

        out_dir = out_file.parent
        if not out_dir.is_dir():
            self.error_exit(f"out-file directory does not exist: {out_dir}")
        if out_file.exists() and not os.access(out_file, os.W_OK):
            self.error_exit(f"out-file is not writable: {out_file}")
        if not out_file.exists() and not os.access(out_dir, os.W_OK):
            self.error_exit(f"out-file directory is not writable: {out_dir}")

    def create_options(self, args: argparse.Namespace) -> SearchOptions:
        """Create SearchOptions from CLI arguments."""
        try:
            if args.types:
                active_types = self.registry.parse_selectors(args.types)
            else:
                active_types = self.registry.default_types()

            return SearchOptions.create(
                name=args.name,
                path=args.path,
                apath=args.apath,
                grep=args.grep,
                active_types=active_types,
                context=args.context,
                flags=args.flags,
                cat=args.cat,
                out_file=args.out_file,
                hashes=tuple(HASH_ALIASES[h] for h in args.hashes),
                monochrome=args.monochrome,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def run_search(self, search_root: str, options: SearchOptions) -> None:
        """Execute the scan."""
        command = SearchCommand(self.registry)
        handler = ConsoleOutputHandler()
        try:
            stats = command.execute(search_root, options, handler)
        except ValueError as e:
            self.error_exit(str(e))

        if self.verbose:
            print(stats.print_summary(), file=sys.stderr)

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        if self.verbose:
            logging.getLogger("findjar").setLevel(logging.DEBUG)

        if args.examples:
            print(EXAMPLES_TEXT)
            sys.exit(0)

        self.validate_args(args)
        options = self.create_options(args)
        self.run_search(args.search_root, options)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
