"""
Command-line interface for lintbaseline.

Provides commands to inspect a lint baseline, rewrite it in canonical
form and create a configuration file.
"""

import argparse
import sys
import os
from typing import Optional, List

from lintbaseline import __version__
from lintbaseline.baseline import load_baseline, write_baseline
from lintbaseline.config import load_baseline_config, create_default_config
from lintbaseline.formatters import get_formatter


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="lintbaseline",
        description="Load, inspect and maintain lint baseline files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  lintbaseline show -b lint-baseline.xml        # Summarize a baseline
  lintbaseline show -v                          # List every known finding
  lintbaseline show -f json                     # Output as JSON
  lintbaseline rewrite lint-baseline.xml        # Rewrite in canonical form
  lintbaseline init                             # Create config file

An unparseable baseline is deleted when loaded so it can be regenerated.
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Show command
    show_parser = subparsers.add_parser("show", help="Load a baseline and summarize it")
    show_parser.add_argument(
        "-b", "--baseline",
        help="Path to the baseline file (default: from configuration)",
    )
    show_parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
    )
    show_parser.add_argument(
        "-f", "--format",
        choices=["text", "json"],
        help="Output format (default: text)",
    )
    show_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="List every finding in the baseline",
    )
    show_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    # Rewrite command
    rewrite_parser = subparsers.add_parser("rewrite", help="Rewrite a baseline in canonical form")
    rewrite_parser.add_argument(
        "baseline",
        help="Path to the baseline file",
    )

    # Init command
    init_parser = subparsers.add_parser("init", help="Create a configuration file")
    init_parser.add_argument(
        "-f", "--force",
        action="store_true",
        help="Overwrite existing config file",
    )

    return parser


def cmd_show(args: argparse.Namespace) -> int:
    """Execute the show command."""
    config = load_baseline_config(args.config)

    baseline_path = args.baseline if args.baseline is not None else config.baseline
    result = load_baseline(baseline_path)

    formatter = get_formatter(args.format or config.output.format)

    if hasattr(formatter, 'verbose'):
        formatter.verbose = args.verbose or config.output.verbose
    if hasattr(formatter, 'use_color'):
        formatter.use_color = formatter.use_color and config.output.color and not args.no_color

    print(formatter.format_result(result))

    return 1 if result.regeneration_needed else 0


def cmd_rewrite(args: argparse.Namespace) -> int:
    """Execute the rewrite command."""
    result = load_baseline(args.baseline)

    if result.regeneration_needed:
        print(f"Baseline {args.baseline} must be regenerated by a lint run.")
        return 1
    if result.index is None:
        print("No baseline given.")
        return 1

    write_baseline(args.baseline, result.index)
    print(f"Rewrote {args.baseline} ({result.finding_count} findings in {result.file_count} files)")
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    """Execute the init command."""
    config_file = ".lintbaseline.yaml"

    if os.path.exists(config_file) and not args.force:
        print(f"Configuration file {config_file} already exists.")
        print("Use --force to overwrite.")
        return 1

    content = create_default_config()

    with open(config_file, 'w', encoding='utf-8') as f:
        f.write(content)

    print(f"Created configuration file: {config_file}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "show":
            return cmd_show(args)
        elif args.command == "rewrite":
            return cmd_rewrite(args)
        elif args.command == "init":
            return cmd_init(args)
        else:
            parser.print_help()
            return 0

    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if os.environ.get("DEBUG"):
            raise
        return 1


if __name__ == "__main__":
    sys.exit(main())
