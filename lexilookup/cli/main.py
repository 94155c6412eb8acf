"""Main CLI entry point for lexilookup."""

import argparse
import sys

from lexilookup import __version__
from lexilookup.cli.commands import lookup
from lexilookup.models import CefrLevel


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="lexilookup",
        description="Batch dictionary lookup for words, phrases, sentences and native terms",
        epilog="Use 'lexilookup <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # lexilookup lookup [inputs...] [--file PATH]
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Look up definitions for a list of inputs",
        description="Resolve each input through the dictionary provider chain",
    )
    lookup_parser.add_argument("inputs", nargs="*", help="Words, phrases or sentences to look up")
    lookup_parser.add_argument("--file", help="Read inputs from a .txt or .csv file")
    lookup_parser.add_argument(
        "--meanings", type=int, default=2, choices=[1, 2], help="Meanings per item"
    )
    lookup_parser.add_argument(
        "--definitions", type=int, default=1, choices=[0, 1, 2], help="Definitions per meaning"
    )
    lookup_parser.add_argument(
        "--synonyms", type=int, default=2, choices=[0, 1, 2], help="Synonyms per meaning"
    )
    lookup_parser.add_argument(
        "--antonyms", type=int, default=2, choices=[0, 1, 2], help="Antonyms per meaning"
    )
    lookup_parser.add_argument(
        "--related", type=int, default=0, choices=[0, 1, 2], help="Related words per meaning"
    )
    lookup_parser.add_argument(
        "--display",
        default="both",
        choices=["english-only", "native-only", "both"],
        help="Which language meanings are shown in",
    )
    lookup_parser.add_argument(
        "--cefr",
        default="B1",
        choices=[level.value for level in CefrLevel],
        help="CEFR level used to pick definition complexity",
    )
    lookup_parser.add_argument(
        "--batch-size", type=int, default=None, help="Items resolved concurrently per batch"
    )
    lookup_parser.add_argument("--output", help="Write the JSON response to this path")
    lookup_parser.add_argument(
        "--env-file", default=".env", help="Load credentials from this .env file if it exists"
    )
    lookup_parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    # Dispatch to appropriate command
    if args.command == "lookup":
        return lookup.lookup_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
