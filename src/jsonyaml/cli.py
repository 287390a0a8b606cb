"""jsonyaml CLI: text conversion between YAML and JSON."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import Optional


def _read_input(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _write_output(text: str, out: Optional[Path]) -> None:
    if out is None:
        sys.stdout.write(text)
    else:
        out.write_text(text, encoding="utf-8")


def main():
    """Main CLI entry point for jsonyaml commands."""
    # Get version for --version argument (handle PackageNotFoundError)
    try:
        jsonyaml_version = get_version("jsonyaml")
    except PackageNotFoundError:
        jsonyaml_version = "dev"

    parser = argparse.ArgumentParser(
        prog="jsonyaml",
        description="jsonyaml: convert between YAML and JSON with duplicate-key checking"
    )
    parser.add_argument("--version", action="version", version=f"jsonyaml {jsonyaml_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output except the converted text."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr."
    )
    parent_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the result to this file instead of stdout"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # to-json command
    to_json_parser = subparsers.add_parser(
        "to-json",
        help="Convert YAML to JSON",
        parents=[parent_parser]
    )
    to_json_parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="YAML file to read (default: stdin)"
    )
    to_json_parser.add_argument(
        "--all",
        action="store_true",
        help="Convert every document of a multi-document stream, one JSON text per line"
    )

    # to-yaml command
    to_yaml_parser = subparsers.add_parser(
        "to-yaml",
        help="Convert JSON to YAML",
        parents=[parent_parser]
    )
    to_yaml_parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="JSON file to read (default: stdin)"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    from .errors import YAMLCodecError

    try:
        text = _read_input(args.input)
        if args.command == "to-json":
            from .api import yaml_to_json
            if args.all:
                from .stream import Decoder
                from ._internal.canonical_json import canonical_dumps

                lines = [canonical_dumps(doc) + "\n" for doc in Decoder(text)]
                result = "".join(lines)
            else:
                result = yaml_to_json(text) + "\n"
        else:
            from .api import json_to_yaml
            result = json_to_yaml(text)

        _write_output(result, args.out)
        if args.out is not None and not args.quiet:
            print(f"[OK] Wrote {args.out}")
        sys.exit(0)
    except (FileNotFoundError, YAMLCodecError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
