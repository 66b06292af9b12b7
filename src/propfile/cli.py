"""Command line reader for property files."""

from __future__ import annotations

import argparse
import json
import sys

from .api import open_properties
from .config import PropfileSettings
from .errors import PropertyNotFound

EXIT_OK = 0
EXIT_MISSING_KEY = 1
EXIT_LOAD_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="propfile", description="Print properties from a key/value file")
    parser.add_argument("path", help="Path to the property file")
    parser.add_argument("--key", help="Print only the value of this property")
    parser.add_argument("--default", help="Value printed when --key is absent")
    parser.add_argument("--json", action="store_true", help="Print the table as JSON")
    parser.add_argument("--config", help="Path to TOML settings file")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = PropfileSettings.from_toml(args.config) if args.config else PropfileSettings()
    props = open_properties(args.path, settings=settings, configure=True)

    table = props.get_all()
    if props.load_error is not None:
        return EXIT_LOAD_FAILED

    if args.key is not None:
        if args.default is not None:
            value = props.get(args.key, args.default)
        else:
            try:
                value = props.get(args.key)
            except PropertyNotFound as exc:
                print(exc, file=sys.stderr)
                return EXIT_MISSING_KEY
        print(json.dumps(value) if args.json else value)
        return EXIT_OK

    if args.json:
        print(json.dumps(table, indent=2, sort_keys=True))
    else:
        for key in sorted(table):
            print(f"{key}={table[key]}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
