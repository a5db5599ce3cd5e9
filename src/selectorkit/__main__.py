#!/usr/bin/env python3
"""Command-line interface for selectorkit."""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import NoReturn

from .parser import parse_selector
from .selector import PartKind, SelectorBuilder, SelectorError, css_selector_builder

# Names accepted by --part, mapped to builder part kinds
_PART_NAMES: dict[str, str] = {
    "element": PartKind.ELEMENT,
    "id": PartKind.ID,
    "class": PartKind.CLASS,
    "attr": PartKind.ATTRIBUTE,
    "attribute": PartKind.ATTRIBUTE,
    "pseudo-class": PartKind.PSEUDO_CLASS,
    "pseudo-element": PartKind.PSEUDO_ELEMENT,
}


def _get_version() -> str:
    try:
        return version("selectorkit")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


def _part(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition("=")
    if not sep or name not in _PART_NAMES:
        choices = ", ".join(_PART_NAMES)
        raise argparse.ArgumentTypeError(f"expected KIND=VALUE with KIND one of: {choices}")
    return _PART_NAMES[name], value


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="selectorkit",
        description="Validate a CSS selector, or build one part by part, and print it.",
        epilog=(
            "Examples:\n"
            "  selectorkit 'div#main.container + table#data'\n"
            "  echo 'a[href$=\".png\"]:focus' | selectorkit -\n"
            "  selectorkit --part element=a --part 'attr=href$=\".png\"' --part pseudo-class=focus\n"
            "\n"
            "If you don't have the 'selectorkit' command available, use:\n"
            "  python -m selectorkit ...\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "selector",
        nargs="?",
        help="Selector text to validate, or '-' to read it from stdin",
    )
    parser.add_argument(
        "--part",
        action="append",
        type=_part,
        default=[],
        metavar="KIND=VALUE",
        help="Append one selector part; repeat in order (element, id, class, attr, pseudo-class, pseudo-element)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log tokenizer and builder steps to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"selectorkit {_get_version()}",
    )

    args = parser.parse_args(argv)

    if args.selector and args.part:
        parser.error("give either a selector or --part options, not both")

    if not args.selector and not args.part:
        parser.print_help(sys.stderr)
        raise SystemExit(1)

    return args


def _read_selector(selector: str) -> str:
    if selector == "-":
        return sys.stdin.read()

    return selector


def _build(parts: list[tuple[str, str]]) -> SelectorBuilder:
    builder = css_selector_builder
    for kind, value in parts:
        builder = builder.add(kind, value)
    return builder


def main() -> NoReturn | None:
    args = _parse_args(sys.argv[1:])

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        if args.part:
            builder = _build(args.part)
        else:
            builder = parse_selector(_read_selector(args.selector))
    except SelectorError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2) from e

    sys.stdout.write(builder.stringify())
    sys.stdout.write("\n")
    return None


if __name__ == "__main__":
    main()
