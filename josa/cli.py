"""Command line front end — append, select, classify and render."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from josa.config import load_config, setup_logging
from josa.errors import JosaError
from josa.hangul import classify
from josa.particles import Josa
from josa.selector import append, select
from josa.template import render_message

log = logging.getLogger(__name__)


def _josa_arg(value: str) -> Josa:
    try:
        return Josa.from_label(value)
    except KeyError as exc:
        raise argparse.ArgumentTypeError(str(exc.args[0])) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="josa",
        description="Attach the correct Korean particle (josa) to a word.",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to a YAML config file (default: $JOSA_CONFIG).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_append = sub.add_parser("append", help="Print the word with each josa appended.")
    p_append.add_argument("word")
    p_append.add_argument("josa", nargs="+", type=_josa_arg, help='e.g. "은/는", "이가", "(으)로"')

    p_select = sub.add_parser("select", help="Print only the selected josa.")
    p_select.add_argument("word")
    p_select.add_argument("josa", type=_josa_arg)

    p_classify = sub.add_parser("classify", help="Print the coda class of each word.")
    p_classify.add_argument("words", nargs="+")

    p_render = sub.add_parser("render", help="Render a template such as '{name}이(가) 왔다'.")
    p_render.add_argument("template")
    p_render.add_argument("values", nargs="*", metavar="KEY=VALUE")

    sub.add_parser("list", help="Show the josa table.")
    return parser


def _parse_values(pairs: Sequence[str]) -> dict[str, str]:
    values = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise JosaError(f"expected KEY=VALUE, got {pair!r}")
        values[key] = value
    return values


def run(args: argparse.Namespace, config: dict) -> list[str]:
    """Execute a parsed command and return the output lines."""
    separator = config.get("output", {}).get("separator", " ")

    if args.command == "append":
        return [separator.join(append(args.word, j) for j in args.josa)]
    if args.command == "select":
        return [select(args.word, args.josa)]
    if args.command == "classify":
        return [f"{word}\t{classify(word).name}" for word in args.words]
    if args.command == "render":
        return [render_message(args.template, **_parse_values(args.values))]
    # list
    return [
        f"{j.name}\t{j.coda_form}\t{j.no_coda_form}\t{j.fallback_form or '-'}"
        for j in Josa
    ]


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        setup_logging(config)
        lines = run(args, config)
    except JosaError as exc:
        log.debug("Command failed: %s", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
