"""src/urlbuilder/cli.py

Command line interface: parse URLs into components and render templates.

Usage::

    urlbuilder parse "https://example.com/a%20b?x=1"
    urlbuilder render "https://example.com/search?q={term}" -p term="c++ & rust"
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional, Sequence

from urlbuilder.encoding.options import CodecOptions
from urlbuilder.exceptions import UrlBuilderError
from urlbuilder.url.model import parse, parse_template
from urlbuilder.utils.serialization import to_json, url_to_dict
from urlbuilder.version import __version__

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 2


def _parse_placeholders(items: List[str]) -> Dict[str, str]:
    placeholders: Dict[str, str] = {}
    for item in items:
        name, sep, value = item.partition("=")
        if not sep:
            raise argparse.ArgumentTypeError(f"Expected NAME=VALUE, got {item!r}")
        placeholders[name] = value
    return placeholders


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="urlbuilder",
        description="Parse URLs into components and render URL templates.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug information."
    )
    parser.add_argument(
        "--legacy-form-query-space",
        action="store_true",
        help="Encode spaces in query values as '+' and decode '+' as a space.",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Replace undecodable bytes instead of failing.",
    )
    parser.add_argument(
        "--charset", default="utf-8", help="Charset of percent-encoded bytes."
    )

    commands = parser.add_subparsers(dest="command", required=True)

    parse_command = commands.add_parser(
        "parse", help="Print the decoded components of a URL as JSON."
    )
    parse_command.add_argument("url")

    render_command = commands.add_parser(
        "render", help="Fill in a URL template and print the result."
    )
    render_command.add_argument("template")
    render_command.add_argument(
        "-p",
        "--placeholder",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Placeholder value, may be repeated.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line interface and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = CodecOptions(
            legacy_form_query_space=args.legacy_form_query_space,
            lenient_decoding=args.lenient,
            charset=args.charset,
        )
    except ValueError as exc:
        parser.error(str(exc))
    logger.debug("Encoding options: %r", options)

    try:
        if args.command == "parse":
            url = parse(args.url, options)
            print(to_json(url_to_dict(url)))
        else:
            try:
                placeholders = _parse_placeholders(args.placeholder)
            except argparse.ArgumentTypeError as exc:
                parser.error(str(exc))
            logger.debug("Placeholders: %r", placeholders)
            print(parse_template(args.template, placeholders, options).render())
    except UrlBuilderError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return EXIT_ERROR

    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
