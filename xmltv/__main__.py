"""
Command line entry point

    python -m xmltv check guide.xml [more.xml.gz ...]
    python -m xmltv format guide.xml -o pretty.xml --pretty
"""
import argparse
import logging
import sys

from lxml import etree # type: ignore

from xmltv.config import settings, setup_logging
from xmltv.services import InvalidDocumentError, dump, dumps, parse_xmltv_file
from xmltv.scalars import MalformedTimestampError

logger = logging.getLogger("xmltv.cli")

DEFAULT_DOCTYPE = '<!DOCTYPE tv SYSTEM "xmltv.dtd">'

_DOCUMENT_ERRORS = (etree.XMLSyntaxError, MalformedTimestampError, InvalidDocumentError, OSError)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="xmltv", description="Check and re-serialize XMLTV documents")
    parser.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help=f"Logging level (default: {settings.log_level})")
    commands = parser.add_subparsers(dest="command", required=True)

    check = commands.add_parser("check", help="Parse documents and report what they contain")
    check.add_argument("files", nargs="+", help="XMLTV files, optionally gzip-compressed")

    fmt = commands.add_parser("format", help="Parse a document and write it back out")
    fmt.add_argument("source", help="XMLTV file to read")
    fmt.add_argument("-o", "--output", help="Destination file (stdout when omitted)")
    fmt.add_argument("--pretty", action="store_true", default=None, help="Indent the output")
    fmt.add_argument("--declaration", action="store_true", default=None, help="Write an XML declaration")
    fmt.add_argument("--doctype", action="store_const", const=DEFAULT_DOCTYPE, default=None,
                     help="Write the XMLTV DOCTYPE")
    return parser


def run_check(files: list[str]) -> int:
    failures = 0
    for path in files:
        try:
            tv = parse_xmltv_file(path)
        except _DOCUMENT_ERRORS as e:
            logger.error(f"{path}: {e}")
            failures += 1
            continue
        print(f"{path}: {len(tv.channels)} channels, {len(tv.programmes)} programmes")

    return 1 if failures else 0


def run_format(args: argparse.Namespace) -> int:
    try:
        tv = parse_xmltv_file(args.source)
    except _DOCUMENT_ERRORS as e:
        logger.error(f"{args.source}: {e}")
        return 1

    options = {
        "pretty_print": args.pretty,
        "xml_declaration": args.declaration,
        "doctype": args.doctype,
    }
    if args.output:
        dump(tv, args.output, **options)
    else:
        sys.stdout.buffer.write(dumps(tv, **options))
        sys.stdout.buffer.flush()
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.command == "check":
        return run_check(args.files)
    return run_format(args)


if __name__ == "__main__":
    sys.exit(main())
