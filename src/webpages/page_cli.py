from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import NoReturn

from webpages.config import PageConfig, parse_flags
from webpages.errors import (
    AbsolutePathRequiredError,
    EXIT_NORMAL,
    MissingValueError,
    NoMarkdownFileError,
    UnknownOptionError,
    WebpagesError,
)
from webpages.logging import get_logger, set_verbose
from webpages.stages.assemble import assemble_page

log = get_logger()

USAGE = "webpage [-h] [-v] [-f <flags>] [-c <abs path to html root>] [-n navembedcode] <markdown file>"

DESCRIPTION = """\
Broadly speaking, the expectation is that this tool will be used as part of a
script that traverses a directory hierarchy containing md files and converts
them to html. In particular, it's expected that the markdown file resides in
the current working directory, and that this directory is underneath html root
(yes, html root not markdown root)."""

class _PageArgumentParser(argparse.ArgumentParser):
    """argparse reports every problem as exit 2; map them onto our codes instead."""

    def error(self, message: str) -> NoReturn:
        if "expected one argument" in message:
            raise MissingValueError(message)
        raise UnknownOptionError(message)

def _parser() -> _PageArgumentParser:
    p = _PageArgumentParser(
        prog="webpage",
        usage=USAGE,
        description=DESCRIPTION,
        add_help=False,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("-h", action="store_true", dest="help", help="print this help")
    p.add_argument("-v", action="store_true", dest="verbose", help="output verbose information")
    p.add_argument(
        "-f", dest="flags", default=None, metavar="<flags>",
        help="bitwise, hex: 0x01 omit DOCTYPE, 0x02 omit title, 0x04 omit datetime, 0x08 omit author",
    )
    p.add_argument(
        "-c", dest="css_root", default=None, metavar="<abs path to html root>",
        help="enable linking to the first css file found searching from cwd towards html root; "
             "requires an absolute, not relative, path",
    )
    p.add_argument(
        "-n", dest="nav_embed", default=None, metavar="<navembedcode>",
        help="tack a special embedding on to the body for navigation purposes",
    )
    p.add_argument(
        "markdown", nargs="?", default=None, metavar="<markdown file>",
        help="file containing Commonmark markdown; beware of complications if it is not in the cwd",
    )
    return p

def parse_page_args(argv=None) -> argparse.Namespace:
    """-h wins over any unknown option, as with getopt."""
    args, extras = _parser().parse_known_args(argv)
    if extras and not args.help:
        raise UnknownOptionError(f"unrecognized arguments: {' '.join(extras)}")
    return args

def page_config_from_args(args: argparse.Namespace) -> PageConfig:
    css_root = None
    if args.css_root is not None:
        if not os.path.isabs(args.css_root):
            raise AbsolutePathRequiredError("Absolute path required for 'c' option")
        css_root = Path(args.css_root)

    flags = parse_flags(args.flags)
    log.debug("Converted flags as 0x%02x", int(flags))
    return PageConfig(
        flags=flags,
        css_root=css_root,
        nav_embed=args.nav_embed,
    )

def main(argv=None) -> int:
    try:
        args = parse_page_args(argv)
        if args.help:
            _parser().print_help()
            return EXIT_NORMAL
        set_verbose(bool(args.verbose))
        cfg = page_config_from_args(args)
        if args.markdown is None:
            raise NoMarkdownFileError("Expecting a markdown file to be specified")
        log.debug("Using %s as markdown filename", args.markdown)
        assemble_page(args.markdown, cfg)
    except WebpagesError as e:
        log.error("%s", e)
        return e.exit_code
    except OSError as e:
        log.error("%s", e)
        return 1
    return EXIT_NORMAL
