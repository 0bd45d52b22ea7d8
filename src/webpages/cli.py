from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict

from webpages.config import BuildConfig, load_settings, parse_flags, resolve_roots
from webpages.errors import WebpagesError
from webpages.logging import get_logger, set_verbose
from webpages.pipeline.build import build

log = get_logger()

def _confirm(prompt: str = "Do you wish to continue? ") -> bool:
    while True:
        try:
            answer = input(prompt).strip()
        except EOFError:
            # no terminal to ask: treat as a refusal
            return False
        if answer[:1] in ("y", "Y"):
            return True
        if answer[:1] in ("n", "N"):
            return False
        print("Please answer yes or no.")

def _make_config(args: argparse.Namespace) -> BuildConfig:
    settings: Dict[str, Any] = load_settings(Path(args.config)) if args.config else {}

    def pick(name: str, default=None):
        v = getattr(args, name)
        if v is not None:
            return v
        return settings.get(name, default)

    markdown_root, html_root = resolve_roots(
        pick("markdown_root", "."),
        pick("html_root"),
    )
    return BuildConfig(
        markdown_root=markdown_root,
        html_root=html_root,
        css=bool(pick("css", False)),
        nav_embed=pick("nav_embed") or None,
        flags=parse_flags(pick("flags", 0)),
        verbose=bool(pick("verbose", False)),
    )

def _run_build(args: argparse.Namespace) -> int:
    cfg = _make_config(args)
    set_verbose(cfg.verbose)

    log.info("Using Navigation Embed Code : %s", cfg.nav_embed or "")
    log.info("Using Markdown root         : %s", cfg.markdown_root)
    log.info("Using HTML root             : %s", cfg.html_root)
    log.info("Using CSS option            : %s", cfg.css)
    log.info("Using verbose option        : %s", cfg.verbose)
    log.info("Using Flags                 : 0x%02x", int(cfg.flags))

    if not args.yes and not _confirm():
        log.info("Aborted, nothing built")
        return 0

    stats = build(cfg)
    log.info(
        "done: pages=%d links_rewritten=%d files_removed=%d backup=%s output=%s",
        stats.pages, stats.links_rewritten, stats.files_removed,
        stats.backup, cfg.html_root,
    )
    return 0

def main(argv=None) -> int:
    p = argparse.ArgumentParser(prog="webpages")
    sub = p.add_subparsers(dest="cmd", required=True)

    b = sub.add_parser("build", help="Build an html site tree from a markdown tree")
    b.add_argument("markdown_root", nargs="?", default=None, help="Root of the markdown tree (default: .)")
    b.add_argument("-o", "--html-root", dest="html_root", default=None,
                   help="Root of the html tree (default: sibling <markdown root>_html); relative to the markdown root")
    b.add_argument("-c", "--css", action="store_true", default=None,
                   help="Link each page to the nearest .css file found searching up towards the html root")
    b.add_argument("-n", "--nav", dest="nav_embed", default=None,
                   help="Raw html embedded in a comment at the end of every page body")
    b.add_argument("-F", "--flags", default=None,
                   help="Hex bitmask of page elements to omit: 0x01 DOCTYPE, 0x02 title, 0x04 datetime, 0x08 author")
    b.add_argument("-v", "--verbose", action="store_true", default=None, help="Diagnostic output on stderr")
    b.add_argument("--config", default=None, help="YAML settings file; command line values take precedence")
    b.add_argument("-y", "--yes", action="store_true", help="Do not ask for confirmation before building")

    args = p.parse_args(argv)

    try:
        return _run_build(args)
    except WebpagesError as e:
        log.error("%s", e)
        return e.exit_code
    except OSError as e:
        log.error("Build aborted: %s", e)
        return 1
