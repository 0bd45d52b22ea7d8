from __future__ import annotations

import time
from pathlib import Path
from typing import BinaryIO, Union

from webpages.config import OmitFlags, PageConfig
from webpages.core.css import find_stylesheet
from webpages.core.identity import current_user
from webpages.core.render import render_markdown
from webpages.errors import RenderError
from webpages.io.fs import read_text_utf8
from webpages.logging import get_logger

log = get_logger()

DOCTYPE = "<!DOCTYPE html>\n"
PAGE_OPEN, PAGE_CLOSE = "<html>\n", "</html>\n"
HEAD_OPEN, HEAD_CLOSE = "<head>\n", "</head>\n"
BODY_OPEN, BODY_CLOSE = "<body>\n", "</body>\n"
COMMENT_OPEN, COMMENT_CLOSE = "<!--", "-->\n"
NAV_HEADING = " NAVIGATION EMBEDDING GOES HERE \n"
DATETIME_FORMAT = "%c"

def page_stem(markdown_filename: Union[str, Path]) -> str:
    """Filename without its last extension; no ".md" suffix is assumed."""
    name = Path(markdown_filename).name
    stem, dot, _ = name.rpartition(".")
    return stem if dot else name

class _PageWriter:
    def __init__(self, fh: BinaryIO):
        self._fh = fh

    def write(self, s: str) -> None:
        self._fh.write(s.encode("utf-8"))

    def write_bytes(self, b: bytes) -> None:
        self._fh.write(b)

    def comment(self, text: str) -> None:
        self.write(COMMENT_OPEN + text + COMMENT_CLOSE)

def _stylesheet_link(href: str) -> str:
    return f'<link  rel="stylesheet" href="{href}"  >\n'

def _write_head(out: _PageWriter, stem: str, cfg: PageConfig) -> None:
    out.write(HEAD_OPEN)

    if not cfg.omits(OmitFlags.TITLE):
        log.debug("Writing title as %s", stem)
        out.write(f"<title>{stem}</title>\n")

    if not cfg.omits(OmitFlags.AUTHOR):
        out.comment(f"Author is {current_user()}")

    if not cfg.omits(OmitFlags.DATETIME):
        out.comment(f"Datetime is {time.strftime(DATETIME_FORMAT, time.localtime())}")

    if cfg.css_root is not None:
        href = find_stylesheet(cfg.css_root)
        log.debug("Writing link to css file %s", href)
        out.write(_stylesheet_link(href))

    # sidecar: raw head markup, copied byte for byte
    sidecar = Path(f"{stem}.txt")
    if sidecar.is_file():
        log.debug("Copying %s into web page", sidecar)
        out.write_bytes(sidecar.read_bytes())
    else:
        log.debug("Txt file %s not provided", sidecar)

    out.write(HEAD_CLOSE)

def _write_body(out: _PageWriter, html: str, cfg: PageConfig) -> None:
    out.write(BODY_OPEN)
    out.write(html)
    if cfg.nav_embed is not None:
        log.debug("Adding navigation embedding %s", cfg.nav_embed)
        out.comment(NAV_HEADING + cfg.nav_embed)
    out.write(BODY_CLOSE)

def assemble_page(markdown_filename: Union[str, Path], cfg: PageConfig) -> Path:
    """
    Write <stem>.html into the current directory from one markdown file.

    The cwd must be the markdown file's own directory: the sidecar
    <stem>.txt and the stylesheet search are both resolved from it.
    """
    stem = page_stem(markdown_filename)
    # read and render before touching the output so a bad input leaves no page
    try:
        md = read_text_utf8(Path(markdown_filename))
    except UnicodeDecodeError as e:
        raise RenderError(f"{markdown_filename} is not valid UTF-8: {e}") from e
    html = render_markdown(md)

    out_path = Path(f"{stem}.html")
    log.debug("Using web page filename of %s", out_path)
    with out_path.open("wb") as fh:
        out = _PageWriter(fh)
        if not cfg.omits(OmitFlags.DOCTYPE):
            out.write(DOCTYPE)
        out.write(PAGE_OPEN)
        _write_head(out, stem, cfg)
        _write_body(out, html, cfg)
        out.write(PAGE_CLOSE)
    return out_path
