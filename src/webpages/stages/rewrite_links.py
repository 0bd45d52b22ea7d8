from __future__ import annotations

from pathlib import Path

from webpages.io.fs import iter_files
from webpages.logging import get_logger

log = get_logger()

# The '">' anchor keeps prose mentioning "notes.md" out of the rewrite; links
# quoted any other way are not rewritten, and coincidental text still is.
MD_LINK_TAIL = b'.md">'
HTML_LINK_TAIL = b'.html">'

def rewrite_file(p: Path) -> int:
    data = p.read_bytes()
    n = data.count(MD_LINK_TAIL)
    if n:
        p.write_bytes(data.replace(MD_LINK_TAIL, HTML_LINK_TAIL))
    return n

def rewrite_links(html_root: Path) -> int:
    """Point .md link targets at their .html siblings in every page under html_root."""
    total = 0
    for p in iter_files(html_root, "*.html"):
        n = rewrite_file(p)
        if n:
            log.debug("Rewrote %d link(s) in %s", n, p)
        total += n
    return total
