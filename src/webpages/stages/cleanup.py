from __future__ import annotations

from pathlib import Path
from typing import Tuple

from webpages.io.fs import iter_files
from webpages.logging import get_logger

log = get_logger()

# Sources, sidecars and editor backups. Anything else copied from the
# markdown root may be needed by the site and stays.
RESIDUAL_PATTERNS: Tuple[str, ...] = ("*.md", "*.backup", "*.txt")

def cleanup(html_root: Path) -> int:
    removed = 0
    for pattern in RESIDUAL_PATTERNS:
        for p in list(iter_files(html_root, pattern)):
            log.debug("Removing %s", p)
            p.unlink()
            removed += 1
    return removed
