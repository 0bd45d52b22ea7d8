from __future__ import annotations

from pathlib import Path
from typing import Optional

from webpages.errors import UnexpectedStateError
from webpages.io.fs import backup_dir, copy_tree
from webpages.logging import get_logger

log = get_logger()

def mirror(markdown_root: Path, html_root: Path) -> Optional[Path]:
    """
    Replace html_root with a full copy of markdown_root.

    A pre-existing html_root is renamed aside, never overwritten; the
    backup path is returned (None if there was nothing to back up).
    """
    backup = None
    if html_root.exists() or html_root.is_symlink():
        backup = backup_dir(html_root)
        log.info("Backing up HTML root to %s", backup)
    else:
        log.info("HTML root not found")

    if html_root.exists():
        raise UnexpectedStateError(f"Unexpected HTML root found, aborting: {html_root}")

    log.info("Making HTML root %s", html_root)
    html_root.mkdir(parents=True)
    copy_tree(markdown_root, html_root)
    return backup
