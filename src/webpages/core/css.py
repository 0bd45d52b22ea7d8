from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from webpages.errors import NoStylesheetError, OutsideRootError
from webpages.logging import get_logger

log = get_logger()

CSS_MARKER = ".css"

def _is_filesystem_root(abs_path: str) -> bool:
    return os.path.dirname(abs_path) == abs_path

def find_stylesheet(boundary_root: Union[str, Path], start_dir: str = "./") -> str:
    """
    Search upward from start_dir (relative to cwd) for a stylesheet, stopping
    at boundary_root (absolute).

    The result is relative to start_dir: "./site.css", "./../site.css", ...
    Any entry whose name contains ".css" matches, and the first entry the
    directory listing yields wins; listing order depends on the filesystem.

    Raises NoStylesheetError once boundary_root has been searched without a
    match, and OutsideRootError if the filesystem root is reached first.
    """
    boundary = os.path.realpath(str(boundary_root))
    search_dir = start_dir if start_dir.endswith("/") else start_dir + "/"

    while True:
        log.debug("Searching %s for css...", search_dir)
        for name in os.listdir(search_dir):
            if CSS_MARKER in name:
                found = search_dir + name
                log.debug("Found css, file is %s", found)
                return found

        abs_path = os.path.realpath(search_dir)
        log.debug("Real path just searched was %s", abs_path)
        if abs_path == boundary:
            raise NoStylesheetError(f"No css file found under {boundary_root}")
        if _is_filesystem_root(abs_path):
            raise OutsideRootError(
                f"Invoked outside of html root hierarchy {boundary_root} (cwd {os.getcwd()})"
            )
        search_dir += "../"
