from __future__ import annotations

import os
import shutil
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator

BACKUP_STAMP = "%Y:%m:%d-%H:%M:%S"

def iter_files(root: Path, pattern: str) -> Iterable[Path]:
    for p in sorted(root.rglob(pattern)):
        if p.is_file():
            yield p

def iter_md_files(root: Path) -> Iterable[Path]:
    return iter_files(root, "*.md")

def read_text_utf8(p: Path) -> str:
    data = p.read_bytes()
    return data.decode("utf-8")

@contextmanager
def working_directory(p: Path) -> Iterator[Path]:
    """Run the enclosed block with `p` as cwd; the previous cwd is always restored."""
    prev = os.getcwd()
    os.chdir(p)
    try:
        yield p
    finally:
        os.chdir(prev)

def copy_tree(src: Path, dst: Path) -> None:
    """Copy everything under src into dst (which may already exist), unfiltered."""
    shutil.copytree(src, dst, symlinks=True, dirs_exist_ok=True)

def backup_dir(p: Path) -> Path:
    """Rename p to p.<timestamp>; the backup is left for the operator to delete."""
    target = p.with_name(f"{p.name}.{time.strftime(BACKUP_STAMP)}")
    p.rename(target)
    return target
