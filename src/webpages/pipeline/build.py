from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from webpages.config import BuildConfig, resolve_roots
from webpages.io.fs import iter_md_files, working_directory
from webpages.logging import get_logger, set_verbose
from webpages.stages.assemble import assemble_page
from webpages.stages.cleanup import cleanup
from webpages.stages.mirror import mirror
from webpages.stages.rewrite_links import rewrite_links

log = get_logger()

@dataclass(frozen=True)
class BuildStats:
    pages: int
    links_rewritten: int
    files_removed: int
    backup: Optional[Path]

def build(cfg: BuildConfig) -> BuildStats:
    """
    Build a deployable html tree at cfg.html_root from cfg.markdown_root.

    Stages run strictly in order: mirror, assemble every page, rewrite
    links, clean up. The first error aborts the whole build; a previous
    html root survives as the backup made by the mirror stage.
    """
    set_verbose(cfg.verbose)
    markdown_root, html_root = resolve_roots(cfg.markdown_root, cfg.html_root)
    cfg = replace(cfg, markdown_root=markdown_root, html_root=html_root)
    log.info("Absolute markdown root is %s", markdown_root)

    backup = mirror(markdown_root, html_root)
    log.info("Absolute html root is %s", html_root)

    page_cfg = cfg.page_config()
    # snapshot first: assembling must not feed back into the walk
    sources = list(iter_md_files(html_root))
    for md_path in sources:
        log.debug("Assembling %s", md_path.relative_to(html_root))
        with working_directory(md_path.parent):
            assemble_page(md_path.name, page_cfg)
    log.info("Assembled %d page(s)", len(sources))

    links = rewrite_links(html_root)
    log.info("Rewrote %d markdown link(s)", links)

    removed = cleanup(html_root)
    log.info("Removed %d residual file(s)", removed)

    return BuildStats(
        pages=len(sources),
        links_rewritten=links,
        files_removed=removed,
        backup=backup,
    )
