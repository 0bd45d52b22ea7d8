from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from webpages.errors import BadFlagsError, ConfigError

class OmitFlags(enum.IntFlag):
    """Per-page omission bits; a set bit removes that element from the page."""

    NONE = 0x00
    DOCTYPE = 0x01
    TITLE = 0x02
    DATETIME = 0x04
    AUTHOR = 0x08

_ALL_FLAGS = OmitFlags.DOCTYPE | OmitFlags.TITLE | OmitFlags.DATETIME | OmitFlags.AUTHOR

def parse_flags(text) -> OmitFlags:
    """
    Decode a hexadecimal flags value ("c", "0x0c", "0C").
    Integers pass through. Bits outside the known four are dropped.
    """
    if isinstance(text, OmitFlags):
        return text
    if isinstance(text, bool):
        raise BadFlagsError(f"Flags must be hexadecimal, got {text!r}")
    if isinstance(text, int):
        value = text
    else:
        s = str(text or "").strip()
        if not s:
            return OmitFlags.NONE
        try:
            value = int(s, 16)
        except ValueError:
            raise BadFlagsError(f"Flags must be hexadecimal, got {text!r}") from None
    if value < 0:
        raise BadFlagsError(f"Flags must not be negative, got {text!r}")
    return OmitFlags(value & _ALL_FLAGS)

@dataclass(frozen=True)
class PageConfig:
    flags: OmitFlags = OmitFlags.NONE
    css_root: Optional[Path] = None     # absolute; None disables stylesheet linking
    nav_embed: Optional[str] = None

    def omits(self, flag: OmitFlags) -> bool:
        return bool(self.flags & flag)

@dataclass(frozen=True)
class BuildConfig:
    markdown_root: Path
    html_root: Path
    css: bool = False
    nav_embed: Optional[str] = None
    flags: OmitFlags = OmitFlags.NONE
    verbose: bool = False

    def page_config(self) -> PageConfig:
        return PageConfig(
            flags=self.flags,
            css_root=self.html_root if self.css else None,
            nav_embed=self.nav_embed,
        )

def default_html_root(markdown_root: Path) -> Path:
    return markdown_root.parent / f"{markdown_root.name}_html"

def resolve_roots(markdown_root, html_root=None) -> Tuple[Path, Path]:
    """
    Absolute (markdown_root, html_root). A relative html root is taken
    relative to the markdown root.
    """
    md = Path(markdown_root or ".").expanduser().resolve()
    if not md.is_dir():
        raise ConfigError(f"Markdown root is not a directory: {md}")

    if html_root is None or str(html_root) == "":
        out = default_html_root(md)
    else:
        out = Path(html_root).expanduser()
        if not out.is_absolute():
            out = md / out
        out = out.resolve()

    if out == md or md in out.parents:
        raise ConfigError(f"HTML root {out} must not be inside markdown root {md}")
    if out in md.parents:
        # backing up the html root would move the markdown tree with it
        raise ConfigError(f"HTML root {out} must not contain markdown root {md}")
    return md, out

# ---- settings file ----

SETTINGS_KEYS = ("markdown_root", "html_root", "css", "nav_embed", "flags", "verbose")

def load_settings(path: Path) -> Dict[str, Any]:
    """
    Read a YAML settings file. Paths inside it are made relative to the
    file's own directory.
    """
    path = Path(path).expanduser()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read settings file {path}: {e}") from e
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed settings file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Malformed settings file {path}: top-level must be a mapping")

    unknown = sorted(str(k) for k in data if k not in SETTINGS_KEYS)
    if unknown:
        raise ConfigError(f"Unknown settings in {path}: {', '.join(unknown)}")

    out: Dict[str, Any] = dict(data)
    base = path.resolve().parent
    for key in ("markdown_root", "html_root"):
        if out.get(key) is not None:
            p = Path(str(out[key])).expanduser()
            out[key] = p if p.is_absolute() else base / p
    if "flags" in out:
        # YAML reads an unquoted 12 as decimal; the bitmask is always hex
        if not isinstance(out["flags"], str):
            raise ConfigError(
                f"Setting 'flags' must be a quoted hex value (e.g. '0c') in {path}"
            )
        out["flags"] = parse_flags(out["flags"])
    for key in ("css", "verbose"):
        if key in out and not isinstance(out[key], bool):
            raise ConfigError(f"Setting '{key}' must be true or false in {path}")
    if out.get("nav_embed") is not None:
        out["nav_embed"] = str(out["nav_embed"])
    return out
