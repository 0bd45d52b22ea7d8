from __future__ import annotations

import mistune

from webpages.errors import RenderError

# escape=False lets raw HTML embedded in the markdown through untouched.
_markdown = mistune.create_markdown(escape=False)

def render_markdown(md: str) -> str:
    try:
        html = _markdown(md)
    except Exception as e:
        raise RenderError(f"Markdown rendering failed: {e}") from e
    if not isinstance(html, str):
        raise RenderError("Markdown renderer returned no HTML")
    return html
