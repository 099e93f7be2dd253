"""Pure rendering functions: heatmap geometry -> HTML strings.

All renderers follow the same pattern:
  - Input: dataclasses from core/geometry (no raw records)
  - Output: str (HTML fragment, not a full page, unless noted)
  - No side effects, no I/O, no Prefect decorators

Used by flows/build.py which orchestrates the rendering pipeline.

Public API:
  - heatmap: build_heatmap_html, build_page_html
  - formatting: format_temp, format_tick, hover_text, month_name

Templates live in ``templates/`` next to this package. ``heatmap.html.j2``
produces the inline SVG fragment; ``base.html.j2`` wraps it in a page and
owns the CSS.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
