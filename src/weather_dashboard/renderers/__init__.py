"""Pure rendering functions: structured data -> HTML strings.

All renderers follow the same pattern:
  - Input: validated provider models (``weather_dashboard.schemas``)
    plus explicit parameters ("today", window size, icon set, arc geometry)
  - Output: str (HTML fragment, not a full page)
  - No side effects, no I/O, no Prefect decorators, no system clock

Used by flows/build.py which orchestrates the rendering pipeline.

Public API:
  - current: build_current_html, build_uv_html
  - forecast: build_forecast_html, build_timeline_html
  - air_quality: build_air_quality_html
  - weather_utils: format_time, icon_for, round_temp
  - date_utils: format_date_label

Adding a panel
--------------
1. Create ``renderers/{name}.py`` with a build function that calls
   ``render_template("{name}.html.j2", ...)``.
2. Add the template under ``templates/`` (fragments only, no <html>/<body>).
3. Pass the result into ``base.html.j2`` from ``flows/build.py``.
4. Add tests that call the build function and assert on the HTML.
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
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
