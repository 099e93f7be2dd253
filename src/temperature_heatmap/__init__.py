"""Temperature Heatmap - multi-year seasonal temperature patterns at a glance.

Architecture::

    datasources/   Daily temperature table loader (local file or HTTP)
    analysis/      Daily records -> monthly records with extrema
    geometry/      Scales, grid layout, colour scale, sparklines, legend
    core.py        Composes geometry for every cell into one HeatmapGeometry
    renderers/     Pure geometry -> HTML/SVG (Jinja2 templates)
    flows/         Prefect orchestration (load, aggregate, render, write site)
    services/      Shared utilities (HTTP client with retry)

Data flow: datasources -> analysis -> geometry (via core) -> renderers -> site/

Each pipeline entry point takes an explicit ``ChartConfig``; nothing reads
global chart state.
"""

__version__ = "0.1.0"

from temperature_heatmap.config import Settings
from temperature_heatmap.schemas import ChartConfig

__all__ = ["ChartConfig", "Settings", "__version__"]
