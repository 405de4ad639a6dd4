"""
canvas.py — SVG Bar Renderer
==============================
Pure rendering function: bars → SVG string.

The renderer consumes:
  • elements   – a Snapshot's element tuple, or any Element sequence
  • config     – visual config (canvas size, colours, …)

And produces an SVG string ready to inject into the DOM.

Design decisions:
  - NO mutation.  This function is stateless — the caller passes in
    everything it needs and gets back a string.
  - State-based colouring is a simple dict lookup: VisualState → hex colour.
    Nothing in the sorting core depends on these values.
  - Each bar carries its element id (data-id) so the page can animate a
    bar across reorderings.
"""

from typing import Dict, Optional, Sequence

from elements import Element


# ---------------------------------------------------------------------------
# Visual Config — colour palette, dimensions
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 900
    height: int = 400
    bg:     str = "#0d1117"

    # bar colours (state → fill)
    bar_colors: Dict[str, str] = {
        "default":    "#475569",   # neutral slate
        "comparing":  "#0ea5e9",   # highlight A — cyan
        "swapping":   "#f43f5e",   # highlight B — rose
        "pivot":      "#f59e0b",   # highlight C — amber
        "sorted":     "#10b981",   # success — emerald
    }

    # bars
    max_bar_height: int = 350
    min_bar_height: int = 8
    bar_gap:        int = 2
    bar_radius:     int = 2


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def bar_height(value: float, max_value: float, config: CanvasConfig = CONFIG) -> float:
    if max_value <= 0:
        return float(config.min_bar_height)
    return max(config.min_bar_height, value / max_value * config.max_bar_height)


def render_bars(
    elements: Sequence[Element],
    config: CanvasConfig = CONFIG,
    max_value: Optional[float] = None,
) -> str:
    """
    Returns an SVG string.

    Args:
        elements  : Bars in array order.
        config    : Visual config.
        max_value : Scale reference; defaults to the largest value present.
    """
    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">'
    ]

    n = len(elements)
    if n:
        if max_value is None:
            max_value = max(e.value for e in elements)
        slot = config.width / n
        width = max(1.0, slot - config.bar_gap)

        for i, e in enumerate(elements):
            h = bar_height(e.value, max_value, config)
            fill = config.bar_colors.get(e.state.value, config.bar_colors["default"])
            svg_parts.append(
                f'  <rect class="bar {e.state.value}" data-id="{e.id}" data-value="{e.value}" '
                f'x="{i * slot:.2f}" y="{config.height - h:.2f}" '
                f'width="{width:.2f}" height="{h:.2f}" rx="{config.bar_radius}" fill="{fill}"/>'
            )

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)
