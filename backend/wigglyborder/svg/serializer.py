"""Write standalone SVG documents around a generated border path."""

from __future__ import annotations

from typing import Any

from wigglyborder.engine.shapes import CoordinateSpace
from wigglyborder.svg.path_data import format_number
from wigglyborder.svg.style import BorderStyle


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 24.0,
    canvas_h: float = 24.0,
    root_attrs: dict[str, str] | None = None,
) -> str:
    """Generate SVG markup from element definitions."""
    vb = f"0 0 {format_number(canvas_w)} {format_number(canvas_h)}"
    root = {"viewBox": vb, **(root_attrs or {}), "xmlns": "http://www.w3.org/2000/svg"}
    root_str = "\n".join(f'  {k}="{v}"' for k, v in root.items())

    lines = [f"<svg\n{root_str}\n>"]

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k != "tag"}
        if len(attrs) <= 2:
            attr_str = " ".join(f'{k}="{v}"' for k, v in attrs.items())
            lines.append(f"  <{tag} {attr_str} />")
        else:
            attr_str = "\n".join(f'    {k}="{v}"' for k, v in attrs.items())
            lines.append(f"  <{tag}\n{attr_str}\n  />")

    lines.append("</svg>")
    return "\n".join(lines)


def border_elements(path_data: str, style: BorderStyle) -> list[dict[str, Any]]:
    """Background fill path and outline stroke path, in paint order."""
    return [
        {"tag": "path", "d": path_data, "fill": style.background_color},
        {
            "tag": "path",
            "d": path_data,
            "stroke": style.border_color,
            "stroke-width": format_number(style.border_width),
            "stroke-linecap": "round",
            "stroke-linejoin": "round",
            "fill": "none",
            # Keeps the outline width constant when the viewBox is stretched
            "vector-effect": "non-scaling-stroke",
        },
    ]


def border_svg(path_data: str, space: CoordinateSpace, style: BorderStyle | None = None) -> str:
    """Standalone SVG that stretches to fill its container."""
    style = style or BorderStyle()
    return serialize_svg(
        border_elements(path_data, style),
        space.width,
        space.height,
        root_attrs={"preserveAspectRatio": "none", "fill": "none"},
    )
