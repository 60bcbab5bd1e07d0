"""React (TSX) component source with a generated border path baked in."""

from __future__ import annotations

import json

from wigglyborder.engine.shapes import CoordinateSpace
from wigglyborder.svg.path_data import format_number
from wigglyborder.svg.style import BorderStyle

COMPONENT_NAME = "BoxWithWigglyBorder"

# Literal braces in the TSX are doubled for str.format.
_COMPONENT_TEMPLATE = """import type {{ ReactNode }} from "react";

type {name}Props = {{
  children: ReactNode;
  className?: string;
}};

const PATH_DATA = {path_literal};

export const {name} = ({{
  children,
  className = "",
}}: {name}Props) => {{
  return (
    <div className={{`relative ${{className}}`}}>
      <svg
        className="absolute inset-0 w-full h-full overflow-visible"
        viewBox="0 0 {width} {height}"
        preserveAspectRatio="none"
        fill="none"
        xmlns="http://www.w3.org/2000/svg"
      >
        <path d={{PATH_DATA}} fill="{background}" />
        <path
          d={{PATH_DATA}}
          stroke="{border}"
          strokeWidth={{{stroke_width}}}
          strokeLinecap="round"
          strokeLinejoin="round"
          fill="none"
          vectorEffect="non-scaling-stroke"
        />
      </svg>
      <div className="relative px-[20px] py-[32px] text-center">
        {{children}}
      </div>
    </div>
  );
}};

export default {name};
"""


def border_component(
    path_data: str,
    space: CoordinateSpace,
    style: BorderStyle | None = None,
    name: str = COMPONENT_NAME,
) -> str:
    """TSX module exporting ``name`` as both a named and default export."""
    style = style or BorderStyle()
    return _COMPONENT_TEMPLATE.format(
        name=name,
        path_literal=json.dumps(path_data),
        width=format_number(space.width),
        height=format_number(space.height),
        background=style.background_color,
        border=style.border_color,
        stroke_width=format_number(style.border_width),
    )
