"""Border colours and stroke width shared by the exporters."""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")

DEFAULT_BACKGROUND_COLOR = "#FFF8EA"
DEFAULT_BORDER_COLOR = "#F4E3C1"
DEFAULT_BORDER_WIDTH = 4.0


def normalize_hex_color(value: str) -> str:
    """Accept ``RRGGBB`` or ``#RRGGBB``; anything else is rejected."""
    value = value.strip()
    if value and not value.startswith("#"):
        value = "#" + value
    if not _HEX_COLOR_RE.match(value):
        raise ValueError(f"Invalid hex color: {value!r} (expected #RRGGBB)")
    return value


@dataclass(frozen=True)
class BorderStyle:
    background_color: str = DEFAULT_BACKGROUND_COLOR
    border_color: str = DEFAULT_BORDER_COLOR
    border_width: float = DEFAULT_BORDER_WIDTH

    def __post_init__(self) -> None:
        object.__setattr__(self, "background_color", normalize_hex_color(self.background_color))
        object.__setattr__(self, "border_color", normalize_hex_color(self.border_color))
        if self.border_width < 0:
            raise ValueError(f"border_width must be >= 0, got {self.border_width}")
