"""The HSL colour space and its conversion to RGB."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from animray.rgb import RGB, register_conversion


@dataclass(frozen=True)
class HSL:
    """A colour given as hue (degrees), saturation and lightness."""

    h: float = 0.0
    s: float = 0.0
    l: float = 0.0  # noqa: E741

    @property
    def array(self) -> tuple[float, float, float]:
        """The channel values as a tuple."""
        return (self.h, self.s, self.l)

    def __iter__(self) -> Iterator[float]:
        return iter(self.array)

    def to_rgb(self) -> RGB:
        """Convert to an RGB colour with channels in the range 0 to 1."""
        h, s, lightness = self.h, self.s, self.l
        chroma = 2.0 * lightness * s if lightness <= 0.5 else (2.0 - 2.0 * lightness) * s
        sector = h / 60.0
        sector_mod2 = sector
        while sector_mod2 > 2.0:
            sector_mod2 -= 2.0
        x = chroma * (1.0 - abs(sector_mod2 - 1.0))
        if sector < 1.0:
            r, g, b = chroma, x, 0.0
        elif sector < 2.0:
            r, g, b = x, chroma, 0.0
        elif sector < 3.0:
            r, g, b = 0.0, chroma, x
        elif sector < 4.0:
            r, g, b = 0.0, x, chroma
        elif sector < 5.0:
            r, g, b = x, 0.0, chroma
        else:
            r, g, b = chroma, 0.0, x
        m = lightness - 0.5 * chroma
        return RGB(r + m, g + m, b + m)

    def __str__(self) -> str:
        return f"{self.h} {self.s} {self.l}"


register_conversion(HSL, RGB, HSL.to_rgb)