"""The YUV (YCrCb) colour space and its conversion to RGB."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from animray.rgb import RGB, register_conversion


@dataclass(frozen=True)
class YUV:
    """A YUV colour; chroma channels lie between -0.5 and 0.5."""

    y: float = 0.0
    u: float = 0.0
    v: float = 0.0

    @classmethod
    def gray(cls, value: float) -> YUV:
        """A colour with the given luma and no chroma."""
        return cls(value, 0, 0)

    @property
    def array(self) -> tuple[float, float, float]:
        """The channel values as a tuple."""
        return (self.y, self.u, self.v)

    def __iter__(self) -> Iterator[float]:
        return iter(self.array)

    def to_rgb(self) -> RGB:
        """Convert to unclamped RGB using the HDTV (BT.709) coefficients."""
        r = self.y + 1.28033 * self.v
        g = self.y - 0.21482 * self.u - 0.38059 * self.v
        b = self.y + 2.12798 * self.u
        return RGB(r, g, b)

    def __str__(self) -> str:
        return f"{self.y} {self.u} {self.v}"


register_conversion(YUV, RGB, YUV.to_rgb)