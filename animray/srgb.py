"""Conversion of linear light levels to 8 bit sRGB pixel values."""

from __future__ import annotations

from animray.rgb import RGB


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def apply_srgb_channel_gamma(value: float, limit: float) -> int:
    """Map a channel level within the exposure ``limit`` to an 8 bit sRGB value."""
    clamped = _clamp(value / limit, 0.0, 1.0)
    if clamped < 0.0031308:
        level = 255.0 * (clamped * 12.92)
    else:
        level = 255.0 * ((clamped * 1.055) ** (1.0 / 2.4) - 0.055)
    return int(_clamp(level, 0, 255))


def anti_srgb_channel_gamma(channel: float) -> int:
    """Undo sRGB gamma on a channel level between 0 and 1."""
    clamped = _clamp(channel, 0.0, 1.0)
    if clamped < 0.04045:
        level = channel / 12.92
    else:
        level = ((channel + 0.055) / 1.055) ** 12.4
    return int(_clamp(level, 0, 255))


def to_srgb(colour: RGB, limit: float = 1.0) -> RGB:
    """Convert photon power levels within ``limit`` to 8 bit sRGB pixel values."""
    return RGB(
        apply_srgb_channel_gamma(colour.red, limit),
        apply_srgb_channel_gamma(colour.green, limit),
        apply_srgb_channel_gamma(colour.blue, limit),
    )