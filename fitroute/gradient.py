"""
Vertical gradient math for the landing screen scrim.

Kivy has no linear-gradient instruction, so the scrim is drawn as a
1-pixel-wide texture stretched over the screen.  Positions are
normalised: 0.0 is the top edge, 1.0 the bottom edge.
"""

from fitroute import content as c

SCRIM_RGB = (1.0, 1.0, 1.0)  # white
DEFAULT_ROWS = 256


def _clamp01(v):
    return 0.0 if v < 0.0 else 1.0 if v > 1.0 else v


def alpha_at(t, stops=c.GRADIENT_STOPS,
             alphas=(c.GRADIENT_TOP_ALPHA, c.GRADIENT_BOTTOM_ALPHA)):
    """Return the scrim alpha at normalised position *t*."""
    t = _clamp01(t)
    s0, s1 = stops
    a0, a1 = alphas
    if t <= s0:
        return a0
    if t >= s1:
        return a1
    frac = (t - s0) / (s1 - s0)
    return a0 + (a1 - a0) * frac


def color_at(t, stops=c.GRADIENT_STOPS,
             alphas=(c.GRADIENT_TOP_ALPHA, c.GRADIENT_BOTTOM_ALPHA)):
    """Return the RGBA tuple of the scrim at normalised position *t*."""
    return SCRIM_RGB + (alpha_at(t, stops, alphas),)


def alpha_ramp(rows, stops=c.GRADIENT_STOPS,
               alphas=(c.GRADIENT_TOP_ALPHA, c.GRADIENT_BOTTOM_ALPHA)):
    """Return *rows* alpha values sampled at pixel centres, top to bottom."""
    if not isinstance(rows, int) or rows <= 0:
        raise ValueError(f"rows must be a positive integer, got {rows!r}")
    return [alpha_at((i + 0.5) / rows, stops, alphas) for i in range(rows)]


def gradient_buffer(rows=DEFAULT_ROWS, stops=c.GRADIENT_STOPS,
                    alphas=(c.GRADIENT_TOP_ALPHA, c.GRADIENT_BOTTOM_ALPHA)):
    """Return RGBA bytes for a 1 x *rows* texture.

    Kivy textures start at the bottom-left, so the bottom row comes first.
    """
    r, g, b = (int(round(ch * 255)) for ch in SCRIM_RGB)
    buf = bytearray()
    for alpha in reversed(alpha_ramp(rows, stops, alphas)):
        buf.extend((r, g, b, int(round(alpha * 255))))
    return bytes(buf)
