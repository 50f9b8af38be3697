"""Mini README: Scalar helpers shared by the route, airplane and camera code.

Structure:
    * clamp01 / lerp - clamped blending; ``lerp`` never extrapolates.
    * rad_to_deg - radians to degrees.
    * sin_phase - periodic 0..1 oscillator driven purely by elapsed time.
    * wrap_degrees / lerp_angle - shortest-arc helpers for headings.
"""

from __future__ import annotations

import math


def clamp01(value: float) -> float:
    """Clamp ``value`` into the closed unit interval."""

    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


def lerp(a: float, b: float, t: float) -> float:
    """Blend ``a`` towards ``b`` by ``t``; the factor is clamped first."""

    t = clamp01(t)
    return a * (1.0 - t) + b * t


def rad_to_deg(radians: float) -> float:
    return radians * 180.0 / math.pi


def sin_phase(time_s: float, period_s: float) -> float:
    """Return a sine oscillation in [0, 1] with the given period in seconds.

    The result depends only on ``time_s`` so replaying the same timeline
    reproduces the same light pattern.
    """

    return math.sin(((time_s % period_s) / period_s) * math.pi * 2.0) * 0.5 + 0.5


def wrap_degrees(angle: float) -> float:
    """Normalise an angle to the half-open range (-180, 180]."""

    wrapped = math.fmod(angle, 360.0)
    if wrapped <= -180.0:
        wrapped += 360.0
    elif wrapped > 180.0:
        wrapped -= 360.0
    return wrapped


def lerp_angle(a: float, b: float, t: float) -> float:
    """Blend heading ``a`` towards ``b`` along the shortest arc."""

    delta = wrap_degrees(b - a)
    return wrap_degrees(a + delta * clamp01(t))
