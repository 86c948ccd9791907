"""
frcal.reference.deltat

ΔT (= TT − UT) in seconds from the Espenak–Meeus (NASA Five Millennium Canon)
piecewise polynomials, restricted to the branches reachable from the FRC epoch
onwards (decimal years >= 1700). Beyond 2150 the long-term parabola applies;
its extrapolation error grows without bound, which is acceptable for a table
that is only meant to be reproducible.
"""

from __future__ import annotations

from typing import Tuple

# (start, end, origin, coefficients of Σ c_k t^k with t = y - origin)
_BRANCHES: Tuple[Tuple[float, float, float, Tuple[float, ...]], ...] = (
    (1700.0, 1800.0, 1700.0, (8.83, 0.1603, -0.0059285, 0.00013336, -1.0 / 1174000.0)),
    (1800.0, 1860.0, 1800.0, (
        13.72, -0.332447, 0.0068612, 0.0041116, -0.00037436,
        0.0000121272, -0.0000001699, 0.000000000875,
    )),
    (1860.0, 1900.0, 1860.0, (7.62, 0.5737, -0.251754, 0.01680668, -0.0004473624, 1.0 / 233174.0)),
    (1900.0, 1920.0, 1900.0, (-2.79, 1.494119, -0.0598939, 0.0061966, -0.000197)),
    (1920.0, 1941.0, 1920.0, (21.20, 0.84493, -0.076100, 0.0020936)),
    (1941.0, 1961.0, 1950.0, (29.07, 0.407, -1.0 / 233.0, 1.0 / 2547.0)),
    (1961.0, 1986.0, 1975.0, (45.45, 1.067, -1.0 / 260.0, -1.0 / 718.0)),
    (1986.0, 2005.0, 2000.0, (63.86, 0.3345, -0.060374, 0.0017275, 0.000651814, 0.00002373599)),
    (2005.0, 2050.0, 2000.0, (62.92, 0.32217, 0.005589)),
)


def _poly(u: float, coeffs: Tuple[float, ...]) -> float:
    """Horner evaluation for Σ coeffs[k] u^k."""
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * u + c
    return acc


def _long_term(y: float) -> float:
    u = (y - 1820.0) / 100.0
    return -20.0 + 32.0 * u * u


def delta_t_seconds(y: float) -> float:
    """ΔT(y) in seconds for decimal year y >= 1700."""
    if y < 1700.0:
        raise ValueError(f"ΔT model covers decimal years >= 1700, got {y}")
    for start, end, origin, coeffs in _BRANCHES:
        if start <= y < end:
            return _poly(y - origin, coeffs)
    if y < 2150.0:
        # discontinuity fix joining the 2005-2050 branch to the parabola
        return _long_term(y) - 0.5628 * (2150.0 - y)
    return _long_term(y)
