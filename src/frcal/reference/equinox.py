# reference/equinox.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from ..core.time import gregorian_to_jdn, is_gregorian_leap
from .deltat import delta_t_seconds

# Paris Observatory meridian, 2°20'14.025" E
PARIS_LONGITUDE_DEG = 2.0 + 20.0 / 60.0 + 14.025 / 3600.0

# FRC year Y opens on the Paris day of the September equinox of Gregorian year Y + 1791
GREGORIAN_YEAR_OFFSET = 1791

# Meeus, Astronomical Algorithms (2nd ed.), table 27.C: (A, B deg, C deg/century)
_PERIODIC_TERMS = (
    (485, 324.96, 1934.136),
    (203, 337.23, 32964.467),
    (199, 342.08, 20.186),
    (182, 27.85, 445267.112),
    (156, 73.14, 45036.886),
    (136, 171.52, 22518.443),
    (77, 222.54, 65928.934),
    (74, 296.72, 3034.906),
    (70, 243.58, 9037.513),
    (58, 119.81, 33718.147),
    (52, 297.17, 150.678),
    (50, 21.02, 2281.226),
    (45, 247.54, 29929.562),
    (44, 325.15, 31555.956),
    (29, 60.93, 4443.417),
    (18, 155.12, 67555.328),
    (17, 288.79, 4562.452),
    (16, 198.04, 62894.029),
    (14, 199.76, 31436.921),
    (12, 95.39, 14577.848),
    (12, 287.11, 31931.756),
    (12, 320.81, 34777.259),
    (9, 227.73, 1222.114),
    (8, 15.45, 16859.074),
)


def september_equinox_jde(year: int) -> float:
    """
    JDE (TT) of the September equinox of Gregorian `year`, Meeus ch. 27.
    The mean-equinox polynomial is the one for years 1000..3000; later years
    extrapolate it.
    """
    if year < 1000:
        raise ValueError(f"Equinox model covers Gregorian years >= 1000, got {year}")
    y = (year - 2000) / 1000.0
    jde0 = (
        2451810.21715
        + 365242.01767 * y
        - 0.11575 * y * y
        + 0.00337 * y ** 3
        + 0.00078 * y ** 4
    )
    T = (jde0 - 2451545.0) / 36525.0
    W = math.radians(35999.373 * T - 2.47)
    d_lambda = 1.0 + 0.0334 * math.cos(W) + 0.0007 * math.cos(2.0 * W)
    S = sum(A * math.cos(math.radians(B + C * T)) for A, B, C in _PERIODIC_TERMS)
    return jde0 + 0.00001 * S / d_lambda


def _decimal_year(year: int, jd_ut: float) -> float:
    jan1 = gregorian_to_jdn(year, 1, 1) - 0.5
    return year + (jd_ut - jan1) / (366.0 if is_gregorian_leap(year) else 365.0)


@dataclass(frozen=True)
class ParisEquinox:
    gregorian_year: int
    jde: float          # TT
    jd_ut: float        # UT
    paris_jdn: int      # civil day (Paris mean time) containing the equinox
    day_fraction: float # time of day in Paris mean time, 0 = midnight


def paris_equinox(year: int) -> ParisEquinox:
    jde = september_equinox_jde(year)
    # ΔT varies slowly; evaluating it at the TT instant is enough
    jd_ut = jde - delta_t_seconds(_decimal_year(year, jde)) / 86400.0
    local = jd_ut + PARIS_LONGITUDE_DEG / 360.0 + 0.5
    jdn = math.floor(local)
    return ParisEquinox(
        gregorian_year=year,
        jde=jde,
        jd_ut=jd_ut,
        paris_jdn=int(jdn),
        day_fraction=local - jdn,
    )


def new_year_jdn(frc_year: int) -> int:
    """JDN of 1 Vendémiaire of `frc_year` under the equinox rule."""
    return paris_equinox(frc_year + GREGORIAN_YEAR_OFFSET).paris_jdn


def new_year_jdns(first_year: int, count: int) -> List[int]:
    """New-year JDNs for FRC years first_year .. first_year + count (count + 1 values)."""
    return [new_year_jdn(y) for y in range(first_year, first_year + count + 1)]
