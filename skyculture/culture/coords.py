"""
Sexagesimal coordinate decoding.

Right ascension comes as hours/minutes/seconds of time, declination as
signed degrees/minutes/seconds of arc. Both decode to radians. Values are
not range-checked: 75 minutes decodes the same as 1 degree 15 minutes.
"""

import math
import re
from typing import Tuple

# Radians per second of time / second of arc
SECONDS_OF_TIME_TO_RAD = 2.0 * math.pi / 86400.0
ARCSEC_TO_RAD = math.pi / (180.0 * 3600.0)

_SEXAGESIMAL_RE = re.compile(r"^([+-]?)(\d+):(\d+):(\d+(?:\.\d*)?)$")


def _signed(sign: str, value: float) -> float:
    return -value if sign == "-" else value


def decode_right_ascension(sign: str, hours: float, minutes: float, seconds: float) -> float:
    """Hours, minutes, seconds of time to radians."""
    total_seconds = 60.0 * (60.0 * abs(hours) + abs(minutes)) + abs(seconds)
    return _signed(sign, total_seconds * SECONDS_OF_TIME_TO_RAD)


def decode_declination(sign: str, degrees: float, minutes: float, seconds: float) -> float:
    """Degrees, arcminutes, arcseconds to radians."""
    total_arcsec = 60.0 * (60.0 * abs(degrees) + abs(minutes)) + abs(seconds)
    return _signed(sign, total_arcsec * ARCSEC_TO_RAD)


def parse_sexagesimal(text: str) -> Tuple[str, int, int, float]:
    """
    Split an ``[+-]A:B:C`` token into (sign, A, B, C).

    A missing sign is returned as ``+``.

    Raises:
        ValueError: If the token is not three colon-separated numbers
    """
    match = _SEXAGESIMAL_RE.match(text.strip())
    if not match:
        raise ValueError(f"Invalid sexagesimal value: {text!r}")
    sign, a, b, c = match.groups()
    return sign or "+", int(a), int(b), float(c)
