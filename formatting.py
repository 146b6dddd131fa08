# Number formatting shared by the generator and the answer checker.
# Answers are rendered the way the browser client renders them (String(x),
# x.toFixed(n), parseFloat(s)) so that what the learner sees is what we compare.

from __future__ import annotations

import math
import re
from typing import List, Union

from sympy import Rational

Number = Union[int, float]

# JavaScript parseFloat: longest leading decimal literal, else NaN.
_FLOAT_PREFIX_RE = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def format_number(x: Number) -> str:
    """String(x): integral floats drop the trailing .0, everything else is repr."""
    if isinstance(x, bool):
        return str(int(x))
    if isinstance(x, int):
        return str(x)
    if math.isfinite(x) and x == math.floor(x):
        return str(int(x))
    return repr(x)


def to_fixed(x: Number, places: int) -> str:
    return f"{x:.{places}f}"


def parse_float(text: object) -> float:
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        return float(text)
    m = _FLOAT_PREFIX_RE.match(str(text).lstrip())
    if not m:
        return math.nan
    return float(m.group(0))


def round_half_up(x: float) -> int:
    # Math.round: halves go towards +infinity
    return int(math.floor(x + 0.5))


# --- Fractions --------------------------------------------------------------------


def fraction_display(numerator: int, denom: int) -> str:
    """
    Display form for numerator/denom with the denominator kept as-is:
      3/4 -> "3/4", 4/4 -> "1", 5/4 -> "1 1/4", 6/4 -> "1 2/4".
    """
    if numerator >= denom:
        whole, rem = divmod(numerator, denom)
        if rem == 0:
            return str(whole)
        return f"{whole} {rem}/{denom}"
    return f"{numerator}/{denom}"


def reduced_fraction_forms(numerator: int, denom: int) -> List[str]:
    """Lowest-terms renderings: "a/b" and, when improper, the mixed "q r/b"."""
    r = Rational(numerator, denom)
    if r.q == 1:
        return [str(r.p)]
    forms = [f"{r.p}/{r.q}"]
    if r.p > r.q:
        whole, rem = divmod(int(r.p), int(r.q))
        forms.append(f"{whole} {rem}/{r.q}")
    return forms


def fraction_value(numerator: int, denom: int) -> float:
    return float(Rational(numerator, denom))
