"""IEEE-754 float helpers.

Python raises on float division by zero; the engine instead lets degenerate
inputs surface as inf/nan in its outputs.
"""

import math


def ieee_div(numerator: float, denominator: float) -> float:
    """numerator / denominator with IEEE semantics for a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def ieee_pow(base: float, exponent: float) -> float:
    """base ** exponent, overflowing to inf instead of raising."""
    try:
        return base ** exponent
    except OverflowError:
        return math.inf
