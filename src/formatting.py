"""Display formatting for currency and percentages.

Presentation only. Non-finite engine outputs are shown as zero here, never
patched inside the engine.
"""

import math


def finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def format_currency(amount: float) -> str:
    """Whole-dollar USD, e.g. 1234.5 -> "$1,235", -50 -> "-$50".

    Halves round away from zero: 2.5 -> "$3", -0.5 -> "-$1".
    """
    amount = finite_or_zero(amount)
    whole = math.floor(abs(amount) + 0.5)
    sign = "-" if amount < 0 and whole else ""
    return f"{sign}${whole:,}"


def format_percent(value: float) -> str:
    """Fraction to one-decimal percent, e.g. 0.0654 -> "6.5%"."""
    return f"{finite_or_zero(value) * 100:.1f}%"
