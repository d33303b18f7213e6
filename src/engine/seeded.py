"""Deterministic pseudo-random draws keyed by an integer seed.

Not statistically uniform; the goal is reproducible, plausible variation.
"""

import math

from src.models.property import Property


def seeded_value(seed: float, min_value: float, max_value: float) -> float:
    """Map a seed to a value in [min_value, max_value)."""
    x = math.sin(seed) * 10000
    fract = x - math.floor(x)
    return min_value + fract * (max_value - min_value)


def _utf16_code_units(text: str) -> list[int]:
    """Characters outside the BMP count as two surrogate code units."""
    data = text.encode("utf-16-le", errors="surrogatepass")
    return [int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2)]


def seed_from_property(prop: Property) -> float:
    """Base seed for a property. Every field feeds into it."""
    address_hash = sum(_utf16_code_units(prop.address))
    return address_hash + prop.bedrooms * 100 + prop.bathrooms * 50 + prop.year_built


def round_to(value: float, unit: float) -> float:
    """Round to the nearest multiple of unit, halves rounding up."""
    return math.floor(value / unit + 0.5) * unit
