"""Straight-line residential depreciation.

Pure functions. No I/O.
"""

RESIDENTIAL_RECOVERY_YEARS = 27.5  # IRS residential rental property


def depreciable_basis(purchase_price: float, land_value_pct: float) -> float:
    """Land is not depreciable."""
    return purchase_price * (1 - land_value_pct)


def annual_depreciation(purchase_price: float, land_value_pct: float) -> float:
    """Full-year 27.5-year straight-line depreciation (no mid-month convention)."""
    return depreciable_basis(purchase_price, land_value_pct) / RESIDENTIAL_RECOVERY_YEARS
