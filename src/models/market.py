from dataclasses import dataclass


@dataclass(frozen=True)
class MarketContext:
    """Simulated local market snapshot shown alongside an analysis."""
    median_home_price: float
    avg_rent_in_area: float
    market_appreciation: float  # Annual, fraction
    days_on_market: int
