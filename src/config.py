from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    app_name: str = "RE Strategy Analyzer"
    debug: bool = False
    log_level: str = "INFO"
    cors_allow_origins: list[str] = ["*"]

    # Simulator: property age is measured against this year, not today,
    # so simulated assumptions stay stable from one year to the next.
    market_reference_year: int = 2024

    # API-side memoization of proforma results
    proforma_cache_size: int = 256


settings = Settings()
