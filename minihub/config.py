import logging

APP_NAME = "MiniHub"
APP_TAGLINE = "Soluções Diárias Instantâneas"

# Market data (BrasilAPI)
RATES_URL = "https://brasilapi.com.br/api/taxas/v1"
RATES_TTL_SECONDS = 3600          # revalidation window for the cached fetch
REQUEST_TIMEOUT = 10              # seconds
INFLATION_KEY = "IPCA"
REFERENCE_KEY = "CDI"
FALLBACK_RATES = {
    "inflation_rate": 0.047,
    "reference_rate": 0.11,
}

# Income tax on fixed-income yields (long-term bracket)
TAX_RATE = 0.15

LOG_LEVEL_ENV = "MINIHUB_LOG_LEVEL"

# Starting values shown by each tool
DEFAULTS = {
    "planner": {
        "desired_monthly_income": 1518.0,
        "gross_real_rate_pct": 7.95,
    },
    "fuel": {
        "daily_distance_km": 54.0,
        "km_per_litre": 15.0,
        "price_per_litre": 6.29,
        "days_per_week": 5,
    },
    "password": {
        "length": 16,
        "min_length": 8,
        "max_length": 32,
        "lower": True,
        "upper": True,
        "digits": True,
        "symbols": False,
    },
}


def log_level(name) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names give INFO."""
    level = logging.getLevelName(str(name or "").upper())
    return level if isinstance(level, int) else logging.INFO
