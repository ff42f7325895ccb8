"""
YGO Prices — Configuration & Constants

Endpoint paths, HTTP defaults and logging level. Values load from
environment variables (or a local .env file) with fallback defaults.

Usage:
    from ygoprices.config import settings
"""

from __future__ import annotations

from pydantic_settings import BaseSettings


# ---------------------------------------------------------------------------
# Endpoint paths (appended to YGOPRICES_BASE_URL, then the escaped card name)
# ---------------------------------------------------------------------------

CARD_DATA_PATH = "card_data/"
CARD_PRICES_PATH = "get_card_prices/"
CARD_IMAGE_PATH = "card_image/"

# Envelope status value the service uses for a good response
STATUS_SUCCESS = "success"


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """
    Central configuration for the YGO Prices client.

    Loads from environment variables with fallback defaults. Constructor
    arguments on YugiohPricesSearcher / HttpTransport take precedence.
    """

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # -----------------------------------------------------------------------
    # Upstream service
    # -----------------------------------------------------------------------
    YGOPRICES_BASE_URL: str = "http://yugiohprices.com/api/"
    YGOPRICES_TIMEOUT_SECONDS: float = 30.0
    YGOPRICES_USER_AGENT: str = "ygoprices-python/0.1"

    # -----------------------------------------------------------------------
    # Logging (demo entry point only; the library never configures logging)
    # -----------------------------------------------------------------------
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False


# Singleton instance
settings = Settings()
