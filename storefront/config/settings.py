# storefront/config/settings.py

"""Central configuration for the storefront app."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the storefront app."""

    # --- Catalog API ---
    API_BASE_URL: str = os.getenv(
        "STOREFRONT_API_BASE_URL", "https://fakestoreapi.com"
    ).rstrip("/")
    CATEGORY_PATH: str = "/products/category/{category}"
    REQUEST_TIMEOUT: int = 15           # Seconds before a request times out

    # --- HTTP session ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Accept-Language": "en-US,en;q=0.9",
    }

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"

    # --- Categories (fixed picker values) ---
    CATEGORIES: list[dict[str, str]] = [
        {"id": "electronics", "label": "Electronics"},
        {"id": "jewelery", "label": "Jewelery"},
        {"id": "men's clothing", "label": "Men's Clothing"},
        {"id": "women's clothing", "label": "Women's Clothing"},
    ]
