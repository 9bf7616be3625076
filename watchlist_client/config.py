"""Configuration for the watchlist client."""

import os
from pathlib import Path
from dotenv import load_dotenv
from pydantic import BaseModel

# Load environment variables
load_dotenv()

# Base paths
BASE_DIR = Path(__file__).parent.parent
LOGS_DIR = Path(os.getenv("WATCHLIST_LOGS_DIR", str(BASE_DIR / "logs")))


class ApiConfig(BaseModel):
    """Watchlist server connection."""
    base_url: str = os.getenv("WATCHLIST_API_URL", "http://localhost:8000")
    access_token: str = os.getenv("WATCHLIST_ACCESS_TOKEN", "")
    timeout: float = float(os.getenv("WATCHLIST_HTTP_TIMEOUT", "10"))


class Config(BaseModel):
    """Main configuration."""
    api: ApiConfig = ApiConfig()

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Path = LOGS_DIR / "watchlist_client.log"

    # How many popular stocks to show before a search term is typed
    initial_display_limit: int = 10


# Global config instance
config = Config()
