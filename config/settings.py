import os
from functools import lru_cache
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Crawler settings loaded from environment variables with defaults.

    Only the transport and output locations are configurable; the crawl
    itself always walks ``{BASE_URL}/1``, ``{BASE_URL}/2``, ... until an
    empty page is reached.
    """

    # Project metadata
    PROJECT_VERSION = "0.1.0"

    # Crawl Settings
    BASE_URL = os.getenv(
        "CRAWLER_BASE_URL", "https://www.magpiehq.com/developer-challenge/smartphones"
    )
    OUTPUT_FILE = os.getenv("CRAWLER_OUTPUT_FILE", "output.json")

    # Transport Settings
    REQUEST_TIMEOUT = int(os.getenv("CRAWLER_REQUEST_TIMEOUT", "30"))
    USER_AGENT = os.getenv(
        "CRAWLER_USER_AGENT", f"SmartphoneCrawler/{PROJECT_VERSION} (Research Project)"
    )


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()

