import requests
from bs4 import BeautifulSoup
from typing import Optional
import logging
from config.settings import get_settings
from crawler.scrapers.base import BaseScraper


class WebScraperBase(BaseScraper):
    """Base class for scrapers that fetch real pages over HTTP.

    Adds a shared requests session and HTML parsing on top of BaseScraper.
    Failures are never retried: the first transport or status error ends
    the crawl.
    """

    def __init__(
        self,
        name: str,
        url: str,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[int] = None,
    ):
        """Initialize the web scraper.

        Args:
            name: Unique identifier for this data source
            url: Base URL of the website to scrape
            user_agent: Optional custom user agent string
            session: Optional pre-built session (mainly for tests)
            timeout: Per-request timeout in seconds, defaults to settings
        """
        super().__init__(name, url)
        settings = get_settings()
        self.user_agent = user_agent or settings.USER_AGENT
        self.timeout = timeout or settings.REQUEST_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml",
            "Accept-Language": "en-GB,en;q=0.9",
        })
        self.logger = logging.getLogger(f"scraper.{name}")

    def get_page(self, url: str = None) -> BeautifulSoup:
        """Fetch a page and parse it with BeautifulSoup.

        Args:
            url: URL to fetch, defaults to the scraper's base URL

        Returns:
            BeautifulSoup object for HTML parsing

        Raises:
            requests.RequestException: If the request fails or returns 4XX/5XX
        """
        target_url = url or self.url
        self.logger.info("Fetching %s", target_url)

        try:
            response = self.session.get(target_url, timeout=self.timeout)
            response.raise_for_status()  # Raise exception for 4XX/5XX responses

            return BeautifulSoup(response.text, "lxml")
        except requests.RequestException as e:
            self.logger.error("Error fetching %s: %s", target_url, str(e))
            raise
