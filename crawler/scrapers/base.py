# This file defines the abstract base class for all scrapers in the crawler
# It establishes the interface concrete listing scrapers implement

import abc
from typing import List

from crawler.products.models import ProductRecord


class BaseScraper(abc.ABC):
    """Base class for listing scrapers.

    A scraper walks one website and returns normalized ProductRecords. The
    command line and the writer only depend on this interface.
    """

    def __init__(self, name: str, url: str):
        """Initialize the scraper with a name and URL.

        Args:
            name: Identifier for this data source, used in log names
            url: Base URL of the listing to crawl
        """
        self.name = name
        self.url = url

    @abc.abstractmethod
    def scrape(self) -> List[ProductRecord]:
        """Crawl the listing and return its unique product records.

        Raises:
            requests.RequestException: If a page cannot be fetched
            ValueError: If a product card carries malformed numeric data
        """
        raise NotImplementedError("Concrete scraper classes must implement scrape() method")
