from typing import List, Optional

import requests
from bs4 import Tag

from config.settings import get_settings
from crawler.extraction.fragments import extract_fragment, find_fragments
from crawler.normalization.fields import normalize_fields
from crawler.products.dedup import ProductDeduplicator
from crawler.products.models import ProductRecord
from crawler.products.variants import expand_variants
from crawler.scrapers.web_scraper_base import WebScraperBase


class SmartphoneScraper(WebScraperBase):
    """Scraper for the paginated smartphone listing.

    Pages live at ``{base_url}/1``, ``{base_url}/2``, ... and the crawl stops
    at the first page without product cards. Every card is expanded into one
    record per colour and all records are deduplicated across pages.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        **kwargs,
    ):
        base_url = (base_url or get_settings().BASE_URL).rstrip("/")
        super().__init__("smartphones", base_url, session=session, **kwargs)
        self.products = ProductDeduplicator()

    def page_url(self, page_number: int) -> str:
        return f"{self.url}/{page_number}"

    def scrape(self) -> List[ProductRecord]:
        """Crawl every listing page and return the unique product records.

        Raises:
            requests.RequestException: If any page cannot be fetched
            ValueError: If a card's price or capacity text is malformed
        """
        self.logger.info("Starting crawl of %s", self.url)
        # Fresh collection per crawl so a scraper can be run again
        self.products = ProductDeduplicator()
        page_number = 1

        while True:
            soup = self.get_page(url=self.page_url(page_number))
            fragments = find_fragments(soup)

            if not fragments:
                self.logger.info("Page %d has no products, stopping", page_number)
                break

            added = sum(self.process_fragment(fragment) for fragment in fragments)
            self.logger.info(
                "Page %d: %d product cards, %d new records",
                page_number, len(fragments), added,
            )
            page_number += 1

        results = self.products.finalize()
        self.logger.info(
            "Scraped %d unique records from %d pages", len(results), page_number - 1
        )
        return results

    def process_fragment(self, fragment: Tag) -> int:
        """Extract, normalize and expand one product card.

        Returns:
            Number of records that were new to the collection
        """
        raw = extract_fragment(fragment)
        if raw is None:
            return 0

        if not raw.colours:
            self.logger.debug("No colour options for %r, skipping", raw.title)
            return 0

        fields = normalize_fields(raw, self.url)
        records = expand_variants(fields, raw.colours)
        return sum(self.products.insert(record) for record in records)
