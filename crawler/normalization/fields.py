import re
import logging
from typing import Any, Dict, Optional

from crawler.extraction.fragments import RawFields
from crawler.normalization.dates import resolve_date

logger = logging.getLogger(__name__)

IN_STOCK_PHRASE = "Availability: In Stock"
OUT_OF_STOCK_PHRASE = "Availability: Out of Stock"

# Megabytes per advertised gigabyte
MB_PER_GB = 1000

NON_PRICE_CHARS = re.compile(r"[^0-9.]")
NON_DIGITS = re.compile(r"[^0-9]")


def parse_price(price_text: str) -> Optional[float]:
    """Extract a numerical price from text.

    Args:
        price_text: String containing a price (e.g., "£399.99")

    Returns:
        Float value of the price, or None when the text has no digits

    Raises:
        ValueError: If what remains after stripping is not a number (e.g. "1.2.3")
    """
    clean_price = NON_PRICE_CHARS.sub("", price_text)
    if not clean_price:
        return None

    try:
        return float(clean_price)
    except ValueError:
        raise ValueError(f"Malformed price text: {price_text!r}") from None


def parse_capacity(capacity_text: str) -> int:
    """Convert advertised capacity in GB (e.g. "128" or "128GB") to MB."""
    digits = NON_DIGITS.sub("", capacity_text)
    if not digits:
        raise ValueError(f"Malformed capacity text: {capacity_text!r}")
    return int(digits) * MB_PER_GB


def resolve_image_url(src: Optional[str], base_url: str) -> str:
    # Listing images use "../images/x.png" style paths
    if src is None:
        return ""
    return src.replace("..", base_url)


def is_in_stock(availability_text: str) -> bool:
    return IN_STOCK_PHRASE in availability_text


def shipping_date_for(shipping_text: str, availability_text: str) -> str:
    """Canonical shipping date, or "" when out of stock or no date is found.

    The resolver is not consulted at all for out-of-stock items.
    """
    if OUT_OF_STOCK_PHRASE in shipping_text or OUT_OF_STOCK_PHRASE in availability_text:
        return ""
    return resolve_date(shipping_text) or ""


def normalize_fields(raw: RawFields, base_url: str) -> Dict[str, Any]:
    """Convert the raw field bag of one product card into typed record fields.

    Returns every ProductRecord field except ``colour``, which is filled in
    per variant by the expander.

    Raises:
        ValueError: If the price or capacity text is malformed
    """
    fields = {
        "title": raw.title,
        "price": parse_price(raw.price),
        "image_url": resolve_image_url(raw.image_src, base_url),
        "capacity_mb": parse_capacity(raw.capacity),
        "availability_text": raw.availability,
        "is_available": is_in_stock(raw.availability),
        "shipping_text": raw.shipping,
        "shipping_date": shipping_date_for(raw.shipping, raw.availability),
    }
    logger.debug("Normalized %r: %s", raw.title, fields)
    return fields
