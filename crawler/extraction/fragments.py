# This file locates product cards on a listing page and pulls the raw text of
# each field out of a card. No interpretation happens here; see normalization.

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

# CSS selectors for the listing layout
PRODUCT_SELECTOR = ".product"
TITLE_SELECTOR = ".text-blue-600"
PRICE_SELECTOR = ".text-lg"
CAPACITY_SELECTOR = ".product-capacity"
IMAGE_SELECTOR = "img"
# Rows of the card body. Availability is always the third row and shipping the
# last one; the rows carry no class that names them.
CARD_ROW_SELECTOR = ".bg-white > div"
AVAILABILITY_ROW_INDEX = 2
COLOUR_SELECTOR = ".flex .px-2 > span"
COLOUR_ATTRIBUTE = "data-colour"


@dataclass(frozen=True)
class RawFields:
    """Unprocessed field values found on one product card."""

    title: str
    price: str
    capacity: str
    image_src: Optional[str]
    availability: str
    shipping: str
    colours: List[str] = field(default_factory=list)


def inner_html(node: Tag) -> str:
    """Markup inside ``node``, without the node's own tag."""
    return node.decode_contents()


def find_fragments(soup: BeautifulSoup) -> List[Tag]:
    """Return the product cards of a listing page, in document order."""
    return soup.select(PRODUCT_SELECTOR)


def extract_fragment(fragment: Tag) -> Optional[RawFields]:
    """Extract the raw fields of one product card.

    Returns None when any of title, price, capacity, image, availability or
    shipping is missing. Colours are optional here: a card without any simply
    yields no records later on.
    """
    title = fragment.select_one(TITLE_SELECTOR)
    price = fragment.select_one(PRICE_SELECTOR)
    capacity = fragment.select_one(CAPACITY_SELECTOR)
    image = fragment.select_one(IMAGE_SELECTOR)

    rows = fragment.select(CARD_ROW_SELECTOR)
    availability = rows[AVAILABILITY_ROW_INDEX] if len(rows) > AVAILABILITY_ROW_INDEX else None
    shipping = rows[-1] if rows else None

    required = {
        "title": title,
        "price": price,
        "capacity": capacity,
        "image": image,
        "availability": availability,
        "shipping": shipping,
    }
    missing = [name for name, node in required.items() if node is None]
    if missing:
        logger.debug("Skipping product card missing %s", ", ".join(missing))
        return None

    colours = [
        span[COLOUR_ATTRIBUTE]
        for span in fragment.select(COLOUR_SELECTOR)
        if span.has_attr(COLOUR_ATTRIBUTE)
    ]

    return RawFields(
        title=inner_html(title),
        price=inner_html(price),
        capacity=inner_html(capacity),
        image_src=image.get("src"),
        availability=inner_html(availability),
        shipping=inner_html(shipping),
        colours=colours,
    )
