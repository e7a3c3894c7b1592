from unittest.mock import MagicMock

import pytest
import requests
from bs4 import BeautifulSoup

BASE_URL = "https://example.com/developer-challenge/smartphones"


def product_card(
    title="iPhone 12 Pro",
    price="£399.99",
    capacity="128",
    image='<img src="../images/iphone-12-pro.png" alt="iPhone 12 Pro">',
    colours=("Black", "Blue", "Red"),
    availability="Availability: In Stock",
    shipping="Delivery by 15 March 2024",
    rows=None,
):
    """Markup for one product card laid out like the real listing."""
    swatches = "".join(
        f'<div class="px-2"><span class="border border-black rounded-full block" '
        f'data-colour="{colour}"></span></div>'
        for colour in colours
    )
    if rows is None:
        rows = [
            f'<div class="my-8 block text-center text-lg">{price}</div>',
            f'<div class="my-4 text-sm block text-center">{availability}</div>',
            f'<div class="my-4 text-sm block text-center">{shipping}</div>',
        ]
    return (
        '<div class="product px-4 w-full md:w-1/2 lg:w-1/4">'
        '<div class="bg-white p-4 rounded-md">'
        f"{image}"
        '<h3 class="font-semibold text-center mt-8">'
        f'<span class="product-name text-blue-600">{title}</span> '
        f'<span class="product-capacity">{capacity}</span>'
        "</h3>"
        f'<div class="my-4"><div class="flex -mx-2">{swatches}</div></div>'
        + "".join(rows)
        + "</div></div>"
    )


def listing_page(*cards):
    return (
        "<html><body><div id=\"products\" class=\"flex flex-wrap -mx-4\">"
        + "".join(cards)
        + "</div></body></html>"
    )


def parse_card(markup):
    soup = BeautifulSoup(listing_page(markup), "lxml")
    return soup.select_one(".product")


def fake_response(text, status_code=200, url=""):
    response = MagicMock()
    response.text = text
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error for url: {url}"
        )
    return response


@pytest.fixture
def fake_session():
    """A session whose GET serves pages from a {url: html} mapping.

    Unknown URLs get an empty listing page. Set ``session.pages`` and
    ``session.statuses`` in the test.
    """
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    session.pages = {}
    session.statuses = {}

    def get(url, timeout=None):
        return fake_response(
            session.pages.get(url, listing_page()),
            status_code=session.statuses.get(url, 200),
            url=url,
        )

    session.get.side_effect = get
    return session
