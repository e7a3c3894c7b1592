from unittest.mock import patch

import pytest

from crawler.extraction.fragments import RawFields
from crawler.normalization.fields import (
    is_in_stock,
    normalize_fields,
    parse_capacity,
    parse_price,
    resolve_image_url,
    shipping_date_for,
)

BASE_URL = "https://example.com/smartphones"


def make_raw(**overrides):
    values = dict(
        title="iPhone 12 Pro",
        price="£399.99",
        capacity="128",
        image_src="../images/iphone-12-pro.png",
        availability="Availability: In Stock",
        shipping="Delivery by 15 March 2024",
        colours=["Black"],
    )
    values.update(overrides)
    return RawFields(**values)


def test_price_strips_currency():
    assert parse_price("£399.99") == 399.99
    assert parse_price("1,049.00") == 1049.0


def test_price_without_digits_is_absent():
    assert parse_price("Contact us") is None
    assert parse_price("") is None


def test_malformed_price_is_fatal():
    with pytest.raises(ValueError):
        parse_price("1.2.3")
    with pytest.raises(ValueError):
        parse_price("N/A.")


def test_capacity_is_scaled_to_mb():
    assert parse_capacity("128") == 128000
    assert parse_capacity("64GB") == 64000


def test_capacity_without_digits_is_fatal():
    with pytest.raises(ValueError):
        parse_capacity("unknown")


def test_image_url_is_made_absolute():
    assert resolve_image_url("../images/a.png", BASE_URL) == f"{BASE_URL}/images/a.png"
    assert resolve_image_url(None, BASE_URL) == ""


def test_availability_flag():
    assert is_in_stock("Availability: In Stock")
    assert not is_in_stock("Availability: Out of Stock")
    assert not is_in_stock("In Stock")


def test_out_of_stock_forces_empty_date():
    assert shipping_date_for("Delivery by 15 March 2024", "Availability: Out of Stock") == ""
    assert shipping_date_for("Availability: Out of Stock 2024-03-15", "") == ""


def test_out_of_stock_skips_the_resolver():
    with patch("crawler.normalization.fields.resolve_date") as resolver:
        shipping_date_for("2024-03-15", "Availability: Out of Stock")
    resolver.assert_not_called()


def test_unresolvable_shipping_date_is_empty():
    assert shipping_date_for("Free Shipping", "Availability: In Stock") == ""


def test_normalize_fields():
    fields = normalize_fields(make_raw(), BASE_URL)

    assert fields == {
        "title": "iPhone 12 Pro",
        "price": 399.99,
        "image_url": f"{BASE_URL}/images/iphone-12-pro.png",
        "capacity_mb": 128000,
        "availability_text": "Availability: In Stock",
        "is_available": True,
        "shipping_text": "Delivery by 15 March 2024",
        "shipping_date": "2024-03-15",
    }


def test_normalize_out_of_stock_card():
    fields = normalize_fields(
        make_raw(availability="Availability: Out of Stock", price="Contact us"),
        BASE_URL,
    )

    assert fields["is_available"] is False
    assert fields["shipping_date"] == ""
    assert fields["price"] is None
    assert fields["shipping_text"] == "Delivery by 15 March 2024"
