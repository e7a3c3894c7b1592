# This file defines the output record produced by the crawler
# One ProductRecord exists per (product card, colour) pair found on the listing pages

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ProductRecord(BaseModel):
    """A single colour variant of a product, with every field normalized.

    Records are frozen: pydantic then derives ``__hash__`` from all fields,
    so two records with identical values compare equal and collapse to one
    entry in a set or dict. The deduplicator relies on this.
    """

    model_config = ConfigDict(frozen=True)

    # Inner markup of the title node, kept exactly as found
    title: str

    # Absent when the price text carries no digits at all (e.g. "Contact us")
    price: Optional[float] = Field(default=None, ge=0)

    # Absolute URL, or empty string when the card had no image source
    image_url: str = ""

    # Advertised capacity in MB (the listing shows GB, scaled by 1000)
    capacity_mb: int = Field(gt=0)

    colour: str

    # Raw availability phrase and the flag derived from it
    availability_text: str
    is_available: bool

    # Raw shipping phrase and the canonical YYYY-MM-DD date found in it, if any
    shipping_text: str
    shipping_date: str = ""
