"""Find and normalize the delivery date in a free-text shipping phrase.

Shipping phrases on the listing look like ``"Delivery by 15 March 2024"``,
``"Delivers 2024-03-15"`` or ``"Free Delivery tomorrow"``. The resolver looks
for the first date-like expression and, when it can be read as a calendar
date, returns it as ``YYYY-MM-DD``.
"""

import re
import logging
from datetime import datetime
from typing import List, Optional, Pattern, Tuple

logger = logging.getLogger(__name__)

# Matchers in priority order. At a given position in the text the first
# matcher that fits wins; across positions the leftmost match wins.
DATE_MATCHERS: List[Tuple[str, Pattern]] = [
    ("day_month_year", re.compile(r"\d{1,2} \w+ \d{4}")),
    ("iso", re.compile(r"\d{4}-\d{2}-\d{2}")),
    # Day is required, otherwise any "ers 2024" inside a word would match
    ("loose", re.compile(r"\d+(?:[a-z]{2})?\s+(?:of\s+)?[a-z]{3}\s+\d{4}")),
    # Matched but never converted into a date: there is no relative-date logic
    ("tomorrow", re.compile(r"tomorrow")),
]

# Formats tried, in order, against the matched expression
DATE_FORMATS = ["%d %B %Y", "%Y-%m-%d"]

CANONICAL_FORMAT = "%Y-%m-%d"


def find_date_expression(text: str) -> Optional[Tuple[str, str]]:
    """Return ``(matcher_name, matched_text)`` for the first date-like expression.

    Each matcher is run independently; the candidate with the smallest start
    offset is kept, ties going to the matcher listed first.
    """
    best = None
    for priority, (name, pattern) in enumerate(DATE_MATCHERS):
        match = pattern.search(text)
        if not match:
            continue
        key = (match.start(), priority)
        if best is None or key < best[0]:
            best = (key, name, match.group(0))

    if best is None:
        return None
    return best[1], best[2]


def parse_date(date_str: str) -> Optional[str]:
    """Parse a date expression with the supported formats, canonicalized."""
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(date_str, fmt).strftime(CANONICAL_FORMAT)
        except ValueError:
            continue
    return None


def resolve_date(text: str) -> Optional[str]:
    """Return the canonical date found in ``text``, or None.

    Only the first expression is considered even when later ones would parse.
    """
    found = find_date_expression(text)
    if found is None:
        return None

    name, date_str = found
    resolved = parse_date(date_str.strip())
    if resolved is None:
        logger.debug("Unparseable %s date expression %r in %r", name, date_str, text)
    return resolved
