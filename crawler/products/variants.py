from typing import Any, Dict, List, Sequence

from crawler.products.models import ProductRecord


def expand_variants(fields: Dict[str, Any], colours: Sequence[str]) -> List[ProductRecord]:
    """Build one ProductRecord per colour, all sharing the other fields.

    Colours keep their order on the card; an empty list gives no records.
    """
    return [ProductRecord(colour=colour, **fields) for colour in colours]
