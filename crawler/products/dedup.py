from typing import Dict, List

from crawler.products.models import ProductRecord


class ProductDeduplicator:
    """Collects records across all pages, keeping one copy of each value.

    The listing can show the same product variant more than once, so records
    are keyed by full-field equality. A dict is used as an insertion-ordered
    set; callers should still treat the final order as unspecified.
    """

    def __init__(self):
        self._records: Dict[ProductRecord, None] = {}
        self._finalized = False

    def __len__(self):
        return len(self._records)

    def insert(self, record: ProductRecord) -> bool:
        """Add a record. Returns False if an equal record was already present."""
        if self._finalized:
            raise RuntimeError("Cannot insert into a finalized deduplicator")
        if record in self._records:
            return False
        self._records[record] = None
        return True

    def finalize(self) -> List[ProductRecord]:
        """Return the unique records. Can only be called once."""
        if self._finalized:
            raise RuntimeError("Deduplicator has already been finalized")
        self._finalized = True
        return list(self._records)
