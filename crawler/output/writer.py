import json
import logging
from pathlib import Path
from typing import Iterable, List, Union

from crawler.products.models import ProductRecord

logger = logging.getLogger(__name__)


def write_products(records: Iterable[ProductRecord], path: Union[str, Path]) -> int:
    """Write records to ``path`` as a UTF-8 JSON array.

    ``price`` is left out of a record entirely when it is absent rather than
    written as null.

    Returns:
        Number of records written
    """
    path = Path(path)
    data = [record.model_dump(exclude_none=True) for record in records]

    if path.parent != Path(""):
        path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False)

    logger.info("Wrote %d records to %s", len(data), path)
    return len(data)


def load_products(path: Union[str, Path]) -> List[ProductRecord]:
    """Read a file written by write_products back into records.

    Raises:
        ValueError: If the file is not a JSON array of valid records
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of products in {path}")
    return [ProductRecord.model_validate(item) for item in data]
