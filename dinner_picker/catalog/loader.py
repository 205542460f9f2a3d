from __future__ import annotations

import logging

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import MenuRecord
from .parser import parse_catalog_text

logger = logging.getLogger(__name__)


def load_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> list[MenuRecord]:
    """
    Read the catalog CSV from disk and parse it.

    Parsing errors propagate; no partial catalog is ever returned.
    """
    raw = config.csv_path.read_text(encoding=config.encoding)
    records = parse_catalog_text(raw)
    logger.info("Loaded %d menu records from %s", len(records), config.csv_path)
    return records


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    menus = load_catalog()
    print(f"Catalog OK: {len(menus)} records from {DEFAULT_CATALOG_CONFIG.csv_path}")
