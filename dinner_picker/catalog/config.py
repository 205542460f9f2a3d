from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_CSV = Path(__file__).resolve().parent.parent / "data" / "menus.csv"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Where the menu catalog lives and how to read it.
    """

    csv_path: Path = Path(os.getenv("DINNER_PICKER_MENUS_CSV", str(_BUNDLED_CSV)))
    encoding: str = "utf-8-sig"


DEFAULT_CATALOG_CONFIG = CatalogConfig()
