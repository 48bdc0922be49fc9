import json
import logging
import math
from pathlib import Path

from models.product import Product, DEFAULT_PRODUCTS

logger = logging.getLogger("checkout.repository")

DEFAULT_SETTINGS = {
    "default_discount": "none",
    "currency": "$",
}


class DataRepository:
    def __init__(self, storage_dir: str | Path = "data/storage"):
        # base folder where all JSON data lives
        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def _file_path(self, filename: str) -> Path:
        return self.storage_dir / filename

    def _read_json(self, filename: str):
        # Load JSON from disk. If file does not exist or is empty/bad,
        # return None and let the caller pick its default.
        path = self._file_path(filename)
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read().strip()
                if text == "":
                    return None
                return json.loads(text)
        except (OSError, ValueError) as e:
            # unreadable, not utf-8 or not json -> fail safe
            logger.warning(f"Could not read {path}: {e}")
            return None

    def _write_json(self, filename: str, data) -> None:
        #Save Python data structure back to JSON file with pretty formatting.
        path = self._file_path(filename)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def get_products(self) -> list[Product]:
        data = self._read_json("products.json")
        if not isinstance(data, list):
            # first run or corrupted format -> sample catalog
            return list(DEFAULT_PRODUCTS)

        products: list[Product] = []
        for entry in data:
            if not isinstance(entry, dict):
                logger.warning(f"Skipping catalog entry {entry!r}: not an object")
                continue
            name = entry.get("name")
            price = entry.get("price")
            if not name or isinstance(price, bool) or not isinstance(price, (int, float)):
                logger.warning(f"Skipping catalog entry {entry!r}: missing name or price")
                continue
            try:
                price = float(price)
            except OverflowError:
                logger.warning(f"Skipping catalog entry {name!r}: price too large")
                continue
            if not math.isfinite(price) or price < 0:
                logger.warning(f"Skipping catalog entry {entry!r}: invalid price")
                continue
            products.append(Product(str(name), price))
        return products

    def save_products(self, products: list[Product]) -> None:
        self._write_json(
            "products.json",
            [{"name": p.name, "price": p.price} for p in products],
        )

    def get_settings(self) -> dict:
        # Returns application settings.
        # If file missing or bad, return default structure.
        data = self._read_json("settings.json")
        if not isinstance(data, dict):
            data = {}

        return {
            "default_discount": data.get("default_discount", DEFAULT_SETTINGS["default_discount"]),
            "currency": data.get("currency", DEFAULT_SETTINGS["currency"]),
        }

    def save_settings(self, settings: dict) -> None:
        self._write_json("settings.json", settings)
