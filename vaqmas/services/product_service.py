"""Product catalog and admin form rules.

ProductCatalog is the public site's product cache. The module-level
helpers carry the rules the admin product forms apply before writing.
"""
from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional

from pydantic import ValidationError

from vaqmas.core.logger import get_logger
from vaqmas.models.product import DoseBundle, VaccinationProgram, Vaccine, parse_product
from vaqmas.services.firestore_collection import FirestoreCollection
from vaqmas.services.image_utils import delete_product_image, get_image_url

logger = get_logger("products")

PRODUCTS = "products"


# -------------------------
# Form rules
# -------------------------
def validate_old_price(product) -> dict[str, str]:
    """Returns field errors keyed by Firestore field name."""
    errors: dict[str, str] = {}
    if product.old_price is not None:
        if product.old_price < 0:
            errors["oldPrice"] = "El precio anterior debe ser un número válido"
        elif product.old_price <= (product.price or 0):
            errors["oldPrice"] = "El precio anterior debe ser mayor que el precio actual"
    return errors


def normalize_product_prices(product) -> tuple[Optional[float], Optional[float]]:
    """
    (price, oldPrice) as they should be stored. Bundles and packages keep
    prices only when the whole program can be paid at once.
    """
    if isinstance(product, (DoseBundle, VaccinationProgram)):
        if not product.can_pay_for_whole_program:
            return None, None
    elif not isinstance(product, Vaccine):
        raise TypeError(f"Unknown product variant: {type(product).__name__}")

    price = float(product.price) if product.price is not None else None
    old_price = float(product.old_price) if product.old_price is not None else None
    return price, old_price


def normalize_age_unit(age_unit: Optional[str] = None) -> str:
    return age_unit or "months"


def add_unique_id(ids: list[str], new_id: str) -> list[str]:
    return ids if new_id in ids else [*ids, new_id]


def remove_id(ids: list[str], id_to_remove: str) -> list[str]:
    return [i for i in ids if i != id_to_remove]


def should_show_discount_preview(price: Optional[float], old_price: Optional[float]) -> bool:
    return price is not None and old_price is not None and old_price > price


def calculate_discount_percentage(old_price: float, current_price: float) -> int:
    return round((old_price - current_price) / old_price * 100)


def to_document(product) -> dict[str, Any]:
    """Firestore payload for a product after the form rules are applied."""
    price, old_price = normalize_product_prices(product)
    data = product.to_firestore(exclude={"resolved_image_url", "created_at"})
    data["price"] = price
    data["oldPrice"] = old_price
    data["ageUnit"] = normalize_age_unit(product.age_unit)
    if isinstance(product, (DoseBundle, VaccinationProgram)):
        data["includedProductIds"] = list(dict.fromkeys(product.included_product_ids))
    return data


# -------------------------
# Admin CRUD
# -------------------------
def create_product(db, product) -> dict[str, Any]:
    return FirestoreCollection(db, PRODUCTS).create(to_document(product))


def update_product(db, product_id: str, product) -> dict[str, Any]:
    return FirestoreCollection(db, PRODUCTS).update(product_id, to_document(product))


def delete_product(db, bucket, product_id: str) -> dict[str, Any]:
    """Deletes the document, then its image best-effort."""
    existing = FirestoreCollection(db, PRODUCTS).delete(product_id)
    delete_product_image(bucket, existing.get("imageUrl"), existing.get("type") or "")
    return existing


def load_products(db, bucket, ttl_minutes: int = 60) -> list:
    """All products with their image URLs resolved. Invalid documents are skipped."""
    products = []
    for doc in db.collection(PRODUCTS).stream():
        try:
            products.append(parse_product(doc.to_dict() or {}, doc.id))
        except ValidationError as exc:
            logger.warning("Skipping malformed product %s: %s", doc.id, exc.errors()[:1])

    def _resolve(product):
        product.resolved_image_url = get_image_url(bucket, product.image_url, product.type, ttl_minutes)
        return product

    if not products:
        return []
    with ThreadPoolExecutor(max_workers=min(8, len(products))) as pool:
        return list(pool.map(_resolve, products))


class ProductCatalog:
    """Public product cache, loaded once and invalidated by admin writes.

    Callers that arrive while a load is running wait for it. An
    invalidate() during a load bumps the generation, and the loader then
    discards its result and loads again.
    """

    def __init__(self, db, bucket, ttl_minutes: int = 60):
        self._db = db
        self._bucket = bucket
        self._ttl_minutes = ttl_minutes
        self._cond = threading.Condition()
        self._generation = 0
        self.products: list = []
        self.loading = False
        self.loaded = False
        self.error: Optional[str] = None

    def load_if_needed(self) -> None:
        with self._cond:
            while self.loading:
                self._cond.wait()
            if self.loaded:
                return
            self.loading = True
            self.error = None

        while True:
            with self._cond:
                generation = self._generation

            try:
                products = load_products(self._db, self._bucket, self._ttl_minutes)
            except Exception as exc:
                logger.error("Product catalog load error: %s", exc)
                with self._cond:
                    self.loading = False
                    self.loaded = False
                    self.error = str(exc) or "Error al cargar productos"
                    self._cond.notify_all()
                return

            with self._cond:
                if generation != self._generation:
                    logger.debug("Product catalog invalidated during load; reloading")
                    continue
                self.products = products
                self.loading = False
                self.loaded = True
                self._cond.notify_all()
                return

    def invalidate(self) -> None:
        with self._cond:
            self._generation += 1
            self.products = []
            self.loaded = False
            self.error = None

    def vaccines(self) -> list:
        return [p for p in self.products if isinstance(p, Vaccine)]

    def programs(self) -> list:
        return [p for p in self.products if isinstance(p, DoseBundle) and not p.is_hidden]

    def packages(self) -> list:
        return [p for p in self.products if isinstance(p, VaccinationProgram)]

    def get(self, product_id: str):
        return next((p for p in self.products if p.id == product_id), None)
