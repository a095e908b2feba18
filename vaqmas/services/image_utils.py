"""Helpers for resolving product images kept in Firebase Storage.

Product documents store only the image file name; the folder comes from
the product type (see resolve_folder).
"""
from datetime import timedelta
from typing import Optional
from urllib.parse import quote

import requests

from vaqmas.core.logger import get_logger

logger = get_logger("images")

DOWNLOAD_URL = "https://firebasestorage.googleapis.com/v0/b/{bucket}/o/{path}?alt=media&token={token}"

FALLBACK_IMAGES = {
    "vaccine": "💉",
    "bundle": "📦",
    "package": "📦",
    "default": "💊",
}


def resolve_folder(type: Optional[str] = None) -> str:
    """
    Storage folder for a product type.
    - vaccine(s)  -> "products"
    - bundle(s)   -> "bundles"
    - package(s)  -> "packages"
    - anything else -> the type itself, or "general" when no type is given
    """
    t = str(type or "").lower().strip()

    if t in ("vaccine", "vaccines"):
        return "products"
    if t in ("bundle", "bundles"):
        return "bundles"
    if t in ("package", "packages"):
        return "packages"
    return t or "general"


def get_fallback_image(product_type: Optional[str] = "default") -> str:
    return FALLBACK_IMAGES.get(str(product_type or "default"), FALLBACK_IMAGES["default"])


def _download_url(blob, ttl_minutes: int) -> str:
    # Raises NotFound when the object does not exist
    blob.reload()
    tokens = (blob.metadata or {}).get("firebaseStorageDownloadTokens")
    if tokens:
        return DOWNLOAD_URL.format(
            bucket=blob.bucket.name,
            path=quote(blob.name, safe=""),
            token=tokens.split(",")[0],
        )
    return blob.generate_signed_url(expiration=timedelta(minutes=ttl_minutes), version="v4")


def get_image_url(bucket, file_name: Optional[str] = None, type: Optional[str] = None, ttl_minutes: int = 60) -> str:
    """
    Download URL for a product image, or the fallback for `type` when the
    name is empty, the bucket is missing, or Storage refuses the lookup.
    Never raises.
    """
    if not file_name or not isinstance(file_name, str):
        return get_fallback_image(type)

    # Keep only the base file name (strip accidental paths)
    base_name = file_name.split("/")[-1].strip()
    if not base_name or bucket is None:
        return get_fallback_image(type)

    storage_path = base_name
    try:
        storage_path = f"{resolve_folder(type)}/{base_name}"
        return _download_url(bucket.blob(storage_path), ttl_minutes)
    except Exception as exc:
        # Missing object or permissions; fall back gracefully.
        logger.warning("get_image_url: falling back for %s: %s", storage_path, exc)
        return get_fallback_image(type)


def is_image_accessible(image_url: str, timeout: float = 5.0) -> bool:
    if not image_url:
        return False
    try:
        response = requests.head(image_url, timeout=timeout, allow_redirects=True)
        return response.ok
    except requests.RequestException as exc:
        logger.warning("Image accessibility check failed for %s: %s", image_url, exc)
        return False


def get_storage_bucket(context) -> str:
    """Name of the bucket images are served from, or "" when none is configured."""
    if context.bucket is not None:
        return context.bucket.name
    return context.settings.FIREBASE_STORAGE_BUCKET or ""


def delete_product_image(bucket, image_url: Optional[str], product_type: str) -> bool:
    """
    Deletes a product's stored image. Inline data URLs and empty names are
    skipped. Returns True when an object was deleted.
    """
    if not image_url or image_url.startswith("data:") or bucket is None:
        return False

    storage_path = f"{resolve_folder(product_type)}/{image_url}"
    try:
        bucket.blob(storage_path).delete()
        return True
    except Exception as exc:
        logger.warning("Could not delete product image %s: %s", storage_path, exc)
        return False
