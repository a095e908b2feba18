"""Product routes: the public catalog and admin product management."""
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError

from vaqmas.api.deps import get_context, require_admin
from vaqmas.models.product import parse_product
from vaqmas.services import product_service
from vaqmas.services.firestore_collection import FirestoreCollection

router = APIRouter(prefix="/products", tags=["products"])
admin_router = APIRouter(prefix="/admin/products", tags=["admin_products"])


def _loaded_catalog(context):
    catalog = context.catalog
    catalog.load_if_needed()
    if catalog.error:
        raise HTTPException(status_code=503, detail=catalog.error)
    return catalog


def _items(products):
    return {"items": [p.to_api() for p in products]}


@router.get("/")
def list_products(type: Optional[str] = None, context=Depends(get_context)):
    catalog = _loaded_catalog(context)
    products = catalog.products
    if type:
        products = [p for p in products if p.type == type]
    return _items(products)


@router.get("/vaccines")
def list_vaccines(context=Depends(get_context)):
    return _items(_loaded_catalog(context).vaccines())


@router.get("/programs")
def list_programs(context=Depends(get_context)):
    return _items(_loaded_catalog(context).programs())


@router.get("/packages")
def list_packages(context=Depends(get_context)):
    return _items(_loaded_catalog(context).packages())


@router.get("/{product_id}")
def get_product(product_id: str, context=Depends(get_context)):
    product = _loaded_catalog(context).get(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product.to_api()


# -------------------------
# Admin
# -------------------------
def _parse_form(data: dict):
    data = {k: v for k, v in data.items() if k not in ("id", "createdAt", "resolvedImageUrl")}
    try:
        product = parse_product(data)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False, include_context=False)) from exc
    errors = product_service.validate_old_price(product)
    if errors:
        raise HTTPException(status_code=400, detail={"errors": errors})
    return product


@admin_router.get("/")
def admin_list_products(user=Depends(require_admin), context=Depends(get_context)):
    return {"items": FirestoreCollection(context.db, product_service.PRODUCTS).list(order_by="createdAt")}


@admin_router.post("/", status_code=201)
def admin_create_product(
    data: dict = Body(...),
    user=Depends(require_admin),
    context=Depends(get_context),
):
    product = _parse_form(data)
    created = product_service.create_product(context.db, product)
    context.catalog.invalidate()
    context.notifications.success(f"Producto '{product.name}' creado")
    return created


@admin_router.put("/{product_id}")
def admin_update_product(
    product_id: str,
    data: dict = Body(...),
    user=Depends(require_admin),
    context=Depends(get_context),
):
    product = _parse_form(data)
    updated = product_service.update_product(context.db, product_id, product)
    context.catalog.invalidate()
    context.notifications.success(f"Producto '{product.name}' actualizado")
    return updated


@admin_router.delete("/{product_id}")
def admin_delete_product(product_id: str, user=Depends(require_admin), context=Depends(get_context)):
    deleted = product_service.delete_product(context.db, context.bucket, product_id)
    context.catalog.invalidate()
    context.notifications.success(f"Producto '{deleted.get('name', product_id)}' eliminado")
    return {"id": product_id, "deleted": True}
