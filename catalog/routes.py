# catalog/routes.py
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Request

from .errors import product_not_found, validation_error_response
from .models import ErrorBody, Product, ProductList, ProductMessage
from .store import ProductStore
from .validation import validate_create, validate_update

router = APIRouter(prefix="/products", tags=["products"])
index_router = APIRouter()

NOT_FOUND = {404: {"model": ErrorBody}}
MUTATION_ERRORS = {400: {"model": ErrorBody}, 401: {"model": ErrorBody}}


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


# ---------------------------
# Index
# ---------------------------
@index_router.get("/")
async def index():
    return {
        "message": "Welcome to the Product API!",
        "endpoints": {
            "GET /products": "Get all products (filters: category, inStock)",
            "GET /products/{id}": "Get specific product",
            "POST /products": "Create new product (requires auth)",
            "PUT /products/{id}": "Update product (requires auth)",
            "DELETE /products/{id}": "Delete product (requires auth)",
        },
    }


# ---------------------------
# Product endpoints
# ---------------------------
@router.get("", response_model=ProductList)
async def list_products(
    category: Optional[str] = None,
    in_stock: Optional[str] = Query(None, alias="inStock"),
    store: ProductStore = Depends(get_store),
):
    stock_filter = None
    if in_stock is not None:
        stock_filter = in_stock.lower() == "true"
    products = await store.list(category=category or None, in_stock=stock_filter)
    return {"count": len(products), "products": products}


@router.get("/{product_id}", response_model=Product, responses=NOT_FOUND)
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    p = await store.get(product_id)
    if p is None:
        return product_not_found(product_id)
    return p


@router.post("", status_code=201, response_model=ProductMessage, responses=MUTATION_ERRORS)
async def create_product(payload: Dict[str, Any] = Body(...), store: ProductStore = Depends(get_store)):
    result = validate_create(payload)
    if not result.ok:
        return validation_error_response(result.error)
    product = await store.create(result.payload)
    return {"message": "Product created successfully", "product": product}


@router.put("/{product_id}", response_model=ProductMessage, responses={**NOT_FOUND, **MUTATION_ERRORS})
async def update_product(
    product_id: str,
    payload: Dict[str, Any] = Body(...),
    store: ProductStore = Depends(get_store),
):
    if await store.get(product_id) is None:
        return product_not_found(product_id)

    result = validate_update(payload)
    if not result.ok:
        return validation_error_response(result.error)

    product = await store.replace_fields(product_id, result.payload)
    if product is None:
        return product_not_found(product_id)
    return {"message": "Product updated successfully", "product": product}


@router.delete("/{product_id}", response_model=ProductMessage, responses={**NOT_FOUND, 401: {"model": ErrorBody}})
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    product = await store.delete(product_id)
    if product is None:
        return product_not_found(product_id)
    return {"message": "Product deleted successfully", "product": product}
