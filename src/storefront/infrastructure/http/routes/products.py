"""Product endpoints under /api/produtos."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from storefront.application.add_product import AddProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.remove_product import RemoveProductHandler
from storefront.application.show_product import ShowProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.repository.document_store import DocumentStore
from storefront.infrastructure.http.dependencies import get_store

router = APIRouter(prefix="/api/produtos", tags=["products"])


@router.get("")
def list_products(store: DocumentStore = Depends(get_store)):
    return ListProductsHandler(store).handle()


@router.get("/{product_id}")
def show_product(product_id: str, store: DocumentStore = Depends(get_store)):
    return ShowProductHandler(store).handle(product_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def add_product(
    payload: Any = Body(None), store: DocumentStore = Depends(get_store)
):
    product = AddProductHandler(store).handle(payload)
    return {"success": True, "product": product}


@router.put("/{product_id}")
def update_product(
    product_id: str,
    payload: Any = Body(None),
    store: DocumentStore = Depends(get_store),
):
    product = UpdateProductHandler(store).handle(product_id, payload)
    return {"success": True, "product": product}


@router.delete("/{product_id}")
def remove_product(product_id: str, store: DocumentStore = Depends(get_store)):
    product = RemoveProductHandler(store).handle(product_id)
    return {
        "success": True,
        "message": "Product removed successfully",
        "product": product,
    }
