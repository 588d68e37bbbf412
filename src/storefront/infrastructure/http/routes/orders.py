"""Order endpoints under /api/pedidos."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from storefront.application.create_order import CreateOrderHandler
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.remove_order import RemoveOrderHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.repository.document_store import DocumentStore
from storefront.infrastructure.http.dependencies import field_of, get_store

router = APIRouter(prefix="/api/pedidos", tags=["orders"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_order(
    payload: Any = Body(None), store: DocumentStore = Depends(get_store)
):
    order = CreateOrderHandler(store).handle(payload)
    return {"success": True, "order": order}


@router.get("")
def list_orders(store: DocumentStore = Depends(get_store)):
    """Newest-created first."""
    return ListOrdersHandler(store).handle()


@router.get("/{order_id}")
def show_order(order_id: str, store: DocumentStore = Depends(get_store)):
    return ShowOrderHandler(store).handle(order_id)


@router.put("/{order_id}/status")
def update_order_status(
    order_id: str,
    payload: Any = Body(None),
    store: DocumentStore = Depends(get_store),
):
    order = UpdateOrderStatusHandler(store).handle(order_id, field_of(payload, "status"))
    return {"success": True, "order": order}


@router.delete("/{order_id}")
def remove_order(order_id: str, store: DocumentStore = Depends(get_store)):
    order = RemoveOrderHandler(store).handle(order_id)
    return {
        "success": True,
        "message": "Order removed successfully",
        "order": order,
    }
