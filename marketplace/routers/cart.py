"""
Cart Router

Session cart endpoints. Carts are keyed by the userId the storefront sends
and live only in process memory.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from marketplace.cart import CartService, CartStore, SelectedPackage
from marketplace.errors import ERROR_CART_ITEM_NOT_FOUND, ERROR_USER_ID_REQUIRED, NotFound, ValidationError
from marketplace.logging import get_logger

from .deps import get_cart_service, get_store
from .models import AddToCartRequest, UpdateCartItemRequest

logger = get_logger(__name__)

router = APIRouter(tags=["cart"])


def _require_user_id(user_id: Optional[str]) -> str:
    if not user_id:
        raise ValidationError(
            ERROR_USER_ID_REQUIRED,
            errors=[{"field": "userId", "message": "Field required", "code": "missing"}],
        )
    return user_id


@router.get("/cart")
async def get_cart(
    user_id: Optional[str] = Query(None, alias="userId"),
    service: CartService = Depends(get_cart_service),
):
    """Cart lines with product details; [] without a userId or lines."""
    if not user_id:
        return []
    return await service.get_cart(user_id)


@router.post("/cart")
async def add_to_cart(request: AddToCartRequest, service: CartService = Depends(get_cart_service)):
    """Add a line, merging with an existing (product, package) line."""
    lines = await service.store.add(
        request.user_id,
        request.product_id,
        request.quantity,
        SelectedPackage(name=request.selected_package.name, price=str(request.selected_package.price)),
    )
    return {"success": True, "cart": await service.render(lines)}


@router.patch("/cart/{line_id}")
async def update_cart_item(
    line_id: str,
    request: UpdateCartItemRequest,
    user_id: Optional[str] = Query(None, alias="userId"),
    service: CartService = Depends(get_cart_service),
):
    """Replace a line's quantity."""
    user_id = _require_user_id(user_id)

    line = await service.store.update(user_id, line_id, request.quantity)
    if line is None:
        raise NotFound(ERROR_CART_ITEM_NOT_FOUND)

    return {"success": True, "cart": await service.get_cart(user_id)}


@router.delete("/cart/{line_id}", status_code=204)
async def remove_cart_item(
    line_id: str,
    user_id: Optional[str] = Query(None, alias="userId"),
    store: CartStore = Depends(get_store),
):
    """Remove one line; unknown ids are ignored."""
    user_id = _require_user_id(user_id)
    await store.remove(user_id, line_id)
    return Response(status_code=204)


@router.delete("/cart", status_code=204)
async def clear_cart(
    user_id: Optional[str] = Query(None, alias="userId"),
    store: CartStore = Depends(get_store),
):
    """Remove every line of the user."""
    user_id = _require_user_id(user_id)
    await store.clear(user_id)
    return Response(status_code=204)
