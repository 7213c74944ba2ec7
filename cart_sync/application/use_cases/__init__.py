"""ユースケースモジュール."""
from .add_to_cart import AddToCartResult, AddToCartUseCase
from .get_cart import CartLineDTO, GetCartResult, GetCartUseCase
from .remove_from_cart import RemoveFromCartResult, RemoveFromCartUseCase
from .update_cart_amount import UpdateCartAmountResult, UpdateCartAmountUseCase

__all__ = [
    # Cart Use Cases
    "AddToCartUseCase",
    "AddToCartResult",
    "GetCartUseCase",
    "GetCartResult",
    "CartLineDTO",
    "RemoveFromCartUseCase",
    "RemoveFromCartResult",
    "UpdateCartAmountUseCase",
    "UpdateCartAmountResult",
]
