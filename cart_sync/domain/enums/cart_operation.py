"""カート操作種別の列挙型."""
from enum import Enum


class CartOperation(Enum):
    """カートに対する変更操作の種別."""

    ADD_ITEM = "add_item"
    REMOVE_ITEM = "remove_item"
    UPDATE_AMOUNT = "update_amount"
