"""カートのシリアライズ.

ミラーには CartLine レコードのJSON配列を1つの値として保存する。
レコード形式: {"id", "title", "price", "image", "amount"}
"""
import json
from typing import Any

from cart_sync.domain.entities import Cart, CartLine
from cart_sync.domain.identifiers import ProductId
from cart_sync.domain.ports import MalformedCartError
from cart_sync.domain.value_objects import Money, ProductAttributes


def cart_to_records(cart: Cart) -> list[dict[str, Any]]:
    """CartエンティティをレコードのリストへJSON互換の形で変換."""
    return [
        {
            "id": line.product_id.value,
            "title": line.attributes.title,
            # Decimal の精度を保つため文字列で保存
            "price": str(line.attributes.price.value),
            "image": line.attributes.image,
            "amount": line.amount,
        }
        for line in cart.get_lines()
    ]


def cart_from_records(records: Any) -> Cart:
    """レコードのリストをCartエンティティに変換.

    Raises:
        MalformedCartError: レコードが想定の形でない場合
    """
    if not isinstance(records, list):
        raise MalformedCartError(f"Stored cart must be a list, got {type(records).__name__}")

    lines = []
    try:
        for record in records:
            attributes = ProductAttributes(
                title=record["title"],
                price=Money.of(record["price"]),
                image=record.get("image") or "",
            )
            lines.append(
                CartLine(
                    product_id=ProductId(record["id"]),
                    attributes=attributes,
                    amount=record["amount"],
                )
            )
        return Cart.of(lines)
    except (KeyError, TypeError, AttributeError, ValueError) as e:
        raise MalformedCartError(f"Invalid cart record: {e}") from e


def serialize_cart(cart: Cart) -> str:
    """CartエンティティをJSON文字列に変換."""
    return json.dumps(cart_to_records(cart), ensure_ascii=False)


def deserialize_cart(value: str) -> Cart:
    """JSON文字列をCartエンティティに変換.

    Raises:
        MalformedCartError: JSONとして解釈できない、またはレコードが不正な場合
    """
    try:
        records = json.loads(value)
    except (json.JSONDecodeError, TypeError, RecursionError) as e:
        raise MalformedCartError(f"Stored cart is not valid JSON: {e}") from e
    return cart_from_records(records)
