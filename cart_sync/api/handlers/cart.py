"""カートAPI ハンドラー."""
import logging
from typing import Any

from cart_sync.api.dependencies import Dependencies
from cart_sync.api.messages import notify_result
from cart_sync.api.request import get_body, get_path_parameter
from cart_sync.api.response import (
    bad_request_response,
    error_response,
    internal_error_response,
    success_response,
)
from cart_sync.application import CartOperationResult
from cart_sync.application.use_cases import GetCartResult, GetCartUseCase
from cart_sync.domain.enums import CartOperationStatus
from cart_sync.domain.identifiers import ProductId

logger = logging.getLogger(__name__)

# 操作結果ごとの (HTTPステータス, エラーコード)
_REJECTED_STATUS = {
    CartOperationStatus.STOCK_EXCEEDED: (409, "STOCK_EXCEEDED"),
    CartOperationStatus.FAILED: (502, "OPERATION_FAILED"),
}


def _cart_view(result: GetCartResult) -> dict:
    """カート取得結果をレスポンス用の辞書に変換する."""
    return {
        "items": [
            {
                "product_id": line.product_id,
                "title": line.title,
                "image": line.image,
                "price": str(line.price.value),
                "amount": line.amount,
                "subtotal": str(line.subtotal.value),
            }
            for line in result.lines
        ],
        "item_count": result.item_count,
        "amounts_by_product": {
            str(product_id): amount for product_id, amount in result.amounts_by_product.items()
        },
        "total_amount": str(result.total_amount.value),
        "is_empty": result.is_empty,
    }


def _current_cart_view() -> dict:
    return _cart_view(GetCartUseCase(Dependencies.get_cart_engine()).execute())


def _operation_response(result: CartOperationResult, event: dict) -> dict:
    """操作結果をレスポンスに変換し、必要なら通知する."""
    message = notify_result(result, Dependencies.get_notification_sink())
    body = {"status": result.status.value, "cart": _current_cart_view()}

    if message is None:
        return success_response(body, event=event)

    status_code, error_code = _REJECTED_STATUS[result.status]
    return error_response(
        message,
        status_code=status_code,
        error_code=error_code,
        event=event,
        extra=body,
    )


def _parse_product_id(raw: Any) -> ProductId:
    """リクエストの商品IDを検証して変換する.

    Raises:
        ValueError: 商品IDとして解釈できない場合
    """
    if isinstance(raw, bool) or not isinstance(raw, (int, str)):
        raise ValueError("product_id must be a positive integer")
    return ProductId.parse(raw)


def get_cart(event: dict, context: Any) -> dict:
    """カートを取得する.

    GET /cart

    Returns:
        カート情報
    """
    try:
        view = _current_cart_view()
    except Exception:
        logger.exception("Failed to get cart")
        return internal_error_response(event=event)

    return success_response(view, event=event)


def add_to_cart(event: dict, context: Any) -> dict:
    """商品をカートに1つ追加する.

    POST /cart/items

    Request Body:
        product_id: 商品ID

    Returns:
        操作結果とカート情報
    """
    try:
        body = get_body(event)
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    if "product_id" not in body:
        return bad_request_response("product_id is required", event=event)

    try:
        product_id = _parse_product_id(body["product_id"])
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    try:
        result = Dependencies.get_cart_engine().add_item(product_id)
        return _operation_response(result, event)
    except Exception:
        logger.exception("Failed to add product_id=%s to cart", product_id)
        return internal_error_response(event=event)


def remove_from_cart(event: dict, context: Any) -> dict:
    """商品の行をカートから削除する.

    DELETE /cart/items/{product_id}

    Path Parameters:
        product_id: 商品ID

    Returns:
        操作結果とカート情報（カートに無い商品でも成功扱い）
    """
    product_id_str = get_path_parameter(event, "product_id")
    if not product_id_str:
        return bad_request_response("product_id is required", event=event)

    try:
        product_id = _parse_product_id(product_id_str)
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    try:
        result = Dependencies.get_cart_engine().remove_item(product_id)
        return _operation_response(result, event)
    except Exception:
        logger.exception("Failed to remove product_id=%s from cart", product_id)
        return internal_error_response(event=event)


def update_cart_item_amount(event: dict, context: Any) -> dict:
    """カート行の数量を増分で変更する.

    PATCH /cart/items/{product_id}

    Path Parameters:
        product_id: 商品ID

    Request Body:
        delta: 数量の増分（負数で減算）

    Returns:
        操作結果とカート情報
    """
    product_id_str = get_path_parameter(event, "product_id")
    if not product_id_str:
        return bad_request_response("product_id is required", event=event)

    try:
        product_id = _parse_product_id(product_id_str)
        body = get_body(event)
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    if "delta" not in body:
        return bad_request_response("delta is required", event=event)
    delta = body["delta"]
    if isinstance(delta, bool) or not isinstance(delta, int):
        return bad_request_response("delta must be an integer", event=event)

    try:
        result = Dependencies.get_cart_engine().update_amount(product_id, delta)
        return _operation_response(result, event)
    except Exception:
        logger.exception("Failed to update amount of product_id=%s", product_id)
        return internal_error_response(event=event)
