"""カート操作結果の通知メッセージ.

結果の種別から利用者向けの固定メッセージを決める。
"""
from cart_sync.application import CartOperationResult
from cart_sync.domain.enums import CartOperation, CartOperationStatus
from cart_sync.domain.ports import NotificationSink

ADD_ITEM_FAILED_MESSAGE = "商品の追加に失敗しました"
REMOVE_ITEM_FAILED_MESSAGE = "商品の削除に失敗しました"
UPDATE_AMOUNT_FAILED_MESSAGE = "商品数量の変更に失敗しました"
STOCK_EXCEEDED_MESSAGE = "在庫数を超える数量は指定できません"

_FAILED_MESSAGES = {
    CartOperation.ADD_ITEM: ADD_ITEM_FAILED_MESSAGE,
    CartOperation.REMOVE_ITEM: REMOVE_ITEM_FAILED_MESSAGE,
    CartOperation.UPDATE_AMOUNT: UPDATE_AMOUNT_FAILED_MESSAGE,
}


def message_for(result: CartOperationResult) -> str | None:
    """結果に対応する通知メッセージを返す（通知不要ならNone）."""
    if not result.status.is_rejected():
        return None
    if result.status is CartOperationStatus.STOCK_EXCEEDED:
        return STOCK_EXCEEDED_MESSAGE
    return _FAILED_MESSAGES[result.operation]


def notify_result(result: CartOperationResult, sink: NotificationSink) -> str | None:
    """結果に対応するメッセージを通知先へ送る.

    Returns:
        送ったメッセージ（送らなかった場合はNone）
    """
    message = message_for(result)
    if message is not None:
        sink.notify(message)
    return message
