"""通知先のインメモリ実装."""
from cart_sync.domain.ports import NotificationSink


class InMemoryNotificationSink(NotificationSink):
    """通知メッセージを順に保持する通知先（テスト用）."""

    def __init__(self) -> None:
        """初期化."""
        self._messages: list[str] = []

    def notify(self, message: str) -> None:
        """メッセージを通知する."""
        self._messages.append(message)

    @property
    def messages(self) -> list[str]:
        """通知されたメッセージ（防御的コピー）."""
        return list(self._messages)

    def clear(self) -> None:
        """保持しているメッセージを破棄する."""
        self._messages.clear()
