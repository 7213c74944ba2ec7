"""通知先インターフェース."""
from abc import ABC, abstractmethod


class NotificationSink(ABC):
    """利用者向けメッセージの送り先（戻り値は使わない）."""

    @abstractmethod
    def notify(self, message: str) -> None:
        """メッセージを通知する."""
        pass
