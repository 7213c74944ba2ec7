"""ログ出力による通知先."""
import logging

from cart_sync.domain.ports import NotificationSink

logger = logging.getLogger(__name__)


class LoggingNotificationSink(NotificationSink):
    """通知メッセージを WARNING ログとして出力する通知先."""

    def notify(self, message: str) -> None:
        """メッセージを通知する."""
        logger.warning("Cart notification: %s", message)
