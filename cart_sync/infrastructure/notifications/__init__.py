"""通知先実装モジュール."""
from .in_memory_notification_sink import InMemoryNotificationSink
from .logging_notification_sink import LoggingNotificationSink

__all__ = [
    "InMemoryNotificationSink",
    "LoggingNotificationSink",
]
