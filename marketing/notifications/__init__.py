from .sink import (
    ConsoleNotificationSink,
    NotificationSink,
    RecordingNotificationSink,
    format_notification,
)

__all__ = [
    "ConsoleNotificationSink",
    "NotificationSink",
    "RecordingNotificationSink",
    "format_notification",
]
