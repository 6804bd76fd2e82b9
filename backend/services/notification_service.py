import logging
from typing import Optional

from models.notification_models import NotificationRequest

def escape_line(value: str) -> str:
    """Keep a value on one physical line so a submission cannot forge extra records."""
    return value.replace("\\", "\\\\").replace("\r", "\\r").replace("\n", "\\n")

class NotificationService:
    """
    Records incoming notifications. The logger is supplied by the caller so
    the sink can be swapped (tests attach a capturing handler).

    Errors inside logging handlers (e.g. a closed stream) are reported by
    logging's own Handler.handleError and never reach the caller; only an
    exception raised out of record() itself surfaces as a recording failure.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger("notification")

    def record(self, notification: NotificationRequest) -> None:
        # one record per call; logging handlers lock around emit so lines never interleave
        self.logger.info("%s : %s", escape_line(notification.chatId), escape_line(notification.message))
