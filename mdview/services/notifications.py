from __future__ import annotations

import logging
from collections.abc import Callable

from PyQt6.QtCore import QObject, pyqtSignal

from mdview.domain.messages import Notification

logger = logging.getLogger(__name__)


class QtNotificationChannel(QObject):
    """
    Fire-and-forget push channel from the host to the display.

    Delivery is at-most-once: a message sent while nobody is subscribed is
    dropped. There is no acknowledgement and no retry.
    """

    notified = pyqtSignal(object)

    def send(self, message: Notification) -> None:
        if self.receivers(self.notified) == 0:
            logger.debug("No display listening, dropped %s", message.kind.name)
            return
        logger.debug("Sending %s", message.kind.name)
        self.notified.emit(message)

    def subscribe(self, callback: Callable[[Notification], None]) -> None:
        self.notified.connect(callback)
