"""Desktop notifications for session milestones.

Delivery is best-effort: a missing notification backend must never stop a
running session, so failures are logged and reported as ``False``.
"""

from __future__ import annotations

import logging

from plyer import notification

from pomodoro_cli.utils.logger import get_logger

APP_TITLE = "Pomodoro Timer"
APP_NAME = "pomodoro-cli"


class Notifier:
    """Sends plain-text desktop notifications via plyer."""

    def __init__(
        self,
        title: str = APP_TITLE,
        timeout: int = 5,
        logger: logging.Logger | None = None,
    ):
        self.title = title
        self.timeout = timeout
        self._logger = logger or get_logger("notifications")

    def send(self, message: str) -> bool:
        try:
            notification.notify(
                title=self.title,
                message=message,
                app_name=APP_NAME,
                timeout=self.timeout,
            )
        except Exception as error:  # plyer raises backend-specific errors
            self._logger.warning("Desktop notification failed: %s", error)
            return False
        self._logger.debug("Notification sent: %s", message)
        return True
