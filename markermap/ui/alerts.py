"""Blocking user-facing alerts."""

from dataclasses import dataclass
from typing import Protocol

from loguru import logger


@dataclass
class Alert:
    """A message dialog shown to the user."""

    title: str
    message: str
    fatal: bool = False


class AlertPresenter(Protocol):
    """Surface that shows alerts to the user."""

    def show(self, alert: Alert) -> None:
        ...


class LoggingAlertPresenter:
    """Presenter that logs every alert and keeps them for inspection."""

    def __init__(self):
        self.alerts: list[Alert] = []

    def show(self, alert: Alert) -> None:
        self.alerts.append(alert)
        if alert.fatal:
            logger.error(f"{alert.title}: {alert.message}")
        else:
            logger.warning(f"{alert.title}: {alert.message}")
