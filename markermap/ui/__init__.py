"""Collaborator seams for the screens: navigation, alerts, picker, feed."""

from markermap.ui.alerts import Alert, AlertPresenter, LoggingAlertPresenter
from markermap.ui.feed import MarkerFeed
from markermap.ui.navigation import Navigator, Route, Screen
from markermap.ui.picker import ImagePicker, PickerError, PickerOptions, PickerResult

__all__ = [
    "Alert",
    "AlertPresenter",
    "ImagePicker",
    "LoggingAlertPresenter",
    "MarkerFeed",
    "Navigator",
    "PickerError",
    "PickerOptions",
    "PickerResult",
    "Route",
    "Screen",
]
